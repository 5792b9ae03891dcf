"""이 파일은 .py FastAPI 앱 모듈로 프로젝트 폴더/설정/진단 REST 엔드포인트를 제공합니다."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, FastAPI, Header, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fieldops.core.config import API_PREFIX, WORKFLOW_BASE_PATH_KEY
from fieldops.core.errors import LayoutConfigError, SettingsStoreError
from fieldops.core.path_validation import is_cloud_synced, validate_path
from fieldops.db import models
from fieldops.db.session import get_session, init_db
from fieldops.services.base_path import get_base_path_status
from fieldops.services.diagnostics import DiagnosticRunner
from fieldops.services.provisioning import ProjectDirectoryProvisioner
from fieldops.services.settings_store import SqlSettingsStore

from .schemas import (
    BasePathResponse,
    BasePathStatusResponse,
    BasePathUpdate,
    DiagnosticReportResponse,
    FolderResultResponse,
    PathTestRequest,
    PathTestResponse,
    ProjectCreate,
    ProjectCreateResponse,
    ProjectResponse,
    TenantCreate,
    TenantResponse,
)

app = FastAPI(title="fieldops")


@app.on_event("startup")
def _startup() -> None:
    init_db()


def require_tenant(
    x_tenant_id: Optional[str] = Header(default=None),
    session: Session = Depends(get_session),
) -> models.Tenant:
    # 인증 계층이 넣어준 X-Tenant-ID 헤더로 현재 테넌트를 확정한다.
    if not x_tenant_id or not x_tenant_id.strip().isdigit():
        raise HTTPException(status_code=403, detail="Tenant context required")
    tenant = session.get(models.Tenant, int(x_tenant_id.strip()))
    if tenant is None:
        raise HTTPException(status_code=404, detail="Tenant not found")
    return tenant


def _build_provisioner(session: Session) -> ProjectDirectoryProvisioner:
    try:
        return ProjectDirectoryProvisioner(SqlSettingsStore(session))
    except LayoutConfigError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.post(f"{API_PREFIX}/tenants", response_model=TenantResponse, status_code=201)
def create_tenant(
    payload: TenantCreate,
    session: Session = Depends(get_session),
) -> TenantResponse:
    tenant = models.Tenant(name=payload.name, project_number_prefix=payload.project_number_prefix)
    session.add(tenant)
    session.commit()
    session.refresh(tenant)
    return TenantResponse.model_validate(tenant)


@app.post(f"{API_PREFIX}/projects", response_model=ProjectCreateResponse, status_code=201)
def create_project(
    payload: ProjectCreate,
    tenant: models.Tenant = Depends(require_tenant),
    session: Session = Depends(get_session),
) -> ProjectCreateResponse:
    project = models.Project(
        tenant_id=tenant.id,
        project_number=payload.project_number,
        project_name=payload.project_name,
    )
    session.add(project)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise HTTPException(status_code=409, detail="Project number already exists") from exc
    session.refresh(project)

    # 폴더 생성 실패는 프로젝트 생성을 막지 않고 결과로 함께 전달한다.
    result = _build_provisioner(session).provision_project_directory(tenant.id, project.project_number)
    return ProjectCreateResponse(
        project=ProjectResponse.model_validate(project),
        folder=FolderResultResponse.model_validate(result),
    )


@app.get(f"{API_PREFIX}/projects/{{project_id}}", response_model=ProjectResponse)
def get_project(
    project_id: int,
    tenant: models.Tenant = Depends(require_tenant),
    session: Session = Depends(get_session),
) -> ProjectResponse:
    project = session.get(models.Project, project_id)
    if project is None or project.tenant_id != tenant.id:
        raise HTTPException(status_code=404, detail="Project not found")
    return ProjectResponse.model_validate(project)


@app.post(f"{API_PREFIX}/projects/{{project_id}}/folder/retry", response_model=FolderResultResponse)
def retry_project_folder(
    project_id: int,
    tenant: models.Tenant = Depends(require_tenant),
    session: Session = Depends(get_session),
) -> FolderResultResponse:
    project = session.get(models.Project, project_id)
    if project is None or project.tenant_id != tenant.id:
        raise HTTPException(status_code=404, detail="Project not found")
    result = _build_provisioner(session).provision_project_directory(tenant.id, project.project_number)
    return FolderResultResponse.model_validate(result)


@app.get(f"{API_PREFIX}/settings/base-path", response_model=BasePathResponse)
def get_base_path(
    tenant: models.Tenant = Depends(require_tenant),
    session: Session = Depends(get_session),
) -> BasePathResponse:
    try:
        value = SqlSettingsStore(session).get_value(WORKFLOW_BASE_PATH_KEY, tenant_id=tenant.id)
    except SettingsStoreError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return BasePathResponse(path=value)


@app.put(f"{API_PREFIX}/settings/base-path", response_model=BasePathResponse)
def update_base_path(
    payload: BasePathUpdate,
    tenant: models.Tenant = Depends(require_tenant),
    session: Session = Depends(get_session),
) -> BasePathResponse:
    # 값이 있으면 저장 전에 검증하고, 비어 있으면 설정 해제로 처리한다.
    if payload.path and payload.path.strip():
        validation = validate_path(payload.path)
        if not validation.valid or not validation.writable:
            raise HTTPException(status_code=400, detail=validation.error or "Path is not writable")
    try:
        value = SqlSettingsStore(session).set_value(WORKFLOW_BASE_PATH_KEY, payload.path, tenant_id=tenant.id)
    except SettingsStoreError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return BasePathResponse(path=value)


@app.get(f"{API_PREFIX}/settings/base-path/status", response_model=BasePathStatusResponse)
def get_base_path_status_endpoint(
    tenant: models.Tenant = Depends(require_tenant),
    session: Session = Depends(get_session),
) -> BasePathStatusResponse:
    status = get_base_path_status(SqlSettingsStore(session), tenant.id)
    return BasePathStatusResponse(**status)


@app.post(f"{API_PREFIX}/settings/base-path/test", response_model=PathTestResponse)
def check_base_path(
    payload: PathTestRequest,
    tenant: models.Tenant = Depends(require_tenant),
) -> PathTestResponse:
    # 저장하지 않고 후보 경로만 검증한다.
    candidate = payload.path.strip()
    if not candidate:
        raise HTTPException(status_code=400, detail="Path is required")
    validation = validate_path(candidate)
    return PathTestResponse(
        path=candidate,
        valid=validation.valid,
        writable=validation.writable,
        cloud_synced=is_cloud_synced(candidate),
        error=validation.error,
    )


@app.get(f"{API_PREFIX}/storage/diagnostics", response_model=DiagnosticReportResponse)
def run_storage_diagnostics(
    tenant: models.Tenant = Depends(require_tenant),
    session: Session = Depends(get_session),
) -> DiagnosticReportResponse:
    report = DiagnosticRunner(SqlSettingsStore(session)).run_diagnostic(tenant.id)
    return DiagnosticReportResponse.model_validate(report)
