"""이 파일은 .py API 스키마 모듈로 요청/응답 모델을 정의합니다."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TenantCreate(BaseModel):
    name: str
    # 프로젝트 번호 접두사(예: "02")로 리포트 번호 체계에 사용된다.
    project_number_prefix: Optional[str] = None


class TenantResponse(BaseModel):
    id: int
    name: str
    project_number_prefix: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ProjectCreate(BaseModel):
    # 프로젝트 번호는 폴더명의 원본이 되므로 공백만 있는 값은 거부한다.
    project_number: str
    project_name: str

    @field_validator("project_number", "project_name")
    @classmethod
    def strip_required(cls, value: str) -> str:
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("must not be empty")
        return trimmed


class ProjectResponse(BaseModel):
    id: int
    tenant_id: int
    project_number: str
    project_name: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class SubdirectoryResponse(BaseModel):
    name: str
    created: bool
    success: bool
    error: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class FolderResultResponse(BaseModel):
    # success=True이면서 warnings가 있으면 "생성됨, 확인 필요"로 안내한다.
    success: bool
    path: Optional[str] = None
    error: Optional[str] = None
    warnings: List[str] = Field(default_factory=list)
    subdirectories: List[SubdirectoryResponse] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class ProjectCreateResponse(BaseModel):
    project: ProjectResponse
    folder: FolderResultResponse


class BasePathUpdate(BaseModel):
    # None 또는 빈 문자열이면 설정을 해제하고 기본 경로를 사용한다.
    path: Optional[str] = None


class BasePathResponse(BaseModel):
    path: Optional[str] = None


class BasePathStatusResponse(BaseModel):
    configured: bool
    source: str
    path: str
    valid: bool
    writable: bool
    cloud_synced: bool
    error: Optional[str] = None


class PathTestRequest(BaseModel):
    path: str


class PathTestResponse(BaseModel):
    path: str
    valid: bool
    writable: bool
    cloud_synced: bool
    error: Optional[str] = None


class DiagnosticStepResponse(BaseModel):
    name: str
    success: bool
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(from_attributes=True)


class DiagnosticReportResponse(BaseModel):
    tenant_id: Optional[int] = None
    base_path: Optional[str] = None
    success: bool
    steps: List[DiagnosticStepResponse] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
