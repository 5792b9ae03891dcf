"""이 파일은 .py 프로비저닝 모듈로 프로젝트 폴더와 하위 폴더를 멱등적으로 생성/검증합니다."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import Callable, List, Optional

from fieldops.core.config import (
    CLOUD_RETRY_ATTEMPTS,
    CLOUD_RETRY_DELAY_S,
    LOCAL_RETRY_ATTEMPTS,
    LOCAL_RETRY_DELAY_S,
)
from fieldops.core.layout import ProjectLayout
from fieldops.core.path_validation import is_cloud_synced, platform_safe_path, probe_writable, validate_path
from fieldops.core.sanitizer import sanitize_segment
from fieldops.core.types import ProvisioningResult, RetryPolicy, SubdirectoryOutcome, TenantId

from .base_path import ensure_default_root, resolve_base_path
from .settings_store import SettingsStore

logger = logging.getLogger(__name__)

CLOUD_POLICY = RetryPolicy(attempts=CLOUD_RETRY_ATTEMPTS, delay_s=CLOUD_RETRY_DELAY_S)
LOCAL_POLICY = RetryPolicy(attempts=LOCAL_RETRY_ATTEMPTS, delay_s=LOCAL_RETRY_DELAY_S)


class DirectoryVerifier:
    """생성 직후 폴더가 논리 경로로 보이는지 정책에 따라 재확인한다."""

    def __init__(
        self,
        cloud_policy: RetryPolicy = CLOUD_POLICY,
        local_policy: RetryPolicy = LOCAL_POLICY,
        sleep: Callable[[float], None] = time.sleep,
        is_directory: Callable[[str], bool] = os.path.isdir,
        is_windows: Optional[bool] = None,
    ) -> None:
        self.cloud_policy = cloud_policy
        self.local_policy = local_policy
        self.sleep = sleep
        self.is_directory = is_directory
        self.is_windows = is_windows

    def policy_for(self, path: str) -> RetryPolicy:
        return self.cloud_policy if is_cloud_synced(path) else self.local_policy

    def create(self, logical_path: str, parents: bool = True, exist_ok: bool = True) -> None:
        # 확장 경로 형태는 생성 호출에만 쓰고 확인은 논리 경로로 한다.
        Path(platform_safe_path(logical_path, self.is_windows)).mkdir(parents=parents, exist_ok=exist_ok)

    def wait_visible(self, logical_path: str, policy: RetryPolicy) -> bool:
        attempts = max(policy.attempts, 1)
        for attempt in range(1, attempts + 1):
            if self.is_directory(logical_path):
                return True
            if attempt < attempts:
                logger.debug("Folder not visible yet (%d/%d): %s", attempt, attempts, logical_path)
                self.sleep(policy.delay_s)
        return False


class ProjectDirectoryProvisioner:
    def __init__(
        self,
        settings_store: Optional[SettingsStore],
        layout: Optional[ProjectLayout] = None,
        default_root: Optional[Path] = None,
        verifier: Optional[DirectoryVerifier] = None,
    ) -> None:
        # 설정 저장소는 호출마다 조회하며 기준 경로를 보관하지 않는다.
        self.settings_store = settings_store
        self.layout = layout or ProjectLayout.from_default()
        self.default_root = default_root
        self.verifier = verifier or DirectoryVerifier()

    def provision_project_directory(self, tenant_id: TenantId, project_identifier: str) -> ProvisioningResult:
        # 1) 테넌트 기준 경로 해석
        resolved = resolve_base_path(self.settings_store, tenant_id, self.default_root)
        base_path = resolved.path
        ensure_default_root(resolved)
        # 3) 프로젝트 번호를 폴더명으로 정규화해 논리 경로를 만든다.
        segment = sanitize_segment(project_identifier)
        project_path = os.path.join(base_path, segment)

        # 2) 기준 경로가 쓸 수 없으면 하위 폴더를 시도하지 않고 하드 실패로 끝낸다.
        validation = validate_path(base_path)
        if not validation.valid or not validation.writable:
            error = f"Base path is invalid: {validation.error or 'not writable'} ({base_path})"
            logger.error("Tenant %s: %s", tenant_id, error)
            return ProvisioningResult(success=False, path=project_path, error=error)

        policy = self.verifier.policy_for(base_path)
        warnings: List[str] = []

        # 4~6) 없으면 생성하고, 보일 때까지 제한된 횟수만큼 재확인한다.
        if not self.verifier.is_directory(project_path):
            try:
                self.verifier.create(project_path)
            except OSError as exc:
                error = f"Failed to create project folder: {exc}"
                logger.error("Tenant %s: %s", tenant_id, error)
                return ProvisioningResult(success=False, path=project_path, error=error)
            logger.info("Created project folder: %s", project_path)

            if not self.verifier.wait_visible(project_path, policy):
                warnings.append(
                    f"Folder may have been created but is not yet visible: {project_path}. Check sync status."
                )

        # 7) 쓰기 가능 여부도 동기화 지연을 겪을 수 있으므로 경고로만 남긴다.
        writable, probe_error = probe_writable(project_path)
        if not writable:
            warnings.append(f"Project folder is not writable yet: {probe_error}")

        # 8) 하위 폴더는 서로 독립적으로 처리한다.
        subdirectories: List[SubdirectoryOutcome] = []
        for name in self.layout.subdirectories:
            outcome = self._provision_subdirectory(project_path, name, policy)
            subdirectories.append(outcome)
            if not outcome.success:
                warnings.append(f"Subdirectory {name}: {outcome.error}")

        for warning in warnings:
            logger.warning("Tenant %s: %s", tenant_id, warning)

        # 9) 루트 폴더가 있으면 경고가 있어도 성공이다.
        return ProvisioningResult(
            success=True,
            path=project_path,
            warnings=tuple(warnings),
            subdirectories=tuple(subdirectories),
        )

    def _provision_subdirectory(self, project_path: str, name: str, policy: RetryPolicy) -> SubdirectoryOutcome:
        path = os.path.join(project_path, name)
        if self.verifier.is_directory(path):
            return SubdirectoryOutcome(name=name, created=False, success=True)

        try:
            self.verifier.create(path)
        except OSError as exc:
            return SubdirectoryOutcome(name=name, created=False, success=False, error=str(exc))

        if not self.verifier.wait_visible(path, policy):
            return SubdirectoryOutcome(
                name=name,
                created=True,
                success=False,
                error=f"Not visible after {policy.attempts} attempts",
            )
        return SubdirectoryOutcome(name=name, created=True, success=True)
