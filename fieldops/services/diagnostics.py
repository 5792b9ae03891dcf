"""이 파일은 .py 진단 모듈로 설정/경로/생성-정리 과정을 임시 폴더로 점검합니다."""

from __future__ import annotations

import logging
import os
import shutil
import uuid
from pathlib import Path
from typing import List, Optional

from fieldops.core.config import WORKFLOW_BASE_PATH_KEY
from fieldops.core.path_validation import is_cloud_synced, needs_extended_path, probe_writable, validate_path
from fieldops.core.types import DiagnosticReport, DiagnosticStep, TenantId

from .base_path import DEFAULT_SOURCE, ensure_default_root, resolve_base_path, store_scope
from .provisioning import DirectoryVerifier
from .settings_store import SettingsStore

logger = logging.getLogger(__name__)

PROBE_DIR_PREFIX = ".fieldops_probe_"


class DiagnosticRunner:
    """각 단계를 독립적으로 실행해 앞 단계가 실패해도 나머지 결과를 모두 기록한다."""

    def __init__(
        self,
        settings_store: Optional[SettingsStore],
        default_root: Optional[Path] = None,
        verifier: Optional[DirectoryVerifier] = None,
    ) -> None:
        self.settings_store = settings_store
        self.default_root = default_root
        self.verifier = verifier or DirectoryVerifier()

    def run_diagnostic(self, tenant_id: Optional[TenantId]) -> DiagnosticReport:
        steps: List[DiagnosticStep] = [self._check_settings_store(tenant_id)]

        resolved = resolve_base_path(self.settings_store, tenant_id, self.default_root)
        ensure_default_root(resolved)
        steps.append(
            DiagnosticStep(
                name="base_path_resolution",
                success=bool(resolved.path),
                message=f"Resolved from {resolved.source}: {resolved.path}",
                details={
                    "path": resolved.path,
                    "source": resolved.source,
                    "configured": resolved.source != DEFAULT_SOURCE,
                    "error": resolved.error,
                },
            )
        )

        steps.append(self._check_base_path(resolved.path))
        steps.append(self._run_probe_cycle(resolved.path))

        report = DiagnosticReport(tenant_id=tenant_id, base_path=resolved.path, steps=tuple(steps))
        logger.info("Diagnostic for tenant %s finished: success=%s", tenant_id, report.success)
        return report

    def _check_settings_store(self, tenant_id: Optional[TenantId]) -> DiagnosticStep:
        name = "settings_store"
        if self.settings_store is None:
            return DiagnosticStep(name=name, success=False, message="No settings store configured")
        scope = store_scope(self.settings_store, tenant_id)
        try:
            value = self.settings_store.get_value(WORKFLOW_BASE_PATH_KEY, tenant_id=scope)
        except Exception as exc:
            logger.warning("Settings store unreachable: %s", exc)
            return DiagnosticStep(name=name, success=False, message=f"Settings store unreachable: {exc}")
        return DiagnosticStep(
            name=name,
            success=True,
            message="Settings store reachable",
            details={
                "partitioned": bool(getattr(self.settings_store, "partitioned", True)),
                "configured_value": value,
            },
        )

    def _check_base_path(self, base_path: str) -> DiagnosticStep:
        validation = validate_path(base_path)
        success = validation.valid and validation.writable
        message = "Base path is valid and writable" if success else f"Base path check failed: {validation.error}"
        return DiagnosticStep(
            name="base_path_validation",
            success=success,
            message=message,
            details={
                "valid": validation.valid,
                "writable": validation.writable,
                "error": validation.error,
                "cloud_synced": is_cloud_synced(base_path),
                "path_length": len(base_path),
                "needs_extended_path": needs_extended_path(base_path),
            },
        )

    def _run_probe_cycle(self, base_path: str) -> DiagnosticStep:
        name = "probe_cycle"
        probe_path = os.path.join(base_path, f"{PROBE_DIR_PREFIX}{uuid.uuid4().hex}")
        details = {"probe_path": probe_path, "created": False, "visible": False, "writable": False, "removed": False}
        policy = self.verifier.policy_for(base_path)
        error: Optional[str] = None

        try:
            # 기준 경로 자체는 만들지 않도록 parents=False로 생성한다.
            self.verifier.create(probe_path, parents=False, exist_ok=False)
            details["created"] = True
            details["visible"] = self.verifier.wait_visible(probe_path, policy)
            writable, probe_error = probe_writable(probe_path)
            details["writable"] = writable
            if not details["visible"]:
                error = f"Probe folder not visible after {policy.attempts} attempts"
            elif not writable:
                error = probe_error
        except OSError as exc:
            error = f"Probe folder could not be created: {exc}"
        finally:
            cleanup_error = self._remove_probe(probe_path) if details["created"] else None
            details["removed"] = not os.path.exists(probe_path)
            if cleanup_error and error is None:
                error = cleanup_error

        success = error is None and details["removed"]
        message = "Create/verify/cleanup cycle succeeded" if success else (error or "Probe folder was not removed")
        return DiagnosticStep(name=name, success=success, message=message, details=details)

    def _remove_probe(self, probe_path: str) -> Optional[str]:
        if not os.path.lexists(probe_path):
            return None
        try:
            shutil.rmtree(probe_path)
        except OSError as exc:
            logger.warning("Probe folder cleanup failed: %s", exc)
            return f"Probe folder cleanup failed: {exc}"
        return None
