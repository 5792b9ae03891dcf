"""이 파일은 .py 기준 경로 해석 모듈로 테넌트별 저장 루트를 결정합니다."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from fieldops.core.config import BASE_PATH_KEYS, DEFAULT_PDF_BASE_PATH
from fieldops.core.path_validation import is_cloud_synced, validate_path
from fieldops.core.types import ResolvedBasePath, TenantId

from .settings_store import SettingsStore

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "default"


def store_scope(store: Optional[SettingsStore], tenant_id: Optional[TenantId]) -> Optional[TenantId]:
    # 테넌트 분리 저장소에만 테넌트 ID를 넘기고 구버전 전역 저장소에는 넘기지 않는다.
    if store is None or not getattr(store, "partitioned", True):
        return None
    return tenant_id


def resolve_base_path(
    store: Optional[SettingsStore],
    tenant_id: Optional[TenantId] = None,
    default_root: Optional[Path] = None,
) -> ResolvedBasePath:
    """설정된 기준 경로 또는 기본 루트를 반환한다. 호출마다 새로 조회하며 캐시하지 않는다."""
    fallback = str(default_root or DEFAULT_PDF_BASE_PATH)
    if store is None:
        return ResolvedBasePath(path=fallback, source=DEFAULT_SOURCE)

    scope = store_scope(store, tenant_id)
    for key in BASE_PATH_KEYS:
        try:
            value = store.get_value(key, tenant_id=scope)
        except Exception as exc:
            # 저장소 장애는 호출자를 중단시키지 않고 기본 경로로 강등한다.
            logger.warning("Settings lookup for %s failed, using default path: %s", key, exc)
            return ResolvedBasePath(path=fallback, source=DEFAULT_SOURCE, error=str(exc))
        if isinstance(value, str) and value.strip():
            return ResolvedBasePath(path=value.strip(), source=key)

    return ResolvedBasePath(path=fallback, source=DEFAULT_SOURCE)


def ensure_default_root(resolved: ResolvedBasePath) -> None:
    # 애플리케이션 기본 저장소는 직접 소유하므로 없으면 만든다. 테넌트 설정 경로는 만들지 않는다.
    if resolved.source != DEFAULT_SOURCE:
        return
    try:
        Path(resolved.path).mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Default storage root could not be created: %s", exc)


def resolve_effective_base_path(
    store: Optional[SettingsStore],
    tenant_id: Optional[TenantId] = None,
    default_root: Optional[Path] = None,
) -> str:
    return resolve_base_path(store, tenant_id, default_root).path


def get_base_path_status(
    store: Optional[SettingsStore],
    tenant_id: Optional[TenantId] = None,
    default_root: Optional[Path] = None,
) -> Dict[str, Any]:
    # 설정 여부와 현재 시점의 검증 결과를 함께 돌려준다.
    resolved = resolve_base_path(store, tenant_id, default_root)
    validation = validate_path(resolved.path)
    return {
        "configured": resolved.source != DEFAULT_SOURCE,
        "source": resolved.source,
        "path": resolved.path,
        "valid": validation.valid,
        "writable": validation.writable,
        "cloud_synced": is_cloud_synced(resolved.path),
        "error": validation.error or resolved.error,
    }
