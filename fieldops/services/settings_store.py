"""이 파일은 .py 설정 저장소 모듈로 키/값 설정 조회와 저장을 제공합니다."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fieldops.core.errors import SettingsStoreError
from fieldops.core.types import TenantId
from fieldops.db import models

logger = logging.getLogger(__name__)

SETTING_DESCRIPTIONS = {
    "workflow_base_path": "Base folder path for project folders. Leave empty to use default PDF storage.",
    "onedrive_base_path": "Base folder path for OneDrive integration. Leave empty to use default PDF storage.",
}


def tenant_scope(tenant_id: Optional[TenantId]) -> Optional[str]:
    # 정수/문자열 테넌트 ID를 저장소 키 형태로 맞춘다.
    if tenant_id is None:
        return None
    return str(tenant_id).strip() or None


def normalize_setting_value(value: Optional[str]) -> Optional[str]:
    # 공백만 있는 값은 설정 해제(None)로 취급한다.
    if value is None:
        return None
    trimmed = str(value).strip()
    return trimmed or None


class SettingsStore(ABC):
    # partitioned가 False인 저장소는 테넌트 구분 없이 전역 값 하나만 가진다.
    partitioned: bool = True

    @abstractmethod
    def get_value(self, key: str, tenant_id: Optional[TenantId] = None) -> Optional[str]:
        raise NotImplementedError


class SqlSettingsStore(SettingsStore):
    def __init__(self, session: Session, partitioned: bool = True) -> None:
        self.session = session
        self.partitioned = partitioned

    def get_value(self, key: str, tenant_id: Optional[TenantId] = None) -> Optional[str]:
        try:
            record = self._find(key, tenant_id)
        except SQLAlchemyError as exc:
            raise SettingsStoreError(f"Failed to read setting {key}: {exc}") from exc
        if record is None:
            return None
        return record.value

    def set_value(
        self,
        key: str,
        value: Optional[str],
        tenant_id: Optional[TenantId] = None,
        user_id: Optional[int] = None,
    ) -> Optional[str]:
        # 값을 정규화하고 기존 레코드가 있으면 갱신, 없으면 새로 만든다.
        normalized = normalize_setting_value(value)
        try:
            record = self._find(key, tenant_id)
            if record is None:
                record = models.AppSetting(
                    tenant_id=tenant_scope(tenant_id),
                    key=key,
                    description=SETTING_DESCRIPTIONS.get(key),
                )
                self.session.add(record)
            record.value = normalized
            record.updated_at = datetime.utcnow()
            if user_id is not None:
                record.updated_by_user_id = user_id
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise SettingsStoreError(f"Failed to save setting {key}: {exc}") from exc

        logger.info("Setting %s updated for tenant %s", key, tenant_id)
        return normalized

    def _find(self, key: str, tenant_id: Optional[TenantId]) -> Optional[models.AppSetting]:
        query = self.session.query(models.AppSetting).filter(models.AppSetting.key == key)
        scope = tenant_scope(tenant_id)
        if scope is None:
            query = query.filter(models.AppSetting.tenant_id.is_(None))
        else:
            query = query.filter(models.AppSetting.tenant_id == scope)
        return query.first()


class StaticSettingsStore(SettingsStore):
    """메모리 딕셔너리 기반 저장소로 CLI 데모와 테스트에서 사용한다."""

    def __init__(
        self,
        values: Optional[Dict[Tuple[Optional[str], str], str]] = None,
        partitioned: bool = True,
    ) -> None:
        self.values: Dict[Tuple[Optional[str], str], str] = dict(values or {})
        self.partitioned = partitioned

    def get_value(self, key: str, tenant_id: Optional[TenantId] = None) -> Optional[str]:
        return self.values.get((tenant_scope(tenant_id), key))

    def set_value(self, key: str, value: Optional[str], tenant_id: Optional[TenantId] = None) -> Optional[str]:
        normalized = normalize_setting_value(value)
        scope = tenant_scope(tenant_id)
        if normalized is None:
            self.values.pop((scope, key), None)
        else:
            self.values[(scope, key)] = normalized
        return normalized
