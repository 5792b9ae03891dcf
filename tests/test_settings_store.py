"""이 파일은 .py 테스트 모듈로 SQL 설정 저장소의 테넌트 분리 동작을 검증합니다."""

from sqlalchemy.exc import OperationalError

from fieldops.core.config import WORKFLOW_BASE_PATH_KEY
from fieldops.core.errors import SettingsStoreError
from fieldops.db import models
from fieldops.services.settings_store import SqlSettingsStore


def test_missing_setting_returns_none(db_session) -> None:
    store = SqlSettingsStore(db_session)
    assert store.get_value(WORKFLOW_BASE_PATH_KEY, tenant_id=7) is None


def test_values_are_isolated_per_tenant(db_session) -> None:
    store = SqlSettingsStore(db_session)
    store.set_value(WORKFLOW_BASE_PATH_KEY, "/srv/tenant-7", tenant_id=7)
    store.set_value(WORKFLOW_BASE_PATH_KEY, "/srv/tenant-8", tenant_id="8")
    assert store.get_value(WORKFLOW_BASE_PATH_KEY, tenant_id="7") == "/srv/tenant-7"
    assert store.get_value(WORKFLOW_BASE_PATH_KEY, tenant_id=8) == "/srv/tenant-8"
    assert store.get_value(WORKFLOW_BASE_PATH_KEY) is None


def test_set_value_trims_and_clears(db_session) -> None:
    store = SqlSettingsStore(db_session)
    assert store.set_value(WORKFLOW_BASE_PATH_KEY, "  /srv/pdfs  ", tenant_id=7, user_id=3) == "/srv/pdfs"
    record = db_session.query(models.AppSetting).one()
    assert record.updated_by_user_id == 3
    assert record.description

    assert store.set_value(WORKFLOW_BASE_PATH_KEY, "   ", tenant_id=7) is None
    assert store.get_value(WORKFLOW_BASE_PATH_KEY, tenant_id=7) is None
    assert db_session.query(models.AppSetting).count() == 1


def test_database_errors_are_wrapped(db_session, monkeypatch) -> None:
    store = SqlSettingsStore(db_session)

    def _broken_query(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(db_session, "query", _broken_query)
    try:
        store.get_value(WORKFLOW_BASE_PATH_KEY, tenant_id=7)
    except SettingsStoreError as exc:
        assert "database is locked" in str(exc)
    else:
        raise AssertionError("SettingsStoreError not raised")
