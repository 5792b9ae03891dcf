"""이 파일은 .py 테스트 모듈로 기준 경로 해석과 기본 경로 강등을 검증합니다."""

from fieldops.core.config import LEGACY_BASE_PATH_KEY, WORKFLOW_BASE_PATH_KEY
from fieldops.services.base_path import (
    ensure_default_root,
    get_base_path_status,
    resolve_base_path,
    resolve_effective_base_path,
)
from fieldops.services.settings_store import SettingsStore, StaticSettingsStore


class BrokenStore(SettingsStore):
    def get_value(self, key, tenant_id=None):
        raise ConnectionError("settings backend unreachable")


class RecordingStore(StaticSettingsStore):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.scopes = []

    def get_value(self, key, tenant_id=None):
        self.scopes.append(tenant_id)
        return super().get_value(key, tenant_id)


def test_configured_path_is_returned(tmp_path) -> None:
    store = StaticSettingsStore({("7", WORKFLOW_BASE_PATH_KEY): f"  {tmp_path}  "})
    resolved = resolve_base_path(store, 7, default_root=tmp_path / "default")
    assert resolved.path == str(tmp_path)
    assert resolved.source == WORKFLOW_BASE_PATH_KEY


def test_legacy_key_is_used_when_workflow_key_missing(tmp_path) -> None:
    store = StaticSettingsStore({("7", LEGACY_BASE_PATH_KEY): "/legacy/onedrive"})
    resolved = resolve_base_path(store, 7, default_root=tmp_path)
    assert resolved.path == "/legacy/onedrive"
    assert resolved.source == LEGACY_BASE_PATH_KEY


def test_missing_setting_falls_back_to_default(tmp_path) -> None:
    store = StaticSettingsStore()
    assert resolve_effective_base_path(store, 7, default_root=tmp_path) == str(tmp_path)


def test_store_error_falls_back_to_default(tmp_path) -> None:
    resolved = resolve_base_path(BrokenStore(), 7, default_root=tmp_path)
    assert resolved.path == str(tmp_path)
    assert resolved.source == "default"
    assert "unreachable" in resolved.error


def test_fallback_is_never_empty() -> None:
    assert resolve_effective_base_path(BrokenStore(), 7)
    assert resolve_effective_base_path(None, None)


def test_legacy_store_ignores_tenant_scope(tmp_path) -> None:
    store = RecordingStore({(None, WORKFLOW_BASE_PATH_KEY): "/global/path"}, partitioned=False)
    assert resolve_effective_base_path(store, 7, default_root=tmp_path) == "/global/path"
    assert store.scopes == [None]


def test_partitioned_store_receives_tenant_scope(tmp_path) -> None:
    store = RecordingStore({(None, WORKFLOW_BASE_PATH_KEY): "/global/path"})
    assert resolve_effective_base_path(store, 7, default_root=tmp_path) == str(tmp_path)
    assert store.scopes == [7, 7]


def test_settings_change_is_visible_without_cache(tmp_path) -> None:
    store = StaticSettingsStore()
    assert resolve_effective_base_path(store, 7, default_root=tmp_path) == str(tmp_path)
    store.set_value(WORKFLOW_BASE_PATH_KEY, "/new/path", tenant_id=7)
    assert resolve_effective_base_path(store, 7, default_root=tmp_path) == "/new/path"


def test_status_reports_configured_cloud_path(tmp_path) -> None:
    synced = tmp_path / "OneDrive" / "MAK_DRIVE"
    synced.mkdir(parents=True)
    store = StaticSettingsStore({("7", WORKFLOW_BASE_PATH_KEY): str(synced)})
    status = get_base_path_status(store, 7)
    assert status["configured"] is True
    assert status["valid"] and status["writable"]
    assert status["cloud_synced"] is True


def test_only_default_root_is_created(tmp_path) -> None:
    configured = tmp_path / "tenant" / "missing"
    ensure_default_root(resolve_base_path(StaticSettingsStore({("7", WORKFLOW_BASE_PATH_KEY): str(configured)}), 7))
    assert not configured.exists()

    default_root = tmp_path / "storage" / "pdfs"
    ensure_default_root(resolve_base_path(StaticSettingsStore(), 7, default_root=default_root))
    assert default_root.is_dir()
