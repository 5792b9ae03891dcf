"""이 파일은 .py 테스트 모듈로 프로젝트 폴더 프로비저닝과 재확인 정책을 검증합니다."""

import os
from pathlib import Path

from fieldops.core.config import WORKFLOW_BASE_PATH_KEY
from fieldops.core.path_validation import EXTENDED_PREFIX, needs_extended_path, platform_safe_path
from fieldops.core.types import RetryPolicy
from fieldops.services.provisioning import DirectoryVerifier, ProjectDirectoryProvisioner
from fieldops.services.settings_store import StaticSettingsStore

EXPECTED_SUBDIRECTORIES = ["Proctor", "Density", "CompressiveStrength", "Rebar", "CylinderPickup", "Drawings"]


class HiddenDirectories:
    # 지정한 경로는 실제로 있어도 보이지 않는 것처럼 응답한다.
    def __init__(self, *hidden: str) -> None:
        self.hidden = set(hidden)

    def __call__(self, path: str) -> bool:
        if path in self.hidden:
            return False
        return os.path.isdir(path)


def _store_for(base_path, tenant_id=7) -> StaticSettingsStore:
    return StaticSettingsStore({(str(tenant_id), WORKFLOW_BASE_PATH_KEY): str(base_path)})


def test_provision_creates_project_and_subdirectories(tmp_path, verifier, sleep_recorder) -> None:
    provisioner = ProjectDirectoryProvisioner(_store_for(tmp_path), verifier=verifier)
    result = provisioner.provision_project_directory(7, "02-2026-0019")

    assert result.success is True
    assert result.error is None
    assert result.warnings == ()
    assert result.path == os.path.join(str(tmp_path), "02-2026-0019")
    assert [item.name for item in result.subdirectories] == EXPECTED_SUBDIRECTORIES
    assert all(item.success and item.created for item in result.subdirectories)
    for name in EXPECTED_SUBDIRECTORIES:
        assert (tmp_path / "02-2026-0019" / name).is_dir()
    assert sleep_recorder.calls == []


def test_provision_is_idempotent(tmp_path, verifier) -> None:
    provisioner = ProjectDirectoryProvisioner(_store_for(tmp_path), verifier=verifier)
    first = provisioner.provision_project_directory(7, "02-2026-0019")
    second = provisioner.provision_project_directory(7, "02-2026-0019")

    assert first.success and second.success
    assert second.path == first.path
    assert second.warnings == ()
    assert all(item.success and not item.created for item in second.subdirectories)
    assert sorted(os.listdir(tmp_path / "02-2026-0019")) == sorted(EXPECTED_SUBDIRECTORIES)


def test_missing_base_path_is_hard_failure(tmp_path, verifier) -> None:
    missing = tmp_path / "does" / "not" / "exist"
    provisioner = ProjectDirectoryProvisioner(_store_for(missing), verifier=verifier)
    result = provisioner.provision_project_directory(7, "02-2026-0019")

    assert result.success is False
    assert "Base path is invalid" in result.error
    assert result.subdirectories == ()
    assert not missing.exists()


def test_traversal_identifier_stays_inside_base(tmp_path, verifier) -> None:
    base = tmp_path / "base"
    base.mkdir()
    provisioner = ProjectDirectoryProvisioner(_store_for(base), verifier=verifier)
    result = provisioner.provision_project_directory(7, "../../etc")

    assert result.success is True
    assert os.path.dirname(result.path) == str(base)
    assert os.listdir(tmp_path) == ["base"]


def test_tenants_use_their_own_base_paths(tmp_path, verifier) -> None:
    first, second = tmp_path / "tenant-7", tmp_path / "tenant-8"
    first.mkdir()
    second.mkdir()
    store = StaticSettingsStore(
        {
            ("7", WORKFLOW_BASE_PATH_KEY): str(first),
            ("8", WORKFLOW_BASE_PATH_KEY): str(second),
        }
    )
    provisioner = ProjectDirectoryProvisioner(store, verifier=verifier)

    assert provisioner.provision_project_directory(7, "P-1").path == os.path.join(str(first), "P-1")
    assert provisioner.provision_project_directory("8", "P-1").path == os.path.join(str(second), "P-1")


def test_unconfigured_tenant_uses_default_root(tmp_path, verifier) -> None:
    default_root = tmp_path / "storage" / "pdfs"
    provisioner = ProjectDirectoryProvisioner(StaticSettingsStore(), default_root=default_root, verifier=verifier)
    result = provisioner.provision_project_directory(7, "02-2026-0019")

    assert result.success is True
    assert (default_root / "02-2026-0019" / "Drawings").is_dir()


def test_invisible_local_folder_is_soft_warning(tmp_path, sleep_recorder) -> None:
    project_path = os.path.join(str(tmp_path), "02-2026-0019")
    verifier = DirectoryVerifier(
        cloud_policy=RetryPolicy(attempts=5, delay_s=1.0),
        local_policy=RetryPolicy(attempts=2, delay_s=0.5),
        sleep=sleep_recorder,
        is_directory=HiddenDirectories(project_path),
    )
    result = ProjectDirectoryProvisioner(_store_for(tmp_path), verifier=verifier).provision_project_directory(
        7, "02-2026-0019"
    )

    assert result.success is True
    assert result.warnings == (
        f"Folder may have been created but is not yet visible: {project_path}. Check sync status.",
    )
    assert sleep_recorder.calls == [0.5]
    assert all(item.success for item in result.subdirectories)


def test_invisible_cloud_folder_uses_cloud_policy(tmp_path, sleep_recorder) -> None:
    base = tmp_path / "OneDrive - MAK"
    base.mkdir()
    project_path = os.path.join(str(base), "02-2026-0019")
    verifier = DirectoryVerifier(
        cloud_policy=RetryPolicy(attempts=5, delay_s=1.0),
        local_policy=RetryPolicy(attempts=2, delay_s=0.5),
        sleep=sleep_recorder,
        is_directory=HiddenDirectories(project_path),
    )
    result = ProjectDirectoryProvisioner(_store_for(base), verifier=verifier).provision_project_directory(
        7, "02-2026-0019"
    )

    assert result.success is True
    assert len(result.warnings) == 1
    assert "Check sync status" in result.warnings[0]
    assert sleep_recorder.calls == [1.0, 1.0, 1.0, 1.0]


def test_invisible_subdirectory_is_reported_per_folder(tmp_path, sleep_recorder) -> None:
    hidden = os.path.join(str(tmp_path), "02-2026-0019", "Rebar")
    verifier = DirectoryVerifier(
        cloud_policy=RetryPolicy(attempts=5, delay_s=1.0),
        local_policy=RetryPolicy(attempts=2, delay_s=0.5),
        sleep=sleep_recorder,
        is_directory=HiddenDirectories(hidden),
    )
    result = ProjectDirectoryProvisioner(_store_for(tmp_path), verifier=verifier).provision_project_directory(
        7, "02-2026-0019"
    )

    assert result.success is True
    rebar = [item for item in result.subdirectories if item.name == "Rebar"][0]
    assert rebar.created is True
    assert rebar.success is False
    assert rebar.error == "Not visible after 2 attempts"
    assert result.warnings == ("Subdirectory Rebar: Not visible after 2 attempts",)


def test_subdirectory_failure_does_not_stop_others(tmp_path, verifier) -> None:
    project_dir = tmp_path / "02-2026-0019"
    project_dir.mkdir()
    # 같은 이름의 파일이 있으면 해당 하위 폴더만 실패한다.
    (project_dir / "Density").write_text("not a folder", encoding="utf-8")

    result = ProjectDirectoryProvisioner(_store_for(tmp_path), verifier=verifier).provision_project_directory(
        7, "02-2026-0019"
    )

    assert result.success is True
    outcomes = {item.name: item for item in result.subdirectories}
    assert outcomes["Density"].success is False
    assert all(outcomes[name].success for name in EXPECTED_SUBDIRECTORIES if name != "Density")
    assert len(result.warnings) == 1
    assert result.warnings[0].startswith("Subdirectory Density:")


def test_file_at_project_path_is_hard_failure(tmp_path, verifier) -> None:
    (tmp_path / "02-2026-0019").write_text("occupied", encoding="utf-8")
    result = ProjectDirectoryProvisioner(_store_for(tmp_path), verifier=verifier).provision_project_directory(
        7, "02-2026-0019"
    )

    assert result.success is False
    assert result.error.startswith("Failed to create project folder:")
    assert result.subdirectories == ()


def test_long_project_path_is_verified_by_logical_path(tmp_path, verifier) -> None:
    identifier = "P" * 200
    result = ProjectDirectoryProvisioner(_store_for(tmp_path), verifier=verifier).provision_project_directory(
        7, identifier
    )

    assert result.success is True
    assert result.warnings == ()
    subdirectory_path = os.path.join(result.path, "CompressiveStrength")
    assert needs_extended_path(subdirectory_path)
    assert os.path.isdir(subdirectory_path)
    assert not result.path.startswith("\\\\?\\")


def test_result_serializes_to_dict(tmp_path, verifier) -> None:
    result = ProjectDirectoryProvisioner(_store_for(tmp_path), verifier=verifier).provision_project_directory(
        7, "02-2026-0019"
    )
    payload = result.to_dict()
    assert payload["success"] is True
    assert payload["warnings"] == []
    assert payload["subdirectories"][0] == {"name": "Proctor", "created": True, "success": True, "error": None}


def test_extended_form_is_used_only_for_creation(tmp_path, sleep_recorder, monkeypatch) -> None:
    base = tmp_path / ("d" * 60)
    base.mkdir()
    identifier = "P" * 200
    created = []
    checked = []

    def _record_mkdir(self, mode=0o777, parents=False, exist_ok=False):
        created.append(str(self))

    def _is_directory(path):
        checked.append(path)
        return platform_safe_path(path, is_windows=True) in created

    monkeypatch.setattr(Path, "mkdir", _record_mkdir)
    monkeypatch.setattr("fieldops.services.provisioning.probe_writable", lambda path: (True, None))
    verifier = DirectoryVerifier(
        cloud_policy=RetryPolicy(attempts=5, delay_s=1.0),
        local_policy=RetryPolicy(attempts=2, delay_s=0.5),
        sleep=sleep_recorder,
        is_directory=_is_directory,
        is_windows=True,
    )
    result = ProjectDirectoryProvisioner(_store_for(base), verifier=verifier).provision_project_directory(
        7, identifier
    )

    assert result.success is True
    assert result.warnings == ()
    assert result.path == os.path.join(str(base), identifier)
    assert needs_extended_path(result.path)
    assert len(created) == 1 + len(EXPECTED_SUBDIRECTORIES)
    assert all(path.startswith(EXTENDED_PREFIX) for path in created)
    assert checked
    assert not any(path.startswith(EXTENDED_PREFIX) for path in checked)
    assert result.path in checked
    assert sleep_recorder.calls == []


def test_unwritable_project_folder_is_soft_warning(tmp_path, verifier, monkeypatch) -> None:
    monkeypatch.setattr("fieldops.services.provisioning.probe_writable", lambda path: (False, "denied"))
    result = ProjectDirectoryProvisioner(_store_for(tmp_path), verifier=verifier).provision_project_directory(
        7, "02-2026-0019"
    )

    assert result.success is True
    assert result.error is None
    assert result.warnings == ("Project folder is not writable yet: denied",)
    assert [item.name for item in result.subdirectories] == EXPECTED_SUBDIRECTORIES
    assert all(item.success for item in result.subdirectories)
    assert (tmp_path / "02-2026-0019" / "Drawings").is_dir()
