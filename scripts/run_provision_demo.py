"""이 파일은 .py 프로비저닝 데모 스크립트로 임시 디렉터리에 프로젝트 폴더를 만들어 봅니다."""

import sys
import tempfile
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from fieldops.core.config import WORKFLOW_BASE_PATH_KEY
from fieldops.core.logging import setup_logging
from fieldops.services.diagnostics import DiagnosticRunner
from fieldops.services.provisioning import ProjectDirectoryProvisioner
from fieldops.services.settings_store import StaticSettingsStore

TENANT_ID = 7
PROJECT_NUMBER = "02-2026-0019"


def main() -> None:
    setup_logging()
    with tempfile.TemporaryDirectory() as base_dir:
        store = StaticSettingsStore({(str(TENANT_ID), WORKFLOW_BASE_PATH_KEY): base_dir})

        result = ProjectDirectoryProvisioner(store).provision_project_directory(TENANT_ID, PROJECT_NUMBER)
        print(f"Success: {result.success} | Path: {result.path}")
        for item in result.subdirectories:
            state = "created" if item.created else "existing"
            print(f"- {item.name} | {state} | ok={item.success}")
        for warning in result.warnings:
            print(f"! {warning}")

        report = DiagnosticRunner(store).run_diagnostic(TENANT_ID)
        for step in report.steps:
            print(f"[{'OK' if step.success else 'FAIL'}] {step.name}: {step.message}")


if __name__ == "__main__":
    main()
