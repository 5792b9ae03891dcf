"""이 파일은 .py 엔트리포인트로 폴더 프로비저닝과 경로 진단을 CLI로 실행합니다."""

import argparse
import json

from fieldops.core.logging import setup_logging
from fieldops.db.session import SessionLocal, init_db
from fieldops.services.diagnostics import DiagnosticRunner
from fieldops.services.provisioning import ProjectDirectoryProvisioner
from fieldops.services.settings_store import SqlSettingsStore


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Project folder provisioning tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    diagnose = subparsers.add_parser("diagnose", help="Check the tenant base path with a throwaway folder")
    diagnose.add_argument("--tenant", type=int, required=True)

    provision = subparsers.add_parser("provision", help="Create or repair a project folder")
    provision.add_argument("--tenant", type=int, required=True)
    provision.add_argument("--project", required=True, help="Project number, e.g. 02-2026-0019")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    setup_logging()
    init_db()
    session = SessionLocal()
    try:
        store = SqlSettingsStore(session)
        if args.command == "diagnose":
            payload = DiagnosticRunner(store).run_diagnostic(args.tenant).to_dict()
        else:
            payload = ProjectDirectoryProvisioner(store).provision_project_directory(args.tenant, args.project).to_dict()
    finally:
        session.close()
    print(json.dumps(payload, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
