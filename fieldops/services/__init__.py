"""이 파일은 .py 서비스 패키지 초기화 모듈로 핵심 서비스를 노출합니다."""

from .base_path import resolve_base_path, resolve_effective_base_path
from .diagnostics import DiagnosticRunner
from .provisioning import DirectoryVerifier, ProjectDirectoryProvisioner
from .settings_store import SettingsStore, SqlSettingsStore, StaticSettingsStore

__all__ = [
    "DiagnosticRunner",
    "DirectoryVerifier",
    "ProjectDirectoryProvisioner",
    "SettingsStore",
    "SqlSettingsStore",
    "StaticSettingsStore",
    "resolve_base_path",
    "resolve_effective_base_path",
]
