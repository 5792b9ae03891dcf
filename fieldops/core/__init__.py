"""이 파일은 .py 코어 패키지 초기화 모듈로 주요 심볼을 재노출합니다."""

from .config import DEFAULT_LAYOUT_FILE, DEFAULT_PDF_BASE_PATH
from .layout import ProjectLayout
from .logging import setup_logging
from .path_validation import is_cloud_synced, platform_safe_path, probe_writable, validate_path
from .sanitizer import sanitize_segment
from .types import (
    DiagnosticReport,
    DiagnosticStep,
    PathValidation,
    ProvisioningResult,
    RetryPolicy,
    SubdirectoryOutcome,
)

__all__ = [
    "DEFAULT_LAYOUT_FILE",
    "DEFAULT_PDF_BASE_PATH",
    "DiagnosticReport",
    "DiagnosticStep",
    "PathValidation",
    "ProjectLayout",
    "ProvisioningResult",
    "RetryPolicy",
    "SubdirectoryOutcome",
    "is_cloud_synced",
    "platform_safe_path",
    "probe_writable",
    "sanitize_segment",
    "setup_logging",
    "validate_path",
]
