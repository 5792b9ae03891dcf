"""이 파일은 .py 설정 모듈로 경로, 기본 위치, 재시도 정책 값을 정의합니다."""

import os
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]
PACKAGE_DIR = REPO_ROOT / "fieldops"
DATA_DIR = PACKAGE_DIR / "data"
DEFAULT_LAYOUT_FILE = DATA_DIR / "project_layout.yml"
STORAGE_DIR = REPO_ROOT / "storage"
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"sqlite:///{(STORAGE_DIR / 'fieldops.db').as_posix()}",
)
API_PREFIX = "/api/v1"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# 설정 저장소에서 기준 경로를 읽을 때 사용하는 키 (앞선 키가 우선한다)
WORKFLOW_BASE_PATH_KEY = "workflow_base_path"
LEGACY_BASE_PATH_KEY = "onedrive_base_path"
BASE_PATH_KEYS = (WORKFLOW_BASE_PATH_KEY, LEGACY_BASE_PATH_KEY)

# 테넌트 설정이 없을 때 사용하는 프로세스 전역 기본 루트
DEFAULT_PDF_BASE_PATH = Path(os.getenv("PDF_BASE_PATH", str(STORAGE_DIR / "pdfs")))

# 경로 문자열에 포함되면 클라우드 동기화 폴더로 간주하는 표식
CLOUD_SYNC_MARKERS = tuple(
    marker.strip().lower()
    for marker in os.getenv(
        "CLOUD_SYNC_MARKERS",
        "onedrive,dropbox,google drive,googledrive,icloud,box sync,sharepoint",
    ).split(",")
    if marker.strip()
)

# 폴더 생성 직후 가시성 확인 재시도 정책
CLOUD_RETRY_ATTEMPTS = int(os.getenv("PROVISION_CLOUD_ATTEMPTS", "5"))
CLOUD_RETRY_DELAY_S = float(os.getenv("PROVISION_CLOUD_DELAY_S", "1.0"))
LOCAL_RETRY_ATTEMPTS = int(os.getenv("PROVISION_LOCAL_ATTEMPTS", "2"))
LOCAL_RETRY_DELAY_S = float(os.getenv("PROVISION_LOCAL_DELAY_S", "0.5"))

WINDOWS_MAX_PATH = 260
SEGMENT_MAX_LENGTH = 200
