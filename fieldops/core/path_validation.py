"""이 파일은 .py 경로 검증 모듈로 존재/디렉터리/쓰기 가능 여부와 동기화 폴더 여부를 판별합니다."""

from __future__ import annotations

import ntpath
import os
import re
import uuid
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from .config import CLOUD_SYNC_MARKERS, WINDOWS_MAX_PATH
from .types import PathValidation

PROBE_FILE_PREFIX = ".fieldops_write_test_"
EXTENDED_PREFIX = "\\\\?\\"
EXTENDED_UNC_PREFIX = "\\\\?\\UNC\\"

# Windows에서 디렉터리 경로에 쓸 수 없는 문자 (콜론은 드라이브 문자 뒤에서만 허용)
_FORBIDDEN_PATH_CHARS = re.compile(r'[<>:"|?*\x00-\x1f]')
_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:(?=[\\/]|$)")

PathLike = Union[str, Path]


def find_invalid_path_chars(path: str) -> List[str]:
    # 드라이브 문자(C:)를 제외한 부분에서 금지 문자를 찾는다.
    body = _DRIVE_PREFIX.sub("", path, count=1)
    found: List[str] = []
    for char in _FORBIDDEN_PATH_CHARS.findall(body):
        label = char if char.isprintable() else repr(char)
        if label not in found:
            found.append(label)
    return found


def probe_writable(directory: PathLike) -> Tuple[bool, Optional[str]]:
    """권한 비트 대신 실제로 빈 파일을 만들고 지워서 쓰기 가능 여부를 확인한다."""
    probe = Path(directory) / f"{PROBE_FILE_PREFIX}{uuid.uuid4().hex}"
    try:
        probe.touch(exist_ok=False)
    except OSError as exc:
        return False, f"Directory is not writable: {exc}"
    try:
        probe.unlink()
    except OSError as exc:
        return False, f"Probe file could not be removed: {exc}"
    return True, None


def validate_path(path: Optional[PathLike]) -> PathValidation:
    # 1) 공백 제거 후 비어 있지 않아야 한다.
    candidate = str(path).strip() if path is not None else ""
    if not candidate:
        return PathValidation(valid=False, writable=False, error="Path is required")

    # 2) 가장 엄격한 플랫폼 기준으로 금지 문자를 검사한다.
    invalid = find_invalid_path_chars(candidate)
    if invalid:
        return PathValidation(
            valid=False,
            writable=False,
            error=f"Path contains invalid characters: {', '.join(invalid)}",
        )

    target = Path(candidate)
    try:
        # 3) 존재 여부, 4) 디렉터리 여부
        if not target.exists():
            return PathValidation(valid=False, writable=False, error="Path does not exist")
        if not target.is_dir():
            return PathValidation(valid=False, writable=False, error="Path is not a directory")
    except OSError as exc:
        return PathValidation(valid=False, writable=False, error=f"Path cannot be inspected: {exc}")

    # 5) 시험 파일 생성/삭제로 쓰기 가능 여부를 확인한다.
    writable, error = probe_writable(target)
    return PathValidation(valid=True, writable=writable, error=error)


def is_cloud_synced(path: Optional[PathLike], markers: Sequence[str] = CLOUD_SYNC_MARKERS) -> bool:
    # 경로 문자열에 동기화 클라이언트 폴더명이 있는지만 본다(누락 허용).
    if not path:
        return False
    lowered = str(path).lower()
    return any(marker in lowered for marker in markers)


def needs_extended_path(path: str) -> bool:
    return len(path) > WINDOWS_MAX_PATH


def platform_safe_path(logical_path: str, is_windows: Optional[bool] = None) -> str:
    """생성 호출에만 쓰는 경로 형태를 반환한다.

    Windows에서 260자를 넘는 경로는 확장 경로 접두사(\\\\?\\)를 붙인다. 존재 확인은
    항상 논리 경로로 하므로 이 값은 mkdir 호출 외에는 사용하지 않는다.
    """
    if is_windows is None:
        is_windows = os.name == "nt"
    if not is_windows or not needs_extended_path(logical_path):
        return logical_path
    if logical_path.startswith(EXTENDED_PREFIX):
        return logical_path

    absolute = ntpath.abspath(logical_path) if os.name == "nt" else ntpath.normpath(logical_path)
    if absolute.startswith("\\\\"):
        return EXTENDED_UNC_PREFIX + absolute[2:]
    return EXTENDED_PREFIX + absolute
