"""이 파일은 .py 경로 세그먼트 정규화 모듈로 프로젝트 번호를 안전한 폴더명으로 바꿉니다."""

import re
from typing import Any

from .config import SEGMENT_MAX_LENGTH

FALLBACK_SEGMENT = "unnamed"
PLACEHOLDER = "_"

# Windows/POSIX 양쪽에서 폴더명에 쓸 수 없는 문자와 제어 문자
_ILLEGAL_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f\x7f]')
# 일부 플랫폼은 앞뒤의 점/공백을 허용하지 않는다.
_EDGE_CHARS = re.compile(r"^[\s.]+|[\s.]+$")


def sanitize_segment(identifier: Any) -> str:
    """임의의 식별자를 결정적이고 멱등적인 폴더명으로 변환한다. 예외를 던지지 않는다."""
    if identifier is None:
        return FALLBACK_SEGMENT
    text = identifier if isinstance(identifier, str) else str(identifier)

    cleaned = _ILLEGAL_CHARS.sub(PLACEHOLDER, text)
    cleaned = _EDGE_CHARS.sub("", cleaned)

    # 하위 폴더명이 붙을 여유를 남기도록 길이를 제한한다.
    if len(cleaned) > SEGMENT_MAX_LENGTH:
        cleaned = _EDGE_CHARS.sub("", cleaned[:SEGMENT_MAX_LENGTH])

    return cleaned or FALLBACK_SEGMENT
