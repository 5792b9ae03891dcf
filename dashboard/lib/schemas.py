"""대시보드 표시를 위한 간단한 응답 변환 보조 모듈."""

from __future__ import annotations

from typing import Any, Dict, List


def subdirectory_rows(folder: Dict[str, Any]) -> List[Dict[str, Any]]:
    # 하위 폴더 결과를 표로 보여주기 위해 상태 문자열을 붙인다.
    rows = []
    for item in folder.get("subdirectories", []) or []:
        if not item.get("success"):
            state = "실패"
        elif item.get("created"):
            state = "생성"
        else:
            state = "기존"
        rows.append({"name": item.get("name"), "state": state, "error": item.get("error")})
    return rows


def folder_summary(folder: Dict[str, Any]) -> str:
    # success + warnings 조합을 사용자 안내 문구로 바꾼다.
    if not folder.get("success"):
        return f"폴더 생성 실패: {folder.get('error')}"
    if folder.get("warnings"):
        return "폴더가 생성되었지만 확인이 필요합니다 (동기화 상태를 확인하세요)."
    return "폴더가 정상적으로 준비되었습니다."
