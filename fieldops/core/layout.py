"""이 파일은 .py 폴더 레이아웃 모듈로 시험 유형→하위 폴더 매핑을 담당합니다."""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import yaml

from .config import DEFAULT_LAYOUT_FILE
from .errors import LayoutConfigError
from .sanitizer import sanitize_segment

DEFAULT_FALLBACK_FOLDER = "Other"


def normalize_test_type(test_type: Optional[str]) -> str:
    # None/공백을 처리하고 대문자 표준화한다.
    if not test_type:
        return ""
    return test_type.strip().upper()


def _check_folder_name(name: str, source: Path) -> str:
    # 레이아웃의 폴더명은 정규화해도 바뀌지 않는 안전한 이름이어야 한다.
    if not isinstance(name, str) or not name or sanitize_segment(name) != name:
        raise LayoutConfigError(f"Invalid folder name {name!r} in {source}")
    return name


@dataclass(frozen=True)
class ProjectLayout:
    folders_by_type: Dict[str, str]
    extra_folders: Tuple[str, ...] = ()
    fallback_folder: str = DEFAULT_FALLBACK_FOLDER

    @classmethod
    def from_file(cls, path: Path) -> "ProjectLayout":
        # YAML 파일을 읽어 매핑 테이블을 구성한다.
        try:
            data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise LayoutConfigError(f"Cannot load layout file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise LayoutConfigError(f"Layout file must contain a mapping: {path}")

        mapping: Dict[str, str] = {}
        for item in data.get("test_types", []) or []:
            test_type = normalize_test_type(item.get("type"))
            if not test_type:
                continue
            mapping[test_type] = _check_folder_name(item.get("folder"), path)

        extras = [_check_folder_name(name, path) for name in data.get("extra_folders", []) or []]
        fallback = _check_folder_name(data.get("fallback_folder", DEFAULT_FALLBACK_FOLDER), path)
        return cls(mapping, tuple(extras), fallback)

    @classmethod
    def from_default(cls) -> "ProjectLayout":
        return cls.from_file(DEFAULT_LAYOUT_FILE)

    @property
    def subdirectories(self) -> Tuple[str, ...]:
        # 여러 시험 유형이 같은 폴더를 공유하므로 순서를 유지하며 중복을 제거한다.
        return tuple(_unique(list(self.folders_by_type.values()) + list(self.extra_folders)))

    def folder_for(self, test_type: str) -> str:
        # 알 수 없는 시험 유형은 fallback 폴더로 보낸다.
        return self.folders_by_type.get(normalize_test_type(test_type), self.fallback_folder)


def _unique(names: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for name in names:
        if name not in seen:
            ordered.append(name)
            seen.add(name)
    return ordered
