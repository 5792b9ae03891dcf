"""이 파일은 .py 타입 정의 모듈로 검증/프로비저닝/진단 결과 모델을 제공합니다."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

TenantId = Union[int, str]


@dataclass(frozen=True)
class RetryPolicy:
    # 생성 직후 폴더가 보이는지 확인할 때의 시도 횟수와 간격(초)이다.
    attempts: int
    delay_s: float


@dataclass(frozen=True)
class PathValidation:
    # valid는 존재/디렉터리 여부, writable은 실제 쓰기 시험 결과다.
    valid: bool
    writable: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class SubdirectoryOutcome:
    name: str
    # created가 False이고 success가 True면 이미 존재하던 폴더다.
    created: bool
    success: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class ProvisioningResult:
    """프로젝트 폴더 프로비저닝 결과.

    success는 프로젝트 루트 폴더가 존재하는지만 나타낸다. 경고(warnings)는
    동기화 지연처럼 스스로 해소될 가능성이 큰 문제를 담고, error는 기준 경로
    오류나 루트 폴더 생성 실패 같은 하드 실패일 때만 채워진다.
    """

    success: bool
    # 사용자에게 보여줄 논리 경로(확장 경로 접두사 없는 형태)다.
    path: Optional[str]
    error: Optional[str] = None
    warnings: Tuple[str, ...] = ()
    subdirectories: Tuple[SubdirectoryOutcome, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "path": self.path,
            "error": self.error,
            "warnings": list(self.warnings),
            "subdirectories": [asdict(item) for item in self.subdirectories],
        }


@dataclass(frozen=True)
class ResolvedBasePath:
    # source는 값을 읽어온 설정 키 또는 "default"다.
    path: str
    source: str
    error: Optional[str] = None


@dataclass(frozen=True)
class DiagnosticStep:
    name: str
    success: bool
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DiagnosticReport:
    tenant_id: Optional[TenantId]
    base_path: Optional[str]
    steps: Tuple[DiagnosticStep, ...]

    @property
    def success(self) -> bool:
        return all(step.success for step in self.steps)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tenant_id": self.tenant_id,
            "base_path": self.base_path,
            "success": self.success,
            "steps": [asdict(step) for step in self.steps],
        }
