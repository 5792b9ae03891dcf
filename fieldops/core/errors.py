"""이 파일은 .py 공통 예외 모듈로 오류 유형을 표준화합니다."""


class SettingsStoreError(RuntimeError):
    """설정 저장소 조회/저장 실패 시 사용합니다."""


class LayoutConfigError(ValueError):
    """프로젝트 폴더 레이아웃 설정이 잘못되었을 때 사용합니다."""
