"""이 파일은 .py 패키지 초기화 모듈로 프로젝트 폴더 프로비저닝 엔진을 담습니다."""

__version__ = "0.1.0"
