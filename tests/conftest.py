"""이 파일은 .py 테스트 설정 모듈로 경로와 공통 픽스처를 초기화합니다."""

import sys
from pathlib import Path
from typing import List

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from fieldops.core.types import RetryPolicy  # noqa: E402
from fieldops.db.base import Base  # noqa: E402
from fieldops.services.provisioning import DirectoryVerifier  # noqa: E402


class SleepRecorder:
    # 실제로 잠들지 않고 호출된 간격만 기록한다.
    def __init__(self) -> None:
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    yield factory
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def verifier(sleep_recorder) -> DirectoryVerifier:
    return DirectoryVerifier(
        cloud_policy=RetryPolicy(attempts=5, delay_s=1.0),
        local_policy=RetryPolicy(attempts=2, delay_s=0.5),
        sleep=sleep_recorder,
    )
