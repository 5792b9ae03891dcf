"""이 파일은 .py DB 세션 모듈로 엔진/세션 생성과 초기화를 담당합니다."""

from __future__ import annotations

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from fieldops.core.config import DATABASE_URL, STORAGE_DIR
from .base import Base


def _ensure_storage_dir() -> None:
    if not STORAGE_DIR.exists():
        STORAGE_DIR.mkdir(parents=True, exist_ok=True)


_connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    _ensure_storage_dir()
    _connect_args = {"check_same_thread": False}

engine = create_engine(DATABASE_URL, connect_args=_connect_args)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def init_db() -> None:
    Base.metadata.create_all(bind=engine)


def get_session() -> Generator[Session, None, None]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
