from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base, Session
from sqlalchemy.pool import StaticPool

from settings import Settings


Base = declarative_base()


def build_engine(app_settings: Settings) -> Engine:
    kwargs = app_settings.engine_kwargs()
    # 메모리 DB는 커넥션 하나를 공유해야 테이블이 유지됨
    if app_settings.is_memory_db:
        kwargs["poolclass"] = StaticPool
    return create_engine(app_settings.database_url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


def create_tables(engine: Engine) -> None:
    # 모델 import 이후 호출 필요
    import models  # noqa: F401
    Base.metadata.create_all(bind=engine)


# DB 세션 가져오기
def get_db(request: Request) -> Generator[Session, None, None]:
    SessionLocal = request.app.state.session_factory
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
