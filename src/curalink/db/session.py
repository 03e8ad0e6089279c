"""Engine and session factory for the credential store."""

from collections.abc import Iterator
from functools import lru_cache

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from curalink.config import get_settings


def make_engine(database_url: str) -> Engine:
    """Create an engine; SQLite connections are shared with the threadpool."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args, pool_pre_ping=True)


@lru_cache
def get_engine() -> Engine:
    return make_engine(get_settings().database_url)


@lru_cache
def _make_session_factory() -> sessionmaker[Session]:
    return sessionmaker(bind=get_engine(), expire_on_commit=False)


def get_db() -> Iterator[Session]:
    """Yield a session and always close it, for use as a FastAPI dependency."""
    session = _make_session_factory()()
    try:
        yield session
    finally:
        session.close()
