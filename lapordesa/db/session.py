"""Database engine and session management."""
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from lapordesa.config.settings import Settings


def create_db_engine(settings: Settings) -> Engine:
    """
    Create the database engine for the configured URL.

    SQLite gets a thread-shared connection so FastAPI's worker threads
    can use it; an in-memory SQLite database additionally keeps a single
    connection alive for the process lifetime.
    """
    url = settings.DATABASE_URL

    if settings.is_sqlite():
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=settings.DATABASE_ECHO, **kwargs)

    return create_engine(
        url,
        pool_pre_ping=True,
        echo=settings.DATABASE_ECHO,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_POOL_OVERFLOW,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create the session factory bound to ``engine``."""
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def session_scope(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """
    Yield a database session and close it afterwards.

    Usage in FastAPI endpoints goes through ``lapordesa.api.deps.get_db``.
    """
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
