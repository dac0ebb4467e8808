"""
Database session management.

Provides SQLModel engine and session creation.
"""

from typing import Generator

from sqlalchemy import event
from sqlalchemy.engine import Engine, make_url
from sqlmodel import Session, create_engine

from gymtrack.core.config import settings

DATABASE_URL: str = settings.SQLALCHEMY_DATABASE_URI


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, echo: bool = False, **kwargs) -> Engine:
    """Create an engine, sizing the pool only for server databases on the default pool.

    SQLite connections get foreign keys switched on so cascades behave
    as they do on PostgreSQL.
    """
    if make_url(url).get_backend_name() == "sqlite":
        sqlite_engine = create_engine(url, echo=echo, connect_args={ "check_same_thread": False }, **kwargs)
        event.listen(sqlite_engine, "connect", _enable_sqlite_foreign_keys)
        return sqlite_engine
    if "poolclass" in kwargs:
        return create_engine(url, echo=echo, **kwargs)
    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=5,         # Connection pool size
        max_overflow=10,     # Max connections beyond pool_size
        **kwargs
    )


engine = build_engine(DATABASE_URL, echo=settings.DEBUG)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance
    """
    with Session(engine) as session:
        yield session
