"""
Database initialization.

Creates all tables.  Production databases are migrated with Alembic;
this is for local development and tests.
"""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from gymtrack.db.session import engine as default_engine


def init_db(engine: Engine = default_engine) -> None:
    """Create every table registered on ``SQLModel.metadata``."""
    import gymtrack.db.base  # noqa: F401

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created successfully")


if __name__ == "__main__":
    init_db()
