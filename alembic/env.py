"""
Alembic environment for the GymTrack schema.

The URL comes from ``settings.SQLALCHEMY_DATABASE_URI``.  SQLite runs in
batch mode so ALTERs work, and with the foreign-key pragma enabled so the
``ON DELETE CASCADE`` rules hold during data migrations.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlmodel import SQLModel

import gymtrack.db.base  # noqa: F401
from gymtrack.core.config import settings
from gymtrack.db.session import build_engine

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

database_url = settings.SQLALCHEMY_DATABASE_URI
config.set_main_option("sqlalchemy.url", database_url)
is_sqlite = database_url.startswith("sqlite")

target_metadata = SQLModel.metadata


def run_migrations_offline() -> None:
    """Emit the migration SQL for ``database_url`` without connecting."""
    context.configure(url=database_url, target_metadata=target_metadata, literal_binds=True,
                      dialect_opts={ "paramstyle": "named" }, render_as_batch=is_sqlite, compare_type=True, )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Migrate through an engine built like the application's own."""
    connectable = build_engine(database_url, poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, render_as_batch=is_sqlite,
                          compare_type=True, )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
