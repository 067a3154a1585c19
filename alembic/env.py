"""Alembic environment for the location and resource cache tables.

The database URL and optional PostgreSQL schema always come from application
settings, so ``alembic.ini`` never carries credentials.  SQLite databases are
migrated in batch mode.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool, text
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

import city_explorer_api.models  # noqa: F401  (registers every table)
from city_explorer_api.core.config import get_settings
from city_explorer_api.models.base import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

settings = get_settings()


def _configure(**kwargs: object) -> None:
    if settings.database_schema is not None:
        kwargs["version_table_schema"] = settings.database_schema
    context.configure(target_metadata=Base.metadata, compare_type=True, **kwargs)
    with context.begin_transaction():
        context.run_migrations()


def run_offline() -> None:
    """Emit SQL for the configured URL without connecting."""
    _configure(url=settings.database_url, literal_binds=True, dialect_opts={"paramstyle": "named"})


def _run_on_connection(connection: Connection) -> None:
    is_postgres = connection.dialect.name == "postgresql"
    if is_postgres and settings.database_schema is not None:
        connection.execute(text(f'SET search_path TO "{settings.database_schema}", public'))
    _configure(connection=connection, render_as_batch=connection.dialect.name == "sqlite")


async def run_online() -> None:
    """Connect with the async driver and run pending migrations."""
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = settings.database_url
    engine = async_engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)

    async with engine.connect() as connection:
        if connection.dialect.name == "postgresql" and settings.database_schema is not None:
            await connection.execute(text(f'CREATE SCHEMA IF NOT EXISTS "{settings.database_schema}"'))
            await connection.commit()
        await connection.run_sync(_run_on_connection)

    await engine.dispose()


if context.is_offline_mode():
    run_offline()
else:
    asyncio.run(run_online())
