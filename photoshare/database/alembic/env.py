# photoshare/database/alembic/env.py
from __future__ import annotations

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool, text
from sqlalchemy.engine import Connection

# --- Load app settings --------------------------------------------------------
# This import must work without importing the whole app graph (keep it light).
from photoshare.common.settings import get_settings

cfg = get_settings()

# --- Alembic Config -----------------------------------------------------------
alembic_config = context.config

# If alembic.ini has a loggers section, set it up.
if alembic_config.config_file_name is not None:
    fileConfig(alembic_config.config_file_name)

# Explicit sqlalchemy.url (tests, CLI -x) > DATABASE_URL > settings
database_url = (
    alembic_config.get_main_option("sqlalchemy.url")
    or os.getenv("DATABASE_URL")
    or cfg.database_url
)

from photoshare.database.models import Base  # noqa: E402  (registers every table)

target_metadata = Base.metadata
app_schema = target_metadata.schema  # None when DB_SCHEMA is "public"


def include_object(object, name, type_, reflected, compare_to):
    """Limit autogenerate to our schema."""
    if type_ == "table":
        obj_schema = getattr(object, "schema", None)
        return obj_schema is None or obj_schema == app_schema
    return True


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode (no DB connection)."""
    context.configure(
        url=database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        include_schemas=app_schema is not None,
        include_object=include_object,
        version_table_schema=app_schema,
    )

    with context.begin_transaction():
        context.run_migrations()


def _prepare_connection(conn: Connection) -> None:
    """Create the app schema and put it first on the search_path (Postgres only)."""
    if conn.dialect.name != "postgresql" or not app_schema:
        return
    conn.execute(text(f'CREATE SCHEMA IF NOT EXISTS "{app_schema}"'))
    conn.execute(text(f'SET search_path TO "{app_schema}", public'))
    conn.commit()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode (with an Engine/Connection)."""
    connectable = create_engine(database_url, poolclass=pool.NullPool, future=True)

    with connectable.connect() as connection:
        _prepare_connection(connection)

        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            include_schemas=app_schema is not None,
            include_object=include_object,
            version_table_schema=app_schema,
            compare_type=True,
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()


# Entrypoint selected by Alembic
if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
