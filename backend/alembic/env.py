"""
Alembic migration environment for the Webinar table.

The database URL comes from DATABASE_URL_SYNC, or from `alembic -x url=...`
when migrating a database other than the configured one.
"""

from logging.config import fileConfig
from sqlalchemy import engine_from_config, pool
from alembic import context

from webinar_api.db.base import Base
from webinar_api.models import WebinarRecord  # noqa: F401 - registers the table on Base.metadata
from webinar_api.core.config import get_settings

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def database_url() -> str:
    override = context.get_x_argument(as_dictionary=True).get("url")
    return override or get_settings().DATABASE_URL_SYNC


def run_migrations_offline() -> None:
    """Emit the SQL script without connecting."""
    context.configure(
        url=database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = database_url()
    connectable = engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
