"""Migration environment for the uploads database"""
import os
from logging.config import fileConfig
from pathlib import Path

from sqlalchemy import engine_from_config
from sqlalchemy import pool
from sqlalchemy.engine import make_url

from alembic import context

from config import Config
from extensions import db
import models  # noqa: F401 - регистрирует модели в db.metadata

# this is the Alembic Config object
config = context.config

# Interpret the config file for Python logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = db.metadata

# Папка instance приложения: Flask-SQLAlchemy разрешает в ней относительные пути SQLite
INSTANCE_PATH = Path(__file__).resolve().parent.parent / "instance"


def get_url():
    """URL базы: sqlalchemy.url из конфигурации Alembic, затем DATABASE_URL приложения."""
    configured = config.get_main_option("sqlalchemy.url")
    if configured:
        return configured

    url = make_url(os.getenv("DATABASE_URL", Config.SQLALCHEMY_DATABASE_URI))
    database = url.database
    if (
        url.drivername.startswith("sqlite")
        and database
        and database != ":memory:"
        and not database.startswith("file:")
        and not os.path.isabs(database)
    ):
        INSTANCE_PATH.mkdir(parents=True, exist_ok=True)
        url = url.set(database=str(INSTANCE_PATH / database))
    return url.render_as_string(hide_password=False)


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode, emitting SQL to the script output."""
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode against a live connection."""
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = get_url()

    connectable = engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
