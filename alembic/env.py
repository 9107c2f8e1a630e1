"""Migration environment for the cabinet schema; the database URL comes from Settings."""

import logging

from alembic import context
from sqlalchemy import create_engine
from sqlalchemy.pool import NullPool

from medicine_cabinet.core.config import settings
from medicine_cabinet.models import Base, CabinetEntry, Comment, Strain, User  # noqa: F401

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("alembic.env")

target_metadata = Base.metadata


def _configure_kwargs(url: str) -> dict:
    # SQLite cannot ALTER most constraints in place; batch mode rebuilds the table.
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "render_as_batch": url.startswith("sqlite"),
    }


def run_migrations_offline() -> None:
    url = settings.DATABASE_URL
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_kwargs(url),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    url = settings.DATABASE_URL
    engine = create_engine(url, poolclass=NullPool)
    logger.info("Running migrations against %s", engine.url.render_as_string(hide_password=True))
    with engine.connect() as connection:
        context.configure(connection=connection, **_configure_kwargs(url))
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
