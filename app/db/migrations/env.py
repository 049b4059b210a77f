"""Alembic environment bound to the application's engine and metadata."""
from __future__ import annotations

from alembic import context

from app.core.database import ENGINE
from app.db import Base

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=str(ENGINE.url),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    with ENGINE.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=connection.dialect.name == "sqlite",
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
