"""Database engine and session management utilities."""
from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.db import Base, models  # noqa: F401  # Ensure models are imported for metadata registration

from .settings import get_settings


def engine_options(database_url: str) -> dict[str, Any]:
    """Extra ``create_engine`` arguments for the given URL.

    SQLite connections are shared across the server's worker threads, and an
    in-memory database only exists on a single connection, so it is pinned
    with ``StaticPool``.
    """

    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return {}
    options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        options["poolclass"] = StaticPool
    return options


_settings = get_settings()

ENGINE = create_engine(_settings.database_url, future=True, **engine_options(_settings.database_url))
SessionLocal = sessionmaker(bind=ENGINE, class_=Session, autoflush=False, autocommit=False)


def get_db_session() -> Generator[Session, None, None]:
    """Yield a request-scoped session; repositories commit their own writes."""

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def create_database_schema() -> None:
    """Create the invoice tables from ORM metadata (fallback when Alembic fails)."""

    Base.metadata.create_all(bind=ENGINE)
