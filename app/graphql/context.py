"""GraphQL context utilities."""
from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session, sessionmaker
from strawberry.fastapi import BaseContext

from app.core.database import SessionLocal


@dataclass(slots=True)
class GraphQLContext(BaseContext):
    """GraphQL-specific request context holding the session factory."""

    session_factory: sessionmaker[Session]

    def get_session(self) -> Session:
        """Return a new SQLAlchemy session for resolver use."""

        return self.session_factory()


def context_getter() -> GraphQLContext:
    """FastAPI-compatible context getter for Strawberry GraphQL router."""

    return GraphQLContext(session_factory=SessionLocal)
