"""Repository abstractions for database access."""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.base import Base

from .result import RepositoryResult

ModelT = TypeVar("ModelT", bound=Base)
ResultT = TypeVar("ResultT")

ENTITY_NOT_FOUND = "Entity not found"

logger = logging.getLogger(__name__)


class Repository(Generic[ModelT]):
    """Base repository providing CRUD helpers that report outcomes.

    Every public method returns a :class:`RepositoryResult`. Storage errors
    are caught here, the session is rolled back, and the error text is
    embedded in a failure result; nothing raised by SQLAlchemy reaches the
    caller.
    """

    model: type[ModelT]

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_all(self) -> RepositoryResult[list[ModelT]]:
        return self._execute(
            "Error retrieving entities",
            lambda: RepositoryResult.success(self._fetch_all(self._base_query())),
        )

    def get_by_id(self, obj_id: Any) -> RepositoryResult[ModelT]:
        def operation() -> RepositoryResult[ModelT]:
            instance = self.session.get(self.model, obj_id)
            if instance is None:
                return RepositoryResult.failure(ENTITY_NOT_FOUND)
            return RepositoryResult.success(instance)

        return self._execute("Error retrieving entity", operation)

    def create(self, instance: ModelT) -> RepositoryResult[ModelT]:
        def operation() -> RepositoryResult[ModelT]:
            self.session.add(instance)
            self.session.commit()
            self.session.refresh(instance)
            return RepositoryResult.success(instance)

        return self._execute("Error creating entity", operation)

    def update(self, instance: ModelT) -> RepositoryResult[ModelT]:
        def operation() -> RepositoryResult[ModelT]:
            # merge() would insert a missing row; update only replaces existing ones
            identity = inspect(self.model).primary_key_from_instance(instance)
            if None in identity or self.session.get(self.model, identity) is None:
                return RepositoryResult.failure(ENTITY_NOT_FOUND)
            persistent = self.session.merge(instance)
            self.session.commit()
            self.session.refresh(persistent)
            return RepositoryResult.success(persistent)

        return self._execute("Error updating entity", operation)

    def delete_by_id(self, obj_id: Any) -> RepositoryResult[None]:
        def operation() -> RepositoryResult[None]:
            instance = self.session.get(self.model, obj_id)
            if instance is None:
                return RepositoryResult.failure(ENTITY_NOT_FOUND)
            self.session.delete(instance)
            self.session.commit()
            return RepositoryResult.success()

        return self._execute("Error deleting entity", operation)

    def _base_query(self) -> Select[tuple[ModelT]]:
        return select(self.model)

    def _fetch_all(self, statement: Select[tuple[ModelT]]) -> list[ModelT]:
        return list(self.session.scalars(statement).all())

    def _execute(
        self,
        action: str,
        operation: Callable[[], RepositoryResult[ResultT]],
    ) -> RepositoryResult[ResultT]:
        """Run ``operation`` and convert storage errors into a failure result."""

        try:
            return operation()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.warning("%s (%s): %s", action, self.model.__name__, exc)
            return RepositoryResult.failure(f"{action}: {exc}")
