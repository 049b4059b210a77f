"""Outcome value returned by repositories instead of raising."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class RepositoryResult(Generic[T]):
    """Success flag plus either a payload or an error message."""

    is_success: bool
    data: T | None = None
    error_message: str | None = None

    @classmethod
    def success(cls, data: T | None = None) -> "RepositoryResult[T]":
        return cls(is_success=True, data=data)

    @classmethod
    def failure(cls, error_message: str) -> "RepositoryResult[T]":
        return cls(is_success=False, error_message=error_message)

    def __bool__(self) -> bool:
        return self.is_success
