"""SQLAlchemy Declarative base, common mixins and column types."""
from __future__ import annotations

from datetime import datetime, timezone
from enum import IntEnum

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, declared_attr, mapped_column
from sqlalchemy.types import TypeDecorator


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    @declared_attr.directive
    def __tablename__(cls) -> str:
        return cls.__name__.lower()


class TimestampMixin:
    """Mixin adding creation timestamp."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


class IntEnumType(TypeDecorator):
    """Store an ``IntEnum`` member as its ordinal integer.

    Values are bound as ``int(member)`` and loaded back through the enum class,
    so the ORM attribute always holds an enum member rather than a bare int.
    """

    impl = Integer
    cache_ok = True

    def __init__(self, enum_class: type[IntEnum], *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.enum_class = enum_class

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return int(self.enum_class(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return self.enum_class(value)
