"""Database package exposing declarative base and ORM models."""

from .base import Base, IntEnumType, TimestampMixin
from . import models

__all__ = ["Base", "IntEnumType", "TimestampMixin", "models"]
