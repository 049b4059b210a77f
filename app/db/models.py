"""ORM model definitions for the invoice service."""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import IntEnum
from uuid import uuid4

from sqlalchemy import CheckConstraint, Date, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, IntEnumType, TimestampMixin

UUID_STR = String(36)
INVOICE_NUMBER_LENGTH = 50
DISPLAY_NAME_LENGTH = 255
DESCRIPTION_LENGTH = 1000
AMOUNT_PRECISION = 18
AMOUNT_SCALE = 2


class InvoiceStatus(IntEnum):
    """Lifecycle label for invoices, persisted as its ordinal."""

    DRAFT = 0
    SENT = 1
    PAID = 2
    OVERDUE = 3
    CANCELLED = 4

    @property
    def label(self) -> str:
        """External name of the status, e.g. ``"Draft"``."""

        return self.name.capitalize()

    @classmethod
    def parse(cls, value: str | None) -> InvoiceStatus | None:
        """Match ``value`` against the member names, ignoring case.

        Returns ``None`` instead of raising when nothing matches.
        """

        if value is None:
            return None
        candidate = value.strip().upper()
        if not candidate:
            return None
        return cls.__members__.get(candidate)


CLOSED_STATUSES = (InvoiceStatus.PAID, InvoiceStatus.CANCELLED)


class Invoice(TimestampMixin, Base):
    """Invoice billed to a user for an event."""

    id: Mapped[str] = mapped_column(UUID_STR, primary_key=True, default=lambda: str(uuid4()))
    invoice_number: Mapped[str] = mapped_column(String(INVOICE_NUMBER_LENGTH), nullable=False)
    event_id: Mapped[str] = mapped_column(UUID_STR, nullable=False)
    event_name: Mapped[str] = mapped_column(String(DISPLAY_NAME_LENGTH), nullable=False)
    user_id: Mapped[str] = mapped_column(UUID_STR, nullable=False)
    user_name: Mapped[str] = mapped_column(String(DISPLAY_NAME_LENGTH), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(AMOUNT_PRECISION, AMOUNT_SCALE), nullable=False)
    issue_date: Mapped[date] = mapped_column(Date, nullable=False)
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[InvoiceStatus] = mapped_column(
        IntEnumType(InvoiceStatus), default=InvoiceStatus.DRAFT, nullable=False
    )
    description: Mapped[str | None] = mapped_column(String(DESCRIPTION_LENGTH), nullable=True)

    __table_args__ = (
        Index("ix_invoice_invoice_number", "invoice_number", unique=True),
        Index("ix_invoice_event_id", "event_id"),
        Index("ix_invoice_user_id", "user_id"),
        Index("ix_invoice_status_due_date", "status", "due_date"),
        CheckConstraint("amount > 0", name="ck_invoice_amount_positive"),
    )


__all__ = [
    "Invoice",
    "InvoiceStatus",
    "CLOSED_STATUSES",
]
