"""Pydantic schemas for invoice endpoints."""
from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

from app.db.models import (
    AMOUNT_PRECISION,
    AMOUNT_SCALE,
    DESCRIPTION_LENGTH,
    DISPLAY_NAME_LENGTH,
    INVOICE_NUMBER_LENGTH,
    InvoiceStatus,
)

# Amounts must survive quantizing to cents and fit the amount column.
MIN_AMOUNT = 10.0 ** -AMOUNT_SCALE
MAX_AMOUNT = 10.0 ** (AMOUNT_PRECISION - AMOUNT_SCALE)


class InvoiceCreate(BaseModel):
    """Payload for creating invoices. New invoices always start as Draft."""

    invoice_number: str = Field(..., min_length=1, max_length=INVOICE_NUMBER_LENGTH)
    event_id: str = Field(..., min_length=1, max_length=36)
    event_name: str = Field(..., min_length=1, max_length=DISPLAY_NAME_LENGTH)
    user_id: str = Field(..., min_length=1, max_length=36)
    user_name: str = Field(..., min_length=1, max_length=DISPLAY_NAME_LENGTH)
    amount: float = Field(..., ge=MIN_AMOUNT, lt=MAX_AMOUNT)
    issue_date: date
    due_date: date
    description: str | None = Field(default=None, max_length=DESCRIPTION_LENGTH)


class InvoiceUpdate(BaseModel):
    """Payload for updating the mutable fields of an invoice."""

    id: str = Field(..., min_length=1, max_length=36)
    event_name: str = Field(..., min_length=1, max_length=DISPLAY_NAME_LENGTH)
    user_name: str = Field(..., min_length=1, max_length=DISPLAY_NAME_LENGTH)
    amount: float = Field(..., ge=MIN_AMOUNT, lt=MAX_AMOUNT)
    due_date: date
    status: str = Field(..., min_length=1, max_length=20)
    description: str | None = Field(default=None, max_length=DESCRIPTION_LENGTH)


class InvoiceRead(BaseModel):
    """Invoice representation returned to clients."""

    id: str
    invoice_number: str
    event_id: str
    event_name: str
    user_id: str
    user_name: str
    amount: float
    issue_date: date
    due_date: date
    status: str
    description: str | None
    created_at: datetime

    class Config:
        from_attributes = True

    @field_validator("status", mode="before")
    @classmethod
    def status_label(cls, value: object) -> object:
        if isinstance(value, InvoiceStatus):
            return value.label
        return value
