"""FastAPI dependency providers for the invoice service."""
from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.database import get_db_session
from app.repositories.invoice import InvoiceRepository
from app.services.invoice_service import InvoiceService


def get_invoice_repository(session: Session = Depends(get_db_session)) -> InvoiceRepository:
    """Provide an invoice repository bound to the request session."""

    return InvoiceRepository(session)


def get_invoice_service(
    invoices: InvoiceRepository = Depends(get_invoice_repository),
) -> InvoiceService:
    """Provide invoice service wired to the request's repository."""

    return InvoiceService(invoices)
