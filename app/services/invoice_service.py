"""Invoice service mapping repository outcomes to API shapes."""
from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

from app.db.models import Invoice, InvoiceStatus
from app.repositories.invoice import InvoiceRepository
from app.repositories.result import RepositoryResult
from app.schemas.invoice import InvoiceCreate, InvoiceRead, InvoiceUpdate

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _to_decimal(amount: float) -> Decimal:
    return Decimal(str(amount)).quantize(CENTS)


class InvoiceService:
    """Invoice operations for the presentation layers.

    Repository failures are never forwarded: list operations fall back to an
    empty list, single lookups and writes to ``None``, and deletes to
    ``False``. The failure message is logged instead.
    """

    def __init__(
        self,
        invoices: InvoiceRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.invoices = invoices
        self.clock = clock

    def list_all(self) -> list[InvoiceRead]:
        return self._to_list("list_all", self.invoices.list_all())

    def list_by_event(self, event_id: str) -> list[InvoiceRead]:
        return self._to_list("list_by_event", self.invoices.list_by_event(event_id))

    def list_by_user(self, user_id: str) -> list[InvoiceRead]:
        return self._to_list("list_by_user", self.invoices.list_by_user(user_id))

    def list_by_status(self, status: str) -> list[InvoiceRead]:
        parsed = InvoiceStatus.parse(status)
        if parsed is None:
            logger.info("Ignoring status filter with unknown status %r", status)
            return []
        return self._to_list("list_by_status", self.invoices.list_by_status(parsed))

    def list_overdue(self) -> list[InvoiceRead]:
        return self._to_list("list_overdue", self.invoices.list_overdue())

    def get(self, invoice_id: str) -> InvoiceRead | None:
        return self._to_read("get", self.invoices.get_by_id(invoice_id))

    def get_by_number(self, invoice_number: str) -> InvoiceRead | None:
        return self._to_read("get_by_number", self.invoices.get_by_invoice_number(invoice_number))

    def create(self, payload: InvoiceCreate) -> InvoiceRead | None:
        invoice = self.invoices.model(
            id=str(uuid4()),
            invoice_number=payload.invoice_number,
            event_id=payload.event_id,
            event_name=payload.event_name,
            user_id=payload.user_id,
            user_name=payload.user_name,
            amount=_to_decimal(payload.amount),
            issue_date=payload.issue_date,
            due_date=payload.due_date,
            status=InvoiceStatus.DRAFT,
            description=payload.description,
            created_at=self.clock(),
        )
        return self._to_read("create", self.invoices.create(invoice))

    def update(self, payload: InvoiceUpdate) -> InvoiceRead | None:
        """Overwrite the mutable fields of an existing invoice.

        Returns ``None`` when the invoice does not exist, when the status does
        not parse (nothing is written in that case), or when saving fails.
        """

        existing = self.invoices.get_by_id(payload.id)
        if not existing.is_success or existing.data is None:
            logger.info("update skipped for invoice %s: %s", payload.id, existing.error_message)
            return None

        status = InvoiceStatus.parse(payload.status)
        if status is None:
            logger.info("update rejected for invoice %s: unknown status %r", payload.id, payload.status)
            return None

        invoice: Invoice = existing.data
        invoice.event_name = payload.event_name
        invoice.user_name = payload.user_name
        invoice.amount = _to_decimal(payload.amount)
        invoice.due_date = payload.due_date
        invoice.status = status
        invoice.description = payload.description
        return self._to_read("update", self.invoices.update(invoice))

    def delete(self, invoice_id: str) -> bool:
        result = self.invoices.delete_by_id(invoice_id)
        if not result.is_success:
            logger.warning("delete failed for invoice %s: %s", invoice_id, result.error_message)
        return result.is_success

    def _to_list(self, operation: str, result: RepositoryResult[list[Invoice]]) -> list[InvoiceRead]:
        if not result.is_success or result.data is None:
            logger.warning("%s returned no invoices: %s", operation, result.error_message)
            return []
        return [InvoiceRead.model_validate(row) for row in result.data]

    def _to_read(self, operation: str, result: RepositoryResult[Invoice]) -> InvoiceRead | None:
        if not result.is_success or result.data is None:
            logger.warning("%s returned no invoice: %s", operation, result.error_message)
            return None
        return InvoiceRead.model_validate(result.data)
