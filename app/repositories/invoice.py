"""Invoice repository with the invoice-specific queries."""
from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timezone

from sqlalchemy import Select
from sqlalchemy.orm import Session

from app.db.models import CLOSED_STATUSES, Invoice, InvoiceStatus

from .base import Repository
from .result import RepositoryResult

INVOICE_NOT_FOUND = "Invoice not found"


def utc_today() -> date:
    """Current calendar date in UTC."""

    return datetime.now(timezone.utc).date()


class InvoiceRepository(Repository[Invoice]):
    """Invoice repository; lists come back newest-created first."""

    model = Invoice

    def __init__(self, session: Session, today: Callable[[], date] = utc_today) -> None:
        super().__init__(session)
        self.today = today

    def list_all(self) -> RepositoryResult[list[Invoice]]:
        return self._list("Error retrieving all invoices", self._recent_first(self._base_query()))

    def list_by_event(self, event_id: str) -> RepositoryResult[list[Invoice]]:
        statement = self._base_query().where(self.model.event_id == event_id)
        return self._list("Error retrieving invoices by event ID", self._recent_first(statement))

    def list_by_user(self, user_id: str) -> RepositoryResult[list[Invoice]]:
        statement = self._base_query().where(self.model.user_id == user_id)
        return self._list("Error retrieving invoices by user ID", self._recent_first(statement))

    def list_by_status(self, status: InvoiceStatus) -> RepositoryResult[list[Invoice]]:
        statement = self._base_query().where(self.model.status == status)
        return self._list("Error retrieving invoices by status", self._recent_first(statement))

    def list_overdue(self) -> RepositoryResult[list[Invoice]]:
        """Open invoices whose due date has passed, most overdue first."""

        def operation() -> RepositoryResult[list[Invoice]]:
            statement = (
                self._base_query()
                .where(self.model.due_date < self.today())
                .where(self.model.status.not_in(CLOSED_STATUSES))
                .order_by(self.model.due_date.asc())
            )
            return RepositoryResult.success(self._fetch_all(statement))

        return self._execute("Error retrieving overdue invoices", operation)

    def get_by_invoice_number(self, invoice_number: str) -> RepositoryResult[Invoice]:
        def operation() -> RepositoryResult[Invoice]:
            statement = self._base_query().where(self.model.invoice_number == invoice_number)
            invoice = self.session.scalar(statement)
            if invoice is None:
                return RepositoryResult.failure(INVOICE_NOT_FOUND)
            return RepositoryResult.success(invoice)

        return self._execute("Error retrieving invoice by number", operation)

    def _recent_first(self, statement: Select[tuple[Invoice]]) -> Select[tuple[Invoice]]:
        return statement.order_by(self.model.created_at.desc())

    def _list(self, action: str, statement: Select[tuple[Invoice]]) -> RepositoryResult[list[Invoice]]:
        return self._execute(action, lambda: RepositoryResult.success(self._fetch_all(statement)))
