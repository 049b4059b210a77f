"""Strawberry GraphQL schema definition."""
from __future__ import annotations

from collections.abc import Callable
from contextlib import contextmanager
from datetime import date, datetime
from typing import TypeVar

import strawberry
from strawberry.types import Info

from app.graphql.context import GraphQLContext
from app.repositories.invoice import InvoiceRepository
from app.schemas.invoice import InvoiceCreate, InvoiceRead, InvoiceUpdate
from app.services.invoice_service import InvoiceService

ResultType = TypeVar("ResultType")


@contextmanager
def _session_scope(context: GraphQLContext):
    session = context.get_session()
    try:
        yield session
    finally:
        session.close()


def _execute_with_service(
    info: Info[GraphQLContext, None],
    executor: Callable[[InvoiceService], ResultType],
) -> ResultType:
    with _session_scope(info.context) as session:
        return executor(InvoiceService(InvoiceRepository(session)))


@strawberry.type
class HealthCheck:
    status: str


@strawberry.type
class InvoiceType:
    id: strawberry.ID
    invoice_number: str
    event_id: strawberry.ID
    event_name: str
    user_id: strawberry.ID
    user_name: str
    amount: float
    issue_date: date
    due_date: date
    status: str
    description: str | None
    created_at: datetime


@strawberry.type
class SuccessResult:
    success: bool


@strawberry.input
class InvoiceCreateInput:
    invoice_number: str
    event_id: strawberry.ID
    event_name: str
    user_id: strawberry.ID
    user_name: str
    amount: float
    issue_date: date
    due_date: date
    description: str | None = None


@strawberry.input
class InvoiceUpdateInput:
    id: strawberry.ID
    event_name: str
    user_name: str
    amount: float
    due_date: date
    status: str
    description: str | None = None


def _to_invoice_type(invoice: InvoiceRead) -> InvoiceType:
    return InvoiceType(
        id=invoice.id,
        invoice_number=invoice.invoice_number,
        event_id=invoice.event_id,
        event_name=invoice.event_name,
        user_id=invoice.user_id,
        user_name=invoice.user_name,
        amount=invoice.amount,
        issue_date=invoice.issue_date,
        due_date=invoice.due_date,
        status=invoice.status,
        description=invoice.description,
        created_at=invoice.created_at,
    )


def _to_invoice_list(invoices: list[InvoiceRead]) -> list[InvoiceType]:
    return [_to_invoice_type(item) for item in invoices]


def _to_optional_invoice(invoice: InvoiceRead | None) -> InvoiceType | None:
    return None if invoice is None else _to_invoice_type(invoice)


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="Basic service liveness check")
    def health(self) -> HealthCheck:
        return HealthCheck(status="ok")

    @strawberry.field(description="List all invoices, newest first")
    def invoices(self, info: Info[GraphQLContext, None]) -> list[InvoiceType]:
        return _to_invoice_list(_execute_with_service(info, lambda service: service.list_all()))

    @strawberry.field(description="Fetch an invoice by identifier")
    def invoice(self, info: Info[GraphQLContext, None], id: strawberry.ID) -> InvoiceType | None:
        return _to_optional_invoice(_execute_with_service(info, lambda service: service.get(str(id))))

    @strawberry.field(description="Fetch an invoice by its invoice number")
    def invoice_by_number(
        self,
        info: Info[GraphQLContext, None],
        invoice_number: str,
    ) -> InvoiceType | None:
        return _to_optional_invoice(
            _execute_with_service(info, lambda service: service.get_by_number(invoice_number))
        )

    @strawberry.field(description="List invoices in the given status (case-insensitive)")
    def invoices_by_status(self, info: Info[GraphQLContext, None], status: str) -> list[InvoiceType]:
        return _to_invoice_list(_execute_with_service(info, lambda service: service.list_by_status(status)))

    @strawberry.field(description="List unpaid invoices past their due date")
    def overdue_invoices(self, info: Info[GraphQLContext, None]) -> list[InvoiceType]:
        return _to_invoice_list(_execute_with_service(info, lambda service: service.list_overdue()))

    @strawberry.field(description="List invoices for an event")
    def invoices_by_event(
        self,
        info: Info[GraphQLContext, None],
        event_id: strawberry.ID,
    ) -> list[InvoiceType]:
        return _to_invoice_list(
            _execute_with_service(info, lambda service: service.list_by_event(str(event_id)))
        )

    @strawberry.field(description="List invoices for a user")
    def invoices_by_user(
        self,
        info: Info[GraphQLContext, None],
        user_id: strawberry.ID,
    ) -> list[InvoiceType]:
        return _to_invoice_list(
            _execute_with_service(info, lambda service: service.list_by_user(str(user_id)))
        )


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(description="Create a Draft invoice")
    def create_invoice(
        self,
        info: Info[GraphQLContext, None],
        payload: InvoiceCreateInput,
    ) -> InvoiceType | None:
        request = InvoiceCreate(
            invoice_number=payload.invoice_number,
            event_id=str(payload.event_id),
            event_name=payload.event_name,
            user_id=str(payload.user_id),
            user_name=payload.user_name,
            amount=payload.amount,
            issue_date=payload.issue_date,
            due_date=payload.due_date,
            description=payload.description,
        )
        return _to_optional_invoice(_execute_with_service(info, lambda service: service.create(request)))

    @strawberry.mutation(description="Update the mutable fields of an invoice")
    def update_invoice(
        self,
        info: Info[GraphQLContext, None],
        payload: InvoiceUpdateInput,
    ) -> InvoiceType | None:
        request = InvoiceUpdate(
            id=str(payload.id),
            event_name=payload.event_name,
            user_name=payload.user_name,
            amount=payload.amount,
            due_date=payload.due_date,
            status=payload.status,
            description=payload.description,
        )
        return _to_optional_invoice(_execute_with_service(info, lambda service: service.update(request)))

    @strawberry.mutation(description="Delete an invoice")
    def delete_invoice(
        self,
        info: Info[GraphQLContext, None],
        invoice_id: strawberry.ID,
    ) -> SuccessResult:
        deleted = _execute_with_service(info, lambda service: service.delete(str(invoice_id)))
        return SuccessResult(success=deleted)


schema = strawberry.Schema(query=Query, mutation=Mutation)
