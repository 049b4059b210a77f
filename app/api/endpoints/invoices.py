"""Invoice REST endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_invoice_service
from app.api.errors import bad_request, not_found
from app.schemas.envelope import ApiMessage, ApiResponse
from app.schemas.invoice import InvoiceCreate, InvoiceRead, InvoiceUpdate
from app.services.invoice_service import InvoiceService

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get("", response_model=ApiResponse[list[InvoiceRead]])
def list_invoices(service: InvoiceService = Depends(get_invoice_service)) -> ApiResponse:
    """List all invoices, newest first."""

    return ApiResponse(result=service.list_all())


@router.get("/overdue", response_model=ApiResponse[list[InvoiceRead]])
def list_overdue_invoices(service: InvoiceService = Depends(get_invoice_service)) -> ApiResponse:
    """List unpaid invoices past their due date, most overdue first."""

    return ApiResponse(result=service.list_overdue())


@router.get("/number/{invoice_number}", response_model=ApiResponse[InvoiceRead])
def get_invoice_by_number(
    invoice_number: str,
    service: InvoiceService = Depends(get_invoice_service),
) -> ApiResponse:
    invoice = service.get_by_number(invoice_number)
    if invoice is None:
        raise not_found()
    return ApiResponse(result=invoice)


@router.get("/status/{status_name}", response_model=ApiResponse[list[InvoiceRead]])
def list_invoices_by_status(
    status_name: str,
    service: InvoiceService = Depends(get_invoice_service),
) -> ApiResponse:
    """List invoices in a status; unknown statuses yield an empty list."""

    return ApiResponse(result=service.list_by_status(status_name))


@router.get("/event/{event_id}", response_model=ApiResponse[list[InvoiceRead]])
def list_invoices_by_event(
    event_id: str,
    service: InvoiceService = Depends(get_invoice_service),
) -> ApiResponse:
    return ApiResponse(result=service.list_by_event(event_id))


@router.get("/user/{user_id}", response_model=ApiResponse[list[InvoiceRead]])
def list_invoices_by_user(
    user_id: str,
    service: InvoiceService = Depends(get_invoice_service),
) -> ApiResponse:
    return ApiResponse(result=service.list_by_user(user_id))


@router.get("/{invoice_id}", response_model=ApiResponse[InvoiceRead])
def get_invoice(
    invoice_id: str,
    service: InvoiceService = Depends(get_invoice_service),
) -> ApiResponse:
    invoice = service.get(invoice_id)
    if invoice is None:
        raise not_found()
    return ApiResponse(result=invoice)


@router.post("", response_model=ApiResponse[InvoiceRead], status_code=status.HTTP_201_CREATED)
def create_invoice(
    payload: InvoiceCreate,
    service: InvoiceService = Depends(get_invoice_service),
) -> ApiResponse:
    """Create an invoice in Draft status."""

    invoice = service.create(payload)
    if invoice is None:
        raise bad_request("Invoice could not be created")
    return ApiResponse(result=invoice)


@router.put("/{invoice_id}", response_model=ApiResponse[InvoiceRead])
def update_invoice(
    invoice_id: str,
    payload: InvoiceUpdate,
    service: InvoiceService = Depends(get_invoice_service),
) -> ApiResponse:
    """Update an invoice; the body id must match the path id."""

    if payload.id != invoice_id:
        raise bad_request()
    invoice = service.update(payload)
    if invoice is None:
        raise not_found()
    return ApiResponse(result=invoice)


@router.delete("/{invoice_id}", response_model=ApiMessage)
def delete_invoice(
    invoice_id: str,
    service: InvoiceService = Depends(get_invoice_service),
) -> ApiMessage:
    if not service.delete(invoice_id):
        raise not_found()
    return ApiMessage(message="Invoice deleted successfully")
