"""Pydantic schemas exposed by the API layer."""
from .envelope import ApiError, ApiMessage, ApiResponse
from .invoice import InvoiceCreate, InvoiceRead, InvoiceUpdate

__all__ = [
    "ApiError",
    "ApiMessage",
    "ApiResponse",
    "InvoiceCreate",
    "InvoiceRead",
    "InvoiceUpdate",
]
