"""REST endpoint routers exposed by the API."""
from . import invoices

__all__ = [
    "invoices",
]
