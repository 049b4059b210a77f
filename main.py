"""Root module for serving the invoice service with ``uvicorn main:app``."""

from app.main import app

__all__ = ["app"]
