"""Shared pytest fixtures for invoice service tests."""
from __future__ import annotations

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from collections.abc import Callable, Generator
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.database import engine_options, get_db_session
from app.db.base import Base
from app.db.models import Invoice, InvoiceStatus
from app.main import create_app

EVENT_ID = "6f1c2a4e-0000-4000-8000-000000000001"
USER_ID = "9a7d3b2c-0000-4000-8000-000000000002"


@pytest.fixture()
def engine() -> Generator:
    engine = create_engine("sqlite://", future=True, **engine_options("sqlite://"))
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session(engine) -> Generator[Session, None, None]:
    SessionLocal = sessionmaker(bind=engine, class_=Session, autoflush=False, autocommit=False)
    db_session = SessionLocal()
    try:
        yield db_session
    finally:
        db_session.close()


@pytest.fixture()
def make_invoice() -> Callable[..., Invoice]:
    """Build (unsaved) invoices with sensible defaults."""

    counter = {"value": 0}

    def factory(**overrides: object) -> Invoice:
        counter["value"] += 1
        fields: dict[str, object] = {
            "id": str(uuid4()),
            "invoice_number": f"INV-{counter['value']:03d}",
            "event_id": EVENT_ID,
            "event_name": "Spring Gala",
            "user_id": USER_ID,
            "user_name": "Sam Lee",
            "amount": Decimal("100.00"),
            "issue_date": date(2025, 1, 1),
            "due_date": date(2025, 1, 31),
            "status": InvoiceStatus.DRAFT,
            "description": "Ticket package",
            "created_at": datetime(2025, 1, 1, 12, counter["value"], tzinfo=timezone.utc),
        }
        fields.update(overrides)
        return Invoice(**fields)

    return factory


@pytest.fixture()
def client(session: Session) -> Generator[TestClient, None, None]:
    application = create_app()

    def override_get_db_session() -> Generator[Session, None, None]:
        try:
            yield session
        finally:
            session.rollback()

    application.dependency_overrides[get_db_session] = override_get_db_session

    with TestClient(application) as test_client:
        yield test_client

    application.dependency_overrides.clear()
