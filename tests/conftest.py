from __future__ import annotations

import os

os.environ.setdefault("APP_ENV", "test")

import datetime as dt  # noqa: E402
from decimal import Decimal  # noqa: E402
from typing import Collection, Sequence  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from salestax.core.config import settings  # noqa: E402
from salestax.db import session as db_session_module  # noqa: E402
from salestax.db.base_class import Base  # noqa: E402
from salestax.db.session import SessionLocal  # noqa: E402
from salestax.models.models import Order, OrderStatus  # noqa: E402
from salestax.services.sales_tax import OrderRecord, QuarterRange  # noqa: E402


test_engine = create_engine(
    "sqlite:///:memory:",
    future=True,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Ensure application code uses the test engine
settings.ENV = "test"  # type: ignore[attr-defined]
settings.REPORT_ACCESS_KEY = None  # type: ignore[attr-defined]
db_session_module.engine = test_engine  # type: ignore[assignment]
SessionLocal.configure(bind=test_engine)


@pytest.fixture(autouse=True)
def _reset_database_state():
    """Ensure each test sees a fresh order table."""
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield


@pytest.fixture
def db_session():
    """Provide a database session bound to the test engine."""
    session = SessionLocal()
    try:
        yield session
        session.commit()
    finally:
        session.close()


@pytest.fixture
def order_factory(db_session):
    """Factory inserting rows into the order table."""
    def _create(
        created_at: dt.datetime,
        total: str = "10.00",
        tax: str = "0.63",
        subtotal: str | None = None,
        status: str = OrderStatus.COMPLETED.value,
        city: str = "Boston",
        region: str = "MA",
        order_id: int | None = None,
    ) -> Order:
        order = Order(
            id=order_id,
            status=status,
            created_at=created_at,
            subtotal=Decimal(subtotal) if subtotal is not None else Decimal(total) - Decimal(tax),
            tax=Decimal(tax),
            total=Decimal(total),
            billing_city=city,
            billing_region_code=region,
        )
        db_session.add(order)
        db_session.commit()
        return order
    return _create


class InMemoryOrderStore:
    """Order store test double.

    Keeps orders in insertion order and filters them the way the real
    store does. Ids listed in ``vanished`` are still returned by ``find``
    but no longer resolve through ``get``.
    """

    def __init__(self, orders: Sequence[tuple[OrderRecord, str]] = (), vanished: Collection[int] = ()):
        self.orders = list(orders)
        self.vanished = set(vanished)
        self.find_calls: list[dict] = []
        self.get_calls: list[int] = []

    def add(self, record: OrderRecord, status: str = OrderStatus.COMPLETED.value) -> OrderRecord:
        self.orders.append((record, status))
        return record

    def find(self, date_range: QuarterRange, status_in: Collection[str], billing_region: str) -> Sequence[int]:
        self.find_calls.append(
            {"date_range": date_range, "status_in": set(status_in), "billing_region": billing_region}
        )
        return [
            record.id
            for record, status in self.orders
            if date_range.start <= record.created_at <= date_range.end
            and status in status_in
            and record.billing_region_code == billing_region
        ]

    def get(self, order_id: int) -> OrderRecord | None:
        self.get_calls.append(order_id)
        if order_id in self.vanished:
            return None
        for record, _ in self.orders:
            if record.id == order_id:
                return record
        return None


@pytest.fixture
def memory_store():
    return InMemoryOrderStore()


@pytest.fixture
def make_record():
    """Factory for OrderRecord values with sensible defaults."""
    def _make(
        order_id: int,
        total: str,
        tax: str,
        created_at: dt.datetime = dt.datetime(2024, 2, 14, 12, 30, 0),
        subtotal: str | None = None,
        city: str = "Boston",
        region: str = "MA",
    ) -> OrderRecord:
        return OrderRecord(
            id=order_id,
            created_at=created_at,
            subtotal=Decimal(subtotal) if subtotal is not None else Decimal(total) - Decimal(tax),
            tax=Decimal(tax),
            total=Decimal(total),
            billing_city=city,
            billing_region_code=region,
        )
    return _make


# FastAPI TestClient fixture
from fastapi.testclient import TestClient  # noqa: E402
from salestax.api.main import app  # noqa: E402


@pytest.fixture
def client():  # noqa: D401 - simple factory fixture
    """Provide a FastAPI TestClient bound to the application."""
    return TestClient(app)
