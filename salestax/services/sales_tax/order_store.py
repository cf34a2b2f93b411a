"""SQLAlchemy adapter for the host order table."""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Collection, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from salestax.core.exceptions import StoreUnavailableError
from salestax.metrics import record_store_failure
from salestax.models.models import Order

from .types import OrderRecord, QuarterRange

logger = logging.getLogger(__name__)


def _to_decimal(value) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def order_to_record(order: Order) -> OrderRecord:
    return OrderRecord(
        id=order.id,
        created_at=order.created_at,
        subtotal=_to_decimal(order.subtotal),
        tax=_to_decimal(order.tax),
        total=_to_decimal(order.total),
        billing_city=order.billing_city or "",
        billing_region_code=order.billing_region_code or "",
    )


class SqlAlchemyOrderStore:
    """Order store backed by the ``order`` table.

    ``find`` lists newest orders first, like the host store's order screen.
    Database failures surface as StoreUnavailableError; nothing is retried.
    """

    def __init__(self, db: Session):
        self.db = db

    def find(
        self,
        date_range: QuarterRange,
        status_in: Collection[str],
        billing_region: str,
    ) -> Sequence[int]:
        try:
            rows = (
                self.db.query(Order.id)
                .filter(
                    Order.created_at >= date_range.start,
                    Order.created_at <= date_range.end,
                    Order.status.in_(list(status_in)),
                    Order.billing_region_code == billing_region,
                )
                .order_by(Order.created_at.desc(), Order.id.desc())
                .all()
            )
        except SQLAlchemyError as exc:
            record_store_failure()
            logger.error("Order query failed for %s region=%s: %s", date_range.label, billing_region, exc)
            raise StoreUnavailableError(reason=type(exc).__name__) from exc
        return [row.id for row in rows]

    def get(self, order_id: int) -> OrderRecord | None:
        try:
            order = self.db.get(Order, order_id)
        except SQLAlchemyError as exc:
            record_store_failure()
            logger.error("Order lookup failed for order %s: %s", order_id, exc)
            raise StoreUnavailableError(reason=type(exc).__name__) from exc
        if order is None:
            return None
        return order_to_record(order)
