"""Value types shared by the quarterly sales tax pipeline."""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Collection, Protocol, Sequence


@dataclass(frozen=True)
class QuarterRange:
    """Inclusive timestamp bounds of one calendar quarter."""
    quarter: int
    year: int
    start: dt.datetime
    end: dt.datetime

    @property
    def label(self) -> str:
        return f"Q{self.quarter} {self.year}"


@dataclass(frozen=True)
class OrderRecord:
    id: int
    created_at: dt.datetime
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    billing_city: str = ""
    billing_region_code: str = ""


@dataclass(frozen=True)
class Report:
    """Orders matched for one quarter and region, with their totals.

    ``orders`` keeps the order the store returned them in.
    """
    period: QuarterRange
    region_code: str
    orders: tuple[OrderRecord, ...] = ()
    total_sales: Decimal = Decimal("0")
    total_tax: Decimal = Decimal("0")
    order_count: int = 0

    @property
    def has_orders(self) -> bool:
        return self.order_count > 0


@dataclass(frozen=True)
class CsvExport:
    content: bytes
    filename: str
    media_type: str = field(default="text/csv; charset=utf-8")


class OrderStore(Protocol):
    """Read-only capability the aggregator needs from an order store."""

    def find(
        self,
        date_range: QuarterRange,
        status_in: Collection[str],
        billing_region: str,
    ) -> Sequence[int]:
        """Return ids of orders created within ``date_range`` (inclusive)."""
        ...

    def get(self, order_id: int) -> OrderRecord | None:
        """Return the order, or None when it no longer exists."""
        ...
