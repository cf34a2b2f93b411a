from __future__ import annotations

import datetime as dt
import enum
from decimal import Decimal

from sqlalchemy import DateTime, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from salestax.db.base_class import Base


class OrderStatus(str, enum.Enum):
    """Order lifecycle states as recorded by the host store."""
    PENDING = "pending"
    PROCESSING = "processing"
    ON_HOLD = "on-hold"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"
    FAILED = "failed"

    @classmethod
    def reportable(cls) -> frozenset[str]:
        """Statuses whose sales count toward a tax filing."""
        return frozenset({cls.COMPLETED.value, cls.PROCESSING.value})


class Order(Base):
    """Read-only view of the host store's order table.

    Timestamps are naive store-local times; quarter boundaries are compared
    against them directly.
    """
    __tablename__ = "order"
    __table_args__ = (
        Index("ix_order_region_created", "billing_region_code", "created_at"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    status: Mapped[str] = mapped_column(String(30), default=OrderStatus.PENDING.value, index=True)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=False))
    subtotal: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0)
    tax: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0)
    total: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0)
    billing_city: Mapped[str] = mapped_column(String(120), default="")
    billing_region_code: Mapped[str] = mapped_column(String(10), default="")
