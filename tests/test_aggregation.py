"""Tests for quarterly order aggregation."""
from datetime import datetime
from decimal import Decimal

import pytest

from salestax.core.exceptions import InvalidQuarterError, StoreUnavailableError
from salestax.models.models import OrderStatus
from salestax.services.sales_tax import aggregate_orders


def test_aggregate_two_orders(memory_store, make_record):
    """Totals of the two-order example."""
    memory_store.add(make_record(100, total="50.00", tax="3.00"))
    memory_store.add(make_record(101, total="25.50", tax="1.53"))

    report = aggregate_orders(1, 2024, "MA", memory_store)

    assert report.total_sales == Decimal("75.50")
    assert report.total_tax == Decimal("4.53")
    assert report.order_count == 2
    assert [o.id for o in report.orders] == [100, 101]


def test_aggregate_no_matches_returns_empty_report(memory_store):
    report = aggregate_orders(1, 2024, "MA", memory_store)

    assert report.orders == ()
    assert report.total_sales == Decimal("0")
    assert report.total_tax == Decimal("0")
    assert report.order_count == 0
    assert report.has_orders is False
    assert report.period.label == "Q1 2024"
    assert report.region_code == "MA"


def test_aggregate_keeps_store_order(memory_store, make_record):
    """Orders are not re-sorted by date."""
    memory_store.add(make_record(3, "1.00", "0.06", created_at=datetime(2024, 3, 1)))
    memory_store.add(make_record(1, "1.00", "0.06", created_at=datetime(2024, 1, 1)))
    memory_store.add(make_record(2, "1.00", "0.06", created_at=datetime(2024, 2, 1)))

    report = aggregate_orders(1, 2024, "MA", memory_store)

    assert [o.id for o in report.orders] == [3, 1, 2]


def test_aggregate_queries_reportable_statuses_and_region(memory_store):
    aggregate_orders(2, 2023, "MA", memory_store)

    assert len(memory_store.find_calls) == 1
    call = memory_store.find_calls[0]
    assert call["status_in"] == {OrderStatus.COMPLETED.value, OrderStatus.PROCESSING.value}
    assert call["billing_region"] == "MA"
    assert call["date_range"].start == datetime(2023, 4, 1, 0, 0, 0)
    assert call["date_range"].end == datetime(2023, 6, 30, 23, 59, 59)


def test_aggregate_excludes_other_statuses(memory_store, make_record):
    memory_store.add(make_record(1, "10.00", "0.63"), OrderStatus.COMPLETED.value)
    memory_store.add(make_record(2, "20.00", "1.25"), OrderStatus.PROCESSING.value)
    for order_id, status in enumerate(
        [OrderStatus.PENDING, OrderStatus.CANCELLED, OrderStatus.REFUNDED, OrderStatus.FAILED], start=3
    ):
        memory_store.add(make_record(order_id, "99.00", "6.19"), status.value)

    report = aggregate_orders(1, 2024, "MA", memory_store)

    assert [o.id for o in report.orders] == [1, 2]
    assert report.total_sales == Decimal("30.00")
    assert report.total_tax == Decimal("1.88")


def test_aggregate_skips_vanished_orders(memory_store, make_record):
    """An id that no longer resolves is skipped without error."""
    memory_store.add(make_record(1, "10.00", "0.63"))
    memory_store.add(make_record(2, "500.00", "31.25"))
    memory_store.add(make_record(3, "5.00", "0.31"))
    memory_store.vanished.add(2)

    report = aggregate_orders(1, 2024, "MA", memory_store)

    assert [o.id for o in report.orders] == [1, 3]
    assert report.order_count == 2
    assert report.total_sales == Decimal("15.00")
    assert report.total_tax == Decimal("0.94")
    assert memory_store.get_calls == [1, 2, 3]


def test_aggregate_invalid_quarter_does_not_query_store(memory_store):
    with pytest.raises(InvalidQuarterError):
        aggregate_orders(5, 2024, "MA", memory_store)

    assert memory_store.find_calls == []


def test_aggregate_store_failure_carries_period_context(make_record):
    class DownStore:
        def find(self, date_range, status_in, billing_region):
            raise StoreUnavailableError(reason="connection refused")

        def get(self, order_id):  # pragma: no cover - never reached
            raise AssertionError("get should not be called")

    with pytest.raises(StoreUnavailableError) as exc_info:
        aggregate_orders(4, 2022, "MA", DownStore())

    details = exc_info.value.details
    assert details["quarter"] == 4
    assert details["year"] == 2022
    assert details["region"] == "MA"
    assert details["reason"] == "connection refused"


def test_aggregate_totals_match_orders(memory_store, make_record):
    amounts = [("19.99", "1.25"), ("0.01", "0.00"), ("1234.56", "77.16"), ("7.50", "0.47"), ("0.99", "0.06")]
    for order_id, (total, tax) in enumerate(amounts, start=1):
        memory_store.add(make_record(order_id, total, tax))

    report = aggregate_orders(1, 2024, "MA", memory_store)

    assert report.total_sales == sum(o.total for o in report.orders)
    assert report.total_tax == sum(o.tax for o in report.orders)
    assert report.order_count == len(report.orders) == len(amounts)
