"""Metrics facade.

Service code should ONLY call the semantic helpers here so we can change
backend freely.

Metrics:
- sales_tax_reports_built_total       Reports built, by region
- sales_tax_report_orders             Orders per built report
- sales_tax_report_build_seconds      Time spent building a report
- sales_tax_csv_exports_total         CSV downloads served, by region
- sales_tax_orders_skipped_total      Matched ids that no longer resolved
- sales_tax_store_failures_total      Order store queries that failed
"""

from __future__ import annotations

import logging

from prometheus_client import Counter, Histogram

logger = logging.getLogger("metrics")

_REPORTS_BUILT = Counter(
    "sales_tax_reports_built_total", "Quarterly sales tax reports built", ["region"]
)
_REPORT_ORDERS = Histogram(
    "sales_tax_report_orders",
    "Number of orders in a built report",
    buckets=(0, 1, 10, 50, 100, 500, 1000, 5000, 10000),
)
_REPORT_BUILD_SECONDS = Histogram(
    "sales_tax_report_build_seconds",
    "Time spent querying and aggregating a report",
    buckets=(0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10, 30, 60),
)
_CSV_EXPORTS = Counter("sales_tax_csv_exports_total", "CSV report exports served", ["region"])
_ORDERS_SKIPPED = Counter(
    "sales_tax_orders_skipped_total", "Matched order ids that no longer resolved to an order"
)
_STORE_FAILURES = Counter("sales_tax_store_failures_total", "Order store queries that failed")


def record_report_built(region: str, order_count: int, seconds: float) -> None:
    _REPORTS_BUILT.labels(region=region).inc()
    _REPORT_ORDERS.observe(order_count)
    _REPORT_BUILD_SECONDS.observe(seconds)


def record_csv_export(region: str) -> None:
    _CSV_EXPORTS.labels(region=region).inc()


def record_order_skipped() -> None:
    _ORDERS_SKIPPED.inc()


def record_store_failure() -> None:
    _STORE_FAILURES.inc()
