"""CSV serialization of quarterly sales tax reports.

Layout::

    <BOM>Order ID,Date,Subtotal,Tax,Total,City,State
    <one row per order>
    <blank row>
    TOTAL,<n> orders,,<total tax>,<total sales>,,

The summary row lines its amounts up under the Tax and Total columns.
"""
from __future__ import annotations

import csv
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext
from io import StringIO

from .types import OrderRecord, Report

# Spreadsheet tools need the BOM to read non-ASCII city names as UTF-8.
UTF8_BOM = b"\xef\xbb\xbf"

CSV_HEADERS = ("Order ID", "Date", "Subtotal", "Tax", "Total", "City", "State")
_MONTH_DAY_TIME = "%m-%d %H:%M:%S"

_CENTS = Decimal("0.01")


def format_money(value) -> str:
    """Two decimals, "." separator, no grouping; halves round away from zero."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value or 0))
    with localcontext() as ctx:
        # Room for every integer digit plus the two cents.
        ctx.prec = max(28, value.adjusted() + 3)
        return str(value.quantize(_CENTS, rounding=ROUND_HALF_UP))


def format_timestamp(value: datetime) -> str:
    """``YYYY-MM-DD HH:MM:SS`` with the year always four digits."""
    return f"{value.year:04d}-{value.strftime(_MONTH_DAY_TIME)}"


def _order_row(order: OrderRecord) -> list[str]:
    return [
        str(order.id),
        format_timestamp(order.created_at),
        format_money(order.subtotal),
        format_money(order.tax),
        format_money(order.total),
        order.billing_city,
        order.billing_region_code,
    ]


def _summary_row(report: Report) -> list[str]:
    return [
        "TOTAL",
        f"{report.order_count} orders",
        "",
        format_money(report.total_tax),
        format_money(report.total_sales),
        "",
        "",
    ]


def render_report_csv(report: Report) -> bytes:
    """Render a report as UTF-8 CSV bytes prefixed with a byte-order mark."""
    buf = StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for order in report.orders:
        writer.writerow(_order_row(order))
    writer.writerow([])
    writer.writerow(_summary_row(report))
    return UTF8_BOM + buf.getvalue().encode("utf-8")


def csv_filename(prefix: str, quarter: int, year: int) -> str:
    return f"{prefix}-q{quarter}-{year}.csv"
