"""
Shared Pydantic schemas for sales tax report routes.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

from salestax.services.sales_tax import OrderRecord, Report, format_money, format_timestamp


class OrderLineOut(BaseModel):
    """One order row of the report detail table."""

    order_id: int
    date: str = Field(..., description="YYYY-MM-DD HH:MM:SS")
    display_date: str = Field(..., description="e.g. Jan 05, 2024")
    subtotal: str
    tax: str
    total: str
    city: str
    state: str

    @classmethod
    def from_record(cls, order: OrderRecord) -> OrderLineOut:
        return cls(
            order_id=order.id,
            date=format_timestamp(order.created_at),
            display_date=f"{order.created_at:%b %d}, {order.created_at.year:04d}",
            subtotal=format_money(order.subtotal),
            tax=format_money(order.tax),
            total=format_money(order.total),
            city=order.billing_city,
            state=order.billing_region_code,
        )


class SalesTaxReportOut(BaseModel):
    """Quarter summary shown on the report page."""

    quarter: int
    year: int
    period_label: str
    title: str
    start: str
    end: str
    region_code: str
    order_count: int
    total_sales: str
    total_tax: str
    has_orders: bool
    message: str | None = None
    csv_url: str
    orders: list[OrderLineOut]

    @classmethod
    def from_report(cls, report: Report, region_name: str, csv_url: str) -> SalesTaxReportOut:
        period = report.period
        return cls(
            quarter=period.quarter,
            year=period.year,
            period_label=period.label,
            title=f"Q{period.quarter} {period.year} - {region_name} Sales Summary",
            start=period.start.isoformat(sep=" "),
            end=period.end.isoformat(sep=" "),
            region_code=report.region_code,
            order_count=report.order_count,
            total_sales=format_money(report.total_sales),
            total_tax=format_money(report.total_tax),
            has_orders=report.has_orders,
            message=None if report.has_orders else "No orders found for the selected period.",
            csv_url=csv_url,
            orders=[OrderLineOut.from_record(order) for order in report.orders],
        )


class QuarterOption(BaseModel):
    value: int
    label: str


class ReportPeriodsOut(BaseModel):
    """Choices for the report period picker."""

    quarters: list[QuarterOption]
    years: list[int]
    default_quarter: int
    default_year: int
