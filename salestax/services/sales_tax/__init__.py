"""Quarterly Sales Tax Reporting Module.

Filters orders billed to one jurisdiction within a calendar quarter,
totals sales and tax, and exports the result as CSV.

Sub-modules:
- types: QuarterRange, OrderRecord, Report, CsvExport and the OrderStore protocol
- period_utils: Quarter date range calculations
- order_store: SQLAlchemy-backed order store
- aggregation: Order selection and totals
- csv_export: CSV rendering
- reporting_service: Main SalesTaxReportService class
"""
from .aggregation import aggregate_orders
from .csv_export import CSV_HEADERS, csv_filename, format_money, format_timestamp, render_report_csv
from .order_store import SqlAlchemyOrderStore
from .period_utils import (
    QUARTER_LABELS,
    available_years,
    current_quarter,
    resolve_quarter_range,
)
from .reporting_service import SalesTaxReportService
from .types import CsvExport, OrderRecord, OrderStore, QuarterRange, Report

__all__ = [
    # Types
    "CsvExport",
    "OrderRecord",
    "OrderStore",
    "QuarterRange",
    "Report",
    # Constants
    "CSV_HEADERS",
    "QUARTER_LABELS",
    # Functions
    "aggregate_orders",
    "available_years",
    "csv_filename",
    "current_quarter",
    "format_money",
    "format_timestamp",
    "render_report_csv",
    "resolve_quarter_range",
    # Store and service
    "SqlAlchemyOrderStore",
    "SalesTaxReportService",
]
