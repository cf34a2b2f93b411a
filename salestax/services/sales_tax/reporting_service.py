"""Sales Tax Reporting Service.

Entry point for the two report use cases: building a quarter's report for
display and exporting it as a CSV download.
"""
import logging
import time
from datetime import date
from typing import Optional, Tuple

from salestax.core.config import settings
from salestax.metrics import record_csv_export, record_report_built

from .aggregation import aggregate_orders
from .csv_export import csv_filename, render_report_csv
from .period_utils import current_quarter
from .types import CsvExport, OrderStore, Report

logger = logging.getLogger(__name__)


class SalesTaxReportService:
    """Builds quarterly sales tax reports for a single billing region.

    Holds no state between calls; every report is computed fresh from the
    order store.
    """

    def __init__(
        self,
        order_store: OrderStore,
        region_code: Optional[str] = None,
        filename_prefix: Optional[str] = None,
    ):
        self.order_store = order_store
        self.region_code = (region_code or settings.REPORT_REGION_CODE).upper()
        self.filename_prefix = filename_prefix or self._default_prefix(self.region_code)

    @staticmethod
    def _default_prefix(region_code: str) -> str:
        # The configured prefix names the configured region only.
        if region_code == settings.REPORT_REGION_CODE:
            return settings.REPORT_FILENAME_PREFIX
        return f"{region_code.lower()}-sales-tax"

    def resolve_period(
        self,
        quarter: Optional[int] = None,
        year: Optional[int] = None,
        today: Optional[date] = None,
    ) -> Tuple[int, int]:
        """Fill in the current quarter/year for whichever is not given."""
        default_quarter, default_year = current_quarter(today)
        return (
            default_quarter if quarter is None else quarter,
            default_year if year is None else year,
        )

    def build_report(
        self,
        quarter: Optional[int] = None,
        year: Optional[int] = None,
        today: Optional[date] = None,
    ) -> Report:
        """Build the report for a quarter, defaulting to the current one."""
        quarter, year = self.resolve_period(quarter, year, today)
        started = time.perf_counter()
        report = aggregate_orders(quarter, year, self.region_code, self.order_store)
        elapsed = time.perf_counter() - started
        record_report_built(self.region_code, report.order_count, elapsed)
        logger.info(
            "Built sales tax report %s region=%s orders=%d in %.3fs",
            report.period.label, self.region_code, report.order_count, elapsed,
        )
        return report

    def export_csv(
        self,
        quarter: Optional[int] = None,
        year: Optional[int] = None,
        today: Optional[date] = None,
    ) -> CsvExport:
        """Build the report and render it as a CSV attachment."""
        return self.render_export(self.build_report(quarter, year, today))

    def render_export(self, report: Report) -> CsvExport:
        """Render an already built report as a CSV attachment."""
        content = render_report_csv(report)
        record_csv_export(self.region_code)
        return CsvExport(
            content=content,
            filename=csv_filename(self.filename_prefix, report.period.quarter, report.period.year),
        )
