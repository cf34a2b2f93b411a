"""
Sales Tax Report Routes.

Quarter summary for display and the CSV download of the same report.
"""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Query, Request, Response

from salestax.api.dependencies import ReportServiceDep
from salestax.core.config import settings

from .schemas import SalesTaxReportOut

logger = logging.getLogger(__name__)
router = APIRouter()

# Quarter is left unconstrained here; the resolver rejects bad values with RPT001.
QuarterParam = Annotated[int | None, Query(description="Quarter 1-4 (defaults to the current quarter)")]
YearParam = Annotated[int | None, Query(description="Year (defaults to the current year)")]


@router.get("/report", response_model=SalesTaxReportOut)
def get_sales_tax_report(
    request: Request,
    service: ReportServiceDep,
    quarter: QuarterParam = None,
    year: YearParam = None,
):
    """Quarter summary and order detail for the configured region."""
    report = service.build_report(quarter=quarter, year=year)
    csv_url = request.url_for("download_sales_tax_csv").include_query_params(
        quarter=report.period.quarter,
        year=report.period.year,
    )
    return SalesTaxReportOut.from_report(report, settings.REPORT_REGION_NAME, str(csv_url))


@router.get("/report/csv", name="download_sales_tax_csv")
def download_sales_tax_csv(
    service: ReportServiceDep,
    quarter: QuarterParam = None,
    year: YearParam = None,
) -> Response:
    """Download the quarter's orders as a CSV attachment."""
    export = service.export_csv(quarter=quarter, year=year)
    logger.info("Serving sales tax CSV %s (%d bytes)", export.filename, len(export.content))
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={
            "Content-Disposition": f"attachment; filename={export.filename}",
            "Cache-Control": "no-store, no-cache, must-revalidate",
            "Pragma": "no-cache",
            "Expires": "0",
        },
    )
