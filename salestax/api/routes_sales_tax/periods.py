"""
Report period picker options.
"""
from __future__ import annotations

from fastapi import APIRouter

from salestax.core.config import settings
from salestax.services.sales_tax import QUARTER_LABELS, available_years, current_quarter

from .schemas import QuarterOption, ReportPeriodsOut

router = APIRouter()


@router.get("/periods", response_model=ReportPeriodsOut)
def list_report_periods():
    """Quarters and recent years a report can be requested for."""
    default_quarter, default_year = current_quarter()
    return ReportPeriodsOut(
        quarters=[QuarterOption(value=q, label=label) for q, label in QUARTER_LABELS.items()],
        years=available_years(span=settings.REPORT_YEAR_SPAN),
        default_quarter=default_quarter,
        default_year=default_year,
    )
