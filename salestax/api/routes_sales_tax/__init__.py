"""
Sales Tax API Routes Module.

All routes are prefixed with /sales-tax and require the report key.

Sub-modules:
- reports: Quarter summary and CSV export
- periods: Period picker options
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from salestax.api.dependencies import require_report_access

from .periods import router as periods_router
from .reports import router as reports_router

# Main router with /sales-tax prefix
router = APIRouter(
    prefix="/sales-tax",
    tags=["sales-tax"],
    dependencies=[Depends(require_report_access)],
)

router.include_router(reports_router)
router.include_router(periods_router)

__all__ = ["router"]
