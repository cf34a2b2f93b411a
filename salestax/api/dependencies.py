"""Common dependencies for the report endpoints."""
import hmac
from typing import Annotated, TypeAlias

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from salestax.core.config import settings
from salestax.core.exceptions import ConfigurationError
from salestax.db.session import get_db
from salestax.services.sales_tax import SalesTaxReportService, SqlAlchemyOrderStore

DbDep: TypeAlias = Annotated[Session, Depends(get_db)]


def require_report_access(x_report_key: Annotated[str | None, Header()] = None) -> None:
    """
    Gate report endpoints behind the shared report key.

    Access rules:
    - When REPORT_ACCESS_KEY is configured the X-Report-Key header must match it
    - Without a configured key the endpoints are open, except in production

    Raises HTTPException 401 when the header is missing or wrong.
    """
    expected = settings.REPORT_ACCESS_KEY
    if not expected:
        if settings.ENV.lower() == "prod":
            raise ConfigurationError("REPORT_ACCESS_KEY")
        return
    if not x_report_key or not hmac.compare_digest(x_report_key, expected):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid report key")


def get_report_service(db: DbDep) -> SalesTaxReportService:
    return SalesTaxReportService(SqlAlchemyOrderStore(db))


ReportServiceDep: TypeAlias = Annotated[SalesTaxReportService, Depends(get_report_service)]
