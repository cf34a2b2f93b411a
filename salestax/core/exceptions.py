"""Exception hierarchy for the sales tax report service.

Every application error carries a stable code, an HTTP status and a
``details`` dict so the API layer can render it without knowing the type.

Error codes follow pattern: [CATEGORY][NUMBER]
- RPT: Report period errors (001-099)
- SYS: System errors (400-499)

An order id that no longer resolves is not an error at all: the
aggregator skips it.
"""

from __future__ import annotations

from typing import Any


class SalesTaxException(Exception):
    """Base exception for all sales tax report errors."""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        """Initialize exception with a readable message and metadata.

        Args:
            message: Human readable error message
            code: Unique error code (e.g., "RPT001")
            status_code: HTTP status code (default: 400 Bad Request)
            details: Optional additional context
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response format."""
        return {
            "error": {
                "message": self.message,
                "code": self.code,
                "details": self.details,
            }
        }


# ============================================================================
# REPORT PERIOD ERRORS (RPT001-099)
# ============================================================================

class ReportError(SalesTaxException):
    """Base class for report request errors."""
    pass


class InvalidQuarterError(ReportError):
    """Quarter is not one of 1, 2, 3 or 4."""

    def __init__(self, quarter: Any, year: Any = None):
        super().__init__(
            message=f"Invalid quarter: {quarter}. Choose a quarter between 1 and 4.",
            code="RPT001",
            status_code=400,
            details={"quarter": quarter, "year": year},
        )


class InvalidYearError(ReportError):
    """Year cannot be represented as a calendar date."""

    def __init__(self, year: Any, quarter: Any = None):
        super().__init__(
            message=f"Invalid year: {year}",
            code="RPT002",
            status_code=400,
            details={"quarter": quarter, "year": year},
        )


# ============================================================================
# SYSTEM ERRORS (SYS400-499)
# ============================================================================

class SystemError(SalesTaxException):
    """Base class for system/infrastructure errors."""
    pass


class StoreUnavailableError(SystemError):
    """The order store could not be queried."""

    def __init__(self, reason: str | None = None, service_name: str = "Order store"):
        message = f"{service_name} is currently unavailable"
        if reason:
            message = f"{message}: {reason}"

        super().__init__(
            message=message,
            code="SYS400",
            status_code=503,
            details={"service": service_name, "reason": reason},
        )


class ConfigurationError(SystemError):
    """Application configuration is invalid or missing."""

    def __init__(self, parameter: str):
        message = f"Configuration error: {parameter} is not configured properly"
        super().__init__(
            message=message,
            code="SYS401",
            status_code=500,
            details={"parameter": parameter},
        )
