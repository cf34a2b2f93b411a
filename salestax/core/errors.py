import logging
import uuid
from fastapi import Request
from fastapi.responses import JSONResponse

from salestax.core.exceptions import SalesTaxException

logger = logging.getLogger("salestax.errors")


def register_error_handlers(app):
    @app.exception_handler(SalesTaxException)
    async def sales_tax_exception(request: Request, exc: SalesTaxException):
        if exc.status_code >= 500:
            logger.error(
                "Request failed code=%s path=%s details=%s", exc.code, request.url.path, exc.details
            )
        else:
            logger.info("Rejected request code=%s path=%s", exc.code, request.url.path)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):  # noqa: BLE001
        correlation_id = uuid.uuid4().hex
        logger.exception("Unhandled error cid=%s path=%s method=%s", correlation_id, request.url.path, request.method)
        return JSONResponse(status_code=500, content={"detail": "Internal server error", "cid": correlation_id})

    return app
