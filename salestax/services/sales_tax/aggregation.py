"""Order selection and totals for a quarterly sales tax report."""
import logging
from decimal import Decimal

from salestax.core.exceptions import StoreUnavailableError
from salestax.metrics import record_order_skipped
from salestax.models.models import OrderStatus

from .period_utils import resolve_quarter_range
from .types import OrderStore, Report

logger = logging.getLogger(__name__)


def aggregate_orders(
    quarter: int,
    year: int,
    region_code: str,
    order_store: OrderStore,
) -> Report:
    """Collect reportable orders billed to ``region_code`` in a quarter.

    Only completed and processing orders count toward the filing. Ids the
    store lists but can no longer resolve were deleted in the meantime and
    are skipped.

    Raises:
        InvalidQuarterError: If quarter is not 1-4
        StoreUnavailableError: If the store cannot be queried
    """
    period = resolve_quarter_range(quarter, year)

    try:
        order_ids = order_store.find(
            period,
            status_in=OrderStatus.reportable(),
            billing_region=region_code,
        )

        orders = []
        total_sales = Decimal("0")
        total_tax = Decimal("0")
        for order_id in order_ids:
            order = order_store.get(order_id)
            if order is None:
                record_order_skipped()
                logger.debug("Skipping order %s: no longer in store", order_id)
                continue

            orders.append(order)
            total_sales += order.total
            total_tax += order.tax
    except StoreUnavailableError as exc:
        exc.details.update({"quarter": quarter, "year": year, "region": region_code})
        raise

    logger.info(
        "Aggregated %s %s: %d orders, sales=%s, tax=%s",
        period.label, region_code, len(orders), total_sales, total_tax,
    )
    return Report(
        period=period,
        region_code=region_code,
        orders=tuple(orders),
        total_sales=total_sales,
        total_tax=total_tax,
        order_count=len(orders),
    )
