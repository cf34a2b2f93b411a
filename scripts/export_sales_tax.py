#!/usr/bin/env python3
"""
Export a quarterly sales tax report to a CSV file.

Usage:
    python scripts/export_sales_tax.py --quarter 1 --year 2024
    python scripts/export_sales_tax.py --quarter 3 --year 2024 --region MA --output reports/
    python scripts/export_sales_tax.py            # current quarter
"""
import argparse
import logging
import sys
from pathlib import Path

from salestax.core.config import settings
from salestax.core.exceptions import SalesTaxException
from salestax.core.logger import init_logging
from salestax.db.session import session_scope
from salestax.services.sales_tax import SalesTaxReportService, SqlAlchemyOrderStore, format_money

logger = logging.getLogger("scripts.export_sales_tax")


def export_report(quarter: int | None, year: int | None, region: str | None, output_dir: Path) -> Path:
    """Build the report, write its CSV under ``output_dir`` and return the path."""
    with session_scope() as db:
        service = SalesTaxReportService(SqlAlchemyOrderStore(db), region_code=region)
        report = service.build_report(quarter=quarter, year=year)
        export = service.render_export(report)

    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / export.filename
    path.write_bytes(export.content)

    print(f"{report.period.label} - {service.region_code} sales summary")
    print(f"   Orders: {report.order_count}")
    print(f"   Sales:  {format_money(report.total_sales)}")
    print(f"   Tax:    {format_money(report.total_tax)}")
    print(f"   File:   {path}")
    return path


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Export a quarterly sales tax CSV")
    parser.add_argument("--quarter", type=int, help="Quarter 1-4 (default: current)")
    parser.add_argument("--year", type=int, help="Year (default: current)")
    parser.add_argument("--region", default=settings.REPORT_REGION_CODE, help="Billing region code")
    parser.add_argument("--output", type=Path, default=Path("."), help="Directory for the CSV file")
    args = parser.parse_args(argv)

    init_logging()
    try:
        export_report(args.quarter, args.year, args.region.upper(), args.output)
    except SalesTaxException as exc:
        logger.error("Export failed: %s", exc.message, extra={"details": exc.details})
        print(f"Error [{exc.code}]: {exc.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
