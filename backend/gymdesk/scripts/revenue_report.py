"""CLI utility to print the revenue report for a date range."""

from __future__ import annotations

import argparse
import logging
from datetime import date
from typing import Optional

from ..database import session_scope
from ..services.reports import RevenueReportService, RevenueTotals

LOGGER = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _parse_date(raw: str) -> date:
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {raw!r}, expected YYYY-MM-DD") from exc


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Summarizes completed payments between two dates (both inclusive), "
            "suitable for cron or scheduled tasks."
        )
    )
    parser.add_argument("--start", required=True, type=_parse_date, help="First day, YYYY-MM-DD.")
    parser.add_argument("--end", required=True, type=_parse_date, help="Last day, YYYY-MM-DD.")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Also log debug output such as the SQL session lifecycle.",
    )
    return parser.parse_args(argv)


def _log_totals(totals: RevenueTotals) -> None:
    LOGGER.info("Period: %s to %s", totals.period_start, totals.period_end)
    LOGGER.info("Completed payments: %s", totals.payment_count)
    LOGGER.info("Total revenue: %s", totals.total_revenue)
    LOGGER.info("Membership revenue: %s", totals.membership_revenue)
    LOGGER.info("Other revenue: %s", totals.other_revenue)
    for method, amount in sorted(totals.breakdown_by_method.items()):
        LOGGER.info("  %s: %s", method, amount)


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(argv)
    _configure_logging(args.verbose)

    if args.start > args.end:
        LOGGER.warning("Start date %s is after end date %s; the report will be empty", args.start, args.end)

    with session_scope() as db:
        totals = RevenueReportService.generate(db, args.start, args.end)

    _log_totals(totals)
    LOGGER.debug("Revenue report finished")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
