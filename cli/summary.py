#!/usr/bin/env python3

from cli.output import emit
from logger import get_logger
from models.money import format_cents

logger = get_logger()


def cmd_summary(args, services):
    """Show income, expense and net totals for a month."""
    summary = services.summaries.monthly_summary(args.month)

    emit(summary.to_dict(include_counts=args.counts))
    logger.info(
        f"{summary.month}: income {format_cents(summary.income_cents)}, "
        f"expenses {format_cents(summary.expense_cents)}, "
        f"net {format_cents(summary.net_cents)}"
    )
    if summary.uncategorized_count:
        logger.warning(
            f"{summary.uncategorized_count} uncategorized transaction(s) "
            "are not included in these totals."
        )


def setup_parser(subparsers):
    """Setup summary command parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "summary",
        help="Monthly summary",
        description="Income, expense and net totals for a calendar month",
    )
    parser.add_argument("month", help="Month (YYYY-MM)")
    parser.add_argument(
        "--counts",
        action="store_true",
        help="Include transaction and uncategorized counts",
    )
    parser.set_defaults(func=cmd_summary)
