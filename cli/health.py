#!/usr/bin/env python3

from datetime import datetime, timezone

from cli.output import emit
from services.errors import StoreError


def check_health(services) -> dict:
    """Report whether the database answers queries.

    Never raises: a store failure is reported as status "error".
    """
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        category_count = services.categories.count()
    except StoreError as e:
        cause = e.__cause__ or e
        return {
            "status": "error",
            "database": "disconnected",
            "error": str(cause),
            "timestamp": timestamp,
        }

    return {
        "status": "ok",
        "database": "connected",
        "categoryCount": category_count,
        "timestamp": timestamp,
    }


def cmd_health(args, services):
    """Check database connectivity."""
    emit(check_health(services))


def setup_parser(subparsers):
    """Setup health command parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "health",
        help="Check database connectivity",
        description="Report database status and category count",
    )
    parser.set_defaults(func=cmd_health)
