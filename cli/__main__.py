#!/usr/bin/env python3
"""
pocketledger CLI - Unified command-line interface for categories, transactions and summaries.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    categories   Manage budgeting categories
    transactions Record and manage transactions
    summary      Monthly income/expense/net totals
    health       Check database connectivity
    migrate      Database migrations

Examples:
    python -m cli migrate apply
    python -m cli categories create Salary income
    python -m cli transactions create 2024-01-05 "January pay" 500000 --category-id <id>
    python -m cli transactions list --from 2024-01-01 --to 2024-01-31
    python -m cli summary 2024-01
"""

import sys
import argparse
from cli import categories, transactions, summary, health, migrate
from config import load_config
from services.base import Services
from services.errors import LedgerError
from db.manager import DatabaseManager
from logger import setup_logging, get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cli",
        description="pocketledger - Personal finance ledger",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    # Register each command's subparser
    categories.setup_parser(subparsers)
    transactions.setup_parser(subparsers)
    summary.setup_parser(subparsers)
    health.setup_parser(subparsers)
    migrate.setup_parser(subparsers)

    return parser


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config()
        setup_logging(config)

        # Commands that use db_manager directly: migrate
        if args.command == "migrate":
            args.func(args, DatabaseManager(config))
        else:
            args.func(args, Services(config))
    except LedgerError as e:
        get_logger().error(f"{e.title}: {e.detail}")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
