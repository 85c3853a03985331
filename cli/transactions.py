#!/usr/bin/env python3

from cli.output import emit
from logger import get_logger
from models.money import format_cents

logger = get_logger()


def cmd_list(args, services):
    """List transactions matching the given filters.

    Args:
        args: Parsed command-line arguments with optional from/to/category_id/kind
        services: Services container with the transactions service
    """
    transactions = services.transactions.list(
        from_date=args.from_date,
        to_date=args.to_date,
        category_id=args.category_id,
        kind=args.kind,
    )

    emit([transaction.to_dict() for transaction in transactions])

    total = sum(transaction.amount_cents for transaction in transactions)
    logger.info(f"Total transactions: {len(transactions)} ({format_cents(total)})")


def cmd_show(args, services):
    """Show a single transaction."""
    emit(services.transactions.get(args.transaction_id).to_dict())


def cmd_create(args, services):
    """Record a new transaction."""
    transaction = services.transactions.create(
        args.posted_date, args.description, args.amount_cents, args.category_id
    )
    logger.info(f"✓ Transaction created successfully with ID: {transaction.id}")
    emit(transaction.to_dict())


def cmd_update(args, services):
    """Overwrite every field of a transaction."""
    transaction = services.transactions.update(
        args.transaction_id,
        args.posted_date,
        args.description,
        args.amount_cents,
        args.category_id,
    )
    logger.info("✓ Transaction updated.")
    emit(transaction.to_dict())


def cmd_delete(args, services):
    """Permanently delete a transaction."""
    services.transactions.delete(args.transaction_id)
    logger.info(f"✓ Transaction {args.transaction_id} deleted.")


def _add_transaction_fields(parser):
    parser.add_argument("posted_date", help="Posted date (YYYY-MM-DD)")
    parser.add_argument("description", help="Description (1-100 characters)")
    parser.add_argument("amount_cents", help="Amount in cents, e.g. 1250 for 12.50")
    parser.add_argument(
        "--category-id",
        dest="category_id",
        default=None,
        help="ID of the category to assign",
    )


def setup_parser(subparsers):
    """Setup transactions subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "transactions",
        help="Manage transactions",
        description="Record, list, update and delete transactions",
    )

    transactions_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available transaction commands",
        dest="subcommand",
        required=True,
    )

    # transactions list
    list_parser = transactions_subparsers.add_parser(
        "list", help="List transactions"
    )
    list_parser.add_argument(
        "--from", dest="from_date", help="Earliest posted date (YYYY-MM-DD)"
    )
    list_parser.add_argument("--to", dest="to_date", help="Latest posted date (YYYY-MM-DD)")
    list_parser.add_argument(
        "--category-id", dest="category_id", help="Only this category"
    )
    list_parser.add_argument("--kind", help="Only categories of this kind (income/expense)")
    list_parser.set_defaults(func=cmd_list)

    # transactions show
    show_parser = transactions_subparsers.add_parser("show", help="Show a transaction")
    show_parser.add_argument("transaction_id", help="ID of the transaction")
    show_parser.set_defaults(func=cmd_show)

    # transactions create
    create_parser = transactions_subparsers.add_parser(
        "create", help="Record a new transaction"
    )
    _add_transaction_fields(create_parser)
    create_parser.set_defaults(func=cmd_create)

    # transactions update
    update_parser = transactions_subparsers.add_parser(
        "update", help="Update a transaction"
    )
    update_parser.add_argument("transaction_id", help="ID of the transaction")
    _add_transaction_fields(update_parser)
    update_parser.set_defaults(func=cmd_update)

    # transactions delete
    delete_parser = transactions_subparsers.add_parser(
        "delete", help="Delete a transaction by ID"
    )
    delete_parser.add_argument("transaction_id", help="ID of the transaction")
    delete_parser.set_defaults(func=cmd_delete)
