#!/usr/bin/env python3

from cli.output import emit
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List categories, optionally filtered by kind."""
    categories = services.categories.list(
        kind=args.kind, include_archived=args.include_archived
    )

    emit([category.to_dict() for category in categories])
    logger.info(f"Total categories: {len(categories)}")


def cmd_show(args, services):
    """Show a single category."""
    emit(services.categories.get(args.category_id).to_dict())


def cmd_create(args, services):
    """Create a new category."""
    category = services.categories.create(args.name, args.kind)
    logger.info(f"✓ Category created successfully with ID: {category.id}")
    emit(category.to_dict())


def cmd_update(args, services):
    """Overwrite a category's name, kind and archived flag."""
    category = services.categories.update(
        args.category_id, args.name, args.kind, args.archived
    )
    logger.info("✓ Category updated.")
    emit(category.to_dict())


def cmd_archive(args, services):
    """Archive a category."""
    services.categories.archive(args.category_id)
    logger.info(f"✓ Category {args.category_id} archived.")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Manage categories",
        description="Create, list, update and archive budgeting categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    # categories list
    list_parser = categories_subparsers.add_parser("list", help="List categories")
    list_parser.add_argument("--kind", help="income/expense (or 1/2)")
    list_parser.add_argument(
        "--include-archived",
        action="store_true",
        help="Include archived categories",
    )
    list_parser.set_defaults(func=cmd_list)

    # categories show
    show_parser = categories_subparsers.add_parser("show", help="Show a category")
    show_parser.add_argument("category_id", help="ID of the category")
    show_parser.set_defaults(func=cmd_show)

    # categories create
    create_parser = categories_subparsers.add_parser(
        "create", help="Create a new category"
    )
    create_parser.add_argument("name", help="Category name (2-50 characters)")
    create_parser.add_argument("kind", help="income/expense (or 1/2)")
    create_parser.set_defaults(func=cmd_create)

    # categories update
    update_parser = categories_subparsers.add_parser(
        "update", help="Update a category"
    )
    update_parser.add_argument("category_id", help="ID of the category")
    update_parser.add_argument("name", help="Category name (2-50 characters)")
    update_parser.add_argument("kind", help="income/expense (or 1/2)")
    update_parser.add_argument(
        "--archived",
        action="store_true",
        help="Mark the category archived (omit to unarchive)",
    )
    update_parser.set_defaults(func=cmd_update)

    # categories archive
    archive_parser = categories_subparsers.add_parser(
        "archive", help="Archive a category by ID"
    )
    archive_parser.add_argument("category_id", help="ID of the category")
    archive_parser.set_defaults(func=cmd_archive)
