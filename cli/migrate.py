#!/usr/bin/env python3
"""Schema migrations: numbered .sql files applied once each, in name order."""

from typing import List, Set

from logger import get_logger

logger = get_logger()

_CREATE_TRACKING_TABLE = """
    CREATE TABLE IF NOT EXISTS schema_migrations (
        migration_file TEXT PRIMARY KEY,
        applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
"""


def _applied_migrations(conn) -> Set[str]:
    conn.execute(_CREATE_TRACKING_TABLE)
    conn.commit()
    return {row[0] for row in conn.execute("SELECT migration_file FROM schema_migrations")}


def available_migrations(db_manager) -> List[str]:
    migrations_dir = db_manager.get_migrations_dir()
    if not migrations_dir.exists():
        return []
    return sorted(path.name for path in migrations_dir.glob("*.sql"))


def pending_migrations(conn, db_manager) -> List[str]:
    applied = _applied_migrations(conn)
    return [name for name in available_migrations(db_manager) if name not in applied]


def apply_pending(db_manager) -> List[str]:
    """Apply every migration not yet recorded in schema_migrations.

    A failing migration is rolled back and re-raised; the ones before it stay
    applied.

    Returns:
        Names of the migrations applied, in order.
    """
    applied = []
    with db_manager.connect() as conn:
        for name in pending_migrations(conn, db_manager):
            sql = (db_manager.get_migrations_dir() / name).read_text()
            try:
                conn.executescript(sql)
                conn.execute(
                    "INSERT INTO schema_migrations (migration_file) VALUES (?)", (name,)
                )
                conn.commit()
            except Exception as e:
                conn.rollback()
                logger.error(f"Error applying migration {name}: {e}")
                raise
            logger.info(f"Applied migration: {name}")
            applied.append(name)

    return applied


def cmd_status(args, db_manager):
    """Show migration status."""
    if not db_manager.get_db_path().exists():
        logger.info(
            "Database does not exist. Run 'python -m cli migrate apply' to create it."
        )
        return

    with db_manager.connect() as conn:
        pending = set(pending_migrations(conn, db_manager))

    available = available_migrations(db_manager)
    if not available:
        logger.info("No migrations found.")
        return

    for name in available:
        logger.info(f"{name}: {'PENDING' if name in pending else 'APPLIED'}")
    logger.info(f"Applied: {len(available) - len(pending)}, pending: {len(pending)}")


def cmd_apply(args, db_manager):
    """Apply pending migrations."""
    applied = apply_pending(db_manager)
    if applied:
        logger.info(f"Successfully applied {len(applied)} migration(s).")
    else:
        logger.info("No pending migrations.")


def setup_parser(subparsers):
    """Setup migrate subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "migrate",
        help="Database migrations",
        description="Manage database schema migrations",
    )

    migrate_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available migration commands",
        dest="subcommand",
        required=True,
    )

    status_parser = migrate_subparsers.add_parser("status", help="Show migration status")
    status_parser.set_defaults(func=cmd_status)

    apply_parser = migrate_subparsers.add_parser("apply", help="Apply pending migrations")
    apply_parser.set_defaults(func=cmd_apply)
