"""Tests for the schema migration runner."""

import sqlite3

import pytest

from cli.migrate import apply_pending, available_migrations, pending_migrations
from db.manager import DatabaseManager


class TestMigrations:
    """Tests for apply_pending and friends."""

    def test_available_migrations_sorted(self, test_config):
        names = available_migrations(DatabaseManager(test_config))

        assert names == ["001_create_categories.sql", "002_create_transactions.sql"]

    def test_apply_pending_applies_once(self, test_config):
        db_manager = DatabaseManager(test_config)

        first = apply_pending(db_manager)
        second = apply_pending(db_manager)

        assert first == ["001_create_categories.sql", "002_create_transactions.sql"]
        assert second == []
        with db_manager.connect() as conn:
            assert pending_migrations(conn, db_manager) == []
            tables = {
                row[0]
                for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
            }
        assert {"categories", "transactions", "schema_migrations"} <= tables

    def test_schema_enforces_unique_name_and_kind(self, db_manager_with_schema):
        conn = db_manager_with_schema.conn
        insert = (
            "INSERT INTO categories (id, name, kind, archived, created_at) "
            "VALUES (?, 'Rent', 2, 0, '2024-01-01T00:00:00+00:00')"
        )
        conn.execute(insert, ("a",))
        with pytest.raises(sqlite3.IntegrityError):
            conn.execute(insert, ("b",))
        conn.rollback()
