"""Shared pytest fixtures for all tests."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path

import pytest

from cli.migrate import apply_pending
from config import Config
from db.manager import DatabaseManager
from services.base import Services


class InMemoryDatabaseManager(DatabaseManager):
    """DatabaseManager that hands out one shared in-memory connection.

    The connection is never closed here; the test_db fixture owns it.
    """

    def __init__(self, config, conn):
        super().__init__(config)
        self.conn = conn

    @contextmanager
    def connect(self):
        yield self.conn

    def get_db_path(self):
        return Path(":memory:")


@pytest.fixture
def test_db():
    """In-memory SQLite connection with foreign keys enforced."""
    conn = sqlite3.connect(":memory:")
    conn.execute("PRAGMA foreign_keys = ON")
    yield conn
    conn.close()


@pytest.fixture
def test_config(tmp_path):
    """Configuration rooted in a temporary directory."""
    base_dir = tmp_path / "pocketledger"
    return Config(
        base_dir=base_dir,
        db_data_dir=base_dir / "db",
        db_filename="test.db",
        log_level="DEBUG",
        log_dir=base_dir / "logs",
    )


@pytest.fixture
def db_manager_with_schema(test_db, test_config):
    """Database manager over the in-memory connection, all migrations applied."""
    manager = InMemoryDatabaseManager(test_config, test_db)
    apply_pending(manager)
    return manager


@pytest.fixture
def services(test_config, db_manager_with_schema):
    """Services container backed by the in-memory database."""
    return Services(test_config, db_manager=db_manager_with_schema)


@pytest.fixture
def income_category(services):
    return services.categories.create("Salary", "income")


@pytest.fixture
def expense_category(services):
    return services.categories.create("Groceries", "expense")
