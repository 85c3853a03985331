"""SQLite connection management.

Every connection enforces foreign keys and waits up to ``config.db_timeout``
seconds for a lock held by another writer.
"""

import sqlite3
from contextlib import contextmanager
from config import Config, get_migrations_dir


class DatabaseManager:
    """Opens connections to the ledger database.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        self.config = config

    @contextmanager
    def connect(self):
        """Yield a connection and close it afterwards.

        Uncommitted changes are discarded on close.

        Yields:
            sqlite3.Connection: Database connection.
        """
        self.config.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(self.config.db_path, timeout=self.config.db_timeout)
        try:
            conn.execute("PRAGMA foreign_keys = ON")
            yield conn
        finally:
            conn.close()

    @contextmanager
    def transaction(self):
        """Run a unit of work on a single connection.

        The write lock is taken before the block runs, so reads made while
        validating cannot be invalidated by another writer before the commit.
        Commits when the block exits normally and rolls back on any exception,
        so a failed operation never leaves a partial write behind.

        Yields:
            sqlite3.Connection: Database connection.
        """
        with self.connect() as conn:
            conn.execute("BEGIN IMMEDIATE")
            try:
                yield conn
                conn.commit()
            except BaseException:
                conn.rollback()
                raise

    def get_db_path(self):
        return self.config.db_path

    def get_migrations_dir(self):
        return get_migrations_dir()
