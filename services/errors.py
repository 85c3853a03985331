"""Errors raised by the ledger services.

Each error carries a problem-details style ``title``/``detail``/``status``
triple so a presentation layer can render it without inspecting the type.
"""

import functools
import sqlite3

from logger import get_logger

logger = get_logger()


class LedgerError(Exception):
    """Base class for all ledger errors."""

    title = "Server Error"
    status = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def to_dict(self) -> dict:
        """Convert the error to a problem-details dictionary."""
        return {"title": self.title, "detail": self.detail, "status": self.status}


class ValidationError(LedgerError):
    """Input is malformed or outside policy."""

    title = "Validation Error"
    status = 400


class UniquenessError(ValidationError):
    """A category with the same name and kind already exists."""


class NotFoundError(LedgerError):
    """The targeted entity does not exist."""

    title = "Not Found"
    status = 404

    @classmethod
    def for_entity(cls, entity: str, entity_id) -> "NotFoundError":
        return cls(f"{entity} with ID {entity_id} was not found")


class StoreError(LedgerError):
    """Unexpected failure in the underlying database."""


def translate_store_errors(func):
    """Surface unexpected sqlite3 failures as StoreError.

    Business errors raised inside the wrapped call pass through untouched.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except sqlite3.Error as e:
            logger.error(f"Database error in {func.__qualname__}: {e}")
            raise StoreError("Unexpected database error") from e

    return wrapper
