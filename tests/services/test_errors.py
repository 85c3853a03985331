import sqlite3

import pytest

from services.errors import (
    NotFoundError,
    StoreError,
    UniquenessError,
    ValidationError,
    translate_store_errors,
)


class TestErrors:
    """Tests for the error taxonomy."""

    def test_validation_error_to_dict(self):
        error = ValidationError("Name is required")

        assert error.to_dict() == {
            "title": "Validation Error",
            "detail": "Name is required",
            "status": 400,
        }

    def test_uniqueness_error_status(self):
        assert UniquenessError("dup").status == 400

    def test_not_found_for_entity(self):
        error = NotFoundError.for_entity("Transaction", "abc")

        assert error.status == 404
        assert error.detail == "Transaction with ID abc was not found"
        assert str(error) == error.detail

    def test_store_error_status(self):
        assert StoreError("boom").status == 500


class TestTranslateStoreErrors:
    """Tests for translate_store_errors."""

    def test_wraps_sqlite_errors(self):
        @translate_store_errors
        def broken():
            raise sqlite3.OperationalError("no such table: categories")

        with pytest.raises(StoreError) as exc_info:
            broken()

        assert isinstance(exc_info.value.__cause__, sqlite3.OperationalError)

    def test_passes_business_errors_through(self):
        @translate_store_errors
        def invalid():
            raise ValidationError("bad")

        with pytest.raises(ValidationError):
            invalid()

    def test_store_error_from_missing_schema(self, test_config):
        from services.base import Services

        services = Services(test_config)

        with pytest.raises(StoreError):
            services.categories.list()
