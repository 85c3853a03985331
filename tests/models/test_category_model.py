"""Tests for the Category model and CategoryKind parsing."""

import pytest

from models.category import CategoryKind
from services.errors import ValidationError


class TestCategoryKind:
    """Tests for CategoryKind.parse."""

    def test_integer_mapping_is_fixed(self):
        assert int(CategoryKind.INCOME) == 1
        assert int(CategoryKind.EXPENSE) == 2

    @pytest.mark.parametrize(
        "value, expected",
        [
            (CategoryKind.INCOME, CategoryKind.INCOME),
            (1, CategoryKind.INCOME),
            (2, CategoryKind.EXPENSE),
            ("1", CategoryKind.INCOME),
            ("income", CategoryKind.INCOME),
            ("Expense", CategoryKind.EXPENSE),
            (" EXPENSE ", CategoryKind.EXPENSE),
        ],
    )
    def test_parse(self, value, expected):
        assert CategoryKind.parse(value) is expected

    @pytest.mark.parametrize("value", [0, 3, "3", "transfer", "", None, True, 1.0])
    def test_parse_rejects(self, value):
        with pytest.raises(ValidationError, match="Kind must be"):
            CategoryKind.parse(value)

    def test_label(self):
        assert CategoryKind.INCOME.label == "Income"
