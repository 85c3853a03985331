"""Category model for budgeting classification."""

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum

from services.errors import ValidationError


class CategoryKind(IntEnum):
    """Cash-flow direction of a category.

    The integer values are the storage and wire representation and must not
    change.
    """

    INCOME = 1
    EXPENSE = 2

    @classmethod
    def parse(cls, value) -> "CategoryKind":
        """Coerce raw input into a CategoryKind.

        Accepts the enum itself, the integers 1/2 (or their string form), or a
        kind name in any case ("income", "Expense").

        Raises:
            ValidationError: If the value does not name a kind.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        elif isinstance(value, str):
            text = value.strip()
            if text.isascii() and text.isdigit():
                return cls.parse(int(text))
            try:
                return cls[text.upper()]
            except KeyError:
                pass
        raise ValidationError("Kind must be Income (1) or Expense (2)")

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass
class Category:
    """Represents a budgeting category.

    Attributes:
        id: Opaque unique identifier, assigned at creation.
        name: Trimmed display name, 2-50 characters.
        kind: Income or expense.
        archived: Soft-delete flag. Archived categories stay valid references.
        created_at: Creation timestamp (UTC).
    """

    id: str
    name: str
    kind: CategoryKind
    archived: bool
    created_at: datetime

    def to_dict(self) -> dict:
        """Convert category to its read projection."""
        return {
            "id": self.id,
            "name": self.name,
            "kind": int(self.kind),
            "archived": self.archived,
        }
