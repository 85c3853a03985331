from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from models.category import CategoryKind
from models.dates import format_date


@dataclass
class Transaction:
    id: str
    posted_date: date
    description: str
    amount_cents: int  # always >= 1
    category_id: Optional[str]
    created_at: datetime
    # Denormalized from the referenced category, read-only
    category_name: Optional[str] = None
    category_kind: Optional[CategoryKind] = None

    def to_dict(self) -> dict:
        """Convert transaction to its read projection."""
        return {
            "id": self.id,
            "postedDate": format_date(self.posted_date),
            "description": self.description,
            "amountCents": self.amount_cents,
            "categoryId": self.category_id,
            "categoryName": self.category_name,
            "categoryKind": (
                int(self.category_kind) if self.category_kind is not None else None
            ),
        }
