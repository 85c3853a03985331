"""Transaction service for database operations."""

import uuid
from datetime import date, datetime
from typing import Callable, List, NamedTuple, Optional

from logger import get_logger
from models.category import CategoryKind
from models.dates import format_date, parse_date, utc_now
from models.money import parse_cents
from models.transaction import Transaction
from services.errors import NotFoundError, ValidationError, translate_store_errors

logger = get_logger()

DESCRIPTION_MAX_LENGTH = 100
# Largest value a SQLite INTEGER column can hold
AMOUNT_MAX_CENTS = 2**63 - 1

# SQL Query Constants
_TRANSACTION_SELECT_FIELDS = """t.id, t.posted_date, t.description, t.amount_cents,
       t.category_id, t.created_at, c.name, c.kind"""

_TRANSACTION_FROM = """transactions t
       LEFT JOIN categories c ON c.id = t.category_id"""


class _ValidatedInput(NamedTuple):
    posted_date: date
    description: str
    amount_cents: int
    category_id: Optional[str]
    category_name: Optional[str]
    category_kind: Optional[CategoryKind]


class TransactionService:
    """Service for managing transactions.

    Args:
        db_manager: Database manager instance for database operations.
        today: Callable returning the current date; posted dates after it are
            rejected.
        allow_archived_categories: Whether archived categories may be assigned
            to new or updated transactions.
    """

    def __init__(
        self,
        db_manager,
        today: Callable[[], date] = date.today,
        allow_archived_categories: bool = True,
    ):
        self.db_manager = db_manager
        self.today = today
        self.allow_archived_categories = allow_archived_categories

    @translate_store_errors
    def create(
        self,
        posted_date,
        description: str,
        amount_cents: int,
        category_id: Optional[str] = None,
    ) -> Transaction:
        """Create a transaction.

        Args:
            posted_date: date or YYYY-MM-DD string, not after today.
            description: Free text, trimmed, 1-100 characters.
            amount_cents: Positive whole number of cents.
            category_id: Optional ID of an existing category.

        Returns:
            The created Transaction, including category name and kind.

        Raises:
            ValidationError: If any input is invalid, including a category ID
                that does not resolve.
        """
        with self.db_manager.transaction() as conn:
            valid = self._validate(
                conn, posted_date, description, amount_cents, category_id
            )
            transaction = Transaction(
                id=uuid.uuid4().hex,
                posted_date=valid.posted_date,
                description=valid.description,
                amount_cents=valid.amount_cents,
                category_id=valid.category_id,
                created_at=utc_now(),
                category_name=valid.category_name,
                category_kind=valid.category_kind,
            )
            conn.execute(
                """
                INSERT INTO transactions
                    (id, posted_date, description, amount_cents, category_id, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    transaction.id,
                    format_date(transaction.posted_date),
                    transaction.description,
                    transaction.amount_cents,
                    transaction.category_id,
                    transaction.created_at.isoformat(),
                ),
            )

        logger.debug(
            f"Created transaction {transaction.id} "
            f"({transaction.posted_date}, {transaction.amount_cents} cents)"
        )
        return transaction

    @translate_store_errors
    def list(
        self,
        from_date=None,
        to_date=None,
        category_id: Optional[str] = None,
        kind=None,
    ) -> List[Transaction]:
        """Get transactions matching all supplied filters.

        Args:
            from_date: Optional inclusive lower bound on posted date.
            to_date: Optional inclusive upper bound on posted date.
            category_id: Optional category ID to filter by.
            kind: Optional category kind. Uncategorized transactions never
                match a kind filter.

        Returns:
            List of Transaction objects, newest first, then by description.

        Raises:
            ValidationError: If a filter value is malformed.
        """
        query = f"SELECT {_TRANSACTION_SELECT_FIELDS} FROM {_TRANSACTION_FROM} WHERE 1 = 1"
        params = []

        if from_date is not None:
            query += " AND t.posted_date >= ?"
            params.append(format_date(parse_date(from_date, "From")))

        if to_date is not None:
            query += " AND t.posted_date <= ?"
            params.append(format_date(parse_date(to_date, "To")))

        if category_id is not None:
            query += " AND t.category_id = ?"
            params.append(category_id)

        if kind is not None:
            query += " AND c.kind = ?"
            params.append(int(CategoryKind.parse(kind)))

        query += " ORDER BY t.posted_date DESC, t.description, t.id"

        with self.db_manager.connect() as conn:
            cursor = conn.execute(query, params)
            return [self._row_to_transaction(row) for row in cursor.fetchall()]

    def find_between(self, start_date: date, end_date: date) -> List[Transaction]:
        """Get transactions posted within an inclusive date range."""
        return self.list(from_date=start_date, to_date=end_date)

    @translate_store_errors
    def find(self, transaction_id: str) -> Optional[Transaction]:
        """Get a single transaction by ID.

        Returns:
            Transaction object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            return self._find(conn, transaction_id)

    def get(self, transaction_id: str) -> Transaction:
        """Get a single transaction by ID.

        Raises:
            NotFoundError: If no transaction has this ID.
        """
        transaction = self.find(transaction_id)
        if transaction is None:
            raise NotFoundError.for_entity("Transaction", transaction_id)
        return transaction

    @translate_store_errors
    def update(
        self,
        transaction_id: str,
        posted_date,
        description: str,
        amount_cents: int,
        category_id: Optional[str] = None,
    ) -> Transaction:
        """Overwrite all fields of a transaction.

        Validation is identical to create. On failure the stored transaction
        is left unchanged.

        Raises:
            NotFoundError: If no transaction has this ID.
            ValidationError: If any input is invalid.
        """
        with self.db_manager.transaction() as conn:
            existing = self._find(conn, transaction_id)
            if existing is None:
                raise NotFoundError.for_entity("Transaction", transaction_id)

            valid = self._validate(
                conn, posted_date, description, amount_cents, category_id
            )
            conn.execute(
                """
                UPDATE transactions
                SET posted_date = ?, description = ?, amount_cents = ?, category_id = ?
                WHERE id = ?
                """,
                (
                    format_date(valid.posted_date),
                    valid.description,
                    valid.amount_cents,
                    valid.category_id,
                    transaction_id,
                ),
            )

        logger.debug(f"Updated transaction {transaction_id}")
        return Transaction(
            id=existing.id,
            posted_date=valid.posted_date,
            description=valid.description,
            amount_cents=valid.amount_cents,
            category_id=valid.category_id,
            created_at=existing.created_at,
            category_name=valid.category_name,
            category_kind=valid.category_kind,
        )

    @translate_store_errors
    def delete(self, transaction_id: str) -> None:
        """Permanently delete a transaction.

        Raises:
            NotFoundError: If no transaction has this ID.
        """
        with self.db_manager.transaction() as conn:
            cursor = conn.execute(
                "DELETE FROM transactions WHERE id = ?", (transaction_id,)
            )
            if cursor.rowcount == 0:
                raise NotFoundError.for_entity("Transaction", transaction_id)

        logger.info(f"Deleted transaction {transaction_id}")

    def _validate(
        self, conn, posted_date, description, amount_cents, category_id
    ) -> _ValidatedInput:
        """Check transaction input in the order callers see errors reported."""
        if not isinstance(description, str) or not description.strip():
            raise ValidationError("Description is required")
        trimmed = description.strip()
        if len(trimmed) > DESCRIPTION_MAX_LENGTH:
            raise ValidationError(
                f"Description must be between 1 and {DESCRIPTION_MAX_LENGTH} characters"
            )

        cents = parse_cents(amount_cents)
        if cents < 1:
            raise ValidationError("Amount must be at least 1 cent")
        if cents > AMOUNT_MAX_CENTS:
            raise ValidationError(f"Amount must be at most {AMOUNT_MAX_CENTS} cents")

        posted = parse_date(posted_date)
        if posted > self.today():
            raise ValidationError("PostedDate cannot be in the future")

        if category_id is None:
            return _ValidatedInput(posted, trimmed, cents, None, None, None)

        row = conn.execute(
            "SELECT name, kind, archived FROM categories WHERE id = ?",
            (category_id,),
        ).fetchone()
        if row is None:
            raise ValidationError("Category not found")

        name, kind, archived = row[0], CategoryKind(row[1]), bool(row[2])
        if archived:
            if not self.allow_archived_categories:
                raise ValidationError("Category is archived")
            logger.warning(
                f"Assigning archived category '{name}' ({category_id}) to a transaction"
            )

        return _ValidatedInput(posted, trimmed, cents, category_id, name, kind)

    def _find(self, conn, transaction_id) -> Optional[Transaction]:
        cursor = conn.execute(
            f"SELECT {_TRANSACTION_SELECT_FIELDS} FROM {_TRANSACTION_FROM} WHERE t.id = ?",
            (transaction_id,),
        )
        row = cursor.fetchone()
        return self._row_to_transaction(row) if row else None

    def _row_to_transaction(self, row: tuple) -> Transaction:
        """Convert a database row to a Transaction object."""
        return Transaction(
            id=row[0],
            posted_date=date.fromisoformat(row[1]),
            description=row[2],
            amount_cents=row[3],
            category_id=row[4],
            created_at=datetime.fromisoformat(row[5]),
            category_name=row[6],
            category_kind=CategoryKind(row[7]) if row[7] is not None else None,
        )
