"""Category service for database operations."""

import sqlite3
import uuid
from datetime import datetime
from typing import List, Optional

from logger import get_logger
from models.category import Category, CategoryKind
from models.dates import utc_now
from services.errors import (
    NotFoundError,
    UniquenessError,
    ValidationError,
    translate_store_errors,
)

logger = get_logger()

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50

_CATEGORY_SELECT_FIELDS = "id, name, kind, archived, created_at"


def _validate_name(name) -> str:
    """Trim a category name and check its length bounds."""
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Name is required")

    trimmed = name.strip()
    if not NAME_MIN_LENGTH <= len(trimmed) <= NAME_MAX_LENGTH:
        raise ValidationError(
            f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
        )
    return trimmed


def _duplicate_error(name: str, kind: CategoryKind) -> UniquenessError:
    return UniquenessError(
        f"A category with name '{name}' and kind '{kind.label}' already exists"
    )


class CategoryService:
    """Service for managing categories.

    Categories are never removed from the database. Archiving hides a category
    from default listings but keeps it a valid transaction reference.
    """

    def __init__(self, db_manager):
        """Initialize the category service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    @translate_store_errors
    def create(self, name: str, kind) -> Category:
        """Create a new category.

        Args:
            name: Category name, trimmed before storage.
            kind: CategoryKind, or anything CategoryKind.parse accepts.

        Returns:
            The created Category.

        Raises:
            ValidationError: If the name or kind is invalid.
            UniquenessError: If a category with the same name and kind exists,
                archived or not.
        """
        trimmed = _validate_name(name)
        kind = CategoryKind.parse(kind)

        category = Category(
            id=uuid.uuid4().hex,
            name=trimmed,
            kind=kind,
            archived=False,
            created_at=utc_now(),
        )

        with self.db_manager.transaction() as conn:
            if self._name_taken(conn, trimmed, kind):
                raise _duplicate_error(trimmed, kind)
            try:
                conn.execute(
                    f"INSERT INTO categories ({_CATEGORY_SELECT_FIELDS}) VALUES (?, ?, ?, ?, ?)",
                    (
                        category.id,
                        category.name,
                        int(category.kind),
                        0,
                        category.created_at.isoformat(),
                    ),
                )
            except sqlite3.IntegrityError as e:
                # Lost a race with a concurrent writer
                raise _duplicate_error(trimmed, kind) from e

        logger.info(f"Created category '{category.name}' ({kind.label}) {category.id}")
        return category

    @translate_store_errors
    def list(self, kind=None, include_archived: bool = False) -> List[Category]:
        """Get categories ordered by kind, then name.

        Args:
            kind: Optional kind filter.
            include_archived: If True, archived categories are included.

        Returns:
            List of Category objects.
        """
        query = f"SELECT {_CATEGORY_SELECT_FIELDS} FROM categories WHERE 1 = 1"
        params = []

        if kind is not None:
            query += " AND kind = ?"
            params.append(int(CategoryKind.parse(kind)))

        if not include_archived:
            query += " AND archived = 0"

        query += " ORDER BY kind, name"

        with self.db_manager.connect() as conn:
            cursor = conn.execute(query, params)
            return [self._row_to_category(row) for row in cursor.fetchall()]

    @translate_store_errors
    def find(self, category_id: str) -> Optional[Category]:
        """Get a single category by ID.

        Returns:
            Category object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            return self._find(conn, category_id)

    def get(self, category_id: str) -> Category:
        """Get a single category by ID.

        Raises:
            NotFoundError: If no category has this ID.
        """
        category = self.find(category_id)
        if category is None:
            raise NotFoundError.for_entity("Category", category_id)
        return category

    @translate_store_errors
    def update(self, category_id: str, name: str, kind, archived: bool) -> Category:
        """Overwrite all mutable fields of a category.

        Passing archived=False is how an archived category is restored.

        Raises:
            NotFoundError: If no category has this ID.
            ValidationError: If the name, kind or archived flag is invalid.
            UniquenessError: If another category already has this name and kind.
        """
        with self.db_manager.transaction() as conn:
            existing = self._find(conn, category_id)
            if existing is None:
                raise NotFoundError.for_entity("Category", category_id)

            trimmed = _validate_name(name)
            kind = CategoryKind.parse(kind)
            if not isinstance(archived, bool):
                raise ValidationError("Archived must be true or false")

            if self._name_taken(conn, trimmed, kind, exclude_id=category_id):
                raise _duplicate_error(trimmed, kind)

            try:
                conn.execute(
                    "UPDATE categories SET name = ?, kind = ?, archived = ? WHERE id = ?",
                    (trimmed, int(kind), int(archived), category_id),
                )
            except sqlite3.IntegrityError as e:
                raise _duplicate_error(trimmed, kind) from e

        logger.info(f"Updated category {category_id}")
        return Category(
            id=existing.id,
            name=trimmed,
            kind=kind,
            archived=archived,
            created_at=existing.created_at,
        )

    @translate_store_errors
    def archive(self, category_id: str) -> None:
        """Archive (soft delete) a category. Archiving twice is not an error.

        Raises:
            NotFoundError: If no category has this ID.
        """
        with self.db_manager.transaction() as conn:
            cursor = conn.execute(
                "UPDATE categories SET archived = 1 WHERE id = ?", (category_id,)
            )
            if cursor.rowcount == 0:
                raise NotFoundError.for_entity("Category", category_id)

        logger.info(f"Archived category {category_id}")

    @translate_store_errors
    def count(self) -> int:
        """Count all categories, archived included."""
        with self.db_manager.connect() as conn:
            return conn.execute("SELECT COUNT(*) FROM categories").fetchone()[0]

    def _find(self, conn, category_id) -> Optional[Category]:
        cursor = conn.execute(
            f"SELECT {_CATEGORY_SELECT_FIELDS} FROM categories WHERE id = ?",
            (category_id,),
        )
        row = cursor.fetchone()
        return self._row_to_category(row) if row else None

    def _name_taken(
        self,
        conn,
        name: str,
        kind: CategoryKind,
        exclude_id: Optional[str] = None,
    ) -> bool:
        query = "SELECT 1 FROM categories WHERE name = ? AND kind = ?"
        params = [name, int(kind)]
        if exclude_id is not None:
            query += " AND id != ?"
            params.append(exclude_id)
        return conn.execute(query, params).fetchone() is not None

    def _row_to_category(self, row: tuple) -> Category:
        """Convert a database row to a Category object."""
        return Category(
            id=row[0],
            name=row[1],
            kind=CategoryKind(row[2]),
            archived=bool(row[3]),
            created_at=datetime.fromisoformat(row[4]),
        )
