"""Summary service for monthly aggregation."""

from typing import Dict, Optional

from logger import get_logger
from models.category import CategoryKind
from models.dates import format_month, month_bounds, parse_month
from models.summary import MonthlySummary
from models.transaction import Transaction

logger = get_logger()


class SummaryService:
    """Read-only aggregation over transactions and their categories.

    Args:
        transactions: TransactionService used to fetch the month's entries.
        categories: CategoryService used to resolve categories the
            transaction projection does not already carry.
    """

    def __init__(self, transactions, categories):
        self.transactions = transactions
        self.categories = categories

    def monthly_summary(self, year_month: str) -> MonthlySummary:
        """Compute income, expense and net totals for a calendar month.

        Transactions without a resolvable category count toward neither
        income nor expense; they are reported in uncategorized_count.

        Args:
            year_month: Month in YYYY-MM format.

        Returns:
            MonthlySummary for the month. A month with no transactions yields
            all zeros.

        Raises:
            ValidationError: If year_month is malformed.
        """
        start_date, end_date = month_bounds(parse_month(year_month))
        transactions = self.transactions.find_between(start_date, end_date)

        summary = MonthlySummary(month=format_month(start_date))
        kinds: Dict[str, Optional[CategoryKind]] = {}

        for transaction in transactions:
            summary.transaction_count += 1
            kind = self._resolve_kind(transaction, kinds)

            if kind == CategoryKind.INCOME:
                summary.income_cents += transaction.amount_cents
            elif kind == CategoryKind.EXPENSE:
                summary.expense_cents += transaction.amount_cents
            else:
                summary.uncategorized_count += 1

        summary.net_cents = summary.income_cents - summary.expense_cents

        if summary.uncategorized_count:
            logger.debug(
                f"{summary.uncategorized_count} uncategorized transaction(s) "
                f"excluded from {summary.month} totals"
            )
        return summary

    def _resolve_kind(
        self, transaction: Transaction, cache: Dict[str, Optional[CategoryKind]]
    ) -> Optional[CategoryKind]:
        if transaction.category_kind is not None:
            return transaction.category_kind
        if transaction.category_id is None:
            return None

        if transaction.category_id not in cache:
            category = self.categories.find(transaction.category_id)
            cache[transaction.category_id] = category.kind if category else None
        return cache[transaction.category_id]
