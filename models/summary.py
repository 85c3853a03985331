"""MonthlySummary model for aggregated monthly totals."""

from dataclasses import dataclass


@dataclass
class MonthlySummary:
    """Income, expense and net totals for one calendar month.

    Attributes:
        month: Month in YYYY-MM format.
        income_cents: Sum of income-kind transactions.
        expense_cents: Sum of expense-kind transactions.
        net_cents: income_cents - expense_cents.
        transaction_count: Transactions posted in the month.
        uncategorized_count: Transactions left out of both sums because they
            have no resolvable category.
    """

    month: str
    income_cents: int = 0
    expense_cents: int = 0
    net_cents: int = 0
    transaction_count: int = 0
    uncategorized_count: int = 0

    def to_dict(self, include_counts: bool = False) -> dict:
        data = {
            "month": self.month,
            "incomeCents": self.income_cents,
            "expenseCents": self.expense_cents,
            "netCents": self.net_cents,
        }
        if include_counts:
            data["transactionCount"] = self.transaction_count
            data["uncategorizedCount"] = self.uncategorized_count
        return data
