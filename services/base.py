"""Services container wiring the ledger services to one database manager."""

from config import Config
from db.manager import DatabaseManager


class Services:
    """Holds the category, transaction and summary services.

    Args:
        config: Application configuration object.
        db_manager: Optional database manager, used by tests to supply an
            in-memory database. Defaults to a DatabaseManager built from config.
    """

    def __init__(self, config: Config, db_manager=None):
        self.config = config
        self.db_manager = db_manager or DatabaseManager(config)

        # Lazy import to avoid circular dependencies
        from services.categories import CategoryService
        from services.transactions import TransactionService
        from services.summaries import SummaryService

        self.categories = CategoryService(self.db_manager)
        self.transactions = TransactionService(
            self.db_manager,
            allow_archived_categories=config.allow_archived_categories,
        )
        self.summaries = SummaryService(self.transactions, self.categories)
