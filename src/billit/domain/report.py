"""Report domain service."""

from datetime import date
from typing import Optional

from billit.database.base import Database
from billit.domain.entities import DashboardSummary, PaymentSummary, ReportSummary
from billit.domain import ledger


class ReportService:
    """Service for building dashboard, report and payment figures.

    Loads a snapshot from the database and hands it to the ledger
    calculations. The reference date defaults to today only here.
    """

    def __init__(self, db: Database):
        """Initialize report service.

        Args:
            db: Database instance
        """
        self.db = db

    def dashboard(self, reference: Optional[date] = None) -> DashboardSummary:
        """Build dashboard figures as of ``reference``."""
        bills = self.db.list_bills()
        return ledger.dashboard_summary(
            bills,
            client_count=self.db.count_clients(),
            reference=reference or date.today(),
        )

    def report(self, reference: Optional[date] = None) -> ReportSummary:
        """Build report figures as of ``reference``."""
        return ledger.report_summary(self.db.list_bills(), reference or date.today())

    def payments(self) -> PaymentSummary:
        """Build payment screen figures."""
        return ledger.payment_summary(self.db.list_bills(), self.db.list_payments())
