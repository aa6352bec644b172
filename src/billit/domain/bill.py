"""Bill domain service."""

import logging
from datetime import date
from typing import Iterable, Optional

from billit.database.base import Database
from billit.domain.entities import Bill as BillEntity, BillStatus, Service
from billit.domain.errors import (
    DependencyError,
    NotFoundError,
    ValidationError,
    bill_delete_blocked,
    bill_not_found,
    client_not_found,
    invalid_status,
)
from billit.domain.ledger import STATUS_FILTER_ALL, filter_bills, is_past_due

logger = logging.getLogger(__name__)


def parse_status(status: BillStatus | str) -> BillStatus:
    """Convert a status string to BillStatus.

    Raises:
        ValidationError: If the status is not unpaid, paid or overdue
    """
    try:
        return BillStatus(status.strip().lower() if isinstance(status, str) else status)
    except ValueError:
        raise ValidationError(invalid_status(str(status)))


def validate_services(services: Iterable[Service]) -> tuple[Service, ...]:
    """Check a bill's service list.

    Raises:
        ValidationError: If the list is empty or a service is incomplete
    """
    services = tuple(services)
    if not services:
        raise ValidationError("At least one service is required")

    for index, service in enumerate(services, start=1):
        if not service.vehicle or not service.vehicle.strip():
            raise ValidationError(f"Service {index}: vehicle is required")
        if not service.origin or not service.origin.strip():
            raise ValidationError(f"Service {index}: from is required")
        if not service.destination or not service.destination.strip():
            raise ValidationError(f"Service {index}: to is required")
        if service.amount < 0:
            raise ValidationError(f"Service {index}: amount must not be negative")

    return services


class BillService:
    """Service for managing bills and their service line items."""

    def __init__(self, db: Database):
        """Initialize bill service.

        Args:
            db: Database instance
        """
        self.db = db

    def _client_name(self, client_id: int) -> str:
        client = self.db.get_client(client_id)
        if client is None:
            raise NotFoundError(client_not_found(client_id))
        return client.name

    def create_bill(
        self,
        client_id: int,
        date: date,
        services: Iterable[Service],
        status: BillStatus | str = BillStatus.UNPAID,
    ) -> int:
        """Create a bill.

        The client's current name is stored on the bill and the amount is the
        sum of the service amounts.

        Args:
            client_id: Client ID
            date: Bill date
            services: One or more service line items
            status: Initial status (defaults to unpaid)

        Returns:
            Bill ID

        Raises:
            NotFoundError: If the client doesn't exist
            ValidationError: If the status or services are invalid
        """
        status = parse_status(status)
        services = validate_services(services)
        client_name = self._client_name(client_id)

        bill_id = self.db.create_bill(
            client_id=client_id,
            client_name=client_name,
            date=date,
            status=status,
            services=services,
        )
        logger.info(
            "Created bill %s for client %s with %d service(s)",
            bill_id,
            client_id,
            len(services),
        )
        return bill_id

    def get_bill(self, bill_id: int) -> Optional[BillEntity]:
        """Get bill by ID, or None if not found."""
        return self.db.get_bill(bill_id)

    def require_bill(self, bill_id: int) -> BillEntity:
        """Get bill by ID or raise NotFoundError."""
        bill = self.db.get_bill(bill_id)
        if bill is None:
            raise NotFoundError(bill_not_found(bill_id))
        return bill

    def list_bills(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[BillEntity]:
        """List bills newest first, optionally within a date range."""
        return self.db.list_bills(start_date=start_date, end_date=end_date)

    def search_bills(
        self,
        search_text: str = "",
        status_filter: str = STATUS_FILTER_ALL,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[BillEntity]:
        """List bills matching bill number or client name and status."""
        if status_filter != STATUS_FILTER_ALL:
            status_filter = parse_status(status_filter)
        bills = self.list_bills(start_date=start_date, end_date=end_date)
        return list(filter_bills(bills, search_text, status_filter))

    def update_bill(
        self,
        bill_id: int,
        client_id: int,
        date: date,
        services: Iterable[Service],
        status: BillStatus | str,
    ) -> None:
        """Overwrite a bill.

        Services are replaced and the amount is recomputed from them in the
        same write. The client name is taken afresh from the client record.

        Raises:
            NotFoundError: If the bill or client doesn't exist
            ValidationError: If the status or services are invalid
        """
        self.require_bill(bill_id)
        status = parse_status(status)
        services = validate_services(services)
        client_name = self._client_name(client_id)

        self.db.update_bill(
            bill_id=bill_id,
            client_id=client_id,
            client_name=client_name,
            date=date,
            status=status,
            services=services,
        )
        logger.info("Updated bill %s", bill_id)

    def delete_bill(self, bill_id: int) -> None:
        """Delete a bill and its services.

        Raises:
            NotFoundError: If the bill doesn't exist
            DependencyError: If payments were recorded against the bill
        """
        self.require_bill(bill_id)
        payment_count = self.db.get_bill_payment_count(bill_id)
        if payment_count > 0:
            logger.warning("Refused to delete bill %s with payments", bill_id)
            raise DependencyError(bill_delete_blocked(bill_id, payment_count))

        self.db.delete_bill(bill_id)
        logger.info("Deleted bill %s", bill_id)

    def mark_overdue(self, as_of: date) -> list[int]:
        """Set unpaid bills dated before ``as_of`` to overdue.

        This is the only path that moves a bill to overdue besides editing
        it. Paid and already overdue bills are left alone.

        Returns:
            IDs of the bills that changed
        """
        changed = []
        for bill in self.db.list_bills():
            if bill.status == BillStatus.UNPAID and is_past_due(bill, as_of):
                self.db.update_bill_status(bill.id, BillStatus.OVERDUE)
                changed.append(bill.id)

        logger.info("Marked %d bill(s) overdue as of %s", len(changed), as_of)
        return changed
