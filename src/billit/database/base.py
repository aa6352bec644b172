"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from datetime import date

# Import entities directly to avoid circular import through domain/__init__.py
from billit.domain.entities import (
    Bill,
    BillStatus,
    Client,
    Payment,
    Service,
)


class Database(ABC):
    """Abstract database interface for billit."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Client operations
    @abstractmethod
    def create_client(
        self,
        name: str,
        company: Optional[str] = None,
        contact: Optional[str] = None,
        email: Optional[str] = None,
        address: Optional[str] = None,
        tax_id: Optional[str] = None,
    ) -> int:
        """Create a client. Returns client ID."""
        pass

    @abstractmethod
    def get_client(self, client_id: int) -> Optional[Client]:
        """Get client by ID."""
        pass

    @abstractmethod
    def list_clients(self) -> list[Client]:
        """List all clients."""
        pass

    @abstractmethod
    def count_clients(self) -> int:
        """Count clients."""
        pass

    @abstractmethod
    def update_client(
        self,
        client_id: int,
        name: str,
        company: Optional[str] = None,
        contact: Optional[str] = None,
        email: Optional[str] = None,
        address: Optional[str] = None,
        tax_id: Optional[str] = None,
    ) -> None:
        """Overwrite every field of a client."""
        pass

    @abstractmethod
    def delete_client(self, client_id: int) -> None:
        """Delete a client."""
        pass

    # Bill operations
    @abstractmethod
    def create_bill(
        self,
        client_id: int,
        client_name: str,
        date: date,
        status: BillStatus,
        services: Sequence[Service],
    ) -> int:
        """Create a bill with its services. Returns bill ID.

        The stored amount is the sum of the service amounts.
        """
        pass

    @abstractmethod
    def get_bill(self, bill_id: int) -> Optional[Bill]:
        """Get bill by ID, with its services."""
        pass

    @abstractmethod
    def list_bills(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Bill]:
        """List bills, newest first, with optional date filters."""
        pass

    @abstractmethod
    def update_bill(
        self,
        bill_id: int,
        client_id: int,
        client_name: str,
        date: date,
        status: BillStatus,
        services: Sequence[Service],
    ) -> None:
        """Overwrite a bill and replace its services in one transaction.

        The stored amount is recomputed from the new services.
        """
        pass

    @abstractmethod
    def update_bill_status(self, bill_id: int, status: BillStatus) -> None:
        """Set the status of a bill."""
        pass

    @abstractmethod
    def delete_bill(self, bill_id: int) -> None:
        """Delete a bill and its services."""
        pass

    # Payment operations
    @abstractmethod
    def record_payment(
        self,
        bill_id: int,
        amount: int,
        payment_date: date,
        payment_mode: Optional[str] = None,
        transaction_reference: Optional[str] = None,
    ) -> int:
        """Insert a payment and mark its bill paid in one transaction.

        Returns payment ID.
        """
        pass

    @abstractmethod
    def list_payments(self, bill_id: Optional[int] = None) -> list[Payment]:
        """List payments, optionally for one bill."""
        pass

    @abstractmethod
    def get_bill_payment_count(self, bill_id: int) -> int:
        """Count payments recorded against a bill."""
        pass
