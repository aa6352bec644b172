"""Client domain service."""

import logging
import re
from typing import Optional

from billit.database.base import Database
from billit.domain.entities import Client as ClientEntity
from billit.domain.errors import NotFoundError, ValidationError, client_not_found
from billit.domain.ledger import filter_clients

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _clean(value: Optional[str]) -> Optional[str]:
    """Strip text and turn empty strings into None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


class ClientService:
    """Service for managing clients."""

    def __init__(self, db: Database):
        """Initialize client service.

        Args:
            db: Database instance
        """
        self.db = db

    def _validate(self, name: str, email: Optional[str]) -> tuple[str, Optional[str]]:
        name = _clean(name)
        if name is None:
            raise ValidationError("Name is required")
        email = _clean(email)
        if email is not None and not _EMAIL_RE.match(email):
            raise ValidationError(f"Invalid email address '{email}'")
        return name, email

    def create_client(
        self,
        name: str,
        company: Optional[str] = None,
        contact: Optional[str] = None,
        email: Optional[str] = None,
        address: Optional[str] = None,
        tax_id: Optional[str] = None,
    ) -> int:
        """Create a new client.

        Args:
            name: Client display name
            company: Optional company name
            contact: Optional phone or contact person
            email: Optional email address
            address: Optional postal address
            tax_id: Optional GST number

        Returns:
            Client ID

        Raises:
            ValidationError: If the name is missing or the email is malformed
        """
        name, email = self._validate(name, email)
        client_id = self.db.create_client(
            name=name,
            company=_clean(company),
            contact=_clean(contact),
            email=email,
            address=_clean(address),
            tax_id=_clean(tax_id),
        )
        logger.info("Created client %s (%s)", client_id, name)
        return client_id

    def get_client(self, client_id: int) -> Optional[ClientEntity]:
        """Get client by ID.

        Returns:
            Client entity or None if not found
        """
        return self.db.get_client(client_id)

    def require_client(self, client_id: int) -> ClientEntity:
        """Get client by ID or raise NotFoundError."""
        client = self.db.get_client(client_id)
        if client is None:
            raise NotFoundError(client_not_found(client_id))
        return client

    def list_clients(self) -> list[ClientEntity]:
        """List all clients ordered by name."""
        return self.db.list_clients()

    def search_clients(self, search_text: str = "") -> list[ClientEntity]:
        """List clients whose name, company or tax id contains the text."""
        return list(filter_clients(self.db.list_clients(), search_text))

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
        """Overwrite a client with the given fields.

        Fields left as None are cleared. Bills already saved keep the client
        name they were saved with.

        Raises:
            NotFoundError: If the client doesn't exist
            ValidationError: If the name is missing or the email is malformed
        """
        self.require_client(client_id)
        name, email = self._validate(name, email)
        self.db.update_client(
            client_id=client_id,
            name=name,
            company=_clean(company),
            contact=_clean(contact),
            email=email,
            address=_clean(address),
            tax_id=_clean(tax_id),
        )
        logger.info("Updated client %s", client_id)

    def delete_client(self, client_id: int) -> None:
        """Delete a client.

        Bills referencing the client are left as they are.

        Raises:
            NotFoundError: If the client doesn't exist
        """
        self.require_client(client_id)
        self.db.delete_client(client_id)
        logger.info("Deleted client %s", client_id)
