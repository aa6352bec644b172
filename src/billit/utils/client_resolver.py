"""Utility for resolving client names to IDs."""

from billit.domain.client import ClientService
from billit.domain.errors import NotFoundError, client_name_not_found


def resolve_client(client_service: ClientService, client: str | int) -> int:
    """Resolve client name or ID to client ID.

    Args:
        client_service: ClientService instance
        client: Client name (str) or ID (int or string representation of int)

    Returns:
        Client ID

    Raises:
        NotFoundError: If client is not found
    """
    if isinstance(client, int):
        if client_service.get_client(client) is None:
            raise NotFoundError(f"Client ID {client} not found")
        return client

    try:
        client_id = int(client)
    except (ValueError, TypeError):
        client_id = None

    if client_id is not None:
        if client_service.get_client(client_id) is None:
            raise NotFoundError(f"Client ID {client_id} not found")
        return client_id

    for existing in client_service.list_clients():
        if existing.name == client:
            return existing.id

    raise NotFoundError(client_name_not_found(client))
