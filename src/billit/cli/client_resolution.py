"""CLI helpers for client resolution and error handling."""

from __future__ import annotations

import click
from billit.cli.error_handling import handle_domain_error
from billit.domain.client import ClientService
from billit.utils.client_resolver import resolve_client


def resolve_client_or_exit(
    ctx: click.Context, client_service: ClientService, client: str | int
) -> int:
    """Resolve client name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_client(client_service, client)
    except ValueError as exc:
        handle_domain_error(ctx, exc)
