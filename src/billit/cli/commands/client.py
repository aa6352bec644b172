"""Client management commands."""

import click
from billit.cli.client_resolution import resolve_client_or_exit
from billit.cli.error_handling import handle_domain_error
from billit.domain.client import ClientService


@click.group()
def client_group():
    """Manage clients."""
    pass


def _client_options(func):
    """Optional client detail options shared by create and update."""
    options = [
        click.option("--company", help="Company name"),
        click.option("--contact", help="Phone number or contact person"),
        click.option("--email", help="Email address"),
        click.option("--address", help="Postal address"),
        click.option("--gst", "tax_id", help="GST number"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@client_group.command("create")
@click.argument("name", metavar="CLIENT_NAME")
@_client_options
@click.pass_context
def create_client(ctx, name: str, company, contact, email, address, tax_id):
    """Create a new client.

    Examples:
        billit client create "Sharma Logistics"
        billit client create "Acme" --company "Acme Pvt Ltd" --gst 27AAACA1234A1Z5
    """
    service = ClientService(ctx.obj["db"])

    try:
        client_id = service.create_client(
            name=name,
            company=company,
            contact=contact,
            email=email,
            address=address,
            tax_id=tax_id,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created client '{name.strip()}' (ID: {client_id})")


@client_group.command("list")
@click.option("--search", default="", help="Match name, company or GST number")
@click.pass_context
def list_clients(ctx, search: str):
    """List clients."""
    service = ClientService(ctx.obj["db"])

    clients = service.search_clients(search)
    if not clients:
        click.echo("No clients found.")
        return

    click.echo(f"\nClients ({len(clients)}):")
    click.echo("-" * 90)
    for c in clients:
        click.echo(
            f"ID: {c.id:3d} | {c.name:25s} | {(c.company or ''):25s} | GST: {c.tax_id or '-'}"
        )


@client_group.command("show")
@click.argument("client", metavar="CLIENT")
@click.pass_context
def show_client(ctx, client: str):
    """Show a client's details.

    CLIENT can be a client name or ID.
    """
    service = ClientService(ctx.obj["db"])
    client_id = resolve_client_or_exit(ctx, service, client)
    c = service.require_client(client_id)

    click.echo(f"\nClient ID: {c.id}")
    click.echo(f"  Name: {c.name}")
    if c.company:
        click.echo(f"  Company: {c.company}")
    if c.contact:
        click.echo(f"  Contact: {c.contact}")
    if c.email:
        click.echo(f"  Email: {c.email}")
    if c.address:
        click.echo(f"  Address: {c.address}")
    if c.tax_id:
        click.echo(f"  GST: {c.tax_id}")


@client_group.command("update")
@click.argument("client", metavar="CLIENT")
@click.option("--name", required=True, help="Client name")
@_client_options
@click.pass_context
def update_client(ctx, client: str, name: str, company, contact, email, address, tax_id):
    """Overwrite a client's details.

    CLIENT can be a client name or ID. Details not given are cleared, and
    bills already saved keep the name they were saved with.

    Examples:
        billit client update 3 --name "Sharma Logistics" --email ops@sharma.in
    """
    service = ClientService(ctx.obj["db"])
    client_id = resolve_client_or_exit(ctx, service, client)

    try:
        service.update_client(
            client_id=client_id,
            name=name,
            company=company,
            contact=contact,
            email=email,
            address=address,
            tax_id=tax_id,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Updated client {client_id}")


@client_group.command("delete")
@click.argument("client", metavar="CLIENT")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_client(ctx, client: str, yes: bool):
    """Delete a client.

    CLIENT can be a client name or ID. Existing bills for the client are
    kept unchanged.
    """
    service = ClientService(ctx.obj["db"])
    client_id = resolve_client_or_exit(ctx, service, client)
    client_obj = service.require_client(client_id)

    if not yes and not click.confirm(
        f"Are you sure you want to delete client '{client_obj.name}' (ID: {client_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_client(client_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Deleted client '{client_obj.name}'")


def register_commands(cli):
    """Register client commands with main CLI."""
    cli.add_command(client_group, name="client")
