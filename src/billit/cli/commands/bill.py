"""Bill management commands."""

import click
from billit.cli.client_resolution import resolve_client_or_exit
from billit.cli.date_filters import (
    as_of_option,
    period_option,
    resolve_as_of,
    resolve_cli_date_range,
)
from billit.cli.display import echo_bill_table
from billit.cli.error_handling import handle_domain_error
from billit.domain.bill import BillService
from billit.domain.client import ClientService
from billit.domain.entities import Service
from billit.utils.amount_parser import format_currency, parse_amount_paise
from billit.utils.date_parser import parse_date

STATUS_CHOICES = ["unpaid", "paid", "overdue"]


def parse_service_option(value: str) -> Service:
    """Parse a ``VEHICLE|FROM|TO|AMOUNT`` option value into a Service.

    Raises:
        ValueError: If the value doesn't have four parts or the amount is bad
    """
    parts = [p.strip() for p in value.split("|")]
    if len(parts) != 4:
        raise ValueError(
            f"Invalid service '{value}'. Expected VEHICLE|FROM|TO|AMOUNT"
        )
    vehicle, origin, destination, amount = parts
    return Service(
        vehicle=vehicle,
        origin=origin,
        destination=destination,
        amount=parse_amount_paise(amount),
    )


def _parse_bill_input(ctx, date_str: str, service_options: tuple[str, ...]):
    try:
        bill_date = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        services = [parse_service_option(s) for s in service_options]
    except ValueError as e:
        handle_domain_error(ctx, e)

    return bill_date, services


@click.group()
def bill_group():
    """Manage bills."""
    pass


@bill_group.command("create")
@click.option("--client", required=True, help="Client name or ID")
@click.option("--date", "date_str", default="today", show_default=True, help="Bill date")
@click.option(
    "--status",
    type=click.Choice(STATUS_CHOICES),
    default="unpaid",
    show_default=True,
    help="Bill status",
)
@click.option(
    "--service",
    "service_options",
    multiple=True,
    required=True,
    help="Service as 'VEHICLE|FROM|TO|AMOUNT' (repeat for more)",
)
@click.pass_context
def create_bill(ctx, client: str, date_str: str, status: str, service_options: tuple[str, ...]):
    """Create a bill.

    The bill amount is the sum of its service amounts.

    Examples:
        billit bill create --client "Acme" --service "MH12AB1234|Pune|Mumbai|4500"
        billit bill create --client 2 --date 2024-03-01 \\
            --service "TRUCK-7|Nashik|Pune|3000" --service "TRUCK-7|Pune|Nashik|2800"
    """
    db = ctx.obj["db"]
    bill_service = BillService(db)
    client_id = resolve_client_or_exit(ctx, ClientService(db), client)
    bill_date, services = _parse_bill_input(ctx, date_str, service_options)

    try:
        bill_id = bill_service.create_bill(
            client_id=client_id, date=bill_date, services=services, status=status
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    bill = bill_service.require_bill(bill_id)
    click.echo(
        f"Created bill #{bill.id} for '{bill.client_name}' of {format_currency(bill.amount)}"
    )


@bill_group.command("list")
@click.option("--search", default="", help="Match bill number or client name")
@click.option(
    "--status",
    type=click.Choice(["all"] + STATUS_CHOICES),
    default="all",
    show_default=True,
    help="Filter by status",
)
@click.option("--start-date", help="Start date (YYYY-MM-DD or 'today', 'yesterday')")
@click.option("--end-date", help="End date (YYYY-MM-DD or 'today', 'yesterday')")
@period_option
@as_of_option
@click.pass_context
def list_bills(
    ctx,
    search: str,
    status: str,
    start_date: str | None,
    end_date: str | None,
    period: str | None,
    as_of: str,
):
    """List bills, newest first.

    Examples:
        billit bill list --period this-month
        billit bill list --status overdue --as-of 2024-03-31 --period last-year
    """
    service = BillService(ctx.obj["db"])
    today = resolve_as_of(ctx, as_of)

    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period=period, today=today
    )

    bills = service.search_bills(
        search_text=search, status_filter=status, start_date=start, end_date=end
    )
    if not bills:
        click.echo("No bills found.")
        return

    click.echo(f"\nAll Bills ({len(bills)}):")
    echo_bill_table(bills, today=today)


@bill_group.command("show")
@click.argument("bill_id", type=int)
@click.pass_context
def show_bill(ctx, bill_id: int):
    """Show a bill with its services."""
    service = BillService(ctx.obj["db"])

    try:
        bill = service.require_bill(bill_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"\nBill #{bill.id}")
    click.echo(f"  Client: {bill.client_name} (ID: {bill.client_id})")
    click.echo(f"  Date: {bill.date}")
    click.echo(f"  Status: {bill.status.value}")
    click.echo("  Services:")
    for index, s in enumerate(bill.services, start=1):
        click.echo(
            f"    {index}. {s.vehicle:<15} {s.origin} -> {s.destination:<20} "
            f"{format_currency(s.amount):>14}"
        )
    click.echo(f"  Total: {format_currency(bill.amount)}")


@bill_group.command("update")
@click.argument("bill_id", type=int)
@click.option("--client", required=True, help="Client name or ID")
@click.option("--date", "date_str", required=True, help="Bill date")
@click.option("--status", type=click.Choice(STATUS_CHOICES), required=True, help="Bill status")
@click.option(
    "--service",
    "service_options",
    multiple=True,
    required=True,
    help="Service as 'VEHICLE|FROM|TO|AMOUNT' (repeat for more)",
)
@click.pass_context
def update_bill(
    ctx, bill_id: int, client: str, date_str: str, status: str, service_options: tuple[str, ...]
):
    """Overwrite a bill.

    All services are replaced by the ones given and the amount is
    recomputed from them.

    Examples:
        billit bill update 4 --client "Acme" --date 2024-03-01 --status unpaid \\
            --service "MH12AB1234|Pune|Mumbai|5000"
    """
    db = ctx.obj["db"]
    bill_service = BillService(db)
    client_id = resolve_client_or_exit(ctx, ClientService(db), client)
    bill_date, services = _parse_bill_input(ctx, date_str, service_options)

    try:
        bill_service.update_bill(
            bill_id=bill_id,
            client_id=client_id,
            date=bill_date,
            services=services,
            status=status,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    bill = bill_service.require_bill(bill_id)
    click.echo(f"Updated bill #{bill.id}: {format_currency(bill.amount)}")


@bill_group.command("delete")
@click.argument("bill_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_bill(ctx, bill_id: int, yes: bool):
    """Delete a bill.

    Bills with recorded payments cannot be deleted.
    """
    service = BillService(ctx.obj["db"])

    if not yes and not click.confirm(f"Are you sure you want to delete bill #{bill_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_bill(bill_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Deleted bill #{bill_id}")


@bill_group.command("mark-overdue")
@as_of_option
@click.pass_context
def mark_overdue(ctx, as_of: str):
    """Set unpaid bills dated before the reference date to overdue."""
    service = BillService(ctx.obj["db"])
    as_of_date = resolve_as_of(ctx, as_of)

    changed = service.mark_overdue(as_of_date)
    if not changed:
        click.echo("No bills to mark overdue.")
        return

    click.echo(
        f"Marked {len(changed)} bill(s) overdue: {', '.join(f'#{i}' for i in changed)}"
    )


def register_commands(cli):
    """Register bill commands with main CLI."""
    cli.add_command(bill_group, name="bill")
