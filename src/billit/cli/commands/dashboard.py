"""Dashboard command."""

import click
from billit.cli.date_filters import as_of_option, resolve_as_of
from billit.cli.display import echo_bill_table, echo_stat
from billit.domain.report import ReportService
from billit.utils.amount_parser import format_currency


@click.command("dashboard")
@as_of_option
@click.pass_context
def dashboard(ctx, as_of: str):
    """Show an overview of bills, clients and revenue."""
    reference = resolve_as_of(ctx, as_of)

    summary = ReportService(ctx.obj["db"]).dashboard(reference)

    click.echo("\nDashboard:")
    click.echo("-" * 80)
    echo_stat("Total Bills", summary.total_bills)
    echo_stat("Paid Bills", summary.paid_bills)
    echo_stat("Unpaid Bills", summary.unpaid_bills)
    echo_stat("Total Clients", summary.total_clients)
    click.echo("-" * 80)
    echo_stat("Monthly Revenue", format_currency(summary.monthly_revenue))
    echo_stat(
        f"Overdue Amount ({summary.overdue_bills} overdue bills)",
        format_currency(summary.overdue_amount),
    )

    if summary.recent_bills:
        click.echo("\nRecent Bills:")
        echo_bill_table(summary.recent_bills)


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
