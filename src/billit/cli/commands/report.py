"""Report command."""

import click
from billit.cli.date_filters import as_of_option, resolve_as_of
from billit.cli.display import echo_stat
from billit.domain.report import ReportService
from billit.utils.amount_parser import format_currency


@click.command("report")
@as_of_option
@click.option("--by-client", is_flag=True, help="Show client-wise revenue")
@click.option("--by-month", is_flag=True, help="Show monthly income summary")
@click.pass_context
def report(ctx, as_of: str, by_client: bool, by_month: bool):
    """Show revenue and bill statistics.

    Revenue counts paid bills only. "This Month" and "This Year" are the
    calendar month and year of the reference date.
    """
    reference = resolve_as_of(ctx, as_of)

    summary = ReportService(ctx.obj["db"]).report(reference)

    click.echo(f"\nReport as of {summary.reference}:")
    click.echo("-" * 80)
    echo_stat("This Month", format_currency(summary.monthly_revenue))
    echo_stat("This Year", format_currency(summary.yearly_revenue))
    echo_stat(
        f"Total Bills ({summary.paid_bills} paid, {summary.pending_bills} pending)",
        summary.total_bills,
    )
    echo_stat("Avg. Bill Value", format_currency(summary.average_bill_value))
    echo_stat("Outstanding", format_currency(summary.outstanding))
    echo_stat("Overdue", format_currency(summary.overdue_amount))

    if by_client:
        click.echo("\nClient-wise Revenue:")
        click.echo("-" * 80)
        if not summary.revenue_by_client:
            click.echo("No paid bills.")
        for row in summary.revenue_by_client:
            echo_stat(f"{row.client_name} ({row.bill_count} bills)", format_currency(row.amount))

    if by_month:
        click.echo("\nMonthly Income Summary:")
        click.echo("-" * 80)
        if not summary.revenue_by_month:
            click.echo("No paid bills.")
        for month, amount in summary.revenue_by_month.items():
            echo_stat(month, format_currency(amount))


def register_commands(cli):
    """Register report command with main CLI."""
    cli.add_command(report)
