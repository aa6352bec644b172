"""Payment commands."""

import click
from billit.cli.date_filters import as_of_option, resolve_as_of
from billit.cli.display import echo_bill_table, echo_stat
from billit.cli.error_handling import handle_domain_error
from billit.domain.bill import BillService
from billit.domain.payment import PaymentService
from billit.domain.report import ReportService
from billit.utils.amount_parser import format_currency
from billit.utils.date_parser import parse_date


@click.group()
def payment_group():
    """Record and review payments."""
    pass


@payment_group.command("record")
@click.argument("bill_id", type=int)
@click.option("--date", "date_str", default="today", show_default=True, help="Payment date")
@click.option("--mode", help="Payment mode (cash, UPI, cheque, NEFT, ...)")
@click.option("--reference", help="Transaction reference")
@click.pass_context
def record_payment(ctx, bill_id: int, date_str: str, mode: str | None, reference: str | None):
    """Mark a bill as paid.

    Records a payment for the full bill amount and sets the bill status to
    paid.

    Examples:
        billit payment record 12
        billit payment record 12 --date 2024-03-05 --mode UPI --reference 4099812
    """
    service = PaymentService(ctx.obj["db"])

    try:
        payment_date = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        payment_id = service.record_payment(
            bill_id=bill_id,
            payment_date=payment_date,
            payment_mode=mode,
            transaction_reference=reference,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    payment = service.list_payments(bill_id=bill_id)[0]
    click.echo(
        f"Recorded payment {payment_id} of {format_currency(payment.amount)}; "
        f"bill #{bill_id} marked as paid"
    )


@payment_group.command("list")
@click.option("--search", default="", help="Match bill number or client name")
@click.option(
    "--status",
    type=click.Choice(["all", "unpaid", "paid", "overdue"]),
    default="all",
    show_default=True,
    help="Filter by status",
)
@as_of_option
@click.pass_context
def list_payments(ctx, search: str, status: str, as_of: str):
    """Show payment totals and the bills they apply to.

    Unpaid bills dated before the reference date are marked with '!'.
    """
    db = ctx.obj["db"]
    today = resolve_as_of(ctx, as_of)
    summary = ReportService(db).payments()

    click.echo("\nPayments:")
    click.echo("-" * 80)
    echo_stat(f"Total Received ({summary.payment_count} payments)", format_currency(summary.total_received))
    echo_stat(f"Outstanding ({summary.outstanding_count} unpaid bills)", format_currency(summary.outstanding))
    echo_stat(f"Overdue ({summary.overdue_count} overdue bills)", format_currency(summary.overdue_amount))

    bills = BillService(db).search_bills(search_text=search, status_filter=status)
    if not bills:
        click.echo("\nNo bills found.")
        return

    click.echo(f"\nPayment Status ({len(bills)}):")
    echo_bill_table(bills, today=today)


def register_commands(cli):
    """Register payment commands with main CLI."""
    cli.add_command(payment_group, name="payment")
