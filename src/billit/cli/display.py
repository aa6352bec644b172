"""Shared table rendering for CLI commands."""

from datetime import date
from typing import Iterable

import click

from billit.domain.entities import Bill
from billit.domain.ledger import is_past_due
from billit.utils.amount_parser import format_currency


def echo_bill_table(bills: Iterable[Bill], today: date | None = None) -> None:
    """Print bills as a compact table.

    When ``today`` is given, unpaid bills dated before it are flagged with
    ``!`` next to the date.
    """
    click.echo("-" * 90)
    click.echo(
        f"{'Bill':<8} {'Date':<12} {'Client':<30} {'Amount':>16} {'Status':>10}"
    )
    click.echo("-" * 90)

    for bill in bills:
        date_str = str(bill.date)
        if today is not None and is_past_due(bill, today):
            date_str += " !"
        client_name = bill.client_name[:30]
        click.echo(
            f"#{bill.id:<7} {date_str:<12} {client_name:<30} "
            f"{format_currency(bill.amount):>16} {bill.status.value:>10}"
        )


def echo_stat(label: str, value: str | int) -> None:
    """Print one label/value line of a summary block."""
    click.echo(f"{label:<50} {str(value):>20}")
