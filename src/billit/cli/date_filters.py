"""CLI helpers for reference dates and bill date ranges."""

from datetime import date

import click

from billit.utils.date_parser import PERIODS, get_date_range, parse_date


def as_of_option(func):
    """Add the ``--as-of`` reference date option."""
    return click.option(
        "--as-of",
        "as_of",
        default="today",
        show_default=True,
        help="Reference date for relative dates, periods and overdue markers",
    )(func)


def period_option(func):
    """Add the ``--period`` option for calendar ranges around the reference date."""
    return click.option(
        "--period",
        type=click.Choice(PERIODS),
        help="Limit to a calendar period relative to --as-of",
    )(func)


def _parse_or_exit(ctx: click.Context, label: str, value: str, today: date | None) -> date:
    try:
        return parse_date(value, today=today)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def resolve_as_of(ctx: click.Context, as_of: str) -> date:
    """Parse the ``--as-of`` value, or exit with a CLI error."""
    return _parse_or_exit(ctx, "date format", as_of, None)


def resolve_cli_date_range(
    ctx: click.Context,
    *,
    start_date: str | None,
    end_date: str | None,
    period: str | None,
    today: date,
) -> tuple[date | None, date | None]:
    """Turn ``--period`` or ``--start-date``/``--end-date`` into a date range.

    Relative words and periods are read against ``today``. Either bound may
    be None when not given.
    """
    if period and (start_date or end_date):
        click.echo(
            "Error: --period cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if period:
        return get_date_range(period, today=today)

    start = _parse_or_exit(ctx, "start date", start_date, today) if start_date else None
    end = _parse_or_exit(ctx, "end date", end_date, today) if end_date else None

    if start and end and start > end:
        click.echo(f"Error: Start date {start} is after end date {end}.", err=True)
        ctx.exit(1)

    return start, end
