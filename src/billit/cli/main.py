"""Main CLI entry point."""

import logging

import click
from billit.database.factories import DB_PATH_ENV_VAR, create_sqlite_database

# Import and register all commands at module level
from billit.cli.commands import (
    client,
    bill,
    payment,
    dashboard,
    report,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV_VAR} environment variable)",
    envvar=DB_PATH_ENV_VAR,
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level for diagnostic output on stderr",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Billit - Billing ledger for transport businesses.

    Keep clients, bills and payments, and see revenue, outstanding and
    overdue amounts at a glance.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
client.register_commands(cli)
bill.register_commands(cli)
payment.register_commands(cli)
dashboard.register_commands(cli)
report.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
