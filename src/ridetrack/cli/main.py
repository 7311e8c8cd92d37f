"""Main CLI entry point."""

import click

from ridetrack.database.factories import create_sqlite_database
from ridetrack.logging_config import configure_logging
from ridetrack.utils.daily_marker import check_new_day, marker_path_for

# Import and register all commands at module level
from ridetrack.cli.commands import (
    dashboard,
    earning,
    expense,
    stats,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides RIDETRACK_DB_PATH environment variable)",
    envvar="RIDETRACK_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    envvar="RIDETRACK_LOG_LEVEL",
    help="Logging level for diagnostic output on stderr",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Ridetrack - Earnings and expense tracking for ride-share drivers.

    Record trip earnings per platform and driver, record vehicle expenses,
    and see totals and period statistics.
    """
    ctx.ensure_object(dict)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        configure_logging(level=log_level)
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)

        if check_new_day(marker_path_for(db.database_path)):
            click.echo("New day! Ready to record.", err=True)


# Register all commands
earning.register_commands(cli)
expense.register_commands(cli)
dashboard.register_commands(cli)
stats.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
