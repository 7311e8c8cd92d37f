"""Dashboard and available-dates commands."""

import click

from ridetrack.cli.error_handling import handle_domain_error
from ridetrack.cli.options import (
    CATEGORY_CHOICES,
    PLATFORM_CHOICES,
    format_money,
    parse_date_option,
)
from ridetrack.domain.dashboard import available_dates
from ridetrack.domain.earning import EarningService
from ridetrack.domain.entities import ExpenseCategory, Platform, RecordFilter
from ridetrack.domain.expense import ExpenseService
from ridetrack.domain.statistics import StatisticsService


@click.command("dashboard")
@click.option("--date", help="Only count records on this date")
@click.option("--platform", type=PLATFORM_CHOICES, help="Only count earnings from this platform")
@click.option("--category", type=CATEGORY_CHOICES, help="Only count expenses in this category")
@click.option("--driver", help="Only count earnings by this driver")
@click.pass_context
def dashboard(
    ctx,
    date: str | None,
    platform: str | None,
    category: str | None,
    driver: str | None,
):
    """Show earned, spent and net income."""
    service = StatisticsService(ctx.obj["db"])
    record_filter = RecordFilter(
        date=parse_date_option(ctx, date),
        platform=Platform(platform) if platform else None,
        category=ExpenseCategory(category) if category else None,
        driver=driver,
    )
    totals = service.get_dashboard(record_filter)

    click.echo("\nDashboard")
    click.echo("-" * 50)
    click.echo(f"{'Net income':<30} {format_money(totals.net_income):>19}")
    click.echo("-" * 50)
    click.echo(f"{'Earned':<30} {format_money(totals.total_earned):>19}")
    click.echo(f"{'Spent':<30} {format_money(totals.total_spent):>19}")
    click.echo(f"{'Trips':<30} {totals.trip_count:>19}")
    click.echo(f"{'Expenses':<30} {totals.expense_count:>19}")


@click.command("dates")
@click.pass_context
def list_dates(ctx):
    """List dates that have records, newest first."""
    db = ctx.obj["db"]
    earnings = EarningService(db).list_earnings()
    expenses = ExpenseService(db).list_expenses()
    try:
        dates = available_dates(earnings, expenses)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not dates:
        click.echo("No records found.")
        return
    for d in dates:
        click.echo(d)


def register_commands(cli):
    """Register dashboard commands with main CLI."""
    cli.add_command(dashboard)
    cli.add_command(list_dates)
