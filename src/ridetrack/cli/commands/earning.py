"""Earning commands."""

import click

from ridetrack.cli.error_handling import handle_domain_error
from ridetrack.cli.options import (
    PLATFORM_CHOICES,
    format_money,
    parse_amount_option,
    parse_date_option,
)
from ridetrack.domain.earning import EarningService
from ridetrack.domain.entities import Platform, RecordFilter


@click.group("earning")
def earning_group():
    """Record and browse trip earnings."""
    pass


@earning_group.command("add")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Trip date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--platform", required=True, type=PLATFORM_CHOICES, help="Ride-share platform")
@click.option(
    "--driver",
    required=True,
    envvar="RIDETRACK_DRIVER",
    help="Driver name (defaults to RIDETRACK_DRIVER environment variable)",
)
@click.option("--amount", required=True, help="Amount earned (e.g., 45.50)")
@click.option("--description", help="Trip description")
@click.pass_context
def add_earning(
    ctx,
    date: str,
    platform: str,
    driver: str,
    amount: str,
    description: str | None,
):
    """Record a trip earning.

    Examples:
        ridetrack earning add --platform Uber --driver Sandro --amount 45.50
        ridetrack earning add --date 2024-01-15 --platform Didi --amount 30 --description "Airport"
    """
    service = EarningService(ctx.obj["db"])
    earning_date = parse_date_option(ctx, date)
    earning_amount = parse_amount_option(ctx, amount)

    try:
        earning = service.create_earning(
            date=earning_date,
            platform=Platform(platform),
            driver=driver,
            amount=earning_amount,
            description=description,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created earning {earning.id}")
    click.echo(f"  Date: {earning.date}")
    click.echo(f"  Platform: {earning.platform.value}")
    click.echo(f"  Driver: {earning.driver}")
    click.echo(f"  Amount: {format_money(earning.amount)}")
    if earning.description:
        click.echo(f"  Description: {earning.description}")


@earning_group.command("list")
@click.option("--date", help="Only show earnings on this date")
@click.option("--platform", type=PLATFORM_CHOICES, help="Only show this platform")
@click.option("--driver", help="Only show this driver")
@click.pass_context
def list_earnings(ctx, date: str | None, platform: str | None, driver: str | None):
    """List earnings, newest first."""
    service = EarningService(ctx.obj["db"])
    record_filter = RecordFilter(
        date=parse_date_option(ctx, date),
        platform=Platform(platform) if platform else None,
        driver=driver,
    )
    earnings = service.list_earnings(record_filter)

    if not earnings:
        click.echo("No earnings found.")
        return

    click.echo(f"\nFound {len(earnings)} earning(s):")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<38} {'Date':<12} {'Platform':<10} {'Driver':<14} {'Amount':>12}  {'Description'}"
    )
    click.echo("-" * 100)
    for e in earnings:
        click.echo(
            f"{e.id:<38} {e.date:<12} {e.platform.value:<10} {e.driver[:14]:<14} "
            f"{format_money(e.amount):>12}  {(e.description or '')[:30]}"
        )


@earning_group.command("delete")
@click.argument("earning_id")
@click.option("--yes", is_flag=True, help="Delete without asking for confirmation")
@click.pass_context
def delete_earning(ctx, earning_id: str, yes: bool):
    """Delete an earning by ID."""
    service = EarningService(ctx.obj["db"])
    try:
        earning = service.require_earning(earning_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not yes:
        click.confirm(
            f"Delete {earning.platform.value} earning of {format_money(earning.amount)} "
            f"by {earning.driver} on {earning.date}?",
            abort=True,
        )

    try:
        service.delete_earning(earning_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted earning {earning_id}")


def register_commands(cli):
    """Register earning commands with main CLI."""
    cli.add_command(earning_group)
