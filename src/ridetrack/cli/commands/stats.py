"""Statistics command."""

import click

from ridetrack.cli.error_handling import handle_domain_error
from ridetrack.cli.options import format_money
from ridetrack.domain.entities import Granularity, LabelLocale, StatisticsReport
from ridetrack.domain.statistics import StatisticsService


def _display_buckets(report: StatisticsReport) -> None:
    click.echo(f"\nEarnings by {report.granularity.value}:")
    click.echo("-" * 80)
    click.echo(
        f"{'Period':<8} {'From':<12} {'Earned':>14} {'Spent':>14} {'Net':>14} {'Trips':>8}"
    )
    click.echo("-" * 80)
    for bucket in report.buckets:
        click.echo(
            f"{bucket.period_label:<8} {str(bucket.period_start):<12} "
            f"{format_money(bucket.total_earnings):>14} "
            f"{format_money(bucket.total_expenses):>14} "
            f"{format_money(bucket.net):>14} {bucket.trip_count:>8}"
        )


def _display_rollups(report: StatisticsReport) -> None:
    if report.platforms:
        click.echo("\nBy platform:")
        click.echo("-" * 80)
        for group in report.platforms:
            click.echo(
                f"    {group.key.value:<20} {format_money(group.total):>14} "
                f"{group.count:>6} trips   avg {format_money(group.average)}"
            )

    if report.categories:
        click.echo("\nExpenses by category:")
        click.echo("-" * 80)
        for share in report.categories:
            click.echo(
                f"    {share.category.value:<20} {format_money(share.total):>14} "
                f"{share.percentage:>9.1f}%"
            )

    if report.drivers:
        click.echo("\nBy driver:")
        click.echo("-" * 80)
        for group in report.drivers:
            click.echo(
                f"    {group.key:<20} {format_money(group.total):>14} "
                f"{group.count:>6} trips   avg {format_money(group.average)}"
            )


@click.command("stats")
@click.option(
    "--period",
    type=click.Choice([g.value for g in Granularity], case_sensitive=False),
    default=Granularity.WEEK.value,
    show_default=True,
    help="Bucket size for the series",
)
@click.option(
    "--week-start",
    type=click.Choice(["monday", "sunday"], case_sensitive=False),
    default="monday",
    show_default=True,
    help="First day of the week for weekly buckets",
)
@click.option(
    "--locale",
    type=click.Choice([loc.value for loc in LabelLocale], case_sensitive=False),
    default=LabelLocale.ES.value,
    show_default=True,
    envvar="RIDETRACK_LOCALE",
    help="Language for month labels",
)
@click.pass_context
def stats(ctx, period: str, week_start: str, locale: str):
    """Show earnings and expenses per day, week or month, with breakdowns.

    The series always covers every record, from the earliest one through
    today. Weekly and monthly series skip periods without activity.
    """
    service = StatisticsService(ctx.obj["db"])
    try:
        report = service.build_report(
            granularity=Granularity(period.lower()),
            week_starts_on_monday=week_start.lower() == "monday",
            locale=LabelLocale(locale.lower()),
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not report.buckets:
        click.echo("No records found.")
        return

    _display_buckets(report)
    _display_rollups(report)


def register_commands(cli):
    """Register stats command with main CLI."""
    cli.add_command(stats)
