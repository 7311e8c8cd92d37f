"""Shared CLI option parsing helpers."""

from decimal import Decimal

import click

from ridetrack.cli.error_handling import handle_domain_error
from ridetrack.utils.amount_parser import parse_amount, validate_amount
from ridetrack.utils.date_parser import normalize_date_input

PLATFORM_CHOICES = click.Choice(["Uber", "Cabify", "Didi"], case_sensitive=False)
CATEGORY_CHOICES = click.Choice(["Fuel", "CarWash", "Parts", "Other"], case_sensitive=False)


def parse_date_option(ctx: click.Context, value: str | None) -> str | None:
    """Normalize a --date option to YYYY-MM-DD, or exit with a CLI error."""
    if value is None:
        return None
    try:
        return normalize_date_input(value)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)


def parse_amount_option(ctx: click.Context, value: str) -> Decimal:
    """Parse a non-negative, whole-cent --amount option, or exit with a CLI error."""
    try:
        amount = parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)
    try:
        return validate_amount(amount)
    except ValueError as e:
        handle_domain_error(ctx, e)


def format_money(amount: Decimal) -> str:
    """Format an amount the way all tables show it."""
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"
