"""Expense commands."""

import click

from ridetrack.cli.error_handling import handle_domain_error
from ridetrack.cli.options import (
    CATEGORY_CHOICES,
    format_money,
    parse_amount_option,
    parse_date_option,
)
from ridetrack.domain.entities import ExpenseCategory, RecordFilter
from ridetrack.domain.expense import ExpenseService


@click.group("expense")
def expense_group():
    """Record and browse vehicle expenses."""
    pass


@expense_group.command("add")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Expense date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--category", required=True, type=CATEGORY_CHOICES, help="Expense category")
@click.option("--amount", required=True, help="Amount spent (e.g., 60.00)")
@click.option("--description", help="Expense description")
@click.pass_context
def add_expense(ctx, date: str, category: str, amount: str, description: str | None):
    """Record an expense.

    Examples:
        ridetrack expense add --category Fuel --amount 60
        ridetrack expense add --date yesterday --category Parts --amount 120 --description "Brake pads"
    """
    service = ExpenseService(ctx.obj["db"])
    expense_date = parse_date_option(ctx, date)
    expense_amount = parse_amount_option(ctx, amount)

    try:
        expense = service.create_expense(
            date=expense_date,
            category=ExpenseCategory(category),
            amount=expense_amount,
            description=description,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created expense {expense.id}")
    click.echo(f"  Date: {expense.date}")
    click.echo(f"  Category: {expense.category.value}")
    click.echo(f"  Amount: {format_money(expense.amount)}")
    if expense.description:
        click.echo(f"  Description: {expense.description}")


@expense_group.command("list")
@click.option("--date", help="Only show expenses on this date")
@click.option("--category", type=CATEGORY_CHOICES, help="Only show this category")
@click.pass_context
def list_expenses(ctx, date: str | None, category: str | None):
    """List expenses, newest first."""
    service = ExpenseService(ctx.obj["db"])
    record_filter = RecordFilter(
        date=parse_date_option(ctx, date),
        category=ExpenseCategory(category) if category else None,
    )
    expenses = service.list_expenses(record_filter)

    if not expenses:
        click.echo("No expenses found.")
        return

    click.echo(f"\nFound {len(expenses)} expense(s):")
    click.echo("-" * 90)
    click.echo(f"{'ID':<38} {'Date':<12} {'Category':<10} {'Amount':>12}  {'Description'}")
    click.echo("-" * 90)
    for e in expenses:
        click.echo(
            f"{e.id:<38} {e.date:<12} {e.category.value:<10} "
            f"{format_money(e.amount):>12}  {(e.description or '')[:30]}"
        )


@expense_group.command("delete")
@click.argument("expense_id")
@click.option("--yes", is_flag=True, help="Delete without asking for confirmation")
@click.pass_context
def delete_expense(ctx, expense_id: str, yes: bool):
    """Delete an expense by ID."""
    service = ExpenseService(ctx.obj["db"])
    try:
        expense = service.require_expense(expense_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not yes:
        click.confirm(
            f"Delete {expense.category.value} expense of {format_money(expense.amount)} "
            f"on {expense.date}?",
            abort=True,
        )

    try:
        service.delete_expense(expense_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted expense {expense_id}")


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group)
