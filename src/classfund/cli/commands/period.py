"""Billing period management commands."""

import click
from classfund.cli.display import format_amount
from classfund.cli.error_handling import handle_domain_error
from classfund.domain.classroom import ClassroomService
from classfund.domain.errors import DomainError
from classfund.domain.reconciliation import ReconciliationService
from classfund.utils.amount_parser import parse_amount


@click.group("period")
def period_group():
    """Manage billing periods."""
    pass


@period_group.command("add")
@click.argument("name")
@click.option("--price", help="Canonical price for the period")
@click.pass_context
def add_period(ctx, name: str, price: str | None):
    """Add a billing period (e.g., July, Uniform fee)."""
    service = ClassroomService(ctx.obj["db"])

    amount = None
    if price is not None:
        try:
            amount = parse_amount(price)
        except ValueError as e:
            click.echo(f"Error: Invalid price: {e}", err=True)
            ctx.exit(1)

    try:
        period_id = service.add_period(name, amount)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created period '{name.strip()}' (ID: {period_id})")


@period_group.command("remove")
@click.argument("name")
@click.pass_context
def remove_period(ctx, name: str):
    """Remove a period from the catalog.

    Entries already tagged with the period are kept.
    """
    service = ClassroomService(ctx.obj["db"])
    try:
        service.remove_period(name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Removed period '{name}'")


@period_group.command("price")
@click.argument("name")
@click.argument("amount", required=False)
@click.option("--clear", is_flag=True, help="Remove the canonical price")
@click.pass_context
def set_price(ctx, name: str, amount: str | None, clear: bool):
    """Set or clear the canonical price of a period."""
    if clear == (amount is not None):
        click.echo("Error: Provide either an AMOUNT or --clear.", err=True)
        ctx.exit(1)

    price = None
    if amount is not None:
        try:
            price = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid price: {e}", err=True)
            ctx.exit(1)

    service = ClassroomService(ctx.obj["db"])
    try:
        service.set_period_price(name, price)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if price is None:
        click.echo(f"Cleared price of '{name}'")
    else:
        click.echo(f"Set price of '{name}' to {format_amount(price)}")


@period_group.command("close")
@click.argument("name")
@click.pass_context
def close_period(ctx, name: str):
    """Stop accepting approvals into a period."""
    service = ClassroomService(ctx.obj["db"])
    try:
        service.close_period(name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Closed period '{name}'")


@period_group.command("reopen")
@click.argument("name")
@click.pass_context
def reopen_period(ctx, name: str):
    """Accept approvals into a closed period again."""
    service = ClassroomService(ctx.obj["db"])
    try:
        service.reopen_period(name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Reopened period '{name}'")


@period_group.command("list")
@click.option("--open-only", is_flag=True, help="Hide closed periods")
@click.pass_context
def list_periods(ctx, open_only: bool):
    """List billing periods with their collected totals."""
    db = ctx.obj["db"]
    classroom = ClassroomService(db)
    periods = classroom.list_periods(include_closed=not open_only)
    if not periods:
        click.echo("No periods found.")
        return

    catalog = classroom.load_catalog()
    reconciliation = ReconciliationService(db)
    click.echo(f"{'Period':<24} {'Price':>12} {'Due':>10} {'Collected':>12}  Status")
    click.echo("-" * 72)
    for period in periods:
        total = reconciliation.period_total(period_name=period.name)
        due = catalog.quick_pay_amount(period.name)
        status = "closed" if period.is_closed else "open"
        click.echo(
            f"{period.name[:24]:<24} {format_amount(period.amount):>12} "
            f"{format_amount(due):>10} {format_amount(total):>12}  {status}"
        )


def register_commands(cli):
    """Register period commands with main CLI."""
    cli.add_command(period_group)
