"""Balance query commands."""

import click
from classfund.cli.display import format_amount
from classfund.domain.entities import BalanceMode
from classfund.domain.reconciliation import ReconciliationService

MODE_CHOICES = {
    "net": BalanceMode.NET,
    "income": BalanceMode.INCOME_ONLY,
    "expense": BalanceMode.EXPENSE_ONLY,
}


@click.command("balance")
@click.option("--owner-id", help="Only count entries of this member")
@click.option(
    "--mode",
    type=click.Choice(list(MODE_CHOICES), case_sensitive=False),
    default="net",
    show_default=True,
    help="Deposits minus expenses, deposits only, or expenses only",
)
@click.pass_context
def show_balance(ctx, owner_id: str | None, mode: str):
    """Show the balance of approved entries."""
    service = ReconciliationService(ctx.obj["db"])
    total = service.balance(owner_id=owner_id, mode=MODE_CHOICES[mode.lower()])

    scope = f"member {owner_id}" if owner_id else "classroom"
    click.echo(f"Balance ({mode.lower()}, {scope}): {format_amount(total)}")


@click.command("period-total")
@click.argument("name")
@click.pass_context
def show_period_total(ctx, name: str):
    """Show approved deposits collected for a billing period."""
    service = ReconciliationService(ctx.obj["db"])
    click.echo(f"{name}: {format_amount(service.period_total(period_name=name))}")


def register_commands(cli):
    """Register balance commands with main CLI."""
    cli.add_command(show_balance)
    cli.add_command(show_period_total)
