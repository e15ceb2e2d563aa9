"""Classroom settings commands."""

import click
from classfund.cli.display import format_amount
from classfund.cli.error_handling import handle_domain_error
from classfund.domain.classroom import ClassroomService
from classfund.domain.errors import DomainError
from classfund.utils.amount_parser import parse_amount


def _echo_settings(settings):
    click.echo(f"Classroom: {settings.name}")
    click.echo(f"  Monthly fee: {format_amount(settings.monthly_fee)}")
    click.echo(f"  Accepting payments: {'yes' if settings.is_payment_active else 'no'}")


@click.group("settings")
def settings_group():
    """View and change classroom settings."""
    pass


@settings_group.command("show")
@click.pass_context
def show_settings(ctx):
    """Show classroom settings."""
    _echo_settings(ClassroomService(ctx.obj["db"]).get_settings())


@settings_group.command("set")
@click.option("--name", help="Classroom name")
@click.option("--monthly-fee", help="Default fee for periods without a price")
@click.option("--payments/--no-payments", "payments", default=None, help="Accept member submissions")
@click.pass_context
def set_settings(ctx, name: str | None, monthly_fee: str | None, payments: bool | None):
    """Update classroom settings."""
    if name is None and monthly_fee is None and payments is None:
        click.echo("Error: Nothing to update.", err=True)
        ctx.exit(1)

    fee = None
    if monthly_fee is not None:
        try:
            fee = parse_amount(monthly_fee)
        except ValueError as e:
            click.echo(f"Error: Invalid monthly fee: {e}", err=True)
            ctx.exit(1)

    service = ClassroomService(ctx.obj["db"])
    try:
        settings = service.update_settings(name=name, monthly_fee=fee, is_payment_active=payments)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo("Updated settings.")
    _echo_settings(settings)


def register_commands(cli):
    """Register settings commands with main CLI."""
    cli.add_command(settings_group)
