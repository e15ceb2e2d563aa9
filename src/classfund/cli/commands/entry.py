"""Ledger entry viewing commands."""

import click
from classfund.cli.display import echo_entry, format_amount
from classfund.cli.error_handling import handle_domain_error
from classfund.domain.entities import Direction, EntryStatus
from classfund.domain.errors import DomainError, NotFoundError, entry_not_found
from classfund.domain.reconciliation import ReconciliationService
from classfund.utils.date_parser import parse_date


@click.group("entry")
def entry_group():
    """View ledger entries."""
    pass


@entry_group.command("list")
@click.option(
    "--status",
    type=click.Choice([s.value.lower() for s in EntryStatus], case_sensitive=False),
    help="Only entries with this status",
)
@click.option("--owner-id", help="Only entries of this member")
@click.option("--period", help="Only entries tagged with this period")
@click.option(
    "--direction",
    type=click.Choice([d.value.lower() for d in Direction], case_sensitive=False),
    help="Only deposits or only expenses",
)
@click.option("--start-date", help="Created on or after (YYYY-MM-DD or 'this month', 'yesterday', ...)")
@click.option("--end-date", help="Created on or before (YYYY-MM-DD)")
@click.pass_context
def list_entries(
    ctx,
    status: str | None,
    owner_id: str | None,
    period: str | None,
    direction: str | None,
    start_date: str | None,
    end_date: str | None,
):
    """List ledger entries, newest first."""
    db = ctx.obj["db"]

    start = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    end = None
    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    entries = db.list_entries(
        status=EntryStatus(status.upper()) if status else None,
        owner_id=owner_id,
        period=period,
        direction=Direction(direction.upper()) if direction else None,
        start_date=start,
        end_date=end,
    )

    if not entries:
        click.echo("No entries found.")
        return

    click.echo(f"\nFound {len(entries)} entr{'y' if len(entries) == 1 else 'ies'}:")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Status':<10} {'Type':<8} {'Amount':>12}  {'Owner':<20} {'Period':<24}"
    )
    click.echo("-" * 100)
    for entry in entries:
        click.echo(
            f"{entry.id:<6} {entry.created_at:%Y-%m-%d}   {entry.status.value.lower():<10} "
            f"{entry.direction.value.lower():<8} {format_amount(entry.amount):>12}  "
            f"{entry.owner_label[:20]:<20} {(entry.period or '-')[:24]:<24}"
        )


@entry_group.command("show")
@click.argument("entry_id", type=int)
@click.pass_context
def show_entry(ctx, entry_id: int):
    """Show one entry in detail."""
    db = ctx.obj["db"]
    entry = db.get_entry(entry_id)
    if entry is None:
        handle_domain_error(ctx, NotFoundError(entry_not_found(entry_id)))
    echo_entry(entry)


@entry_group.command("suggest")
@click.argument("entry_id", type=int)
@click.pass_context
def suggest_review(ctx, entry_id: int):
    """Show suggested review periods and amounts for a pending entry."""
    db = ctx.obj["db"]
    service = ReconciliationService.from_database(db)
    try:
        defaults = service.suggest_review(entry_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Suggestions for entry {entry_id}:")
    click.echo(f"  Period: {defaults.primary_period or '-'}  Amount: {format_amount(defaults.primary_amount)}")
    if defaults.secondary_period is not None:
        click.echo(
            f"  Second period: {defaults.secondary_period}  "
            f"Amount: {format_amount(defaults.secondary_amount)}"
        )


def register_commands(cli):
    """Register entry commands with main CLI."""
    cli.add_command(entry_group)
