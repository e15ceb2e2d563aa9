"""Review commands for pending submissions."""

from decimal import Decimal

import click
from classfund.cli.display import echo_entry, format_amount
from classfund.cli.error_handling import handle_domain_error
from classfund.domain.entities import ReviewDecision
from classfund.domain.errors import DomainError
from classfund.domain.reconciliation import ReconciliationService
from classfund.utils.amount_parser import parse_amount


def _parse_optional_amount(ctx, value: str | None, label: str) -> Decimal | None:
    if value is None:
        return None
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


@click.group("review")
def review_group():
    """Approve or reject pending submissions."""
    pass


@review_group.command("approve")
@click.argument("entry_id", type=int)
@click.option("--by", "reviewer", required=True, help="Reviewer name")
@click.option("--period", help="Primary billing period (suggested from the note if omitted)")
@click.option("--amount", help="Amount for the primary period (defaults to its price or the submitted amount)")
@click.option("--second-period", help="Second billing period to split the payment into")
@click.option("--second-amount", help="Amount for the second period (defaults to its price)")
@click.pass_context
def approve_entry(
    ctx,
    entry_id: int,
    reviewer: str,
    period: str | None,
    amount: str | None,
    second_period: str | None,
    second_amount: str | None,
):
    """Approve a pending entry, optionally splitting it across two periods.

    When --period is omitted the suggested periods (from the stored period or
    the note) are used, including a suggested second period.

    Examples:
        classfund review approve 3 --by "Teacher" --period July --amount 60 --second-period August --second-amount 40
        classfund review approve 4 --by "Teacher"
    """
    db = ctx.obj["db"]
    service = ReconciliationService.from_database(db)

    primary_amount = _parse_optional_amount(ctx, amount, "amount")
    secondary_amount = _parse_optional_amount(ctx, second_amount, "second amount")

    try:
        entry = db.get_entry(entry_id)
        if period is None:
            defaults = service.suggest_review(entry_id)
            period = defaults.primary_period
            if primary_amount is None:
                primary_amount = defaults.primary_amount
            if second_period is None and defaults.secondary_period is not None:
                second_period = defaults.secondary_period
                if secondary_amount is None:
                    secondary_amount = defaults.secondary_amount
        elif primary_amount is None and entry is not None:
            primary_amount = service.catalog.price_of(period) or entry.amount

        if second_period is not None and secondary_amount is None:
            secondary_amount = service.catalog.price_of(second_period)

        result = service.review_submission(
            entry_id,
            ReviewDecision.APPROVED,
            reviewer,
            primary_period=period,
            primary_amount=primary_amount,
            secondary_period=second_period,
            secondary_amount=secondary_amount,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Approved entry {result.primary.id}: {result.primary.period} {format_amount(result.primary.amount)}")
    if result.secondary is not None:
        click.echo(
            f"Created split entry {result.secondary.id}: "
            f"{result.secondary.period} {format_amount(result.secondary.amount)}"
        )


@review_group.command("reject")
@click.argument("entry_id", type=int)
@click.option("--by", "reviewer", required=True, help="Reviewer name")
@click.pass_context
def reject_entry(ctx, entry_id: int, reviewer: str):
    """Reject a pending entry.

    The evidence stays reserved and cannot be submitted again.
    """
    db = ctx.obj["db"]
    service = ReconciliationService.from_database(db)
    try:
        result = service.review_submission(entry_id, ReviewDecision.REJECTED, reviewer)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Rejected entry {result.primary.id}")
    echo_entry(result.primary)


def register_commands(cli):
    """Register review commands with main CLI."""
    cli.add_command(review_group)
