"""Submit payment command."""

from pathlib import Path

import click
from classfund.cli.display import format_amount
from classfund.cli.error_handling import handle_domain_error
from classfund.domain.entities import Direction
from classfund.domain.errors import DomainError
from classfund.domain.fingerprints import fingerprint_evidence
from classfund.domain.reconciliation import ReconciliationService
from classfund.utils.amount_parser import parse_amount


@click.command("submit")
@click.option(
    "--direction",
    type=click.Choice(["deposit", "expense"], case_sensitive=False),
    default="deposit",
    show_default=True,
    help="Money coming in (deposit) or going out (expense)",
)
@click.option("--owner", "owner_label", required=True, help="Member display name")
@click.option("--owner-id", help="Member ID (omit for a general classroom entry)")
@click.option("--amount", required=True, help="Amount (e.g., 100 or 1,250.00)")
@click.option("--note", help="Memo, e.g. which dues this pays for")
@click.option(
    "--evidence",
    type=click.Path(exists=True, dir_okay=False),
    help="Payment evidence file (transfer slip); its SHA-256 is used as fingerprint",
)
@click.option("--fingerprint", help="Precomputed SHA-256 fingerprint of the evidence")
@click.option("--evidence-ref", help="Reference to the stored evidence (defaults to the --evidence path)")
@click.option("--admin", "admin_name", help="Record as an approved administrator entry authored by NAME")
@click.option("--period", help="Billing period (administrator entries only)")
@click.pass_context
def submit_payment(
    ctx,
    direction: str,
    owner_label: str,
    owner_id: str | None,
    amount: str,
    note: str | None,
    evidence: str | None,
    fingerprint: str | None,
    evidence_ref: str | None,
    admin_name: str | None,
    period: str | None,
):
    """Submit a payment or expense.

    Member submissions are stored pending until an administrator reviews
    them; member deposits need payment evidence. With --admin the entry is
    recorded as approved straight away.

    Examples:
        classfund submit --owner "Alice" --owner-id u1 --amount 100 --evidence slip.jpg --note "July"
        classfund submit --owner "Class fund" --direction expense --amount 250 --admin "Teacher"
    """
    db = ctx.obj["db"]

    if evidence and fingerprint:
        click.echo("Error: Use either --evidence or --fingerprint, not both.", err=True)
        ctx.exit(1)
    if period and not admin_name:
        click.echo("Error: --period can only be set on administrator entries (--admin).", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    if evidence:
        fingerprint = fingerprint_evidence(Path(evidence).read_bytes())
        if evidence_ref is None:
            evidence_ref = str(evidence)

    service = ReconciliationService.from_database(db)
    try:
        entry_id = service.submit_payment(
            direction=Direction(direction.upper()),
            owner_id=owner_id,
            owner_label=owner_label,
            amount=txn_amount,
            note=note,
            fingerprint=fingerprint,
            is_admin=admin_name is not None,
            period=period,
            evidence_ref=evidence_ref,
            submitted_by=admin_name,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    entry = db.get_entry(entry_id)
    click.echo(f"Created entry {entry.id} ({entry.status.value.lower()})")
    click.echo(f"  Owner: {entry.owner_label}")
    click.echo(f"  {entry.direction.value.capitalize()}: {format_amount(entry.amount)}")
    click.echo(f"  Period: {entry.period or '-'}")


def register_commands(cli):
    """Register submit command with main CLI."""
    cli.add_command(submit_payment)
