"""Shared output helpers for CLI commands."""

from decimal import Decimal
from typing import Optional

import click

from classfund.domain.entities import LedgerEntry


def format_amount(amount: Optional[Decimal]) -> str:
    """Format an amount for display, or a dash when missing."""
    if amount is None:
        return "-"
    return f"{amount:,.2f}"


def echo_entry(entry: LedgerEntry, indent: str = "  ") -> None:
    """Print the details of a single ledger entry."""
    click.echo(f"Entry {entry.id} [{entry.status.value}]")
    click.echo(f"{indent}Owner: {entry.owner_label}" + (f" ({entry.owner_id})" if entry.owner_id else " (general)"))
    click.echo(f"{indent}Direction: {entry.direction.value.lower()}")
    click.echo(f"{indent}Amount: {format_amount(entry.amount)}")
    click.echo(f"{indent}Period: {entry.period or '-'}")
    if entry.note:
        click.echo(f"{indent}Note: {entry.note}")
    if entry.evidence_ref:
        click.echo(f"{indent}Evidence: {entry.evidence_ref}")
    if entry.evidence_fingerprint:
        click.echo(f"{indent}Fingerprint: {entry.evidence_fingerprint}")
    if entry.reviewer_label:
        click.echo(f"{indent}Reviewed by: {entry.reviewer_label}")
    click.echo(f"{indent}Created: {entry.created_at:%Y-%m-%d %H:%M}")
