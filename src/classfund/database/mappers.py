"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, making it easy to change when
the database schema changes. Enum-valued columns are stored as plain
strings and converted back here.
"""

from decimal import Decimal

from classfund.domain import entities as domain
from classfund.database.models import (
    LedgerEntry as ORMLedgerEntry,
    EvidenceClaim as ORMEvidenceClaim,
    Period as ORMPeriod,
    ClassroomSettings as ORMClassroomSettings,
)


def ledger_entry_to_domain(orm_entry: ORMLedgerEntry) -> domain.LedgerEntry:
    """Convert SQLAlchemy LedgerEntry model to domain LedgerEntry entity."""
    return domain.LedgerEntry(
        id=orm_entry.id,
        owner_id=orm_entry.owner_id,
        owner_label=orm_entry.owner_label,
        direction=domain.Direction(orm_entry.direction),
        amount=Decimal(orm_entry.amount),
        period=orm_entry.period,
        note=orm_entry.note,
        status=domain.EntryStatus(orm_entry.status),
        evidence_ref=orm_entry.evidence_ref,
        evidence_fingerprint=orm_entry.evidence_fingerprint,
        reviewer_label=orm_entry.reviewer_label,
        created_at=orm_entry.created_at,
    )


def evidence_claim_to_domain(orm_claim: ORMEvidenceClaim) -> domain.EvidenceClaim:
    """Convert SQLAlchemy EvidenceClaim model to domain EvidenceClaim entity."""
    return domain.EvidenceClaim(
        fingerprint=orm_claim.fingerprint,
        entry_id=orm_claim.entry_id,
        owner_label=orm_claim.owner_label,
        claimed_at=orm_claim.claimed_at,
    )


def period_to_domain(orm_period: ORMPeriod) -> domain.Period:
    """Convert SQLAlchemy Period model to domain Period entity."""
    return domain.Period(
        id=orm_period.id,
        name=orm_period.name,
        amount=Decimal(orm_period.amount) if orm_period.amount is not None else None,
        position=orm_period.position,
        is_closed=orm_period.is_closed,
        created_at=orm_period.created_at,
    )


def classroom_settings_to_domain(
    orm_settings: ORMClassroomSettings,
) -> domain.ClassroomSettings:
    """Convert SQLAlchemy ClassroomSettings model to domain ClassroomSettings entity."""
    return domain.ClassroomSettings(
        name=orm_settings.name,
        monthly_fee=Decimal(orm_settings.monthly_fee),
        is_payment_active=orm_settings.is_payment_active,
    )
