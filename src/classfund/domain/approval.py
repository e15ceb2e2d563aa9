"""Approval state machine for ledger entries.

Entries move ``PENDING -> APPROVED`` or ``PENDING -> REJECTED``; both targets
are terminal. An approval may split one submission into two entries tagged to
different billing periods. Every check runs before the first write, so a
failed call leaves the entry untouched.
"""

import logging
from decimal import Decimal
from typing import Optional

from classfund.database.base import Database
from classfund.domain.audit import (
    APPROVE_TRANSACTION,
    CREATE_TRANSACTION,
    REJECT_TRANSACTION,
    record_audit,
)
from classfund.domain.entities import (
    PENDING_CLASSIFICATION,
    Direction,
    EntryStatus,
    ReviewDecision,
    ReviewResult,
    SplitAllocation,
)
from classfund.domain.errors import (
    DuplicateEvidence,
    EvidenceRequired,
    FingerprintAlreadyClaimed,
    InvalidAmount,
    InvalidState,
    NotFoundError,
    PeriodClosed,
    PeriodRequired,
    ValidationError,
    entry_not_found,
    entry_not_pending,
    period_closed,
    period_not_found,
)
from classfund.domain.fingerprints import normalize_fingerprint
from classfund.domain.money import AmountLike, Money, positive_money
from classfund.domain.periods import PeriodCatalog

logger = logging.getLogger(__name__)

MAX_NOTE_LENGTH = 500
SUPPLEMENTARY_SUFFIX = "(supplementary)"


def supplementary_note(note: Optional[str], entry_id: int) -> str:
    """Note for the second entry of a split."""
    if note:
        return f"{note} {SUPPLEMENTARY_SUFFIX}"
    return f"Supplementary portion of entry {entry_id}"


def _clean_label(value: Optional[str], field_name: str) -> str:
    value = value.strip() if value else ""
    if not value:
        raise ValidationError(f"{field_name} is required")
    return value


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    value = value.strip() if value else ""
    return value or None


class ApprovalStateMachine:
    """Creates ledger entries and drives them through review."""

    def __init__(self, db: Database, catalog: Optional[PeriodCatalog] = None):
        """Initialize the state machine.

        Args:
            db: Database instance
            catalog: Optional period catalog; when given, approved periods must
                exist in it and be open
        """
        self.db = db
        self.catalog = catalog

    def submit(
        self,
        direction: Direction,
        owner_id: Optional[str],
        owner_label: str,
        amount: AmountLike,
        note: Optional[str] = None,
        evidence_fingerprint: Optional[str] = None,
        is_administrator_submission: bool = False,
        period: Optional[str] = None,
        evidence_ref: Optional[str] = None,
        submitted_by: Optional[str] = None,
    ) -> int:
        """Record a new money movement.

        Administrator submissions are authoritative and stored approved.
        Member submissions are stored pending with a placeholder period and
        must carry evidence when they claim a deposit.

        Args:
            direction: Deposit or expense
            owner_id: Member ID, or None for a general classroom entry
            owner_label: Member display name at submission time
            amount: Positive amount
            note: Optional memo (at most 500 characters)
            evidence_fingerprint: Content hash of the payment evidence
            is_administrator_submission: True when an administrator authors the entry
            period: Billing period for administrator entries
            evidence_ref: Reference to the stored evidence media
            submitted_by: Administrator name recorded as reviewer

        Returns:
            Entry ID

        Raises:
            InvalidAmount: If amount is not a positive finite number
            EvidenceRequired: If a member deposit has no fingerprint
            DuplicateEvidence: If the fingerprint was already used
            ValidationError: If labels or note are unusable
        """
        try:
            direction = Direction(direction)
        except ValueError:
            raise ValidationError(f"Unknown direction '{direction}'")
        owner_label = _clean_label(owner_label, "Owner label")
        if note is not None and len(note) > MAX_NOTE_LENGTH:
            raise ValidationError(f"Note must be at most {MAX_NOTE_LENGTH} characters")
        money = positive_money(amount)
        fingerprint = normalize_fingerprint(evidence_fingerprint)

        if is_administrator_submission:
            status = EntryStatus.APPROVED
            period = _blank_to_none(period)
            if period is not None:
                self._check_period_open(period)
            reviewer_label = _blank_to_none(submitted_by)
        else:
            if direction is Direction.DEPOSIT and fingerprint is None:
                raise EvidenceRequired("Payment evidence is required for member deposits")
            status = EntryStatus.PENDING
            period = PENDING_CLASSIFICATION
            reviewer_label = None

        try:
            entry_id = self.db.create_entry(
                direction=direction,
                owner_id=owner_id,
                owner_label=owner_label,
                amount=money.amount,
                status=status,
                period=period,
                note=note,
                evidence_ref=evidence_ref,
                evidence_fingerprint=fingerprint,
                reviewer_label=reviewer_label,
            )
        except FingerprintAlreadyClaimed as exc:
            raise DuplicateEvidence(exc.fingerprint, exc.owner_label) from exc

        entry = self.db.get_entry(entry_id)
        logger.info("Created %s entry %s for %s", status.value.lower(), entry_id, owner_label)
        record_audit(CREATE_TRANSACTION, submitted_by or owner_label, entry)
        return entry_id

    def review(
        self,
        entry_id: int,
        decision: ReviewDecision,
        reviewer_label: str,
        primary_period: Optional[str] = None,
        primary_amount: Optional[AmountLike] = None,
        secondary_period: Optional[str] = None,
        secondary_amount: Optional[AmountLike] = None,
    ) -> ReviewResult:
        """Settle a pending entry.

        Rejection only records status and reviewer; the evidence stays
        claimed. Approval rewrites the entry's period and amount and, when a
        secondary period with a positive amount is given, creates a second
        approved entry without a fingerprint.

        Args:
            entry_id: Pending entry ID
            decision: Approve or reject
            reviewer_label: Reviewer display name
            primary_period: Period for the original entry (approval only)
            primary_amount: Amount for the original entry (approval only)
            secondary_period: Optional period for the split entry
            secondary_amount: Optional amount for the split entry

        Returns:
            ReviewResult with the settled entry and the split entry, if any

        Raises:
            NotFoundError: If the entry doesn't exist
            InvalidState: If the entry is not pending
            PeriodRequired: If approving without a primary period
            InvalidAmount: If amounts are negative, non-finite or sum to zero
        """
        try:
            decision = ReviewDecision(decision)
        except ValueError:
            raise ValidationError(f"Unknown review decision '{decision}'")
        reviewer_label = _clean_label(reviewer_label, "Reviewer label")

        entry = self.db.get_entry(entry_id)
        if entry is None:
            raise NotFoundError(entry_not_found(entry_id))
        if entry.status.is_terminal:
            raise InvalidState(entry_not_pending(entry_id, entry.status.value))

        if decision is ReviewDecision.REJECTED:
            primary, _ = self.db.settle_entry(
                entry_id, status=EntryStatus.REJECTED, reviewer_label=reviewer_label
            )
            logger.info("Entry %s rejected by %s", entry_id, reviewer_label)
            record_audit(REJECT_TRANSACTION, reviewer_label, primary)
            return ReviewResult(primary=primary)

        primary_period = _blank_to_none(primary_period)
        if primary_period is None:
            raise PeriodRequired("Select a period before approving")
        if primary_amount is None:
            raise InvalidAmount("Primary amount is required for approval")

        primary_money = Money(primary_amount)
        secondary_money = Money(secondary_amount) if secondary_amount is not None else None
        total = primary_money.amount + (secondary_money.amount if secondary_money else Decimal("0"))
        if total <= 0:
            raise InvalidAmount("Approved total must be greater than 0")
        if primary_money.is_zero():
            raise InvalidAmount("Primary amount must be greater than 0")

        split = None
        secondary_period = _blank_to_none(secondary_period)
        if secondary_period is not None and secondary_money is not None and not secondary_money.is_zero():
            if secondary_period == primary_period:
                raise ValidationError("Secondary period must differ from the primary period")
            split = SplitAllocation(
                period=secondary_period,
                amount=secondary_money.amount,
                note=supplementary_note(entry.note, entry_id),
            )

        self._check_period_open(primary_period)
        if split is not None:
            self._check_period_open(split.period)

        primary, secondary = self.db.settle_entry(
            entry_id,
            status=EntryStatus.APPROVED,
            reviewer_label=reviewer_label,
            period=primary_period,
            amount=primary_money.amount,
            split=split,
        )
        logger.info(
            "Entry %s approved by %s into %s%s",
            entry_id,
            reviewer_label,
            primary_period,
            f" and {split.period} (entry {secondary.id})" if secondary is not None else "",
        )
        record_audit(APPROVE_TRANSACTION, reviewer_label, primary)
        if secondary is not None:
            record_audit(APPROVE_TRANSACTION, reviewer_label, secondary)
        return ReviewResult(primary=primary, secondary=secondary)

    def _check_period_open(self, name: str) -> None:
        """Validate a period against the catalog, when one is configured."""
        if self.catalog is None:
            return
        if name not in self.catalog:
            raise NotFoundError(period_not_found(name))
        if self.catalog.is_closed(name):
            raise PeriodClosed(period_closed(name))
