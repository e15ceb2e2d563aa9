"""Reconciliation service: the public face of the settlement engine."""

import logging
from decimal import Decimal
from typing import Iterable, Optional

from classfund.database.base import Database
from classfund.domain import balance as aggregator
from classfund.domain.approval import ApprovalStateMachine
from classfund.domain.classroom import ClassroomService
from classfund.domain.entities import (
    BalanceMode,
    ClassroomSettings,
    Direction,
    LedgerEntry,
    ReviewDecision,
    ReviewDefaults,
    ReviewResult,
)
from classfund.domain.errors import (
    DuplicateEvidence,
    InvalidState,
    NotFoundError,
    PaymentsClosed,
    entry_not_found,
    entry_not_pending,
)
from classfund.domain.fingerprints import EvidenceFingerprintStore, normalize_fingerprint
from classfund.domain.money import AmountLike
from classfund.domain.periods import PeriodCatalog, suggest_review_defaults

logger = logging.getLogger(__name__)


class ReconciliationService:
    """Validates submissions, runs reviews and answers balance queries.

    Classroom configuration is passed in explicitly; use ``from_database`` to
    snapshot it from storage.
    """

    def __init__(
        self,
        db: Database,
        catalog: Optional[PeriodCatalog] = None,
        settings: Optional[ClassroomSettings] = None,
    ):
        """Initialize reconciliation service.

        Args:
            db: Database instance
            catalog: Period catalog used to validate approvals and suggest
                review defaults
            settings: Classroom settings; member submissions are refused when
                payments are not active
        """
        self.db = db
        self.catalog = catalog if catalog is not None else PeriodCatalog()
        self.settings = settings
        self.fingerprints = EvidenceFingerprintStore(db)
        self.state_machine = ApprovalStateMachine(db, catalog)

    @classmethod
    def from_database(cls, db: Database) -> "ReconciliationService":
        """Build a service with the catalog and settings currently stored."""
        classroom = ClassroomService(db)
        return cls(db, catalog=classroom.load_catalog(), settings=classroom.get_settings())

    def check_evidence(self, fingerprint: str) -> Optional[str]:
        """Pre-upload duplicate check.

        Returns:
            Owner label of the entry already holding the evidence, or None
        """
        return self.fingerprints.is_claimed(fingerprint)

    def submit_payment(
        self,
        direction: Direction,
        owner_id: Optional[str],
        owner_label: str,
        amount: AmountLike,
        note: Optional[str] = None,
        fingerprint: Optional[str] = None,
        is_admin: bool = False,
        period: Optional[str] = None,
        evidence_ref: Optional[str] = None,
        submitted_by: Optional[str] = None,
    ) -> int:
        """Submit a payment or expense.

        Returns:
            Entry ID

        Raises:
            PaymentsClosed: If a member submits while payments are inactive
            DuplicateEvidence: If the evidence was already used
            InvalidAmount, EvidenceRequired, ValidationError: See ApprovalStateMachine.submit
        """
        if not is_admin and self.settings is not None and not self.settings.is_payment_active:
            raise PaymentsClosed(f"{self.settings.name} is not accepting payments right now")

        normalized = normalize_fingerprint(fingerprint)
        if normalized is not None:
            claimed_by = self.fingerprints.is_claimed(normalized)
            if claimed_by is not None:
                logger.info("Submission for %s reuses evidence from %s", owner_label, claimed_by)
                raise DuplicateEvidence(normalized, claimed_by)

        return self.state_machine.submit(
            direction=direction,
            owner_id=owner_id,
            owner_label=owner_label,
            amount=amount,
            note=note,
            evidence_fingerprint=normalized,
            is_administrator_submission=is_admin,
            period=period,
            evidence_ref=evidence_ref,
            submitted_by=submitted_by,
        )

    def review_submission(
        self,
        entry_id: int,
        decision: ReviewDecision,
        reviewer_label: str,
        primary_period: Optional[str] = None,
        primary_amount: Optional[AmountLike] = None,
        secondary_period: Optional[str] = None,
        secondary_amount: Optional[AmountLike] = None,
    ) -> ReviewResult:
        """Approve (optionally splitting) or reject a pending submission."""
        return self.state_machine.review(
            entry_id,
            decision,
            reviewer_label,
            primary_period=primary_period,
            primary_amount=primary_amount,
            secondary_period=secondary_period,
            secondary_amount=secondary_amount,
        )

    def suggest_review(self, entry_id: int) -> ReviewDefaults:
        """Reviewer convenience defaults for a pending entry."""
        entry = self.db.get_entry(entry_id)
        if entry is None:
            raise NotFoundError(entry_not_found(entry_id))
        if entry.status.is_terminal:
            raise InvalidState(entry_not_pending(entry_id, entry.status.value))
        return suggest_review_defaults(entry, self.catalog)

    def balance(
        self,
        entries: Optional[Iterable[LedgerEntry]] = None,
        owner_id: Optional[str] = None,
        mode: BalanceMode = BalanceMode.NET,
    ) -> Decimal:
        """Balance over the given entries, or over stored approved entries."""
        if entries is None:
            entries = self.db.list_approved(owner_id=owner_id)
        return aggregator.balance(entries, owner_id=owner_id, mode=mode)

    def period_total(
        self, entries: Optional[Iterable[LedgerEntry]] = None, *, period_name: str
    ) -> Decimal:
        """Approved income for one period, over the given or stored entries.

        Pass ``entries=None`` to total the stored approved entries.
        """
        if entries is None:
            entries = self.db.list_approved(period=period_name)
        return aggregator.period_total(entries, period_name)
