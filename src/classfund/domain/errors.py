"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class InvalidAmount(ValidationError):
    """Amount is negative, zero where a payment is required, or not finite."""


class EvidenceRequired(ValidationError):
    """Member deposit submitted without payment evidence."""


class PeriodRequired(ValidationError):
    """Approval attempted without a primary period."""


class PeriodClosed(ValidationError):
    """Approval targets a billing period that no longer accepts payments."""


class PaymentsClosed(ValidationError):
    """Classroom is not accepting member submissions."""


class InvalidState(ConflictError):
    """Review attempted on an entry that already left the pending state."""


class FingerprintAlreadyClaimed(ConflictError):
    """Evidence fingerprint is already reserved by another entry."""

    def __init__(self, fingerprint: str, owner_label: Optional[str]):
        super().__init__(evidence_already_used(owner_label))
        self.fingerprint = fingerprint
        self.owner_label = owner_label


class DuplicateEvidence(ConflictError):
    """Submission reuses evidence that was already counted."""

    def __init__(self, fingerprint: str, owner_label: Optional[str]):
        super().__init__(evidence_already_used(owner_label))
        self.fingerprint = fingerprint
        self.owner_label = owner_label


def entry_not_found(entry_id: int) -> str:
    """Return message for missing ledger entry."""
    return f"Entry {entry_id} not found"


def period_not_found(name: str) -> str:
    """Return message for missing billing period."""
    return f"Period '{name}' not found"


def duplicate_period(name: str) -> str:
    """Return message for a period name that already exists."""
    return f"Period '{name}' already exists"


def period_closed(name: str) -> str:
    """Return message for a closed billing period."""
    return f"Period '{name}' is closed"


def entry_not_pending(entry_id: int, status: str) -> str:
    """Return message for a review on a settled entry."""
    return f"Entry {entry_id} is {status.lower()}; only pending entries can be reviewed"


def evidence_already_used(owner_label: Optional[str]) -> str:
    """Return message for reused payment evidence."""
    if owner_label:
        return f"This payment evidence was already submitted by {owner_label}"
    return "This payment evidence was already submitted"


def invalid_amount(value: object) -> str:
    """Return message for an unusable amount."""
    return f"Invalid amount '{value}': must be a finite, non-negative number"
