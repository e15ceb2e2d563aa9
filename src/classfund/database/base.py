"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from classfund.domain.entities import (
    ClassroomSettings,
    Direction,
    EntryStatus,
    EvidenceClaim,
    LedgerEntry,
    Period,
    SplitAllocation,
)


class Database(ABC):
    """Abstract database interface for classfund."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Ledger entry operations
    @abstractmethod
    def create_entry(
        self,
        direction: Direction,
        owner_id: Optional[str],
        owner_label: str,
        amount: Decimal,
        status: EntryStatus,
        period: Optional[str] = None,
        note: Optional[str] = None,
        evidence_ref: Optional[str] = None,
        evidence_fingerprint: Optional[str] = None,
        reviewer_label: Optional[str] = None,
    ) -> int:
        """Create a ledger entry. Returns entry ID.

        When a fingerprint is given it is claimed in the same transaction as
        the insert, so either both are stored or neither is.

        Raises:
            FingerprintAlreadyClaimed: If the fingerprint is already claimed
        """
        pass

    @abstractmethod
    def get_entry(self, entry_id: int) -> Optional[LedgerEntry]:
        """Get ledger entry by ID."""
        pass

    @abstractmethod
    def find_pending(self, entry_id: int) -> Optional[LedgerEntry]:
        """Get ledger entry by ID only if it is still pending."""
        pass

    @abstractmethod
    def settle_entry(
        self,
        entry_id: int,
        status: EntryStatus,
        reviewer_label: str,
        period: Optional[str] = None,
        amount: Optional[Decimal] = None,
        split: Optional[SplitAllocation] = None,
    ) -> tuple[LedgerEntry, Optional[LedgerEntry]]:
        """Move a pending entry to a terminal status.

        The update only applies while the stored status is still pending. When
        ``split`` is given, a second approved entry is created in the same
        transaction, copying owner, direction and evidence reference from the
        settled entry but never its fingerprint.

        Returns:
            Tuple of (settled entry, split entry or None)

        Raises:
            NotFoundError: If the entry does not exist
            InvalidState: If the entry is no longer pending
        """
        pass

    @abstractmethod
    def list_entries(
        self,
        status: Optional[EntryStatus] = None,
        owner_id: Optional[str] = None,
        period: Optional[str] = None,
        direction: Optional[Direction] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[LedgerEntry]:
        """List ledger entries, newest first, with optional filters.

        Args:
            status: Optional status filter
            owner_id: Optional owner filter
            period: Optional period name filter
            direction: Optional direction filter
            start_date: Optional inclusive lower bound on creation date
            end_date: Optional inclusive upper bound on creation date
        """
        pass

    @abstractmethod
    def list_approved(
        self, owner_id: Optional[str] = None, period: Optional[str] = None
    ) -> list[LedgerEntry]:
        """List approved ledger entries, optionally filtered by owner or period."""
        pass

    # Evidence claim operations
    @abstractmethod
    def get_evidence_claim(self, fingerprint: str) -> Optional[EvidenceClaim]:
        """Get the claim holding a fingerprint, if any."""
        pass

    @abstractmethod
    def claim_evidence(self, fingerprint: str, entry_id: int, owner_label: str) -> None:
        """Reserve a fingerprint for an entry.

        Raises:
            FingerprintAlreadyClaimed: If the fingerprint is already claimed
        """
        pass

    # Period operations
    @abstractmethod
    def create_period(self, name: str, amount: Optional[Decimal] = None) -> int:
        """Create a billing period at the end of the catalog. Returns period ID."""
        pass

    @abstractmethod
    def get_period_by_name(self, name: str) -> Optional[Period]:
        """Get billing period by name."""
        pass

    @abstractmethod
    def list_periods(self, include_closed: bool = True) -> list[Period]:
        """List billing periods in catalog order."""
        pass

    @abstractmethod
    def update_period_amount(self, name: str, amount: Optional[Decimal]) -> None:
        """Set or clear the canonical price of a period."""
        pass

    @abstractmethod
    def set_period_closed(self, name: str, is_closed: bool) -> None:
        """Close or reopen a period."""
        pass

    @abstractmethod
    def delete_period(self, name: str) -> None:
        """Remove a period from the catalog."""
        pass

    # Classroom settings operations
    @abstractmethod
    def get_classroom_settings(self) -> ClassroomSettings:
        """Get classroom settings, creating defaults on first access."""
        pass

    @abstractmethod
    def update_classroom_settings(
        self,
        name: Optional[str] = None,
        monthly_fee: Optional[Decimal] = None,
        is_payment_active: Optional[bool] = None,
    ) -> None:
        """Update the provided classroom settings fields."""
        pass
