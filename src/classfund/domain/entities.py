"""Domain model entities for classfund.

These are pure data classes representing ledger concepts, independent of
database schema. Services exchange these objects; the database layer maps
its rows onto them.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


# Period placeholder carried by member submissions until an administrator
# classifies them during review.
PENDING_CLASSIFICATION = "Pending classification"


class Direction(str, Enum):
    """Money movement direction."""

    DEPOSIT = "DEPOSIT"
    EXPENSE = "EXPENSE"


class EntryStatus(str, Enum):
    """Ledger entry lifecycle status."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

    @property
    def is_terminal(self) -> bool:
        return self is not EntryStatus.PENDING


class ReviewDecision(str, Enum):
    """Outcome chosen by a reviewer for a pending entry."""

    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class BalanceMode(str, Enum):
    """Aggregation semantics for balance queries."""

    NET = "NET"
    INCOME_ONLY = "INCOME_ONLY"
    EXPENSE_ONLY = "EXPENSE_ONLY"


@dataclass(frozen=True)
class LedgerEntry:
    """One money movement attributed to a member (or the whole classroom)."""

    id: int
    owner_id: Optional[str]
    owner_label: str
    direction: Direction
    amount: Decimal
    period: Optional[str]
    note: Optional[str]
    status: EntryStatus
    evidence_ref: Optional[str]
    evidence_fingerprint: Optional[str]
    reviewer_label: Optional[str]
    created_at: datetime

    @property
    def is_general(self) -> bool:
        """True for shared classroom entries not attributed to a member."""
        return self.owner_id is None


@dataclass(frozen=True)
class EvidenceClaim:
    """Reservation of an evidence fingerprint by the entry that first used it."""

    fingerprint: str
    entry_id: int
    owner_label: str
    claimed_at: datetime


@dataclass(frozen=True)
class Period:
    """Named billing period with an optional canonical price."""

    id: int
    name: str
    amount: Optional[Decimal]
    position: int
    is_closed: bool
    created_at: datetime


@dataclass(frozen=True)
class ClassroomSettings:
    """Classroom-wide fee configuration."""

    name: str
    monthly_fee: Decimal
    is_payment_active: bool


@dataclass(frozen=True)
class Member:
    """Member directory record supplied by the identity collaborator."""

    id: str
    label: str


@dataclass(frozen=True)
class SplitAllocation:
    """Second ledger entry to create when a review splits a payment."""

    period: str
    amount: Decimal
    note: Optional[str]


@dataclass(frozen=True)
class ReviewResult:
    """Entries produced by a single review decision."""

    primary: LedgerEntry
    secondary: Optional[LedgerEntry] = None

    @property
    def entries(self) -> tuple[LedgerEntry, ...]:
        if self.secondary is None:
            return (self.primary,)
        return (self.primary, self.secondary)


@dataclass(frozen=True)
class ReviewDefaults:
    """Pre-filled review form values suggested to a reviewer."""

    primary_period: Optional[str]
    primary_amount: Optional[Decimal]
    secondary_period: Optional[str] = None
    secondary_amount: Optional[Decimal] = None


@dataclass(frozen=True)
class ClassroomStatistics:
    """Headline figures for the classroom dashboard."""

    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    pending_count: int
    approval_rate: Decimal


@dataclass(frozen=True)
class MemberTotal:
    """Aggregated amount for one member."""

    member: Member
    amount: Decimal
    count: int


@dataclass(frozen=True)
class PeriodMatrixRow:
    """Approved deposit totals of one member, keyed by period name."""

    member: Member
    amounts: dict[str, Decimal]
    total: Decimal


@dataclass(frozen=True)
class PeriodMatrix:
    """Member by period collection grid."""

    periods: tuple[str, ...]
    rows: tuple[PeriodMatrixRow, ...]
    period_totals: dict[str, Decimal]
    grand_total: Decimal
