"""Reporting helpers built on the balance aggregator."""

from collections import defaultdict
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence

from classfund.domain.balance import ZERO, balance, period_total
from classfund.domain.entities import (
    BalanceMode,
    ClassroomStatistics,
    Direction,
    EntryStatus,
    LedgerEntry,
    Member,
    MemberTotal,
    PeriodMatrix,
    PeriodMatrixRow,
)


def classroom_statistics(entries: Sequence[LedgerEntry]) -> ClassroomStatistics:
    """Compute dashboard figures for the whole classroom.

    The approval rate is the share of approved entries among all entries,
    as a percentage rounded to one decimal place.
    """
    approved = sum(1 for e in entries if e.status is EntryStatus.APPROVED)
    pending = sum(1 for e in entries if e.status is EntryStatus.PENDING)
    if entries:
        rate = (Decimal(approved) * 100 / Decimal(len(entries))).quantize(
            Decimal("0.1"), rounding=ROUND_HALF_UP
        )
    else:
        rate = Decimal("0.0")

    income = balance(entries, mode=BalanceMode.INCOME_ONLY)
    expense = balance(entries, mode=BalanceMode.EXPENSE_ONLY)
    return ClassroomStatistics(
        total_income=income,
        total_expense=expense,
        balance=income - expense,
        pending_count=pending,
        approval_rate=rate,
    )


def members_from_entries(entries: Iterable[LedgerEntry]) -> list[Member]:
    """Derive a member directory from entry owners.

    Used when no external directory is supplied. The most recent label of
    each owner wins; general entries are skipped.
    """
    latest: dict[str, LedgerEntry] = {}
    for entry in entries:
        if entry.owner_id is None:
            continue
        current = latest.get(entry.owner_id)
        if current is None or (entry.created_at, entry.id) > (current.created_at, current.id):
            latest[entry.owner_id] = entry
    members = [Member(id=owner_id, label=e.owner_label) for owner_id, e in latest.items()]
    return sorted(members, key=lambda m: (m.label.casefold(), m.id))


def member_balances(
    entries: Sequence[LedgerEntry],
    members: Iterable[Member],
    mode: BalanceMode = BalanceMode.NET,
) -> list[MemberTotal]:
    """Balance of each member in directory order."""
    counts: dict[str, int] = defaultdict(int)
    for entry in entries:
        if entry.status is EntryStatus.APPROVED and entry.owner_id is not None:
            counts[entry.owner_id] += 1
    return [
        MemberTotal(member=m, amount=balance(entries, owner_id=m.id, mode=mode), count=counts[m.id])
        for m in members
    ]


def top_contributors(
    entries: Sequence[LedgerEntry],
    members: Iterable[Member],
    limit: Optional[int] = 10,
) -> list[MemberTotal]:
    """Members ranked by approved deposit total, largest first.

    Members with nothing deposited are left out.
    """
    counts: dict[str, int] = defaultdict(int)
    for entry in entries:
        if (
            entry.status is EntryStatus.APPROVED
            and entry.direction is Direction.DEPOSIT
            and entry.owner_id is not None
        ):
            counts[entry.owner_id] += 1

    totals = [
        MemberTotal(
            member=m,
            amount=balance(entries, owner_id=m.id, mode=BalanceMode.INCOME_ONLY),
            count=counts[m.id],
        )
        for m in members
    ]
    ranked = sorted(
        (t for t in totals if t.amount > 0),
        key=lambda t: (-t.amount, t.member.label.casefold()),
    )
    return ranked if limit is None else ranked[:limit]


def period_matrix(
    entries: Sequence[LedgerEntry],
    members: Iterable[Member],
    periods: Sequence[str],
) -> PeriodMatrix:
    """Approved deposits per member and period.

    Column totals cover every approved deposit tagged with the period,
    including general entries and owners missing from the directory.
    """
    rows = []
    for member in members:
        own = [e for e in entries if e.owner_id == member.id]
        amounts = {name: period_total(own, name) for name in periods}
        rows.append(PeriodMatrixRow(member=member, amounts=amounts, total=sum(amounts.values(), ZERO)))

    totals = {name: period_total(entries, name) for name in periods}
    return PeriodMatrix(
        periods=tuple(periods),
        rows=tuple(rows),
        period_totals=totals,
        grand_total=sum(totals.values(), ZERO),
    )
