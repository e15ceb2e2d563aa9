"""Balance aggregation over ledger entries.

Pure functions: no I/O, no mutation, deterministic for a given input. Only
approved entries count toward any balance.
"""

from decimal import Decimal
from typing import Iterable, Optional

from classfund.domain.entities import BalanceMode, Direction, EntryStatus, LedgerEntry

ZERO = Decimal("0")


def balance(
    entries: Iterable[LedgerEntry],
    owner_id: Optional[str] = None,
    mode: BalanceMode = BalanceMode.NET,
) -> Decimal:
    """Fold approved entries into a single amount.

    Args:
        entries: Ledger entries in any order
        owner_id: Optional member filter; None means the classroom-wide total
        mode: NET (deposits minus expenses), INCOME_ONLY or EXPENSE_ONLY

    Returns:
        Aggregated amount; zero for an empty selection
    """
    mode = BalanceMode(mode)
    total = ZERO
    for entry in entries:
        if entry.status is not EntryStatus.APPROVED:
            continue
        if owner_id is not None and entry.owner_id != owner_id:
            continue

        is_deposit = entry.direction is Direction.DEPOSIT
        if mode is BalanceMode.NET:
            total += entry.amount if is_deposit else -entry.amount
        elif mode is BalanceMode.INCOME_ONLY:
            if is_deposit:
                total += entry.amount
        elif not is_deposit:
            total += entry.amount
    return total


def period_total(entries: Iterable[LedgerEntry], period_name: str) -> Decimal:
    """Approved income collected for one billing period."""
    return balance(
        (entry for entry in entries if entry.period == period_name),
        mode=BalanceMode.INCOME_ONLY,
    )
