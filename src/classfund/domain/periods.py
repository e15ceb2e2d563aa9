"""Period catalog and reviewer period-guessing helpers."""

import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from classfund.domain.entities import LedgerEntry, Period, ReviewDefaults

_WHITESPACE = re.compile(r"\s+")
_FIRST_NUMBER = re.compile(r"(\d+)")


@dataclass(frozen=True)
class PeriodCatalog:
    """Read-only snapshot of the classroom's billing periods.

    Built from classroom configuration and passed explicitly to the services
    that need it.
    """

    periods: tuple[Period, ...] = ()
    monthly_fee: Decimal = Decimal("0")
    _by_name: dict[str, Period] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_by_name", {p.name: p for p in self.periods})

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Optional[Period]:
        return self._by_name.get(name)

    def price_of(self, name: str) -> Optional[Decimal]:
        """Return the canonical price of a period, or None when it has no fixed price."""
        period = self._by_name.get(name)
        if period is None:
            return None
        return period.amount

    def all_period_names(self) -> list[str]:
        """Return every period name in catalog order."""
        return [p.name for p in self.periods]

    def open_period_names(self) -> list[str]:
        """Return names of periods still accepting payments, in catalog order."""
        return [p.name for p in self.periods if not p.is_closed]

    def is_closed(self, name: str) -> bool:
        period = self._by_name.get(name)
        return period is not None and period.is_closed

    def quick_pay_amount(self, name: str) -> Decimal:
        """Amount to pre-fill when recording a payment for a period.

        Uses the canonical price, then the first integer in the period name
        (e.g. "Uniform 350"), then the classroom monthly fee.
        """
        price = self.price_of(name)
        if price:
            return price
        match = _FIRST_NUMBER.search(name)
        if match:
            return Decimal(match.group(1))
        return self.monthly_fee


def _normalize(text: str) -> str:
    return _WHITESPACE.sub("", text).casefold()


def guess_periods_from_note(note: Optional[str], known_periods: Iterable[str]) -> list[str]:
    """Guess which periods a free-text note refers to.

    Whitespace and case are ignored on both sides before substring matching.
    This is a best-effort hint for reviewers and never authoritative.

    Args:
        note: Entry note
        known_periods: Period names in catalog order

    Returns:
        Matching period names in catalog order
    """
    if not note:
        return []
    haystack = _normalize(note)
    matches = []
    for name in known_periods:
        needle = _normalize(name)
        if needle and needle in haystack:
            matches.append(name)
    return matches


def suggest_review_defaults(entry: LedgerEntry, catalog: PeriodCatalog) -> ReviewDefaults:
    """Pre-fill review slots for a pending entry.

    A stored period that exists in the catalog wins. Otherwise the note is
    matched against the open periods: with zero or one match only the primary
    slot is filled, with two or more the first two matches fill both slots.
    """
    if entry.period and entry.period in catalog:
        periods: Sequence[str] = [entry.period]
    else:
        periods = guess_periods_from_note(entry.note, catalog.open_period_names())

    if len(periods) >= 2:
        first, second = periods[0], periods[1]
        return ReviewDefaults(
            primary_period=first,
            primary_amount=catalog.price_of(first),
            secondary_period=second,
            secondary_amount=catalog.price_of(second),
        )

    primary = periods[0] if periods else None
    price = catalog.price_of(primary) if primary else None
    return ReviewDefaults(
        primary_period=primary,
        primary_amount=price if price is not None else entry.amount,
    )
