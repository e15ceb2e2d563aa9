"""Classroom configuration domain service."""

import logging
from decimal import Decimal
from typing import Optional

from classfund.database.base import Database
from classfund.domain.entities import ClassroomSettings, Period
from classfund.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    duplicate_period,
    period_not_found,
)
from classfund.domain.money import AmountLike, Money, positive_money
from classfund.domain.periods import PeriodCatalog

logger = logging.getLogger(__name__)


class ClassroomService:
    """Service for managing billing periods and classroom settings."""

    def __init__(self, db: Database):
        """Initialize classroom service.

        Args:
            db: Database instance
        """
        self.db = db

    def add_period(self, name: str, amount: Optional[AmountLike] = None) -> int:
        """Add a billing period to the end of the catalog.

        Args:
            name: Period name (e.g., "July", "Uniform fee")
            amount: Optional canonical price

        Returns:
            Period ID

        Raises:
            ValidationError: If the name is blank
            ConflictError: If a period with the same name exists
            InvalidAmount: If the price is not a positive amount
        """
        name = name.strip() if name else ""
        if not name:
            raise ValidationError("Period name must not be empty")
        if self.db.get_period_by_name(name) is not None:
            raise ConflictError(duplicate_period(name))

        price = positive_money(amount).amount if amount is not None else None
        period_id = self.db.create_period(name=name, amount=price)
        logger.info("Added period %r (price %s)", name, price)
        return period_id

    def get_period(self, name: str) -> Optional[Period]:
        """Get period by name.

        Returns:
            Period entity or None if not found
        """
        return self.db.get_period_by_name(name)

    def require_period(self, name: str) -> Period:
        """Get period by name or raise NotFoundError."""
        period = self.db.get_period_by_name(name)
        if period is None:
            raise NotFoundError(period_not_found(name))
        return period

    def list_periods(self, include_closed: bool = True) -> list[Period]:
        """List periods in catalog order."""
        return self.db.list_periods(include_closed=include_closed)

    def remove_period(self, name: str) -> None:
        """Remove a period from the catalog.

        Entries already tagged with the period keep their label, so historic
        period totals remain available.
        """
        self.require_period(name)
        self.db.delete_period(name)
        logger.info("Removed period %r", name)

    def set_period_price(self, name: str, amount: Optional[AmountLike]) -> None:
        """Set a period's canonical price, or clear it with None."""
        self.require_period(name)
        price = positive_money(amount).amount if amount is not None else None
        self.db.update_period_amount(name, price)

    def close_period(self, name: str) -> None:
        """Stop accepting approvals into a period."""
        self.require_period(name)
        self.db.set_period_closed(name, True)
        logger.info("Closed period %r", name)

    def reopen_period(self, name: str) -> None:
        """Accept approvals into a closed period again."""
        self.require_period(name)
        self.db.set_period_closed(name, False)
        logger.info("Reopened period %r", name)

    def get_settings(self) -> ClassroomSettings:
        """Get classroom settings."""
        return self.db.get_classroom_settings()

    def update_settings(
        self,
        name: Optional[str] = None,
        monthly_fee: Optional[AmountLike] = None,
        is_payment_active: Optional[bool] = None,
    ) -> ClassroomSettings:
        """Update classroom settings.

        Args:
            name: Optional new classroom name
            monthly_fee: Optional new default fee (zero allowed)
            is_payment_active: Optional flag controlling member submissions

        Returns:
            Updated settings
        """
        if name is not None and not name.strip():
            raise ValidationError("Classroom name must not be empty")
        fee: Optional[Decimal] = Money(monthly_fee).amount if monthly_fee is not None else None
        self.db.update_classroom_settings(
            name=name.strip() if name is not None else None,
            monthly_fee=fee,
            is_payment_active=is_payment_active,
        )
        return self.db.get_classroom_settings()

    def load_catalog(self) -> PeriodCatalog:
        """Snapshot the current period catalog."""
        settings = self.db.get_classroom_settings()
        return PeriodCatalog(
            periods=tuple(self.db.list_periods(include_closed=True)),
            monthly_fee=settings.monthly_fee,
        )
