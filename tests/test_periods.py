"""Tests for the period catalog and review suggestions."""

import pytest
from datetime import datetime, UTC
from decimal import Decimal

from classfund.domain.entities import PENDING_CLASSIFICATION, EntryStatus, Period
from classfund.domain.periods import (
    PeriodCatalog,
    guess_periods_from_note,
    suggest_review_defaults,
)


@pytest.fixture
def catalog():
    """Catalog with two priced months, an unpriced uniform fee and a closed month."""
    now = datetime.now(UTC)
    return PeriodCatalog(
        periods=(
            Period(1, "July", Decimal("60"), 0, False, now),
            Period(2, "August", Decimal("40"), 1, False, now),
            Period(3, "Uniform 350", None, 2, False, now),
            Period(4, "June", Decimal("60"), 3, True, now),
        ),
        monthly_fee=Decimal("20"),
    )


class TestPeriodCatalog:
    """Tests for PeriodCatalog lookups."""

    def test_membership_and_prices(self, catalog):
        """Test lookups by period name."""
        assert "July" in catalog
        assert "September" not in catalog
        assert catalog.price_of("July") == Decimal("60")
        assert catalog.price_of("Uniform 350") is None
        assert catalog.price_of("September") is None

    def test_open_and_closed(self, catalog):
        """Test that closed periods are excluded from open names."""
        assert catalog.all_period_names() == ["July", "August", "Uniform 350", "June"]
        assert catalog.open_period_names() == ["July", "August", "Uniform 350"]
        assert catalog.is_closed("June")
        assert not catalog.is_closed("July")
        assert not catalog.is_closed("September")

    def test_quick_pay_amount(self, catalog):
        """Test price, then number in name, then monthly fee."""
        assert catalog.quick_pay_amount("July") == Decimal("60")
        assert catalog.quick_pay_amount("Uniform 350") == Decimal("350")
        assert catalog.quick_pay_amount("Field trip") == Decimal("20")


class TestGuessPeriods:
    """Tests for note-based period guessing."""

    def test_matches_in_catalog_order(self):
        """Test that matches follow catalog order, not note order."""
        assert guess_periods_from_note("August and July", ["July", "August"]) == ["July", "August"]

    def test_ignores_whitespace_and_case(self):
        """Test that whitespace and case don't matter."""
        assert guess_periods_from_note("paid for uniform350", ["Uniform 350"]) == ["Uniform 350"]
        assert guess_periods_from_note("J U L Y", ["July"]) == ["July"]

    def test_no_note(self):
        """Test that empty notes match nothing."""
        assert guess_periods_from_note(None, ["July"]) == []
        assert guess_periods_from_note("", ["July"]) == []
        assert guess_periods_from_note("snacks", ["July"]) == []


class TestSuggestReviewDefaults:
    """Tests for reviewer defaults."""

    def test_two_matches_fill_both_slots(self, catalog, make_entry):
        """Test that two guessed periods pre-fill a split."""
        entry = make_entry(
            amount=100, status=EntryStatus.PENDING, period=PENDING_CLASSIFICATION, note="July + August"
        )
        defaults = suggest_review_defaults(entry, catalog)
        assert defaults.primary_period == "July"
        assert defaults.primary_amount == Decimal("60")
        assert defaults.secondary_period == "August"
        assert defaults.secondary_amount == Decimal("40")

    def test_single_match_uses_price(self, catalog, make_entry):
        """Test that a single guessed period uses its price."""
        entry = make_entry(amount=100, status=EntryStatus.PENDING, note="august dues")
        defaults = suggest_review_defaults(entry, catalog)
        assert defaults.primary_period == "August"
        assert defaults.primary_amount == Decimal("40")
        assert defaults.secondary_period is None

    def test_unpriced_match_uses_entry_amount(self, catalog, make_entry):
        """Test that an unpriced period falls back to the submitted amount."""
        entry = make_entry(amount=350, status=EntryStatus.PENDING, note="Uniform 350")
        defaults = suggest_review_defaults(entry, catalog)
        assert defaults.primary_period == "Uniform 350"
        assert defaults.primary_amount == Decimal("350")

    def test_no_match(self, catalog, make_entry):
        """Test that no match leaves the period empty."""
        entry = make_entry(amount=75, status=EntryStatus.PENDING, note="snacks")
        defaults = suggest_review_defaults(entry, catalog)
        assert defaults.primary_period is None
        assert defaults.primary_amount == Decimal("75")

    def test_closed_periods_are_not_guessed(self, catalog, make_entry):
        """Test that closed periods are skipped when guessing."""
        entry = make_entry(status=EntryStatus.PENDING, note="June")
        assert suggest_review_defaults(entry, catalog).primary_period is None

    def test_stored_period_wins(self, catalog, make_entry):
        """Test that a known stored period is used as is."""
        entry = make_entry(amount=100, status=EntryStatus.PENDING, period="August", note="July")
        defaults = suggest_review_defaults(entry, catalog)
        assert defaults.primary_period == "August"
        assert defaults.primary_amount == Decimal("40")
