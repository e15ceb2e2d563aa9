"""Tests for classroom configuration."""

import pytest
from decimal import Decimal

from classfund.domain.errors import ConflictError, InvalidAmount, NotFoundError, ValidationError


class TestPeriods:
    """Tests for billing period management."""

    def test_add_period(self, classroom_service):
        """Test adding periods keeps catalog order."""
        classroom_service.add_period("July", 60)
        classroom_service.add_period("  August  ")

        periods = classroom_service.list_periods()
        assert [p.name for p in periods] == ["July", "August"]
        assert periods[0].amount == Decimal("60")
        assert periods[1].amount is None
        assert not periods[0].is_closed

    def test_add_duplicate_period(self, classroom_service):
        """Test that period names are unique."""
        classroom_service.add_period("July")
        with pytest.raises(ConflictError):
            classroom_service.add_period("July")

    def test_add_invalid_period(self, classroom_service):
        """Test that blank names and non-positive prices are refused."""
        with pytest.raises(ValidationError):
            classroom_service.add_period("   ")
        with pytest.raises(InvalidAmount):
            classroom_service.add_period("July", 0)

    def test_set_and_clear_price(self, classroom_service, sample_periods):
        """Test changing a period's price."""
        classroom_service.set_period_price("Uniform 350", 350)
        assert classroom_service.get_period("Uniform 350").amount == Decimal("350")

        classroom_service.set_period_price("Uniform 350", None)
        assert classroom_service.get_period("Uniform 350").amount is None

    def test_close_and_reopen(self, classroom_service, sample_periods):
        """Test closing periods hides them from open listings."""
        classroom_service.close_period("July")
        assert [p.name for p in classroom_service.list_periods(include_closed=False)] == [
            "August",
            "Uniform 350",
        ]
        assert classroom_service.load_catalog().is_closed("July")

        classroom_service.reopen_period("July")
        assert not classroom_service.get_period("July").is_closed

    def test_remove_period(self, classroom_service, sample_periods):
        """Test removing a period."""
        classroom_service.remove_period("August")
        assert classroom_service.get_period("August") is None

    @pytest.mark.parametrize("operation", ["remove_period", "close_period", "reopen_period", "require_period"])
    def test_unknown_period(self, classroom_service, operation):
        """Test that operations on unknown periods fail."""
        with pytest.raises(NotFoundError):
            getattr(classroom_service, operation)("May")

    def test_load_catalog(self, classroom_service, sample_periods):
        """Test the catalog snapshot."""
        catalog = classroom_service.load_catalog()
        assert catalog.all_period_names() == sample_periods
        assert catalog.monthly_fee == Decimal("20")


class TestSettings:
    """Tests for classroom settings."""

    def test_defaults(self, classroom_service):
        """Test default settings on a fresh database."""
        settings = classroom_service.get_settings()
        assert settings.name == "Classroom fund"
        assert settings.monthly_fee == Decimal("20")
        assert settings.is_payment_active

    def test_update(self, classroom_service):
        """Test partial updates."""
        settings = classroom_service.update_settings(name="Grade 5/2", monthly_fee="30")
        assert settings.name == "Grade 5/2"
        assert settings.monthly_fee == Decimal("30")
        assert settings.is_payment_active

        settings = classroom_service.update_settings(is_payment_active=False)
        assert settings.name == "Grade 5/2"
        assert not settings.is_payment_active

    def test_zero_fee_allowed(self, classroom_service):
        """Test that the monthly fee may be zero."""
        assert classroom_service.update_settings(monthly_fee=0).monthly_fee == Decimal("0")

    def test_invalid_updates(self, classroom_service):
        """Test that blank names and negative fees are refused."""
        with pytest.raises(ValidationError):
            classroom_service.update_settings(name=" ")
        with pytest.raises(InvalidAmount):
            classroom_service.update_settings(monthly_fee=-1)
