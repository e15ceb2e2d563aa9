"""Tests for amount parsing."""

import pytest
from decimal import Decimal

from classfund.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "text,expected",
    [
        ("100", Decimal("100")),
        ("123.45", Decimal("123.45")),
        ("1,234.56", Decimal("1234.56")),
        ("฿60", Decimal("60")),
        ("$12.50", Decimal("12.50")),
        ("350 THB", Decimal("350")),
        ("20 baht", Decimal("20")),
        ("  40  ", Decimal("40")),
    ],
)
def test_parse_amount(text, expected):
    """Test supported amount formats."""
    assert parse_amount(text) == expected


def test_sign_is_preserved():
    """Test that negative input parses so the domain can reject it."""
    assert parse_amount("-5") == Decimal("-5")


@pytest.mark.parametrize("text", ["", "   ", "abc", "1.2.3", "NaN", "Infinity"])
def test_invalid_amount(text):
    """Test that unparseable input raises ValueError."""
    with pytest.raises(ValueError):
        parse_amount(text)
