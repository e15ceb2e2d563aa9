"""Utility functions for classfund."""

from classfund.utils.date_parser import parse_date
from classfund.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_amount"]
