"""Utility functions for ledgerbook."""

from ledgerbook.utils.date_parser import parse_date
from ledgerbook.utils.amount_parser import parse_amount
from ledgerbook.utils.currency import format_currency

__all__ = ["parse_date", "parse_amount", "format_currency"]
