"""Utility functions for billit."""

from billit.utils.date_parser import parse_date
from billit.utils.amount_parser import parse_amount, parse_amount_paise, format_currency

__all__ = ["parse_date", "parse_amount", "parse_amount_paise", "format_currency"]
