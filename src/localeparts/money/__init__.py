"""Locale-aware money formatting to parts and parsing back.

Public API:
    Money - Currency code and Decimal amount
    MoneyOptions - Currency strategy and explicit format string for parsing
    format_money - Format money for a locale (code or symbol display)
    format_money_to_parts - Format money into typed parts
    parse_money - Parse the first amount in a string
    parse_money_to_parts - Typed parts of the first amount in a string
    money_parser - Reusable parser for a locale and layout
    CurrencySymbols, symbol_for - Currency code and symbol tables

Python 3.13+.
"""

from .formatting import FormatToParts, format_money, format_money_to_parts
from .money import Money, MoneyFormatter, MoneyOptions
from .parsing import MoneyParser, money_parser, parse_money, parse_money_to_parts
from .symbols import CurrencySymbols, symbol_for

__all__ = [
    "CurrencySymbols",
    "FormatToParts",
    "Money",
    "MoneyFormatter",
    "MoneyOptions",
    "MoneyParser",
    "format_money",
    "format_money_to_parts",
    "money_parser",
    "parse_money",
    "parse_money_to_parts",
    "symbol_for",
]
