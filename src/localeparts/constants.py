"""Shared constants for localeparts.

This module provides centralized configuration constants used across
the dates and money packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Sample values: Canonical inputs whose rendering reveals a locale's layout
- Name tables: Reference dates used to extract month and weekday names
- Parser defaults: Option sets tried when parsing without options

Python 3.13+. Zero external dependencies.
"""

from datetime import date
from decimal import Decimal

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Sample values
    "SAMPLE_DATE",
    "SAMPLE_YEAR",
    "SAMPLE_TWO_DIGIT_YEAR",
    "SAMPLE_MONTH",
    "SAMPLE_DAY",
    "SAMPLE_WEEKDAY",
    "SAMPLE_AMOUNT",
    "SAMPLE_CURRENCY",
    # Name tables
    "NAMES_YEAR",
    "FIRST_MONDAY",
    # Parser defaults
    "TWO_DIGIT_YEAR_BASE",
    "DEFAULT_FORMAT_OPTIONS",
    "DEFAULT_PARSER_OPTIONS",
    # Locale limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# SAMPLE VALUES
# ============================================================================
#
# Every field of the sample must render to a token that cannot be confused
# with any other field: the year has four identical digits, the month (11)
# never occurs inside the year or day, and the day (20) is above 12 so it is
# never read as a month.

SAMPLE_YEAR: int = 3333
SAMPLE_TWO_DIGIT_YEAR: int = 33
SAMPLE_MONTH: int = 11
SAMPLE_DAY: int = 20

# 3333-11-20 is a Friday (ISO weekday 5).
SAMPLE_WEEKDAY: int = 5
SAMPLE_DATE: date = date(SAMPLE_YEAR, SAMPLE_MONTH, SAMPLE_DAY)

# Integer digits run 1..2 so that the first and last integer digit bound the
# grouped run; the fraction is all 3s so it is recognised at any precision.
SAMPLE_AMOUNT: Decimal = Decimal("111222.3333")
SAMPLE_CURRENCY: str = "GBP"

# ============================================================================
# NAME TABLES
# ============================================================================

# Leap year; month names are taken from the first day of each month.
NAMES_YEAR: int = 2000

# 2000-01-03 is a Monday, the first of seven consecutive weekday samples.
FIRST_MONDAY: date = date(2000, 1, 3)

# ============================================================================
# PARSER DEFAULTS
# ============================================================================

# Two-digit years resolve into the 2000s.
TWO_DIGIT_YEAR_BASE: int = 2000

DEFAULT_FORMAT_OPTIONS: dict[str, str] = {
    "year": "numeric",
    "month": "long",
    "day": "numeric",
}

# Tried in order when parsing without explicit options. Mappings are option
# sets resolved through the locale; strings are explicit patterns.
DEFAULT_PARSER_OPTIONS: tuple[dict[str, str] | str, ...] = (
    {"year": "numeric", "month": "long", "day": "numeric", "weekday": "long"},
    {"year": "numeric", "month": "short", "day": "numeric", "weekday": "short"},
    {"year": "numeric", "month": "numeric", "day": "numeric"},
    {"year": "numeric", "month": "short", "day": "numeric"},
    {"year": "numeric", "month": "long", "day": "numeric"},
    "dd MMM yyyy",
)

# ============================================================================
# LOCALE LIMITS
# ============================================================================

# Parsed Babel Locale objects kept by get_babel_locale().
MAX_LOCALE_CACHE_SIZE: int = 128
