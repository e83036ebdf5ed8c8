"""Locale-aware date formatting to parts and parsing back.

Public API:
    format_date - Format a date for a locale
    format_date_to_parts - Format a date into typed parts (native or emulated)
    parse_date - Parse the first date in a string
    parse_date_to_parts - Typed parts of the first date in a string
    parse_all_dates - Every date embedded in a string
    date_parser - Reusable parser for a locale and layout
    months, weekdays - Month and weekday names of a locale

Python 3.13+.
"""

from .babel_format import BabelDateFormat
from .formatting import (
    FormatToParts,
    SimpleFormat,
    format_date,
    format_date_to_parts,
    format_schema,
)
from .names import Months, Weekdays, months, weekdays
from .options import DateOptions
from .parsing import (
    CompositeDateParser,
    RegexParser,
    date_parser,
    parse_all_dates,
    parse_date,
    parse_date_to_parts,
)

__all__ = [
    "BabelDateFormat",
    "CompositeDateParser",
    "DateOptions",
    "FormatToParts",
    "Months",
    "RegexParser",
    "SimpleFormat",
    "Weekdays",
    "date_parser",
    "format_date",
    "format_date_to_parts",
    "format_schema",
    "months",
    "parse_all_dates",
    "parse_date",
    "parse_date_to_parts",
    "weekdays",
]
