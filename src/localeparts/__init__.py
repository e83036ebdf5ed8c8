"""localeparts - Locale-aware dates and money as typed parts.

Formats dates and monetary amounts into ordered, typed parts (year, month,
day, weekday; integer, group, decimal, fraction, currency; literal text in
between) for any CLDR locale, and inverts that knowledge into parsers that
read formatted strings back into values. Locale data comes from Babel.

Public API:
    format_date, format_date_to_parts - Dates to strings and parts
    parse_date, parse_date_to_parts, parse_all_dates - Strings to dates
    date_parser - Reusable date parser
    months, weekdays, Months, Weekdays - Month and weekday name tables
    format_money, format_money_to_parts - Money to strings and parts
    parse_money, parse_money_to_parts, money_parser - Strings to money
    CurrencySymbols, symbol_for - Currency code and symbol tables
    clear_caches - Drop every memoized schema, matcher and table

Exceptions:
    LocalePartsError - Base exception class
    SchemaInferenceError - Sample rendering could not be segmented
    NotFoundError - Unknown month, weekday or currency name
    NoMatchError - Generated pattern did not match
    UnparseableError - No parser could read the input
    UnsupportedOptionsError - Options the locale cannot honour
    LocaleNotSupportedError - Unknown locale identifier

Submodules:
    localeparts.dates - Date formatting engines and parsers
    localeparts.money - Money formatting engine and parsers
    localeparts.diagnostics - Error codes, templates and formatters
    localeparts.core - Typed parts, pattern builder and caches
"""

from .core import TypedPart, clear_caches
from .dates import (
    DateOptions,
    Months,
    Weekdays,
    date_parser,
    format_date,
    format_date_to_parts,
    months,
    parse_all_dates,
    parse_date,
    parse_date_to_parts,
    weekdays,
)
from .dates import parse_date_to_parts as date_to_parts
from .datum import Datum, DatumLookup, prefer, unique_match
from .diagnostics import (
    LocaleNotSupportedError,
    LocalePartsError,
    NoMatchError,
    NotFoundError,
    SchemaInferenceError,
    UnparseableError,
    UnsupportedOptionsError,
)
from .enums import CurrencyDisplay, PartType
from .money import (
    CurrencySymbols,
    Money,
    MoneyOptions,
    format_money,
    format_money_to_parts,
    money_parser,
    parse_money,
    parse_money_to_parts,
    symbol_for,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localeparts")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CurrencyDisplay",
    "CurrencySymbols",
    "DateOptions",
    "Datum",
    "DatumLookup",
    "LocaleNotSupportedError",
    "LocalePartsError",
    "Money",
    "MoneyOptions",
    "Months",
    "NoMatchError",
    "NotFoundError",
    "PartType",
    "SchemaInferenceError",
    "TypedPart",
    "UnparseableError",
    "UnsupportedOptionsError",
    "Weekdays",
    "__version__",
    "clear_caches",
    "date_parser",
    "date_to_parts",
    "format_date",
    "format_date_to_parts",
    "format_money",
    "format_money_to_parts",
    "months",
    "money_parser",
    "parse_all_dates",
    "parse_date",
    "parse_date_to_parts",
    "parse_money",
    "parse_money_to_parts",
    "prefer",
    "symbol_for",
    "unique_match",
    "weekdays",
]
