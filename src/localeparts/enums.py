"""Enumerations for localeparts type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PartType(StrEnum):
    """Kind of a formatted part.

    StrEnum provides automatic string conversion: str(PartType.YEAR) == "year"
    """

    # Date fields
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    WEEKDAY = "weekday"

    # Money fields
    INTEGER = "integer"
    GROUP = "group"
    DECIMAL = "decimal"
    FRACTION = "fraction"
    CURRENCY = "currency"

    LITERAL = "literal"
    """Separator text between fields, carried verbatim."""


class CurrencyDisplay(StrEnum):
    """How the currency is shown when formatting money.

    StrEnum provides automatic string conversion: str(CurrencyDisplay.CODE) == "code"
    """

    CODE = "code"
    """ISO 4217 code: GBP 1.00"""

    SYMBOL = "symbol"
    """Locale symbol: £1.00"""


__all__ = [
    "CurrencyDisplay",
    "PartType",
]
