"""Month and weekday name tables.

Names are read off the formatter itself: the first day of every month is
rendered with the requested options and the span that varies between
renderings is the name; weekdays are read from the weekday field of seven
consecutive renderings. This yields exactly the form a locale uses in
context, such as the genitive "января" in Russian dates, the "ven." of
French dates or the bare numbers of Chinese dates, which a stand-alone
name list would miss.

Python 3.13+.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import date, timedelta

from babel.dates import get_day_names, get_month_names

from localeparts.constants import FIRST_MONDAY, NAMES_YEAR
from localeparts.core.cache import memoize
from localeparts.core.parts import values_of
from localeparts.datum import Datum, DatumLookup, different
from localeparts.diagnostics import UnsupportedOptionsError
from localeparts.enums import PartType
from localeparts.locale_utils import get_babel_locale, resolve_locale

from .babel_format import BabelDateFormat
from .options import DateOptions

__all__ = [
    "Months",
    "Weekdays",
    "classify",
    "month_names",
    "months",
    "weekday_names",
    "weekdays",
]

logger = logging.getLogger(__name__)

# Option sets whose in-context month names every parser accepts.
_CONTEXT_MONTH_OPTIONS: tuple[DateOptions, ...] = (
    DateOptions(year="numeric", month="long", day="numeric"),
    DateOptions(year="numeric", month="short", day="numeric"),
)

# Option sets whose in-context weekday names every parser accepts.
_CONTEXT_WEEKDAY_OPTIONS: tuple[DateOptions, ...] = (
    DateOptions(weekday="long"),
    DateOptions(weekday="short"),
    DateOptions(year="numeric", month="long", day="numeric", weekday="long"),
    DateOptions(year="numeric", month="short", day="numeric", weekday="short"),
)

# CLDR name widths and contexts merged into the parser tables.
_NAME_WIDTHS: tuple[str, ...] = ("wide", "abbreviated")
_NAME_CONTEXTS: tuple[str, ...] = ("format", "stand-alone")


def _render(locale_code: str, options: DateOptions, values: Iterable[date]) -> list[str]:
    formatter = BabelDateFormat.create(locale_code, options)
    return [formatter.format(value) for value in values]


@memoize("dates.month_names")
def month_names(locale_code: str, options: DateOptions) -> tuple[str, ...]:
    """Twelve month names as rendered in context by the options.

    Args:
        locale_code: Canonical locale identifier
        options: Options whose month rendering is wanted (weekday ignored)

    Returns:
        Names for January..December; empty strings if no month is shown
    """
    samples = (date(NAMES_YEAR, month, 1) for month in range(1, 13))
    return tuple(different(_render(locale_code, options.without("weekday"), samples)))


@memoize("dates.weekday_names")
def weekday_names(locale_code: str, options: DateOptions) -> tuple[str, ...]:
    """Seven weekday names, Monday first, as rendered in context by the options.

    The day of month changes along with the weekday, so the names are not
    diffed out of whole renderings but read from the weekday field of each
    one. A weekday next to a date is often in a different form than a
    weekday alone ("piektd." rather than "Piektd" in Latvian, "Fr." rather
    than "Fr" in German).
    """
    if options.weekday is None:
        return ()
    formatter = BabelDateFormat.create(locale_code, options)
    names: list[str] = []
    for offset in range(7):
        parts = formatter.format_to_parts(FIRST_MONDAY + timedelta(days=offset))
        names.append("".join(values_of(parts, PartType.WEEKDAY)))
    return tuple(names)


def _coerce(options: DateOptions | Mapping[str, str] | str, field: str) -> DateOptions:
    if isinstance(options, str):
        return DateOptions.from_mapping({field: options})
    return DateOptions.coerce(options)


def months(
    locale: str | None = None,
    options: DateOptions | Mapping[str, str] | str = "long",
) -> list[str]:
    """Month names for a locale.

    Args:
        locale: Locale code, or None for the system locale
        options: Date options, or a bare month width ("long", "short")

    Example:
        >>> months("en-GB", "short")[:3]
        ['Jan', 'Feb', 'Mar']
        >>> months("ru", {"year": "numeric", "month": "long", "day": "numeric"})[0]
        'января'
    """
    return list(month_names(resolve_locale(locale), _coerce(options, "month")))


def weekdays(
    locale: str | None = None,
    options: DateOptions | Mapping[str, str] | str = "long",
) -> list[str]:
    """Weekday names for a locale, Monday first.

    Example:
        >>> weekdays("en-GB", "short")[:2]
        ['Mon', 'Tue']
    """
    return list(weekday_names(resolve_locale(locale), _coerce(options, "weekday")))


class Months:
    """Month name tables (values 1..12)."""

    @staticmethod
    def data_for(locale_code: str, options: DateOptions) -> list[Datum[int]]:
        """Month names rendered by the options, each mapped to its number."""
        return [
            Datum(name, number)
            for number, name in enumerate(month_names(locale_code, options), start=1)
            if name
        ]

    @classmethod
    @memoize("dates.months.create")
    def create(cls, locale_code: str, options: DateOptions) -> DatumLookup[int]:
        """Table of exactly the names the options render."""
        return DatumLookup(cls.data_for(locale_code, options), locale_code, form_insensitive=True)

    @classmethod
    @memoize("dates.months.get")
    def get(cls, locale_code: str) -> DatumLookup[int]:
        """Table of every month name form of the locale.

        Merges wide and abbreviated, format and stand-alone names with the
        in-context names of the default option sets.
        """
        locale = get_babel_locale(locale_code)
        data: list[Datum[int]] = []
        for options in _CONTEXT_MONTH_OPTIONS:
            try:
                data.extend(cls.data_for(locale_code, options))
            except UnsupportedOptionsError:
                logger.debug("No in-context month names for %s with %s", locale_code, options)
        for width in _NAME_WIDTHS:
            for context in _NAME_CONTEXTS:
                names = get_month_names(width, context, locale)
                data.extend(Datum(name, number) for number, name in names.items())
        return DatumLookup(data, locale_code, form_insensitive=True)


class Weekdays:
    """Weekday name tables (values 1..7, Monday = 1)."""

    @staticmethod
    def data_for(locale_code: str, options: DateOptions) -> list[Datum[int]]:
        """Weekday names rendered by the options, each mapped to its ISO number."""
        return [
            Datum(name, number)
            for number, name in enumerate(weekday_names(locale_code, options), start=1)
            if name
        ]

    @classmethod
    @memoize("dates.weekdays.create")
    def create(cls, locale_code: str, options: DateOptions) -> DatumLookup[int]:
        """Table of exactly the names the options render."""
        return DatumLookup(cls.data_for(locale_code, options), locale_code, form_insensitive=True)

    @classmethod
    @memoize("dates.weekdays.get")
    def get(cls, locale_code: str) -> DatumLookup[int]:
        """Table of every weekday name form of the locale."""
        locale = get_babel_locale(locale_code)
        data: list[Datum[int]] = []
        for options in _CONTEXT_WEEKDAY_OPTIONS:
            try:
                data.extend(cls.data_for(locale_code, options))
            except UnsupportedOptionsError:
                logger.debug("No in-context weekday names for %s with %s", locale_code, options)
        for width in _NAME_WIDTHS:
            for context in _NAME_CONTEXTS:
                # Babel numbers weekdays from Monday = 0
                names = get_day_names(width, context, locale)
                data.extend(Datum(name, number + 1) for number, name in names.items())
        return DatumLookup(data, locale_code, form_insensitive=True)


def classify(
    kind: str,
    value: str,
    month_table: DatumLookup[int],
    weekday_table: DatumLookup[int],
) -> PartType:
    """Type of a token captured by a month or weekday slot.

    Classification happens after matching: a token the slot's own table
    knows keeps the slot's type, otherwise a month name is a month, a
    weekday name is a weekday and anything else is literal text. Spanish
    "mar" is both a short Tuesday and a short March; its position decides.
    """
    if kind == PartType.MONTH and value.isdigit():
        return PartType.MONTH
    own = month_table if kind == PartType.MONTH else weekday_table
    if own.parsable(value):
        return PartType(kind)
    if month_table.parsable(value):
        return PartType.MONTH
    if weekday_table.parsable(value):
        return PartType.WEEKDAY
    return PartType.LITERAL
