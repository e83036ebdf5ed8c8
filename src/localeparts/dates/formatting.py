"""Date formatting to strings and to typed parts.

Two ways to break a rendering into parts:

    native      Babel exposes the resolved pattern's tokens, so each field
                is rendered on its own and typed by its pattern letter.
    emulated    Only the rendered string is used. The sample date 3333-11-20
                is rendered once; the fields are located by their known
                renderings ("3333", "November", "20", "Friday") and the
                runs between them are literals. Generalizing each field
                gives a pattern that splits the rendering of any date.

Both produce the same parts; the emulated path works for any formatter
that can only produce strings and is what the money side relies on.

Python 3.13+.
"""

import logging
import re
from collections import Counter
from collections.abc import Iterable, Mapping
from datetime import date

from localeparts.constants import (
    DEFAULT_FORMAT_OPTIONS,
    SAMPLE_DATE,
    SAMPLE_DAY,
    SAMPLE_MONTH,
    SAMPLE_TWO_DIGIT_YEAR,
    SAMPLE_WEEKDAY,
    SAMPLE_YEAR,
)
from localeparts.core.cache import memoize
from localeparts.core.parts import TypedPart, collapse_literals
from localeparts.core.pattern import Matcher, Slot, char_class, iterate_matches
from localeparts.datum import DatumLookup
from localeparts.diagnostics import ErrorTemplate, SchemaInferenceError
from localeparts.enums import PartType
from localeparts.locale_utils import resolve_locale

from .babel_format import BabelDateFormat
from .names import Months, Weekdays, classify, month_names, weekday_names
from .options import DateOptions, options_from, parts_from

__all__ = [
    "FormatToParts",
    "SimpleFormat",
    "coerce_options",
    "format_date",
    "format_date_to_parts",
    "format_schema",
    "formatter_for",
]

logger = logging.getLogger(__name__)

type DateFormatSpec = DateOptions | str


class SimpleFormat(BabelDateFormat):
    """Formatter for an explicit pattern string such as "dd MMM yyyy".

    The pattern is the schema: its tokens give the parts directly, so no
    probing is needed.

    Attributes:
        schema: Typed parts of the pattern (field values are the tokens)
    """

    __slots__ = ("schema",)

    def __init__(self, locale_code: str, pattern: str) -> None:
        self.schema = parts_from(pattern)
        super().__init__(locale_code, options_from(self.schema), pattern)

    def __repr__(self) -> str:
        return f"SimpleFormat({self.locale_code!r}, {self.pattern!r})"


def _sample_values(locale_code: str, options: DateOptions) -> dict[str, str]:
    """Known rendering of each sample field under the options."""
    values: dict[str, str] = {}
    if options.year:
        year = SAMPLE_TWO_DIGIT_YEAR if options.year == "2-digit" else SAMPLE_YEAR
        values["year"] = str(year)
    if options.month:
        values["month"] = month_names(locale_code, options)[SAMPLE_MONTH - 1]
    if options.day:
        values["day"] = str(SAMPLE_DAY)
    if options.weekday:
        values["weekday"] = weekday_names(locale_code, options)[SAMPLE_WEEKDAY - 1]
    return values


class FormatToParts:
    """Emulated part breakdown for one locale and option set.

    Attributes:
        locale_code: Canonical locale identifier
        options: Requested fields and widths
        matcher: Generalized pattern splitting any rendering into parts
        schema: Parts of the sample rendering
    """

    __slots__ = ("_formatter", "_months", "_weekdays", "locale_code", "matcher", "options", "schema")

    def __init__(self, locale_code: str, options: DateOptions) -> None:
        """Learn the layout of the options from the sample rendering.

        Raises:
            SchemaInferenceError: If a requested field is not found exactly
                once in the sample rendering
            UnsupportedOptionsError: If the locale cannot show the options
        """
        self.locale_code = locale_code
        self.options = options
        self._formatter = BabelDateFormat.create(locale_code, options)
        self._months = (
            Months.create(locale_code, options) if options.month else DatumLookup((), locale_code)
        )
        self._weekdays = (
            Weekdays.create(locale_code, options) if options.weekday else DatumLookup((), locale_code)
        )

        rendered = self._formatter.format(SAMPLE_DATE)
        self.matcher = Matcher(
            self._learn(rendered),
            convert=self._convert,
            locale_code=locale_code,
        )
        self.schema = collapse_literals(self.matcher.fullmatch(rendered))
        logger.debug(
            "Inferred %s for %s from %r: %s",
            options.skeleton,
            locale_code,
            rendered,
            self.matcher.pattern.pattern,
        )

    @classmethod
    @memoize("dates.format_to_parts")
    def create(cls, locale_code: str, options: DateOptions) -> "FormatToParts":
        """Shared engine for (locale, options)."""
        return cls(locale_code, options)

    def _learn(self, rendered: str) -> list[Slot]:
        sample = _sample_values(self.locale_code, self.options)
        empty = [field for field, value in sample.items() if not value]
        if empty:
            raise SchemaInferenceError(
                ErrorTemplate.schema_inference_failed(
                    self.locale_code, rendered, f"no distinct rendering for {', '.join(empty)}"
                ),
                input_value=rendered,
                locale_code=self.locale_code,
            )

        learning = re.compile(
            "|".join(f"(?P<{field}>{re.escape(value)})" for field, value in sample.items())
        )
        slots: list[Slot] = []
        found: Counter[str] = Counter()
        for token in iterate_matches(learning, rendered):
            if isinstance(token, str):
                slots.append(Slot(PartType.LITERAL, char_class(token, spaces=False) + "+?"))
            else:
                field = token.lastgroup or ""
                found[field] += 1
                slots.append(Slot(field, self._generalize(field)))

        wrong = [field for field in sample if found[field] != 1]
        if wrong:
            raise SchemaInferenceError(
                ErrorTemplate.schema_inference_failed(
                    self.locale_code, rendered, f"not found exactly once: {', '.join(wrong)}"
                ),
                input_value=rendered,
                locale_code=self.locale_code,
            )
        return slots

    def _generalize(self, field: str) -> str:
        match field:
            case "year":
                return r"\d{2}" if self.options.year == "2-digit" else r"\d{4}"
            case "day":
                return r"\d{1,2}"
            case "month":
                return r"\d{1,2}|" + self._months.pattern
            case _:
                return self._weekdays.pattern

    def _convert(self, kind: str, value: str) -> Iterable[TypedPart]:
        if kind in (PartType.MONTH, PartType.WEEKDAY):
            return (TypedPart(classify(kind, value, self._months, self._weekdays), value),)
        return (TypedPart(PartType(kind), value),)

    def format(self, value: date) -> str:
        """Render value."""
        return self._formatter.format(value)

    def format_to_parts(self, value: date) -> tuple[TypedPart, ...]:
        """Render value and split it with the learned pattern.

        Raises:
            NoMatchError: If the rendering departs from the learned layout
        """
        return collapse_literals(self.matcher.fullmatch(self._formatter.format(value)))

    def __repr__(self) -> str:
        return f"FormatToParts({self.locale_code!r}, {self.options.skeleton!r})"


def coerce_options(options: DateOptions | Mapping[str, str] | str | None) -> DateFormatSpec:
    """Normalize caller options: None selects the defaults, strings are patterns."""
    if options is None:
        return DateOptions.from_mapping(DEFAULT_FORMAT_OPTIONS)
    if isinstance(options, str):
        return options
    return DateOptions.coerce(options)


@memoize("dates.formatter")
def formatter_for(locale_code: str, spec: DateFormatSpec) -> BabelDateFormat:
    """Shared formatter for a canonical locale and normalized options."""
    if isinstance(spec, str):
        return SimpleFormat(locale_code, spec)
    return BabelDateFormat.create(locale_code, spec)


@memoize("dates.schema")
def format_schema(locale_code: str, spec: DateFormatSpec, native: bool = True) -> tuple[TypedPart, ...]:
    """Typed parts of the sample date for (locale, options).

    Pattern strings are their own schema. Option sets are sampled natively
    or through the emulation engine.
    """
    if isinstance(spec, str):
        return parts_from(spec)
    if native:
        return BabelDateFormat.create(locale_code, spec).format_to_parts(SAMPLE_DATE)
    return FormatToParts.create(locale_code, spec).schema


def format_date(
    value: date,
    locale: str | None = None,
    options: DateOptions | Mapping[str, str] | str | None = None,
) -> str:
    """Format a date for a locale.

    Args:
        value: Date to format
        locale: Locale code (BCP-47 or POSIX), or None for the system locale
        options: Date options, a mapping of them, or a pattern string;
            None means year numeric, month long, day numeric

    Returns:
        Formatted date

    Example:
        >>> format_date(date(2019, 1, 25), "en-GB",
        ...             {"year": "numeric", "month": "short", "day": "numeric", "weekday": "short"})
        'Fri, 25 Jan 2019'
    """
    return formatter_for(resolve_locale(locale), coerce_options(options)).format(value)


def format_date_to_parts(
    value: date,
    locale: str | None = None,
    options: DateOptions | Mapping[str, str] | str | None = None,
    *,
    native: bool = True,
) -> tuple[TypedPart, ...]:
    """Format a date into typed parts.

    Joining the values of the parts reproduces format_date() exactly, and
    no two consecutive parts are literals.

    Args:
        value: Date to format
        locale: Locale code, or None for the system locale
        options: Date options, a mapping of them, or a pattern string
        native: Use Babel's pattern tokens (True) or the sample-based
            emulation engine (False); pattern strings are always native

    Example:
        >>> format_date_to_parts(date(2019, 1, 25), "nl",
        ...                      {"year": "numeric", "month": "numeric", "day": "numeric"})
        (TypedPart(type=<PartType.DAY: 'day'>, value='25'), TypedPart(...'-'), ...)
    """
    locale_code = resolve_locale(locale)
    spec = coerce_options(options)
    if isinstance(spec, str) or native:
        return formatter_for(locale_code, spec).format_to_parts(value)
    return FormatToParts.create(locale_code, spec).format_to_parts(value)

