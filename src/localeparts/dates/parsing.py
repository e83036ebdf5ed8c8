"""Date parsing: schemas inverted into matchers.

A schema (the typed parts of the sample rendering) fixes field order and
the literal characters between fields. The regex builder turns it into a
case-insensitive matcher that accepts any month or weekday name form of
the locale and tolerates variant separators, and the parser assembles a
date from the matched parts.

Without options, a composite parser tries a fixed list of candidate
layouts (long and short names, numeric, "dd MMM yyyy") in order.

Python 3.13+.
"""

import logging
import re
from collections.abc import Callable, Iterable, Mapping, Sequence
from datetime import date
from functools import cached_property
from typing import Protocol

from localeparts.constants import DEFAULT_PARSER_OPTIONS, TWO_DIGIT_YEAR_BASE
from localeparts.core.cache import memoize
from localeparts.core.parts import TypedPart
from localeparts.core.pattern import Matcher, Slot, char_class
from localeparts.diagnostics import (
    ErrorTemplate,
    LocalePartsError,
    NoMatchError,
    NotFoundError,
    UnparseableError,
)
from localeparts.enums import PartType
from localeparts.locale_utils import resolve_locale

from .formatting import DateFormatSpec, coerce_options, format_schema
from .names import Months, Weekdays, classify
from .options import DateOptions, options_from

__all__ = [
    "CompositeDateParser",
    "DateParser",
    "RegexBuilder",
    "RegexParser",
    "date_from",
    "date_parser",
    "default_parser",
    "parse_all_dates",
    "parse_date",
    "parse_date_to_parts",
]

logger = logging.getLogger(__name__)

type Span = tuple[int, int]


class DateParser(Protocol):
    """Anything that turns text into dates."""

    def parse(self, text: str) -> date: ...

    def parse_to_parts(self, text: str) -> tuple[TypedPart, ...]: ...

    def scan(self, text: str) -> list[tuple[Span, date]]: ...

    def parse_all(self, text: str) -> list[date]: ...


class RegexBuilder:
    """Builds the parsing matcher of a schema.

    Fields generalize to: year \\d{4} (\\d{2} for 2-digit), day \\d{1,2},
    month \\d{1,2} or any month name of the locale, weekday any weekday
    name. Literals become lazy character classes over their characters
    plus whitespace; leading and trailing literals are optional.
    """

    __slots__ = ("locale_code", "months", "options", "schema", "weekdays")

    def __init__(
        self,
        locale_code: str,
        schema: Sequence[TypedPart],
        options: DateOptions,
    ) -> None:
        self.locale_code = locale_code
        self.schema = tuple(schema)
        self.options = options
        self.months = Months.get(locale_code)
        self.weekdays = Weekdays.get(locale_code)

    @classmethod
    @memoize("dates.regex_builder")
    def create(cls, locale_code: str, spec: DateFormatSpec, native: bool = True) -> "RegexBuilder":
        """Shared builder for a canonical locale and normalized options."""
        schema = format_schema(locale_code, spec, native)
        options = options_from(schema) if isinstance(spec, str) else spec
        return cls(locale_code, schema, options)

    def slots(self) -> list[Slot]:
        """Slots of the parsing pattern, one per schema part."""
        last = len(self.schema) - 1
        slots: list[Slot] = []
        for index, part in enumerate(self.schema):
            match part.type:
                case PartType.LITERAL:
                    quantifier = "*?" if index in (0, last) else "+?"
                    body = char_class(part.value) + quantifier
                case PartType.YEAR:
                    body = r"\d{2}" if self.options.year == "2-digit" else r"\d{4}"
                case PartType.DAY:
                    body = r"\d{1,2}"
                case PartType.MONTH:
                    body = r"\d{1,2}|" + self.months.pattern
                case _:
                    body = self.weekdays.pattern
            slots.append(Slot(part.type, body))
        return slots

    def build(self) -> Matcher:
        """Compile the case-insensitive matcher."""
        return Matcher(
            self.slots(),
            flags=re.IGNORECASE,
            convert=self._convert,
            locale_code=self.locale_code,
        )

    def _convert(self, kind: str, value: str) -> Iterable[TypedPart]:
        if kind in (PartType.MONTH, PartType.WEEKDAY):
            return (TypedPart(classify(kind, value, self.months, self.weekdays), value),)
        return (TypedPart(PartType(kind), value),)


def date_from(parts: Iterable[TypedPart], locale_code: str, text: str = "") -> date:
    """Assemble a date from matched parts.

    Day and year are base-10; a two-digit year lies in the 2000s; a month
    is a 1-based number or a name resolved through the locale's table.

    Raises:
        UnparseableError: If a field is missing or the date does not exist
        NotFoundError: If a month name is unknown to the locale
    """
    values: dict[PartType, str] = {}
    for part in parts:
        if part.type in (PartType.YEAR, PartType.MONTH, PartType.DAY):
            values.setdefault(part.type, part.value)

    missing = [field for field in (PartType.YEAR, PartType.MONTH, PartType.DAY) if field not in values]
    if missing:
        raise UnparseableError(
            ErrorTemplate.date_invalid(text, locale_code, f"missing {', '.join(missing)}"),
            input_value=text,
            locale_code=locale_code,
        )

    year_text = values[PartType.YEAR]
    year = int(year_text)
    if len(year_text) == 2:  # noqa: PLR2004
        year += TWO_DIGIT_YEAR_BASE

    month_text = values[PartType.MONTH]
    month = int(month_text) if month_text.isdigit() else Months.get(locale_code).parse(month_text)

    try:
        return date(year, month, int(values[PartType.DAY]))
    except ValueError as e:
        raise UnparseableError(
            ErrorTemplate.date_invalid(text, locale_code, str(e)),
            input_value=text,
            locale_code=locale_code,
        ) from e


class RegexParser:
    """Parser for one locale and one layout.

    The matcher is built on first use, so a composite parser only pays
    for (and only fails on) the candidates it actually tries.

    Attributes:
        locale_code: Canonical locale identifier
        spec: Option set or pattern string of the layout
        native: Whether the schema comes from Babel's tokens or from probing
    """

    def __init__(self, locale_code: str, spec: DateFormatSpec, native: bool = True) -> None:
        self.locale_code = locale_code
        self.spec = spec
        self.native = native

    @classmethod
    @memoize("dates.regex_parser")
    def create(cls, locale_code: str, spec: DateFormatSpec, native: bool = True) -> "RegexParser":
        """Shared parser for a canonical locale and normalized options."""
        return cls(locale_code, spec, native)

    @cached_property
    def matcher(self) -> Matcher:
        """Parsing matcher, built on first use."""
        return RegexBuilder.create(self.locale_code, self.spec, self.native).build()

    def parse_to_parts(self, text: str) -> tuple[TypedPart, ...]:
        """Typed parts of the first date found in text.

        Raises:
            NoMatchError: If no date in this layout occurs in text
        """
        return self.matcher.match(text)

    def parse(self, text: str) -> date:
        """First date found in text."""
        return date_from(self.parse_to_parts(text), self.locale_code, text)

    def scan(self, text: str) -> list[tuple[Span, date]]:
        """Spans and values of every valid date in text."""
        found: list[tuple[Span, date]] = []
        for span, parts in self.matcher.match_all(text):
            try:
                found.append((span, date_from(parts, self.locale_code, text[span[0] : span[1]])))
            except (UnparseableError, NotFoundError) as e:
                logger.debug("Skipping %r at %s: %s", text[span[0] : span[1]], span, e)
        return found

    def parse_all(self, text: str) -> list[date]:
        """Every valid date in text, in order."""
        return [value for _, value in self.scan(text)]

    def __repr__(self) -> str:
        return f"RegexParser({self.locale_code!r}, {self.spec!r}, native={self.native})"


class CompositeDateParser:
    """Ordered list of parsers tried one after another.

    Attributes:
        locale_code: Canonical locale identifier
        parsers: Candidates in priority order
    """

    __slots__ = ("locale_code", "parsers")

    def __init__(self, locale_code: str, parsers: Sequence[DateParser]) -> None:
        self.locale_code = locale_code
        self.parsers = tuple(parsers)

    def _first[T](self, text: str, attempt: Callable[[DateParser], T]) -> T:
        for parser in self.parsers:
            try:
                return attempt(parser)
            except LocalePartsError as e:
                logger.debug("Candidate %r rejected %r: %s", parser, text, e)
        raise UnparseableError(
            ErrorTemplate.unparseable(text, self.locale_code, "date"),
            input_value=text,
            locale_code=self.locale_code,
        )

    def parse(self, text: str) -> date:
        """First candidate's date.

        Raises:
            UnparseableError: If every candidate fails
        """
        return self._first(text, lambda parser: parser.parse(text))

    def parse_to_parts(self, text: str) -> tuple[TypedPart, ...]:
        """First candidate's parts.

        Raises:
            UnparseableError: If every candidate fails
        """
        return self._first(text, lambda parser: parser.parse_to_parts(text))

    def scan(self, text: str) -> list[tuple[Span, date]]:
        """Merged hits of every candidate.

        Hits are ordered by position, then by candidate priority; the first
        hit at a position wins and hits overlapping an accepted one are
        dropped.
        """
        hits: list[tuple[int, int, int, date]] = []
        for priority, parser in enumerate(self.parsers):
            try:
                found = parser.scan(text)
            except LocalePartsError as e:
                logger.debug("Candidate %r unavailable: %s", parser, e)
                continue
            hits.extend((start, priority, end, value) for (start, end), value in found)

        accepted: list[tuple[Span, date]] = []
        position = 0
        for start, _, end, value in sorted(hits, key=lambda hit: hit[:2]):
            if start >= position:
                accepted.append(((start, end), value))
                position = end
        return accepted

    def parse_all(self, text: str) -> list[date]:
        """Every date found by any candidate, in order, without overlaps."""
        return [value for _, value in self.scan(text)]

    def __repr__(self) -> str:
        return f"CompositeDateParser({self.locale_code!r}, {len(self.parsers)} candidates)"


def _candidate_spec(candidate: Mapping[str, str] | str) -> DateFormatSpec:
    return candidate if isinstance(candidate, str) else DateOptions.from_mapping(candidate)


@memoize("dates.default_parser")
def default_parser(locale_code: str, native: bool = True) -> CompositeDateParser:
    """Composite of the default candidate layouts for a canonical locale."""
    return CompositeDateParser(
        locale_code,
        [
            RegexParser.create(locale_code, _candidate_spec(candidate), native)
            for candidate in DEFAULT_PARSER_OPTIONS
        ],
    )


def date_parser(
    locale: str | None = None,
    options: DateOptions | Mapping[str, str] | str | None = None,
    *,
    native: bool = True,
) -> RegexParser | CompositeDateParser:
    """Parser for a locale and layout; None options try every default layout.

    Example:
        >>> date_parser("en-GB").parse("18/12/2018")
        datetime.date(2018, 12, 18)
    """
    locale_code = resolve_locale(locale)
    if options is None:
        return default_parser(locale_code, native)
    return RegexParser.create(locale_code, coerce_options(options), native)


def _unparseable(text: str, locale_code: str) -> UnparseableError:
    return UnparseableError(
        ErrorTemplate.unparseable(text, locale_code, "date"),
        input_value=text,
        locale_code=locale_code,
    )


def parse_date(
    text: str,
    locale: str | None = None,
    options: DateOptions | Mapping[str, str] | str | None = None,
    *,
    native: bool = True,
) -> date:
    """Parse the first date in text.

    Month and weekday names match case-insensitively, in any of the
    locale's long, short, stand-alone or in-context forms.

    Args:
        text: Text containing a formatted date
        locale: Locale code, or None for the system locale
        options: Layout options or pattern string; None tries the defaults
        native: Derive the layout from Babel's tokens or by probing

    Returns:
        The parsed date

    Raises:
        UnparseableError: If no date can be read from text
        UnsupportedOptionsError: If explicit options cannot be honoured

    Example:
        >>> parse_date("Fri, 25 Jan 2019", "en-GB")
        datetime.date(2019, 1, 25)
    """
    parser = date_parser(locale, options, native=native)
    try:
        return parser.parse(text)
    except (NoMatchError, NotFoundError) as e:
        raise _unparseable(text, parser.locale_code) from e


def parse_date_to_parts(
    text: str,
    locale: str | None = None,
    options: DateOptions | Mapping[str, str] | str | None = None,
    *,
    native: bool = True,
) -> tuple[TypedPart, ...]:
    """Typed parts of the first date in text.

    Raises:
        UnparseableError: If no date can be read from text
    """
    parser = date_parser(locale, options, native=native)
    try:
        return parser.parse_to_parts(text)
    except NoMatchError as e:
        raise _unparseable(text, parser.locale_code) from e


def parse_all_dates(
    text: str,
    locale: str | None = None,
    options: DateOptions | Mapping[str, str] | str | None = None,
    *,
    native: bool = True,
) -> list[date]:
    """Every date embedded in text, in order of appearance.

    Example:
        >>> parse_all_dates("from 1 Jan 2019 until 31/01/2019", "en-GB")
        [datetime.date(2019, 1, 1), datetime.date(2019, 1, 31)]
    """
    return date_parser(locale, options, native=native).parse_all(text)
