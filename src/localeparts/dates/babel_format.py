"""Babel-backed date formatter: the host formatting facility.

Resolves an option set to the locale's preferred CLDR pattern the way ICU
does: pick the closest availableFormats skeleton, then stretch or shrink
each field of its pattern to the requested width. The pattern is rendered
by Babel, and because Babel exposes the pattern's tokens, this formatter
can also break its output into typed parts natively.

Python 3.13+.
"""

import logging
from datetime import date
from itertools import groupby

from babel.dates import (
    DateTimeFormat,
    format_date,
    match_skeleton,
    tokenize_pattern,
    untokenize_pattern,
)

from localeparts.core.cache import memoize
from localeparts.core.parts import TypedPart, collapse_literals, literal
from localeparts.diagnostics import ErrorTemplate, UnsupportedOptionsError
from localeparts.enums import PartType
from localeparts.locale_utils import get_babel_locale

from .options import DATE_FIELDS, FIELD_LETTERS, DateOptions

__all__ = ["BabelDateFormat", "resolve_pattern"]

logger = logging.getLogger(__name__)

# Weekday letters whose one- and two-letter forms are numeric.
_NUMERIC_WEEKDAY_LETTERS: frozenset[str] = frozenset({"c", "e"})
_TEXT_WEEKDAY_MIN_COUNT: int = 3


def _field_widths(skeleton: str) -> dict[str, int]:
    """Letter count per date field of a skeleton ("yMMMd" -> month: 3)."""
    widths: dict[str, int] = {}
    for letter, run in groupby(skeleton):
        field = FIELD_LETTERS.get(letter)
        if field:
            widths[field] = len(list(run))
    return widths


def resolve_pattern(locale_code: str, options: DateOptions) -> str:
    """CLDR pattern rendering the requested fields at the requested widths.

    Args:
        locale_code: Canonical locale identifier
        options: Fields and widths to show

    Returns:
        Babel/CLDR date pattern (e.g., "EEE, d MMM y")

    Raises:
        UnsupportedOptionsError: If no fields are requested, or if the
            locale has no pattern showing every requested field
    """
    skeleton = options.skeleton
    if not skeleton:
        raise UnsupportedOptionsError(
            ErrorTemplate.unsupported_option("fields", "none", DATE_FIELDS),
            locale_code=locale_code,
        )

    skeletons = get_babel_locale(locale_code).datetime_skeletons
    best = match_skeleton(skeleton, skeletons)
    if best is None:
        raise UnsupportedOptionsError(
            ErrorTemplate.field_dropped(locale_code, ", ".join(options.keys), skeleton),
            locale_code=locale_code,
        )

    requested = _field_widths(skeleton)
    available = _field_widths(best)
    tokens = []
    shown: set[str] = set()
    for kind, value in tokenize_pattern(skeletons[best].pattern):
        if kind == "field":
            letter, count = value
            field = FIELD_LETTERS.get(letter)
            if field in requested:
                shown.add(field)
                if requested[field] != available.get(field):
                    count = requested[field]
                if (
                    field == "weekday"
                    and letter in _NUMERIC_WEEKDAY_LETTERS
                    and count < _TEXT_WEEKDAY_MIN_COUNT
                ):
                    count = _TEXT_WEEKDAY_MIN_COUNT
            value = (letter, count)
        tokens.append((kind, value))
    pattern = untokenize_pattern(tokens)

    missing = [field for field in requested if field not in shown]
    if missing:
        raise UnsupportedOptionsError(
            ErrorTemplate.field_dropped(locale_code, ", ".join(missing), pattern),
            locale_code=locale_code,
        )

    logger.debug("Resolved %s for %s to %r via %r", skeleton, locale_code, pattern, best)
    return pattern


class BabelDateFormat:
    """Date formatter for one locale and option set.

    Attributes:
        locale_code: Canonical locale identifier
        options: Requested fields and widths
        pattern: Resolved CLDR pattern
    """

    __slots__ = ("_tokens", "locale_code", "options", "pattern")

    def __init__(self, locale_code: str, options: DateOptions, pattern: str | None = None) -> None:
        """Create a formatter.

        Args:
            locale_code: Canonical locale identifier
            options: Requested fields and widths
            pattern: Explicit CLDR pattern; resolved from options if None
        """
        self.locale_code = locale_code
        self.options = options
        self.pattern = pattern if pattern is not None else resolve_pattern(locale_code, options)
        self._tokens = tuple(tokenize_pattern(self.pattern))

    @classmethod
    @memoize("dates.babel_format")
    def create(cls, locale_code: str, options: DateOptions) -> "BabelDateFormat":
        """Shared formatter for (locale, options)."""
        return cls(locale_code, options)

    def format(self, value: date) -> str:
        """Render value with the resolved pattern."""
        return format_date(value, self.pattern, locale=get_babel_locale(self.locale_code))

    def format_to_parts(self, value: date) -> tuple[TypedPart, ...]:
        """Render value field by field from the pattern's tokens.

        Fields outside year, month, day and weekday (an era, say) are
        reported as literal text.
        """
        fields = DateTimeFormat(value, get_babel_locale(self.locale_code))
        parts: list[TypedPart] = []
        for kind, token in self._tokens:
            if kind == "chars":
                parts.append(literal(token))
                continue
            letter, count = token
            text = fields[letter * count]
            field = FIELD_LETTERS.get(letter)
            parts.append(TypedPart(PartType(field), text) if field else literal(text))
        return collapse_literals(parts)

    def __repr__(self) -> str:
        return f"BabelDateFormat({self.locale_code!r}, {self.pattern!r})"
