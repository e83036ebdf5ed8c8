"""Date formatting options and explicit pattern strings.

Options say which fields to show and how wide: the same vocabulary the
CLDR skeletons use, so an option set maps one-to-one onto a skeleton that
Babel resolves to the locale's preferred pattern.

Pattern strings ("dd MMM yyyy") bypass the locale's layout: letters y, M,
d and E name fields and their count encodes the width. Pattern strings
are tokenized by Babel, so text in single quotes is literal and letters
outside the CLDR pattern alphabet are plain text.

Python 3.13+.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, fields, replace
from typing import Literal

from babel.dates import tokenize_pattern

from localeparts.core.parts import TypedPart, collapse_literals, literal
from localeparts.diagnostics import ErrorTemplate, UnsupportedOptionsError
from localeparts.enums import PartType

__all__ = [
    "DATE_FIELDS",
    "FIELD_LETTERS",
    "DateOptions",
    "options_from",
    "parts_from",
]

type YearWidth = Literal["numeric", "2-digit"]
type MonthWidth = Literal["numeric", "2-digit", "short", "long"]
type DayWidth = Literal["numeric", "2-digit"]
type WeekdayWidth = Literal["short", "long"]

# Field order used for skeletons and for the sample's learning alternation.
DATE_FIELDS: tuple[str, ...] = ("year", "month", "day", "weekday")

# Accepted widths per field, with the CLDR skeleton letters for each.
_SKELETON_LETTERS: dict[str, dict[str, str]] = {
    "year": {"numeric": "y", "2-digit": "yy"},
    "month": {"numeric": "M", "2-digit": "MM", "short": "MMM", "long": "MMMM"},
    "day": {"numeric": "d", "2-digit": "dd"},
    "weekday": {"short": "E", "long": "EEEE"},
}

# Pattern letter to field, for pattern strings and resolved CLDR patterns.
FIELD_LETTERS: dict[str, str] = {
    "y": "year",
    "Y": "year",
    "u": "year",
    "M": "month",
    "L": "month",
    "d": "day",
    "E": "weekday",
    "e": "weekday",
    "c": "weekday",
}

# Pattern-string letter count to width.
_PATTERN_WIDTHS: dict[str, dict[int, str]] = {
    "y": {1: "numeric", 2: "2-digit", 3: "numeric", 4: "numeric"},
    "M": {1: "numeric", 2: "2-digit", 3: "short", 4: "long"},
    "d": {1: "numeric", 2: "2-digit"},
    "E": {1: "short", 2: "short", 3: "short", 4: "long"},
}


@dataclass(frozen=True, slots=True)
class DateOptions:
    """Which date fields to show and at what width.

    Unset fields are not shown. Instances are hashable and used as cache
    keys.

    Attributes:
        year: "numeric" (2019) or "2-digit" (19)
        month: "numeric" (1), "2-digit" (01), "short" (Jan) or "long" (January)
        day: "numeric" (5) or "2-digit" (05)
        weekday: "short" (Fri) or "long" (Friday)
    """

    year: YearWidth | None = None
    month: MonthWidth | None = None
    day: DayWidth | None = None
    weekday: WeekdayWidth | None = None

    def __post_init__(self) -> None:
        """Validate widths.

        Raises:
            UnsupportedOptionsError: If a width is not valid for its field
        """
        for name, width in self.items():
            allowed = _SKELETON_LETTERS[name]
            if width not in allowed:
                raise UnsupportedOptionsError(ErrorTemplate.unsupported_option(name, width, allowed))

    @classmethod
    def from_mapping(cls, options: Mapping[str, str]) -> "DateOptions":
        """Build options from a mapping such as {"year": "numeric"}.

        Raises:
            UnsupportedOptionsError: If a key is not a date field
        """
        for key in options:
            if key not in _SKELETON_LETTERS:
                raise UnsupportedOptionsError(
                    ErrorTemplate.unsupported_option("key", key, DATE_FIELDS)
                )
        return cls(**options)  # type: ignore[arg-type]

    @classmethod
    def coerce(cls, options: "DateOptions | Mapping[str, str]") -> "DateOptions":
        """Accept either options or a mapping."""
        if isinstance(options, DateOptions):
            return options
        return cls.from_mapping(options)

    def items(self) -> Iterator[tuple[str, str]]:
        """Set fields and their widths, in year, month, day, weekday order."""
        for field in fields(self):
            width = getattr(self, field.name)
            if width is not None:
                yield field.name, width

    def without(self, *names: str) -> "DateOptions":
        """Copy with the given fields unset."""
        return replace(self, **dict.fromkeys(names))

    @property
    def keys(self) -> tuple[str, ...]:
        """Names of the set fields."""
        return tuple(name for name, _ in self.items())

    @property
    def skeleton(self) -> str:
        """CLDR skeleton requesting exactly these fields and widths.

        Example:
            >>> DateOptions(year="numeric", month="short", day="numeric").skeleton
            'yMMMd'
        """
        return "".join(_SKELETON_LETTERS[name][width] for name, width in self.items())


def parts_from(pattern: str) -> tuple[TypedPart, ...]:
    """Typed schema of a pattern string.

    Field parts carry their pattern token as value ("MMM"); literal parts
    carry the literal text.

    Raises:
        UnsupportedOptionsError: If the pattern uses a letter other than
            y, M, d, E or an unsupported letter count
    """
    parts: list[TypedPart] = []
    for kind, token in tokenize_pattern(pattern):
        if kind == "chars":
            parts.append(literal(token))
            continue
        letter, count = token
        text = letter * count
        if letter not in _PATTERN_WIDTHS or count not in _PATTERN_WIDTHS[letter]:
            raise UnsupportedOptionsError(
                ErrorTemplate.pattern_string_invalid(pattern, text), input_value=pattern
            )
        parts.append(TypedPart(PartType(FIELD_LETTERS[letter]), text))
    return collapse_literals(parts)


def options_from(parts: tuple[TypedPart, ...]) -> DateOptions:
    """Options requesting the fields of a pattern-string schema."""
    widths: dict[str, str] = {}
    for part in parts:
        if part.type is not PartType.LITERAL:
            widths[part.type.value] = _PATTERN_WIDTHS[part.value[0]][len(part.value)]
    return DateOptions.from_mapping(widths)
