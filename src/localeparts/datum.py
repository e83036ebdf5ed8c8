"""Name tables: locale-specific names mapped to values.

A DatumLookup holds the names a locale renders for one kind of value
(months, weekdays, currencies) and provides both directions: a regular
expression alternation matching any of the names, and a case-insensitive
lookup from a matched name back to its value.

Names that several values share (a "$" used by many currencies) are kept
with every value; a match strategy decides which one a lookup returns.

Python 3.13+.
"""

import logging
import os
import unicodedata
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from localeparts.core.pattern import alternation
from localeparts.diagnostics import ErrorTemplate, NotFoundError
from localeparts.locale_utils import to_lower

__all__ = [
    "Datum",
    "DatumLookup",
    "MatchStrategy",
    "different",
    "first_match",
    "prefer",
    "unique_match",
]

logger = logging.getLogger(__name__)

# Picks one value among the candidates a name maps to:
# (name, candidates, locale_code) -> value
type MatchStrategy[T] = Callable[[str, Sequence[T], str], T]


@dataclass(frozen=True, slots=True)
class Datum[T]:
    """A name as rendered in some locale and the value it stands for."""

    name: str
    value: T


def first_match[T](name: str, candidates: Sequence[T], locale_code: str) -> T:  # noqa: ARG001
    """Return the first registered value for the name."""
    return candidates[0]


def unique_match[T](name: str, candidates: Sequence[T], locale_code: str) -> T:
    """Return the only value for the name.

    Raises:
        NotFoundError: If the name maps to more than one value
    """
    if len(candidates) > 1:
        raise NotFoundError(
            ErrorTemplate.name_ambiguous(name, locale_code, candidates),
            input_value=name,
            locale_code=locale_code,
        )
    return candidates[0]


def prefer[T](*preferred: T) -> MatchStrategy[T]:
    """Strategy choosing the first of preferred among the candidates.

    Falls back to the first candidate when none is preferred.

    Example:
        >>> lookup.parse("$", prefer("CAD", "AUD"))
        'CAD'
    """

    def strategy(name: str, candidates: Sequence[T], locale_code: str) -> T:
        for value in preferred:
            if value in candidates:
                return value
        return first_match(name, candidates, locale_code)

    return strategy


class DatumLookup[T]:
    """Bidirectional name table for one locale.

    Attributes:
        data: Entries in registration order (earlier entries take precedence)
        locale_code: Locale whose casing rules normalize names
        pattern: Non-capturing alternation of every name, longest first
    """

    __slots__ = ("_index", "data", "locale_code", "pattern")

    def __init__(
        self,
        data: Iterable[Datum[T]],
        locale_code: str,
        *,
        form_insensitive: bool = False,
    ) -> None:
        """Build the table.

        Args:
            data: Entries; a name registered twice keeps both values in order
            locale_code: Locale whose casing rules normalize names
            form_insensitive: Also accept names without their trailing full
                stops ("janv." as "janv")
        """
        self.data = tuple(data)
        self.locale_code = locale_code
        self._index: dict[str, list[T]] = {}
        names: list[str] = []
        for datum in self.data:
            forms = [datum.name]
            if form_insensitive:
                stripped = datum.name.rstrip(".")
                if stripped and stripped != datum.name:
                    forms.append(stripped)
            for form in forms:
                values = self._index.setdefault(self.normalize(form), [])
                if datum.value not in values:
                    values.append(datum.value)
                names.append(form)
        self.pattern = alternation(names)

    def normalize(self, text: str) -> str:
        """Lookup key: locale-aware lower case with whitespace collapsed."""
        return " ".join(to_lower(text, self.locale_code).split())

    def candidates(self, text: str) -> tuple[T, ...]:
        """Every value the name maps to, in registration order."""
        return tuple(self._index.get(self.normalize(text), ()))

    def parsable(self, text: str) -> bool:
        """True if the name is in the table."""
        return self.normalize(text) in self._index

    def parse(self, text: str, strategy: MatchStrategy[T] | None = None) -> T:
        """Value for the name.

        Args:
            text: Name as it appears in the input, in any case
            strategy: Chooses among several values (default: first_match)

        Returns:
            The value the name stands for

        Raises:
            NotFoundError: If the name is not in the table
        """
        values = self._index.get(self.normalize(text))
        if not values:
            raise NotFoundError(
                ErrorTemplate.name_not_found(text, self.locale_code),
                input_value=text,
                locale_code=self.locale_code,
            )
        return (strategy or first_match)(text, values, self.locale_code)

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"DatumLookup(locale_code={self.locale_code!r}, entries={len(self.data)})"


def _word_class(char: str) -> str:
    """Letter/number class of a character ('' for anything else)."""
    category = unicodedata.category(char)[0]
    return category if category in ("L", "N") else ""


def _splits_word(value: str, index: int) -> bool:
    """True if cutting value at index would split a letter or digit run."""
    if index <= 0 or index >= len(value):
        return False
    before = _word_class(value[index - 1])
    return bool(before) and before == _word_class(value[index])


def _cuts_abbreviation(value: str, index: int) -> bool:
    """True if cutting value at index would drop the full stop ending a word."""
    if index <= 0 or index >= len(value):
        return False
    return value[index] == "." and _word_class(value[index - 1]) == "L"


def different(values: Sequence[str]) -> list[str]:
    """Strip the longest common prefix and suffix from every value.

    The cut backs off so that no letter or digit run is split: formatting
    the first of every month as "1 March 2000" and "1 May 2000" yields
    "March" and "May", not "rch" and "y". A full stop directly after a
    letter stays with the name it abbreviates ("lun.", not "lun").

    Args:
        values: Renderings differing in exactly one field

    Returns:
        The varying span of each value, in order

    Example:
        >>> different(["1 January 2000", "1 February 2000", "1 March 2000"])
        ['January', 'February', 'March']
    """
    if len(values) < 2:  # noqa: PLR2004
        return list(values)

    prefix = len(os.path.commonprefix(list(values)))
    while prefix and any(_splits_word(value, prefix) for value in values):
        prefix -= 1

    suffix = len(os.path.commonprefix([value[::-1] for value in values]))
    suffix = min(suffix, min(len(value) for value in values) - prefix)
    while suffix and any(
        _splits_word(value, len(value) - suffix) or _cuts_abbreviation(value, len(value) - suffix)
        for value in values
    ):
        suffix -= 1

    result = [value[prefix : len(value) - suffix] for value in values]
    logger.debug("Extracted names %s", result)
    return result
