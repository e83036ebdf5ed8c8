"""Pattern builder: ordered slots compiled into a typed matcher.

A schema is turned into a sequence of slots, each a part kind plus a
regular-expression body. Python's re module forbids repeating a group name,
so every slot gets its own group (g0, g1, ...) and the matcher keeps the
group-to-kind mapping that turns a match back into typed parts.

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from localeparts.core.parts import TypedPart
from localeparts.diagnostics import ErrorTemplate, NoMatchError
from localeparts.enums import PartType

__all__ = [
    "Matcher",
    "Slot",
    "alternation",
    "char_class",
    "iterate_matches",
]

# Maps a slot kind and its captured text to typed parts.
type PartConverter = Callable[[str, str], Iterable[TypedPart]]


@dataclass(frozen=True, slots=True)
class Slot:
    """One position of a generated pattern.

    Attributes:
        kind: Part kind captured by the slot, or None for a non-capturing slot
        body: Regular-expression body
    """

    kind: str | None
    body: str


def char_class(chars: str, *, spaces: bool = True) -> str:
    """Character class over the distinct characters of chars.

    Whitespace, including the no-break and narrow no-break spaces found in
    CLDR output, collapses into \\s. With spaces=True a \\s is always
    included so that literal separators tolerate any kind of space.
    """
    seen: dict[str, None] = {}
    for char in chars:
        if char.isspace():
            spaces = True
        else:
            seen.setdefault(char, None)
    body = "".join(re.escape(char) for char in seen)
    if spaces:
        body += r"\s"
    return f"[{body}]"


def alternation(names: Iterable[str]) -> str:
    """Non-capturing alternation of distinct names, longest first.

    Longest-first ordering guarantees that no name is tried before a longer
    name sharing it as a prefix ("Jun" after "June"). Whitespace inside a
    name matches any run of whitespace.
    """
    distinct = sorted({name for name in names if name}, key=lambda name: (-len(name), name))
    if not distinct:
        return "(?!)"
    return "(?:" + "|".join(_spaced(name) for name in distinct) + ")"


def _spaced(name: str) -> str:
    words = name.split()
    if len(words) <= 1:
        return re.escape(name)
    return r"\s+".join(re.escape(word) for word in words)


def iterate_matches(pattern: re.Pattern[str], text: str) -> Iterator[re.Match[str] | str]:
    """Walk text, yielding each match and each unmatched run between matches."""
    position = 0
    for match in pattern.finditer(text):
        if match.start() > position:
            yield text[position : match.start()]
        if match.end() > match.start():
            yield match
        position = match.end()
    if position < len(text):
        yield text[position:]


def _default_converter(kind: str, value: str) -> Iterable[TypedPart]:
    return (TypedPart(PartType(kind), value),)


class Matcher:
    """Compiled pattern with a deterministic group-to-kind mapping.

    Attributes:
        pattern: Compiled regular expression
        kinds: Group name to slot kind mapping, in slot order
        locale_code: Locale the pattern was generated for (diagnostics)
    """

    __slots__ = ("_convert", "kinds", "locale_code", "pattern")

    def __init__(
        self,
        slots: Iterable[Slot],
        *,
        flags: int = 0,
        suffix: str = "",
        convert: PartConverter = _default_converter,
        locale_code: str = "",
    ) -> None:
        """Compile slots into a matcher.

        Args:
            slots: Ordered slots of the pattern
            flags: re flags (re.IGNORECASE for name matching)
            suffix: Trailing regular expression appended after the last slot
            convert: Maps (kind, captured text) to typed parts
            locale_code: Locale the pattern was generated for
        """
        bodies: list[str] = []
        kinds: dict[str, str] = {}
        for index, slot in enumerate(slots):
            if slot.kind is None:
                bodies.append(f"(?:{slot.body})")
            else:
                group = f"g{index}"
                kinds[group] = slot.kind
                bodies.append(f"(?P<{group}>{slot.body})")
        self.pattern = re.compile("".join(bodies) + suffix, flags)
        self.kinds = kinds
        self.locale_code = locale_code
        self._convert = convert

    def match(self, text: str) -> tuple[TypedPart, ...]:
        """Typed parts of the first match anywhere in text.

        Raises:
            NoMatchError: If the pattern does not occur in text
        """
        found = self.pattern.search(text)
        if found is None:
            raise self._no_match(text)
        return self.parts_of(found)

    def fullmatch(self, text: str) -> tuple[TypedPart, ...]:
        """Typed parts of a match spanning the whole of text.

        Raises:
            NoMatchError: If the pattern does not match all of text
        """
        found = self.pattern.fullmatch(text)
        if found is None:
            raise self._no_match(text)
        return self.parts_of(found)

    def match_all(self, text: str) -> list[tuple[tuple[int, int], tuple[TypedPart, ...]]]:
        """Spans and typed parts of every non-overlapping match in text."""
        return [
            (found.span(), self.parts_of(found))
            for found in self.pattern.finditer(text)
            if found.end() > found.start()
        ]

    def parts_of(self, found: re.Match[str]) -> tuple[TypedPart, ...]:
        """Convert a match into typed parts, dropping empty captures."""
        parts: list[TypedPart] = []
        for group, kind in self.kinds.items():
            value = found.group(group)
            if value:
                parts.extend(self._convert(kind, value))
        return tuple(parts)

    def _no_match(self, text: str) -> NoMatchError:
        return NoMatchError(
            ErrorTemplate.no_match(text, self.pattern.pattern, self.locale_code),
            input_value=text,
            locale_code=self.locale_code,
            pattern=self.pattern.pattern,
        )

    def __repr__(self) -> str:
        return f"Matcher({self.pattern.pattern!r})"
