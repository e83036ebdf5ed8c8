"""Typed parts: the unit of every format-to-parts and parse-to-parts result.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from localeparts.enums import PartType

__all__ = [
    "TypedPart",
    "collapse_literals",
    "join_parts",
    "literal",
    "values_of",
]


@dataclass(frozen=True, slots=True)
class TypedPart:
    """One segment of a formatted value.

    Attributes:
        type: Kind of the segment
        value: Exact text of the segment
    """

    type: PartType
    value: str

    def __str__(self) -> str:
        return self.value


def literal(value: str) -> TypedPart:
    """Create a literal part."""
    return TypedPart(PartType.LITERAL, value)


def collapse_literals(parts: Iterable[TypedPart]) -> tuple[TypedPart, ...]:
    """Merge runs of adjacent literal parts into one literal.

    Example:
        >>> collapse_literals([literal(", "), literal(" "), TypedPart(PartType.DAY, "25")])
        (TypedPart(type=<PartType.LITERAL: 'literal'>, value=',  '), TypedPart(...))
    """
    collapsed: list[TypedPart] = []
    for part in parts:
        if (
            part.type is PartType.LITERAL
            and collapsed
            and collapsed[-1].type is PartType.LITERAL
        ):
            collapsed[-1] = literal(collapsed[-1].value + part.value)
        else:
            collapsed.append(part)
    return tuple(collapsed)


def join_parts(parts: Iterable[TypedPart]) -> str:
    """Reconstruct the formatted string from its parts."""
    return "".join(part.value for part in parts)


def values_of(parts: Sequence[TypedPart], part_type: PartType) -> list[str]:
    """Values of every part of the given type, in order."""
    return [part.value for part in parts if part.type is part_type]
