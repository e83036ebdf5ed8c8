"""Core utilities shared by the dates and money packages.

This package provides the foundations both formatting engines and both
parsers depend on:

    core <- datum <- dates, money

Exports:
    TypedPart: One typed segment of a formatted value
    Matcher, Slot: Pattern builder and compiled matcher
    KeyedCache, memoize, clear_caches: Process-wide memoization

Python 3.13+.
"""

from .cache import KeyedCache, cache_stats, clear_caches, memoize
from .parts import TypedPart, collapse_literals, join_parts
from .pattern import Matcher, Slot, alternation, char_class, iterate_matches

__all__ = [
    "KeyedCache",
    "Matcher",
    "Slot",
    "TypedPart",
    "alternation",
    "cache_stats",
    "char_class",
    "clear_caches",
    "collapse_literals",
    "iterate_matches",
    "join_parts",
    "memoize",
]
