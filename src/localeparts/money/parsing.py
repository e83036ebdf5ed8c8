"""Money parsing: schemas inverted into matchers.

The schema of the sample rendering (or of an explicit format string) fixes
the order of currency, integer, decimal separator and fraction. Group
separators are folded into the integer slot so that amounts of any size
match, the fraction is optional and literal separators may be dropped,
repeated or replaced by any whitespace. A match must end at whitespace or
at the end of the text, so that "GBP 12" is not read out of "GBP 12abc".

Python 3.13+.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal, InvalidOperation

from localeparts.core.cache import memoize
from localeparts.core.parts import TypedPart, values_of
from localeparts.core.pattern import Matcher, Slot, char_class
from localeparts.diagnostics import (
    ErrorTemplate,
    NoMatchError,
    NotFoundError,
    UnparseableError,
)
from localeparts.enums import PartType
from localeparts.locale_utils import resolve_locale

from .formatting import DIGITS, FORMAT_STRING, money_schema
from .money import Money, MoneyOptions
from .symbols import CurrencySymbols

__all__ = [
    "MoneyParser",
    "NumberFormatPartParser",
    "RegexBuilder",
    "money_from",
    "money_parser",
    "parse_money",
    "parse_money_to_parts",
]

logger = logging.getLogger(__name__)

type Span = tuple[int, int]

_NUMBER_PARTS: frozenset[PartType] = frozenset({PartType.INTEGER, PartType.DECIMAL, PartType.FRACTION})


class RegexBuilder:
    """Builds money matchers for one locale.

    Attributes:
        locale_code: Canonical locale identifier
        symbols: Currency table whose alternation fills the currency slot
    """

    __slots__ = ("locale_code", "symbols")

    def __init__(self, locale_code: str) -> None:
        self.locale_code = locale_code
        self.symbols = CurrencySymbols.get(locale_code)

    @classmethod
    @memoize("money.regex_builder")
    def create(cls, locale_code: str) -> "RegexBuilder":
        """Shared builder for a canonical locale."""
        return cls(locale_code)

    def slots(self, parts: Sequence[TypedPart]) -> list[Slot]:
        """Slots matching any amount laid out like parts."""
        group = "".join(values_of(parts, PartType.GROUP))
        layout: list[TypedPart] = []
        for part in parts:
            if part.type is PartType.GROUP:
                continue
            if layout and layout[-1].type is part.type:
                continue
            layout.append(part)

        slots: list[Slot] = []
        for index, part in enumerate(layout):
            match part.type:
                case PartType.CURRENCY:
                    body = self.symbols.pattern
                case PartType.DECIMAL:
                    body = char_class(part.value, spaces=False) + "?"
                case PartType.FRACTION:
                    body = r"\d*"
                case PartType.INTEGER:
                    separators = char_class(group, spaces=False)[1:-1]
                    body = rf"[\d{separators}]*\d+"
                case _:
                    body = char_class(part.value) + "*"
            if index and _touching(layout[index - 1], part):
                slots.append(Slot(PartType.LITERAL, r"\s?"))
            slots.append(Slot(part.type, body))
        return slots

    def build_from(self, parts: Sequence[TypedPart]) -> Matcher:
        """Compile the matcher for a schema."""
        return Matcher(
            self.slots(parts),
            suffix=r"(?=\s|$)",
            convert=_convert,
            locale_code=self.locale_code,
        )


def _touching(before: TypedPart, after: TypedPart) -> bool:
    """True where a currency sits directly against a number."""
    kinds = {before.type, after.type}
    return PartType.CURRENCY in kinds and bool(kinds & _NUMBER_PARTS)


def _convert(kind: str, value: str) -> Iterable[TypedPart]:
    if kind == PartType.INTEGER:
        return DIGITS.parse(value)
    return (TypedPart(PartType(kind), value),)


class NumberFormatPartParser:
    """Splits text into money parts for one locale and layout.

    Attributes:
        locale_code: Canonical locale identifier
        format: Explicit format string, or None for the locale's own layout
        matcher: Compiled money matcher
    """

    __slots__ = ("format", "locale_code", "matcher")

    def __init__(self, locale_code: str, format: str | None = None) -> None:  # noqa: A002
        self.locale_code = locale_code
        self.format = format
        schema = FORMAT_STRING.parse(format) if format else money_schema(locale_code)
        self.matcher = RegexBuilder.create(locale_code).build_from(schema)

    @classmethod
    @memoize("money.part_parser")
    def create(cls, locale_code: str, format: str | None = None) -> "NumberFormatPartParser":  # noqa: A002
        """Shared part parser for (locale, format)."""
        return cls(locale_code, format)

    def parse(self, text: str) -> tuple[TypedPart, ...]:
        """Parts of the first amount in text.

        Raises:
            NoMatchError: If no amount in this layout occurs in text
        """
        return self.matcher.match(text)

    def scan(self, text: str) -> list[tuple[Span, tuple[TypedPart, ...]]]:
        """Spans and parts of every amount in text."""
        return self.matcher.match_all(text)

    def __repr__(self) -> str:
        return f"NumberFormatPartParser({self.locale_code!r}, {self.format!r})"


def money_from(
    parts: Iterable[TypedPart],
    locale_code: str,
    options: MoneyOptions | None = None,
    text: str = "",
) -> Money:
    """Assemble money from matched parts.

    The currency is resolved through the locale's currency table with the
    options' strategy; integer runs, a "." and the fraction digits form
    the amount.

    Raises:
        UnparseableError: If the currency or the integer digits are missing
        NotFoundError: If the currency is unknown to the locale
    """
    parts = tuple(parts)
    currencies = values_of(parts, PartType.CURRENCY)
    integer = "".join(values_of(parts, PartType.INTEGER))
    if not currencies or not integer:
        missing = "currency" if not currencies else "integer digits"
        raise UnparseableError(
            ErrorTemplate.amount_invalid(text, locale_code, f"missing {missing}"),
            input_value=text,
            locale_code=locale_code,
        )

    strategy = options.strategy if options else None
    currency = CurrencySymbols.get(locale_code).parse(currencies[0], strategy)

    fraction = "".join(values_of(parts, PartType.FRACTION))
    try:
        amount = Decimal(f"{integer}.{fraction}" if fraction else integer)
    except InvalidOperation as e:
        raise UnparseableError(
            ErrorTemplate.amount_invalid(text, locale_code, str(e)),
            input_value=text,
            locale_code=locale_code,
        ) from e
    return Money(currency, amount)


class MoneyParser:
    """Parser for money in one locale and layout.

    Attributes:
        locale_code: Canonical locale identifier
        options: Currency strategy and optional format string
    """

    __slots__ = ("_parts", "locale_code", "options")

    def __init__(self, locale_code: str, options: MoneyOptions | None = None) -> None:
        self.locale_code = locale_code
        self.options = options or MoneyOptions()
        self._parts = NumberFormatPartParser.create(locale_code, self.options.format)

    def parse_to_parts(self, text: str) -> tuple[TypedPart, ...]:
        """Typed parts of the first amount in text.

        Raises:
            NoMatchError: If no amount occurs in text
        """
        return self._parts.parse(text)

    def parse(self, text: str) -> Money:
        """First amount in text."""
        return money_from(self.parse_to_parts(text), self.locale_code, self.options, text)

    def scan(self, text: str) -> list[tuple[Span, Money]]:
        """Spans and values of every amount with a known currency."""
        found: list[tuple[Span, Money]] = []
        for span, parts in self._parts.scan(text):
            snippet = text[span[0] : span[1]]
            try:
                found.append((span, money_from(parts, self.locale_code, self.options, snippet)))
            except (UnparseableError, NotFoundError) as e:
                logger.debug("Skipping %r at %s: %s", snippet, span, e)
        return found

    def parse_all(self, text: str) -> list[Money]:
        """Every amount in text, in order."""
        return [value for _, value in self.scan(text)]

    def __repr__(self) -> str:
        return f"MoneyParser({self.locale_code!r}, {self.options.format!r})"


def money_parser(
    locale: str | None = None,
    options: MoneyOptions | Mapping[str, object] | str | None = None,
) -> MoneyParser:
    """Parser for a locale; options give a strategy and/or a format string.

    Example:
        >>> money_parser("en-GB", {"format": "CCC i,iii.ff"}).parse("GBP 1,234.50")
        Money(currency='GBP', amount=Decimal('1234.50'))
    """
    return MoneyParser(resolve_locale(locale), MoneyOptions.coerce(options))


def _unparseable(text: str, locale_code: str) -> UnparseableError:
    return UnparseableError(
        ErrorTemplate.unparseable(text, locale_code, "money"),
        input_value=text,
        locale_code=locale_code,
    )


def parse_money(
    text: str,
    locale: str | None = None,
    options: MoneyOptions | Mapping[str, object] | str | None = None,
) -> Money:
    """Parse the first amount of money in text.

    Args:
        text: Text containing a formatted amount
        locale: Locale code, or None for the system locale
        options: Currency strategy and/or format string

    Returns:
        The parsed money

    Raises:
        UnparseableError: If no amount with a known currency is found

    Example:
        >>> parse_money("GBP 111,222.33", "en-GB")
        Money(currency='GBP', amount=Decimal('111222.33'))
        >>> parse_money("Total: £12.50", "en-GB", {"strategy": unique_match})
        Money(currency='GBP', amount=Decimal('12.50'))
    """
    parser = money_parser(locale, options)
    try:
        return parser.parse(text)
    except (NoMatchError, NotFoundError) as e:
        raise _unparseable(text, parser.locale_code) from e


def parse_money_to_parts(
    text: str,
    locale: str | None = None,
    options: MoneyOptions | Mapping[str, object] | str | None = None,
) -> tuple[TypedPart, ...]:
    """Typed parts of the first amount in text.

    Raises:
        UnparseableError: If no amount is found
    """
    parser = money_parser(locale, options)
    try:
        return parser.parse_to_parts(text)
    except NoMatchError as e:
        raise _unparseable(text, parser.locale_code) from e
