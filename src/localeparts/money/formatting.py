"""Money formatting to strings and to typed parts.

Babel renders currency amounts but has no part breakdown for them, so the
parts are always emulated. The sample GBP 111222.3333 is rendered once per
locale and display mode: the integer run starts with 1 and ends with 2,
the fraction is all 3s and whatever the currency table recognises is the
currency. The integer run is then split into digit runs and group
separators, and the resulting schema is generalized into a pattern that
splits the rendering of any amount in any currency.

Python 3.13+.
"""

import logging
import re

from localeparts.constants import SAMPLE_AMOUNT, SAMPLE_CURRENCY
from localeparts.core.cache import memoize
from localeparts.core.parts import TypedPart, collapse_literals, literal
from localeparts.core.pattern import Matcher, iterate_matches
from localeparts.diagnostics import ErrorTemplate, SchemaInferenceError
from localeparts.enums import CurrencyDisplay, PartType
from localeparts.locale_utils import resolve_locale

from .money import Money, MoneyFormatter, coerce_display
from .symbols import CurrencySymbols

__all__ = [
    "DIGITS",
    "FORMAT_STRING",
    "FormatToParts",
    "IntegerGroupParser",
    "PLACEHOLDERS",
    "PartsFromFormat",
    "format_money",
    "format_money_to_parts",
    "money_schema",
]

logger = logging.getLogger(__name__)

_REQUIRED_PARTS: tuple[PartType, ...] = (PartType.CURRENCY, PartType.INTEGER)


class IntegerGroupParser:
    """Splits a grouped integer run ("111,222") into integer and group parts.

    Attributes:
        pattern: What one run of integer digits looks like
    """

    __slots__ = ("pattern",)

    def __init__(self, digits: str) -> None:
        self.pattern = re.compile(digits)

    def parse(self, text: str) -> list[TypedPart]:
        """Integer runs and the group separators between them, in order."""
        return [
            TypedPart(PartType.INTEGER, token.group())
            if isinstance(token, re.Match)
            else TypedPart(PartType.GROUP, token)
            for token in iterate_matches(self.pattern, text)
        ]


# Rendered amounts: digit runs.
DIGITS = IntegerGroupParser(r"\d+")

# Format strings: runs of the i placeholder.
PLACEHOLDERS = IntegerGroupParser(r"i+")


class PartsFromFormat:
    """Reads the parts of a money rendering or format string.

    The pattern has three named groups: integer_group (the whole grouped
    integer run), optional decimal plus fraction, and currency. Text
    between matches is literal.
    """

    __slots__ = ("integer_groups", "pattern")

    def __init__(self, pattern: str, integer_groups: IntegerGroupParser) -> None:
        self.pattern = re.compile(pattern)
        self.integer_groups = integer_groups

    @classmethod
    @memoize("money.example_pattern")
    def example(cls, locale_code: str) -> "PartsFromFormat":
        """Reader for renderings of the sample amount in a locale."""
        currencies = CurrencySymbols.get(locale_code).pattern
        return cls(
            rf"(?:(?P<integer_group>1.*2)(?:(?P<decimal>.)(?P<fraction>3+))?|(?P<currency>{currencies}))",
            DIGITS,
        )

    def parse(self, text: str) -> tuple[TypedPart, ...]:
        """Typed parts of text; adjacent literals are collapsed."""
        parts: list[TypedPart] = []
        for token in iterate_matches(self.pattern, text):
            if isinstance(token, str):
                parts.append(literal(token))
            elif currency := token.group("currency"):
                parts.append(TypedPart(PartType.CURRENCY, currency))
            else:
                parts.extend(self.integer_groups.parse(token.group("integer_group")))
                if decimal := token.group("decimal"):
                    parts.append(TypedPart(PartType.DECIMAL, decimal))
                    parts.append(TypedPart(PartType.FRACTION, token.group("fraction")))
        return collapse_literals(parts)


# Explicit layouts: "CCC i,iii.ff", "i.iii,ff C".
FORMAT_STRING = PartsFromFormat(
    r"(?:(?P<integer_group>i(?:.*i)?)(?:(?P<decimal>[^f])(?P<fraction>f+))?|(?P<currency>C+))",
    PLACEHOLDERS,
)


class FormatToParts:
    """Emulated part breakdown of money renderings for one locale and display.

    Attributes:
        locale_code: Canonical locale identifier
        display: Code or symbol display
        schema: Parts of the sample rendering
        matcher: Generalized pattern splitting any rendering into parts
    """

    __slots__ = ("_formatter", "display", "locale_code", "matcher", "schema")

    def __init__(self, locale_code: str, display: CurrencyDisplay) -> None:
        """Learn the layout from the sample rendering.

        Raises:
            SchemaInferenceError: If the sample rendering shows no currency
                or no integer digits
        """
        # parsing.py builds on the schemas learned here
        from .parsing import RegexBuilder  # noqa: PLC0415

        self.locale_code = locale_code
        self.display = display
        self._formatter = MoneyFormatter.create(locale_code, display)

        rendered = self._formatter.format(Money(SAMPLE_CURRENCY, SAMPLE_AMOUNT))
        self.schema = PartsFromFormat.example(locale_code).parse(rendered)
        kinds = {part.type for part in self.schema}
        missing = [kind.value for kind in _REQUIRED_PARTS if kind not in kinds]
        if missing:
            raise SchemaInferenceError(
                ErrorTemplate.schema_inference_failed(
                    locale_code, rendered, f"no {', '.join(missing)} found"
                ),
                input_value=rendered,
                locale_code=locale_code,
            )

        self.matcher: Matcher = RegexBuilder.create(locale_code).build_from(self.schema)
        logger.debug(
            "Inferred money layout for %s (%s) from %r: %s",
            locale_code,
            display,
            rendered,
            self.matcher.pattern.pattern,
        )

    @classmethod
    @memoize("money.format_to_parts")
    def create(cls, locale_code: str, display: CurrencyDisplay) -> "FormatToParts":
        """Shared engine for (locale, display)."""
        return cls(locale_code, display)

    def format(self, money: Money) -> str:
        """Render money."""
        return self._formatter.format(money)

    def format_to_parts(self, money: Money) -> tuple[TypedPart, ...]:
        """Render money and split it with the learned pattern.

        Raises:
            NoMatchError: If the rendering departs from the learned layout
        """
        return collapse_literals(self.matcher.fullmatch(self.format(money)))

    def __repr__(self) -> str:
        return f"FormatToParts({self.locale_code!r}, {self.display.value!r})"


def money_schema(locale_code: str, display: CurrencyDisplay = CurrencyDisplay.CODE) -> tuple[TypedPart, ...]:
    """Typed parts of the sample amount for a canonical locale."""
    return FormatToParts.create(locale_code, display).schema


def format_money(
    money: Money,
    locale: str | None = None,
    display: CurrencyDisplay | str = CurrencyDisplay.CODE,
) -> str:
    """Format money for a locale.

    Args:
        money: Amount and currency
        locale: Locale code, or None for the system locale
        display: "code" (GBP) or "symbol" (£)

    Example:
        >>> format_money(Money("GBP", Decimal("111222.33")), "de")
        '111.222,33\\xa0GBP'
    """
    return MoneyFormatter.create(resolve_locale(locale), coerce_display(display)).format(money)


def format_money_to_parts(
    money: Money,
    locale: str | None = None,
    display: CurrencyDisplay | str = CurrencyDisplay.CODE,
) -> tuple[TypedPart, ...]:
    """Format money into typed parts.

    Joining the values of the parts reproduces format_money() exactly.

    Example:
        >>> format_money_to_parts(Money("GBP", Decimal("1234.5")), "en-GB", "symbol")
        (TypedPart(type=<PartType.CURRENCY: 'currency'>, value='£'),
         TypedPart(type=<PartType.INTEGER: 'integer'>, value='1'),
         TypedPart(type=<PartType.GROUP: 'group'>, value=','),
         TypedPart(type=<PartType.INTEGER: 'integer'>, value='234'),
         TypedPart(type=<PartType.DECIMAL: 'decimal'>, value='.'),
         TypedPart(type=<PartType.FRACTION: 'fraction'>, value='50'))
    """
    return FormatToParts.create(resolve_locale(locale), coerce_display(display)).format_to_parts(money)

