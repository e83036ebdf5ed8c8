"""Money value type, options and the Babel currency formatter.

Amounts are Decimal throughout: a monetary value never passes through
binary floating point on its way to or from text.

Python 3.13+.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from babel.numbers import format_currency

from localeparts.core.cache import memoize
from localeparts.datum import MatchStrategy
from localeparts.diagnostics import ErrorTemplate, UnsupportedOptionsError
from localeparts.enums import CurrencyDisplay
from localeparts.locale_utils import get_babel_locale

__all__ = [
    "ISO_CURRENCY_CODE_LENGTH",
    "Money",
    "MoneyFormatter",
    "MoneyOptions",
    "coerce_display",
]

logger = logging.getLogger(__name__)

# ISO 4217 currency codes are exactly 3 uppercase ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3

# A lone currency sign in a CLDR number pattern; doubled it shows the ISO code.
_CURRENCY_SIGN = re.compile("(?<!¤)¤(?!¤)")

_MONEY_OPTION_KEYS: tuple[str, ...] = ("strategy", "format")


@dataclass(frozen=True, slots=True)
class Money:
    """An amount of one currency.

    Attributes:
        currency: ISO 4217 code ("GBP")
        amount: Exact decimal amount
    """

    currency: str
    amount: Decimal

    def __post_init__(self) -> None:
        if not (
            len(self.currency) == ISO_CURRENCY_CODE_LENGTH
            and self.currency.isascii()
            and self.currency.isalpha()
            and self.currency.isupper()
        ):
            msg = f"Currency must be a 3-letter uppercase ISO 4217 code, got {self.currency!r}"
            raise ValueError(msg)
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", self._to_decimal(self.amount))

    @staticmethod
    def _to_decimal(amount: object) -> Decimal:
        # str() first so that floats keep their shortest repr (0.1, not 0.1000000000000000055...)
        try:
            return Decimal(str(amount))
        except InvalidOperation as e:
            msg = f"Amount must be a decimal number, got {amount!r}"
            raise ValueError(msg) from e

    def __str__(self) -> str:
        return f"{self.currency} {self.amount}"


@dataclass(frozen=True, slots=True)
class MoneyOptions:
    """Parsing options for money.

    Attributes:
        strategy: Chooses a currency when a symbol stands for several
            (default: the first registered, which favours the locale's
            own territory)
        format: Explicit layout using C (currency), i (integer digits,
            grouped as written) and f (fraction digits), e.g. "CCC i,iii.ff"
    """

    strategy: MatchStrategy[str] | None = None
    format: str | None = None

    @classmethod
    def coerce(cls, options: "MoneyOptions | Mapping[str, object] | str | None") -> "MoneyOptions":
        """Accept MoneyOptions, a mapping of its fields, a format string or None.

        Raises:
            UnsupportedOptionsError: If a mapping carries an unknown key
        """
        match options:
            case None:
                return cls()
            case MoneyOptions():
                return options
            case str():
                return cls(format=options)
        for key in options:
            if key not in _MONEY_OPTION_KEYS:
                raise UnsupportedOptionsError(
                    ErrorTemplate.unsupported_option(key, options[key], _MONEY_OPTION_KEYS),
                )
        return cls(
            strategy=options.get("strategy"),  # type: ignore[arg-type]
            format=options.get("format"),  # type: ignore[arg-type]
        )


def coerce_display(display: CurrencyDisplay | str) -> CurrencyDisplay:
    """Accept a CurrencyDisplay or its string value ("code", "symbol")."""
    try:
        return CurrencyDisplay(display)
    except ValueError as e:
        raise UnsupportedOptionsError(
            ErrorTemplate.unsupported_option("display", display, list(CurrencyDisplay)),
        ) from e


class MoneyFormatter:
    """Currency formatter for one locale and display mode.

    Uses the locale's standard currency pattern; code display doubles the
    currency sign so that Babel renders the ISO code in the symbol's place.
    Fraction digits follow the currency (2 for GBP, 0 for JPY).

    Attributes:
        locale_code: Canonical locale identifier
        display: Code or symbol display
        pattern: CLDR number pattern used for rendering
    """

    __slots__ = ("display", "locale_code", "pattern")

    def __init__(self, locale_code: str, display: CurrencyDisplay | str = CurrencyDisplay.CODE) -> None:
        self.locale_code = locale_code
        self.display = coerce_display(display)
        pattern = get_babel_locale(locale_code).currency_formats["standard"].pattern
        if self.display is CurrencyDisplay.CODE:
            pattern = _CURRENCY_SIGN.sub("¤¤", pattern)
        self.pattern = pattern
        logger.debug("Currency pattern for %s (%s): %r", locale_code, self.display, pattern)

    @classmethod
    @memoize("money.formatter")
    def create(cls, locale_code: str, display: CurrencyDisplay) -> "MoneyFormatter":
        """Shared formatter for (locale, display)."""
        return cls(locale_code, display)

    def format(self, money: Money) -> str:
        """Render money with the currency's own number of fraction digits."""
        return format_currency(
            money.amount,
            money.currency,
            format=self.pattern,
            locale=get_babel_locale(self.locale_code),
            currency_digits=True,
        )

    def __repr__(self) -> str:
        return f"MoneyFormatter({self.locale_code!r}, {self.display.value!r})"
