"""Currency code and symbol tables.

Every CLDR currency contributes its ISO code and the symbol the locale
displays for it. A symbol several currencies share ("$" in a locale that
shows both USD and CAD as "$") keeps every code; the territory's own
currencies are registered first so that the default strategy favours them.

All currency data is sourced from Unicode CLDR via Babel.

Python 3.13+.
"""
# ruff: noqa: ERA001 - Section comments in data structures are documentation, not dead code

import logging
from collections.abc import Iterable

from babel.numbers import get_currency_symbol, get_territory_currencies, list_currencies

from localeparts.core.cache import memoize
from localeparts.datum import Datum, DatumLookup
from localeparts.locale_utils import get_babel_locale, resolve_locale

__all__ = ["CurrencySymbols", "symbol_for"]

logger = logging.getLogger(__name__)

# Symbols that map to exactly one currency worldwide, accepted in every
# locale even where CLDR displays the currency differently.
_UNAMBIGUOUS_SYMBOLS: dict[str, str] = {
    # European currencies
    "€": "EUR",  # Euro sign
    "£": "GBP",  # Pound sign (unambiguous as GBP in practice)
    # Asian currencies
    "₹": "INR",  # Indian Rupee
    "₩": "KRW",  # Korean Won
    "₫": "VND",  # Vietnamese Dong
    "₮": "MNT",  # Mongolian Tugrik
    "₱": "PHP",  # Philippine Peso
    "₴": "UAH",  # Ukrainian Hryvnia
    "₸": "KZT",  # Kazakhstani Tenge
    "₺": "TRY",  # Turkish Lira
    "₽": "RUB",  # Russian Ruble
    "₾": "GEL",  # Georgian Lari
    # Americas
    "₲": "PYG",  # Paraguayan Guarani
    # Middle East
    "₪": "ILS",  # Israeli New Shekel
    "₼": "AZN",  # Azerbaijani Manat
    # African currencies
    "₦": "NGN",  # Nigerian Naira
    "₵": "GHS",  # Ghanaian Cedi
    # Text symbols
    "zł": "PLN",  # Polish Zloty
    "Ft": "HUF",  # Hungarian Forint
}


def symbol_for(currency: str, locale: str | None = None) -> str:
    """Symbol the locale displays for a currency.

    Example:
        >>> symbol_for("GBP", "en-GB")
        '£'
        >>> symbol_for("USD", "en-GB")
        'US$'
    """
    return get_currency_symbol(currency, locale=get_babel_locale(resolve_locale(locale)))


def _territory_currencies(locale_code: str) -> list[str]:
    territory = get_babel_locale(locale_code).territory
    if not territory:
        return []
    return list(get_territory_currencies(territory))


class CurrencySymbols:
    """Currency tables mapping codes and symbols to ISO codes."""

    @staticmethod
    def data_for(locale_code: str, currency: str) -> list[Datum[str]]:
        """The ISO code and the locale's symbol for one currency."""
        symbol = get_currency_symbol(currency, locale=get_babel_locale(locale_code))
        data = [Datum(currency, currency)]
        if symbol and symbol != currency:
            data.append(Datum(symbol, currency))
        return data

    @classmethod
    def get(
        cls,
        locale: str | None = None,
        additional_data: Iterable[Datum[str]] = (),
    ) -> DatumLookup[str]:
        """Table of every currency code and symbol for a locale.

        Args:
            locale: Locale code, or None for the system locale
            additional_data: Extra entries registered ahead of CLDR's, so
                they win when a name is shared

        Example:
            >>> CurrencySymbols.get("en-GB").parse("£")
            'GBP'
        """
        return cls._table(resolve_locale(locale), tuple(additional_data))

    @classmethod
    @memoize("money.currency_symbols")
    def _table(cls, locale_code: str, additional_data: tuple[Datum[str], ...]) -> DatumLookup[str]:
        territory = _territory_currencies(locale_code)
        codes = territory + sorted(set(list_currencies()) - set(territory))
        data: list[Datum[str]] = list(additional_data)
        for code in codes:
            data.extend(cls.data_for(locale_code, code))
        data.extend(Datum(symbol, code) for symbol, code in _UNAMBIGUOUS_SYMBOLS.items())
        logger.debug(
            "Currency table for %s: %d entries, territory currencies %s",
            locale_code,
            len(data),
            territory,
        )
        return DatumLookup(data, locale_code)
