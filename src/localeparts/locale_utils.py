"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from localeparts.constants import MAX_LOCALE_CACHE_SIZE
from localeparts.diagnostics import ErrorTemplate, LocaleNotSupportedError

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "resolve_locale",
    "to_lower",
]

# Languages whose lower-casing of I differs from the default Unicode mapping.
_DOTTED_I_LANGUAGES: frozenset[str] = frozenset({"tr", "az"})


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-GB), while Babel/POSIX uses underscores (en_GB).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-GB", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_GB", "pt_BR")

    Example:
        >>> normalize_locale("en-GB")
        'en_GB'
        >>> normalize_locale("nl")  # Already normalized
        'nl'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-GB")
        >>> locale.territory
        'GB'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    normalized = normalize_locale(locale_code)
    return Locale.parse(normalized)


def resolve_locale(locale_code: str | None = None) -> str:
    """Resolve a caller-supplied locale to its canonical identifier.

    None selects the system locale. The canonical form is Babel's own
    rendering of the parsed locale, so "en-gb", "en_GB" and "en-GB" share
    cache entries.

    Args:
        locale_code: Locale code, or None for the system locale

    Returns:
        Canonical POSIX locale identifier (e.g., "en_GB")

    Raises:
        LocaleNotSupportedError: If Babel does not know the locale
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    code = locale_code if locale_code else get_system_locale()
    try:
        return str(get_babel_locale(code))
    except (UnknownLocaleError, ValueError) as e:
        raise LocaleNotSupportedError(
            ErrorTemplate.locale_unknown(code), locale_code=code
        ) from e


def to_lower(text: str, locale_code: str) -> str:
    """Lower-case text following the casing rules of the locale's language.

    Args:
        text: Text to lower-case
        locale_code: Locale whose language selects the casing rules

    Returns:
        Lower-cased text

    Example:
        >>> to_lower("IRMAK", "tr_TR")
        'ırmak'
        >>> to_lower("IRMAK", "en_GB")
        'irmak'
    """
    language = normalize_locale(locale_code).split("_", 1)[0].lower()
    if language in _DOTTED_I_LANGUAGES:
        text = text.replace("I", "ı").replace("İ", "i")
    return text.lower()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Normalizes the result to POSIX format for Babel compatibility.
    Filters out "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in POSIX format.
        Returns "en_US" if not determinable and raise_on_failure is False.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return normalize_locale(system_locale.split(".")[0])
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", ""):
            # Strip encoding suffix (e.g., ".UTF-8")
            return normalize_locale(value.split(".")[0])

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return "en_US"
