"""Property tests for date formatting and parsing.

Any date in the four-digit year range survives format_date() followed by
parse_date() under the same locale and options, and the parts of every
rendering join back to it.
"""

from datetime import date

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from localeparts import format_date, format_date_to_parts, parse_all_dates, parse_date
from localeparts.core.parts import join_parts
from localeparts.enums import PartType

# ============================================================================
# STRATEGIES
# ============================================================================

LOCALES = ["en-GB", "en-US", "nl", "de", "fr", "es"]

OPTION_SETS = [
    {"year": "numeric", "month": "numeric", "day": "numeric"},
    {"year": "numeric", "month": "short", "day": "numeric"},
    {"year": "numeric", "month": "long", "day": "numeric"},
    {"year": "numeric", "month": "long", "day": "numeric", "weekday": "long"},
]

dates = st.dates(min_value=date(1000, 1, 1), max_value=date(9999, 12, 31))
locales = st.sampled_from(LOCALES)
option_sets = st.sampled_from(OPTION_SETS)


def _label(options: dict[str, str]) -> str:
    return "+".join(f"{key}={value}" for key, value in options.items())


# ============================================================================
# ROUND TRIPS
# ============================================================================


class TestDateRoundTrip:
    """format_date() and parse_date() are inverse."""

    @given(value=dates, locale=locales, options=option_sets)
    def test_round_trip(self, value: date, locale: str, options: dict[str, str]) -> None:
        """Parsing a formatted date gives the date back."""
        event(f"locale={locale}")
        event(f"options={_label(options)}")
        text = format_date(value, locale, options)
        assert parse_date(text, locale, options) == value

    @given(value=dates, locale=locales, options=option_sets)
    def test_emulated_round_trip(self, value: date, locale: str, options: dict[str, str]) -> None:
        """The sampled schema parses what the locale renders."""
        event(f"locale={locale}")
        text = format_date(value, locale, options)
        assert parse_date(text, locale, options, native=False) == value

    @given(
        value=dates,
        locale=st.sampled_from(["en-GB", "en-US"]),
        options=option_sets,
    )
    def test_default_candidates(self, value: date, locale: str, options: dict[str, str]) -> None:
        """Parsing without options finds the date in any common layout."""
        event(f"options={_label(options)}")
        text = format_date(value, locale, options)
        assert parse_date(text, locale) == value

    @given(value=st.dates(min_value=date(2000, 1, 1), max_value=date(2099, 12, 31)))
    def test_two_digit_year(self, value: date) -> None:
        """Two-digit years round-trip within the 2000s."""
        text = format_date(value, "en-GB", "dd/MM/yy")
        assert parse_date(text, "en-GB", "dd/MM/yy") == value


# ============================================================================
# PART INVARIANTS
# ============================================================================


class TestPartInvariants:
    """Parts reproduce the rendering for any date."""

    @given(value=dates, locale=locales, options=option_sets, native=st.booleans())
    def test_parts_join(
        self, value: date, locale: str, options: dict[str, str], native: bool
    ) -> None:
        """Joined parts equal the formatted string; literals never touch."""
        event(f"native={native}")
        parts = format_date_to_parts(value, locale, options, native=native)
        assert join_parts(parts) == format_date(value, locale, options)
        kinds = [part.type for part in parts]
        for before, after in zip(kinds, kinds[1:], strict=False):
            assert not (before is PartType.LITERAL and after is PartType.LITERAL)

    @given(value=dates, locale=locales, options=option_sets)
    def test_year_part_is_year(self, value: date, locale: str, options: dict[str, str]) -> None:
        parts = format_date_to_parts(value, locale, options)
        years = [part.value for part in parts if part.type is PartType.YEAR]
        assert years == [str(value.year)]


# ============================================================================
# FUZZ
# ============================================================================


@pytest.mark.fuzz
class TestScanFuzz:
    """Dates embedded in prose are all found."""

    @given(
        values=st.lists(dates, min_size=1, max_size=5),
        locale=locales,
        options=option_sets,
    )
    def test_scan_finds_every_date(
        self, values: list[date], locale: str, options: dict[str, str]
    ) -> None:
        text = " and then ".join(format_date(value, locale, options) for value in values)
        assert parse_all_dates(f"from {text}.", locale, options) == values
