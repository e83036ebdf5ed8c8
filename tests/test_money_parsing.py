"""Tests for money parsing, scanning and explicit layouts."""

from decimal import Decimal

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from localeparts import (
    Datum,
    Money,
    MoneyOptions,
    NoMatchError,
    NotFoundError,
    PartType,
    UnparseableError,
    format_money,
    money_parser,
    parse_money,
    parse_money_to_parts,
    prefer,
)
from localeparts.core.parts import TypedPart, literal, values_of
from localeparts.diagnostics import DiagnosticCode
from localeparts.money import CurrencySymbols, MoneyParser
from localeparts.money.formatting import FORMAT_STRING, money_schema
from localeparts.money.parsing import NumberFormatPartParser, RegexBuilder, money_from


class TestParseMoney:
    """Test parse_money()."""

    def test_code_round_trip(self) -> None:
        money = Money("GBP", Decimal("111222.33"))
        assert parse_money(format_money(money, "en-GB"), "en-GB") == money

    def test_symbol(self) -> None:
        assert parse_money("£1,234.50", "en-GB") == Money("GBP", Decimal("1234.50"))

    def test_space_after_currency(self) -> None:
        """A space may separate currency and amount even where none is rendered."""
        assert parse_money("GBP 111,222.33", "en-GB") == Money("GBP", Decimal("111222.33"))
        assert parse_money("£ 5", "en-GB") == Money("GBP", Decimal(5))
        assert parse_money("GBP111,222.33", "en-GB") == Money("GBP", Decimal("111222.33"))

    def test_embedded(self) -> None:
        assert parse_money("Total: £12.50 due", "en-GB") == Money("GBP", Decimal("12.50"))

    def test_without_grouping(self) -> None:
        assert parse_money("£1234567.89", "en-GB") == Money("GBP", Decimal("1234567.89"))

    def test_without_fraction(self) -> None:
        assert parse_money("£12", "en-GB") == Money("GBP", Decimal(12))

    def test_german(self) -> None:
        text = format_money(Money("EUR", Decimal("1234.5")), "de", "symbol")
        assert parse_money(text, "de") == Money("EUR", Decimal("1234.50"))

    def test_german_plain_space(self) -> None:
        """Any whitespace stands in for the no-break space."""
        assert parse_money("1.234,50 EUR", "de") == Money("EUR", Decimal("1234.50"))

    def test_dollar_by_locale(self) -> None:
        assert parse_money("$5.00", "en-US").currency == "USD"
        assert parse_money("$5.00", "en-CA").currency == "CAD"

    def test_strategy(self) -> None:
        options = {"strategy": prefer("AUD", "USD")}
        assert parse_money("$5.00", "en-CA", options).currency == "CAD"

    def test_trailing_garbage_rejected(self) -> None:
        """An amount must end at whitespace or the end of the text."""
        with pytest.raises(UnparseableError):
            parse_money("GBP 12abc", "en-GB")

    def test_no_amount(self) -> None:
        with pytest.raises(UnparseableError) as exc_info:
            parse_money("nothing to see", "en-GB")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.UNPARSEABLE
        assert isinstance(exc_info.value.__cause__, NoMatchError)


class TestFormatStrings:
    """Test explicit layouts."""

    def test_code_first(self) -> None:
        assert parse_money("GBP 1,234.50", "en-GB", "CCC i,iii.ff") == Money(
            "GBP", Decimal("1234.50")
        )

    def test_currency_last(self) -> None:
        """A layout can differ from the locale's own."""
        assert parse_money("1.234,50 GBP", "en-GB", {"format": "i.iii,ff CCC"}) == Money(
            "GBP", Decimal("1234.50")
        )

    def test_options_instance(self) -> None:
        options = MoneyOptions(format="CCC i,iii.ff")
        assert parse_money("EUR 9,999.99", "en-GB", options) == Money("EUR", Decimal("9999.99"))


class TestParseMoneyToParts:
    """Test parse_money_to_parts()."""

    def test_parts(self) -> None:
        parts = parse_money_to_parts("£1,234.50", "en-GB")
        assert parts == (
            TypedPart(PartType.CURRENCY, "£"),
            TypedPart(PartType.INTEGER, "1"),
            TypedPart(PartType.GROUP, ","),
            TypedPart(PartType.INTEGER, "234"),
            TypedPart(PartType.DECIMAL, "."),
            TypedPart(PartType.FRACTION, "50"),
        )

    def test_space_is_literal(self) -> None:
        """The optional space between currency and amount is kept as a literal."""
        parts = parse_money_to_parts("GBP 12.00", "en-GB")
        assert parts[:3] == (
            TypedPart(PartType.CURRENCY, "GBP"),
            literal(" "),
            TypedPart(PartType.INTEGER, "12"),
        )

    def test_no_match(self) -> None:
        with pytest.raises(UnparseableError):
            parse_money_to_parts("nothing", "en-GB")


class TestScanning:
    """Test MoneyParser.parse_all() and scan()."""

    def test_parse_all(self) -> None:
        parser = money_parser("en-GB")
        assert parser.parse_all("Paid GBP 10.00 and GBP 2,000.50 today") == [
            Money("GBP", Decimal("10.00")),
            Money("GBP", Decimal("2000.50")),
        ]

    def test_scan_spans(self) -> None:
        found = money_parser("en-GB").scan("fee £5 waived")
        assert found == [((4, 6), Money("GBP", Decimal(5)))]

    def test_parse_all_empty(self) -> None:
        assert money_parser("en-GB").parse_all("no amounts") == []


class TestMoneyParser:
    """Test parser construction and sharing."""

    def test_money_parser(self) -> None:
        parser = money_parser("en-GB", "CCC i,iii.ff")
        assert isinstance(parser, MoneyParser)
        assert parser.locale_code == "en_GB"
        assert parser.options.format == "CCC i,iii.ff"

    def test_part_parsers_shared(self) -> None:
        assert NumberFormatPartParser.create("en_GB") is NumberFormatPartParser.create("en_GB")
        assert RegexBuilder.create("en_GB") is RegexBuilder.create("en_GB")

    def test_slots_follow_schema(self) -> None:
        """Group separators fold into the integer slot."""
        builder = RegexBuilder.create("en_GB")
        kinds = [slot.kind for slot in builder.slots(FORMAT_STRING.parse("CCC i,iii.ff"))]
        assert kinds == [
            PartType.CURRENCY,
            PartType.LITERAL,
            PartType.INTEGER,
            PartType.DECIMAL,
            PartType.FRACTION,
        ]

    def test_touching_currency_gets_space_slot(self) -> None:
        builder = RegexBuilder.create("en_GB")
        slots = builder.slots(money_schema("en_GB"))
        assert slots[1].kind is PartType.LITERAL


class TestMoneyFrom:
    """Test money_from()."""

    def test_assembles_amount(self) -> None:
        parts = [
            TypedPart(PartType.CURRENCY, "£"),
            TypedPart(PartType.INTEGER, "1"),
            TypedPart(PartType.GROUP, ","),
            TypedPart(PartType.INTEGER, "234"),
            TypedPart(PartType.DECIMAL, "."),
            TypedPart(PartType.FRACTION, "5"),
        ]
        assert money_from(parts, "en_GB") == Money("GBP", Decimal("1234.5"))

    def test_missing_currency(self) -> None:
        with pytest.raises(UnparseableError) as exc_info:
            money_from([TypedPart(PartType.INTEGER, "12")], "en_GB", text="12")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.AMOUNT_INVALID

    def test_missing_integer(self) -> None:
        with pytest.raises(UnparseableError):
            money_from([TypedPart(PartType.CURRENCY, "GBP")], "en_GB")

    def test_unknown_currency(self) -> None:
        parts = [TypedPart(PartType.CURRENCY, "QQQ"), TypedPart(PartType.INTEGER, "12")]
        with pytest.raises(NotFoundError):
            money_from(parts, "en_GB")

    def test_strategy_applies(self) -> None:
        """The options' strategy picks among shared symbols."""
        table = CurrencySymbols.get("en_US")
        assert "USD" in table.candidates("$")
        parts = [TypedPart(PartType.CURRENCY, "$"), TypedPart(PartType.INTEGER, "1")]
        options = MoneyOptions(strategy=prefer("USD"))
        assert money_from(parts, "en_US", options).currency == "USD"

    def test_additional_symbols_ignored_by_default(self) -> None:
        """Extra table entries do not leak into the locale's default table."""
        CurrencySymbols.get("en_GB", [Datum("quid", "GBP")])
        assert not CurrencySymbols.get("en_GB").parsable("quid")


# ============================================================================
# PROPERTIES
# ============================================================================

amounts = st.decimals(
    min_value=Decimal(0),
    max_value=Decimal("999999999.99"),
    places=2,
    allow_nan=False,
    allow_infinity=False,
)


class TestMoneyRoundTrip:
    """format_money() and parse_money() are inverse."""

    @given(
        amount=amounts,
        currency=st.sampled_from(["GBP", "EUR", "USD"]),
        locale=st.sampled_from(["en-GB", "en-US", "de", "fr", "nl"]),
        display=st.sampled_from(["code", "symbol"]),
    )
    def test_round_trip(self, amount: Decimal, currency: str, locale: str, display: str) -> None:
        event(f"locale={locale}")
        event(f"display={display}")
        money = Money(currency, amount)
        assert parse_money(format_money(money, locale, display), locale) == money

    @given(amount=amounts)
    def test_integer_parts_are_digits(self, amount: Decimal) -> None:
        parts = parse_money_to_parts(format_money(Money("GBP", amount), "en-GB"), "en-GB")
        assert all(value.isdigit() for value in values_of(parts, PartType.INTEGER))
