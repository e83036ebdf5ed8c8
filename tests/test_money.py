"""Tests for the money value type, options and formatting to parts."""

from decimal import Decimal

import pytest

from localeparts import (
    CurrencyDisplay,
    Money,
    MoneyOptions,
    PartType,
    UnsupportedOptionsError,
    format_money,
    format_money_to_parts,
    unique_match,
)
from localeparts.core.parts import TypedPart, join_parts, values_of
from localeparts.money import FormatToParts, MoneyFormatter
from localeparts.money.formatting import DIGITS, FORMAT_STRING, PLACEHOLDERS, PartsFromFormat
from localeparts.money.money import coerce_display

LOCALES = ["en-GB", "en-US", "de", "fr", "nl", "es"]


class TestMoney:
    """Test the Money value type."""

    def test_decimal_amount(self) -> None:
        money = Money("GBP", Decimal("12.50"))
        assert money.currency == "GBP"
        assert money.amount == Decimal("12.50")

    def test_coerces_numbers(self) -> None:
        """Ints, floats and strings become exact decimals."""
        assert Money("GBP", 12).amount == Decimal(12)
        assert Money("GBP", 0.1).amount == Decimal("0.1")  # type: ignore[arg-type]
        assert Money("GBP", "3.25").amount == Decimal("3.25")  # type: ignore[arg-type]

    @pytest.mark.parametrize("currency", ["gbp", "GB", "GBPX", "G1P", "ÄBC"])
    def test_invalid_currency(self, currency: str) -> None:
        with pytest.raises(ValueError, match="ISO 4217"):
            Money(currency, Decimal(1))

    def test_invalid_amount(self) -> None:
        with pytest.raises(ValueError, match="decimal number"):
            Money("GBP", "twelve")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        money = Money("GBP", Decimal(1))
        with pytest.raises(AttributeError):
            money.currency = "EUR"  # type: ignore[misc]

    def test_equality_ignores_trailing_zeros(self) -> None:
        assert Money("GBP", Decimal("12.50")) == Money("GBP", Decimal("12.5"))

    def test_str(self) -> None:
        assert str(Money("GBP", Decimal("12.50"))) == "GBP 12.50"


class TestMoneyOptions:
    """Test MoneyOptions.coerce()."""

    def test_none(self) -> None:
        assert MoneyOptions.coerce(None) == MoneyOptions()

    def test_instance_passes_through(self) -> None:
        options = MoneyOptions(format="CCC i.ff")
        assert MoneyOptions.coerce(options) is options

    def test_string_is_format(self) -> None:
        assert MoneyOptions.coerce("CCC i,iii.ff") == MoneyOptions(format="CCC i,iii.ff")

    def test_mapping(self) -> None:
        options = MoneyOptions.coerce({"strategy": unique_match, "format": "i.ff C"})
        assert options.strategy is unique_match
        assert options.format == "i.ff C"

    def test_unknown_key(self) -> None:
        with pytest.raises(UnsupportedOptionsError) as exc_info:
            MoneyOptions.coerce({"rounding": "up"})
        assert "rounding" in str(exc_info.value)


class TestCoerceDisplay:
    """Test coerce_display()."""

    def test_enum_and_string(self) -> None:
        assert coerce_display(CurrencyDisplay.SYMBOL) is CurrencyDisplay.SYMBOL
        assert coerce_display("code") is CurrencyDisplay.CODE

    def test_unknown(self) -> None:
        with pytest.raises(UnsupportedOptionsError):
            coerce_display("name")


class TestFormatMoney:
    """Test format_money()."""

    def test_code_display(self) -> None:
        text = format_money(Money("GBP", Decimal("111222.33")), "en-GB")
        assert "GBP" in text
        assert "111,222.33" in text

    def test_code_display_follows_babel_spacing(self) -> None:
        """The ISO code is rendered where the sign stands, with no spacing added."""
        assert format_money(Money("GBP", Decimal("111222.33")), "en-GB") == "GBP111,222.33"

    def test_symbol_display(self) -> None:
        assert format_money(Money("GBP", Decimal("1234.5")), "en-GB", "symbol") == "£1,234.50"

    def test_german_layout(self) -> None:
        """German puts the currency after the amount and swaps separators."""
        text = format_money(Money("EUR", Decimal("1234.5")), "de", CurrencyDisplay.SYMBOL)
        assert text.startswith("1.234,50")
        assert text.endswith("€")

    def test_currency_digits(self) -> None:
        """Fraction digits follow the currency."""
        assert format_money(Money("JPY", Decimal("1234")), "en-US", "symbol") == "¥1,234"

    def test_formatter_shared(self) -> None:
        first = MoneyFormatter.create("en_GB", CurrencyDisplay.CODE)
        assert first is MoneyFormatter.create("en_GB", CurrencyDisplay.CODE)
        assert "¤¤" in first.pattern

    def test_symbol_pattern_keeps_single_sign(self) -> None:
        formatter = MoneyFormatter("en_GB", "symbol")
        assert "¤¤" not in formatter.pattern
        assert "¤" in formatter.pattern


class TestFormatMoneyToParts:
    """Test format_money_to_parts()."""

    def test_en_gb_symbol_parts(self) -> None:
        parts = format_money_to_parts(Money("GBP", Decimal("1234.5")), "en-GB", "symbol")
        assert parts == (
            TypedPart(PartType.CURRENCY, "£"),
            TypedPart(PartType.INTEGER, "1"),
            TypedPart(PartType.GROUP, ","),
            TypedPart(PartType.INTEGER, "234"),
            TypedPart(PartType.DECIMAL, "."),
            TypedPart(PartType.FRACTION, "50"),
        )

    def test_code_parts(self) -> None:
        parts = format_money_to_parts(Money("GBP", Decimal("111222.33")), "en-GB")
        assert values_of(parts, PartType.CURRENCY) == ["GBP"]
        assert values_of(parts, PartType.INTEGER) == ["111", "222"]
        assert values_of(parts, PartType.FRACTION) == ["33"]

    def test_german_parts(self) -> None:
        parts = format_money_to_parts(Money("EUR", Decimal("1234.5")), "de", "symbol")
        kinds = [part.type for part in parts]
        assert kinds[:5] == [
            PartType.INTEGER,
            PartType.GROUP,
            PartType.INTEGER,
            PartType.DECIMAL,
            PartType.FRACTION,
        ]
        assert kinds[-1] is PartType.CURRENCY
        assert values_of(parts, PartType.DECIMAL) == [","]

    def test_zero_fraction_currency(self) -> None:
        parts = format_money_to_parts(Money("JPY", Decimal("1234")), "en-US", "symbol")
        assert values_of(parts, PartType.FRACTION) == []
        assert values_of(parts, PartType.CURRENCY) == ["¥"]

    @pytest.mark.parametrize("locale", LOCALES)
    @pytest.mark.parametrize("display", ["code", "symbol"])
    @pytest.mark.parametrize("amount", ["0.05", "7", "1234.5", "9876543.21"])
    def test_parts_join_to_formatted(self, locale: str, display: str, amount: str) -> None:
        money = Money("EUR", Decimal(amount))
        parts = format_money_to_parts(money, locale, display)
        assert join_parts(parts) == format_money(money, locale, display)

    def test_unknown_display(self) -> None:
        with pytest.raises(UnsupportedOptionsError):
            format_money_to_parts(Money("GBP", Decimal(1)), "en-GB", "name")


class TestFormatToParts:
    """Test the money emulation engine."""

    def test_schema(self) -> None:
        engine = FormatToParts.create("en_GB", CurrencyDisplay.SYMBOL)
        assert join_parts(engine.schema) == "£111,222.33"
        assert values_of(engine.schema, PartType.INTEGER) == ["111", "222"]

    def test_engine_shared(self) -> None:
        assert FormatToParts.create("de", CurrencyDisplay.CODE) is FormatToParts.create(
            "de", CurrencyDisplay.CODE
        )


class TestPartsFromFormat:
    """Test reading layouts from renderings and format strings."""

    def test_integer_group_parser(self) -> None:
        assert DIGITS.parse("1,234,567") == [
            TypedPart(PartType.INTEGER, "1"),
            TypedPart(PartType.GROUP, ","),
            TypedPart(PartType.INTEGER, "234"),
            TypedPart(PartType.GROUP, ","),
            TypedPart(PartType.INTEGER, "567"),
        ]
        assert PLACEHOLDERS.parse("i.iii") == [
            TypedPart(PartType.INTEGER, "i"),
            TypedPart(PartType.GROUP, "."),
            TypedPart(PartType.INTEGER, "iii"),
        ]

    def test_format_string(self) -> None:
        parts = FORMAT_STRING.parse("CCC i,iii.ff")
        assert [part.type for part in parts] == [
            PartType.CURRENCY,
            PartType.LITERAL,
            PartType.INTEGER,
            PartType.GROUP,
            PartType.INTEGER,
            PartType.DECIMAL,
            PartType.FRACTION,
        ]

    def test_format_string_currency_last(self) -> None:
        parts = FORMAT_STRING.parse("i.iii,ff C")
        assert values_of(parts, PartType.DECIMAL) == [","]
        assert values_of(parts, PartType.GROUP) == ["."]
        assert parts[-1] == TypedPart(PartType.CURRENCY, "C")

    def test_example_reader(self) -> None:
        """Sample renderings split into currency, grouped integer and fraction."""
        parts = PartsFromFormat.example("en_GB").parse("£111,222.33")
        assert [part.value for part in parts] == ["£", "111", ",", "222", ".", "33"]
