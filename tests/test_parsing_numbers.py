"""Tests for LocalizedNumberParser and parse_number.

Validates parsing across separator conventions and numbering systems,
NaN results for unparseable input, and default-locale resolution.
"""

import dataclasses
import logging
import math

import pytest
from babel import UnknownLocaleError

from localizednumbers import parse_number
from localizednumbers.enums import NumberPartType
from localizednumbers.locale_utils import get_system_locale
from localizednumbers.parsing import DigitIndex, LocalizedNumberParser, SeparatorSet
from localizednumbers.runtime import LocaleContext, NumberPart


class TestLocaleConventions:
    """Parse numerals written in each locale's own notation."""

    def test_english(self) -> None:
        assert LocalizedNumberParser("en").parse("12,345,678.90") == 12345678.9

    def test_german(self) -> None:
        assert LocalizedNumberParser("de").parse("12.345.678,9") == 12345678.9

    def test_indian_grouping(self) -> None:
        """2+3 grouping needs no special handling: groups are just removed."""
        assert LocalizedNumberParser("en-IN").parse("1,23,45,678.9") == 12345678.9

    def test_arabic_indic_digits(self) -> None:
        assert LocalizedNumberParser("ar-EG").parse("١٬٢٣٤٫٥٦") == 1234.56

    def test_han_decimal_digits(self) -> None:
        parser = LocalizedNumberParser("zh-Hans-CN-u-nu-hanidec")
        assert parser.parse("一,二三四.五六") == 1234.56

    def test_han_zero(self) -> None:
        parser = LocalizedNumberParser("zh-Hans-CN-u-nu-hanidec")
        assert parser.parse("二〇二四") == 2024.0

    def test_posix_spelling(self) -> None:
        assert LocalizedNumberParser("de_DE").parse("1.234,5") == 1234.5

    def test_french_narrow_space_group(self) -> None:
        """fr groups with U+202F NARROW NO-BREAK SPACE."""
        formatted = LocaleContext.create("fr").format_number(1234567.5)
        assert LocalizedNumberParser("fr").parse(formatted) == 1234567.5

    def test_ascii_digits_in_native_digit_locale(self) -> None:
        assert LocalizedNumberParser("ar-EG").parse("1234") == 1234.0

    def test_grouping_not_validated(self) -> None:
        """Group separators are removed wherever they appear."""
        assert LocalizedNumberParser("en").parse("1,2,3") == 123.0


class TestSignsAndShapes:
    """Leading signs, whitespace and partial numerals."""

    def test_negative_german(self) -> None:
        assert LocalizedNumberParser("de").parse("-1.234,5") == -1234.5

    def test_negative_arabic_minus_sign(self) -> None:
        """The bidi-marked Arabic minus sign is recognized."""
        parser = LocalizedNumberParser("ar-EG")
        minus_sign = parser.separators.minus_sign
        assert minus_sign
        assert parser.parse(f"{minus_sign}١٬٢٣٤٫٥") == -1234.5

    def test_ascii_minus_in_arabic_locale(self) -> None:
        assert LocalizedNumberParser("ar-EG").parse("-١٢") == -12.0

    @pytest.mark.parametrize(
        "text", ["\u200e-۱۲", "-\u200e۱۲", "\u200e-\u200e۱۲", "-۱۲"]
    )
    def test_partially_marked_minus_sign(self, text: str) -> None:
        """LRM marks around the minus sign are optional."""
        assert LocalizedNumberParser("ps").parse(text) == -12.0

    def test_arabic_letter_mark_before_minus(self) -> None:
        assert LocalizedNumberParser("ar-EG").parse("\u061c-١٢") == -12.0

    def test_bidi_mark_between_digits_rejected(self) -> None:
        assert math.isnan(LocalizedNumberParser("ar-EG").parse("١\u061c٢"))

    def test_plus_sign(self) -> None:
        assert LocalizedNumberParser("en").parse("+5") == 5.0

    def test_whitespace_trimmed(self) -> None:
        assert LocalizedNumberParser("en").parse("  1,234.5\n\t") == 1234.5

    def test_leading_decimal(self) -> None:
        assert LocalizedNumberParser("de").parse(",5") == 0.5

    def test_trailing_decimal(self) -> None:
        assert LocalizedNumberParser("en").parse("5.") == 5.0

    def test_zero(self) -> None:
        assert LocalizedNumberParser("en").parse("0") == 0.0


class TestUnparseableInput:
    """Every unparseable input returns the NaN sentinel."""

    @pytest.mark.parametrize(
        "locale_code", ["en", "de", "en-IN", "ar-EG", "zh-Hans-CN-u-nu-hanidec"]
    )
    @pytest.mark.parametrize("text", ["", " ", "\t\n", "　"])
    def test_empty_and_whitespace(self, locale_code: str, text: str) -> None:
        assert math.isnan(LocalizedNumberParser(locale_code).parse(text))

    @pytest.mark.parametrize(
        "text",
        [
            "abc",
            "12abc",
            "1.2.3",
            "--1",
            "1-",
            ".",
            "-",
            "inf",
            "Infinity",
            "nan",
            "1e5",
            "1_000",
            "1 000",
            "$5",
        ],
    )
    def test_garbage_english(self, text: str) -> None:
        assert math.isnan(LocalizedNumberParser("en").parse(text))

    def test_multiple_decimal_separators(self) -> None:
        assert math.isnan(LocalizedNumberParser("de").parse("1,2,3"))

    def test_foreign_digits_rejected(self) -> None:
        """Digits of another numbering system are not translated."""
        assert math.isnan(LocalizedNumberParser("en").parse("١٢"))
        assert math.isnan(LocalizedNumberParser("zh").parse("一二"))

    @pytest.mark.parametrize("locale_code", ["en", "de"])
    def test_overflow_rejected(self, locale_code: str) -> None:
        """Digit strings beyond the float range are not infinite."""
        assert math.isnan(LocalizedNumberParser(locale_code).parse("9" * 400))
        assert math.isnan(LocalizedNumberParser(locale_code).parse("-" + "9" * 400))

    def test_overflow_in_native_digits_rejected(self) -> None:
        assert math.isnan(LocalizedNumberParser("ar-EG").parse("٩" * 400))
        assert math.isnan(LocalizedNumberParser("zh-Hans-CN-u-nu-hanidec").parse("九" * 400))

    def test_largest_finite_value_accepted(self) -> None:
        assert LocalizedNumberParser("en").parse("1" + "0" * 308) == 1e308

    def test_non_ascii_unicode_digits_rejected(self) -> None:
        """float() would accept these; the parser must not."""
        assert math.isnan(LocalizedNumberParser("en").parse("１２"))

    def test_parse_never_mutates(self) -> None:
        parser = LocalizedNumberParser("de")
        before = (parser.digits, parser.separators)
        parser.parse("garbage")
        parser.parse("1.234,5")
        assert (parser.digits, parser.separators) == before


class TestConstruction:
    """Parser construction and locale errors."""

    def test_unknown_locale_propagates(self) -> None:
        with pytest.raises(UnknownLocaleError):
            LocalizedNumberParser("xx-YY")

    def test_malformed_locale_propagates(self) -> None:
        with pytest.raises(ValueError):
            LocalizedNumberParser("123")

    def test_classifiers(self) -> None:
        parser = LocalizedNumberParser("de")
        assert parser.digits.numerals == "0123456789"
        assert parser.separators.group == frozenset(".")
        assert parser.separators.decimal == frozenset(",")
        assert parser.separators.minus_sign == "-"

    def test_arabic_classifiers(self) -> None:
        parser = LocalizedNumberParser("ar-EG")
        assert parser.digits.numerals == "٠١٢٣٤٥٦٧٨٩"
        assert parser.separators.group == frozenset("٬")
        assert parser.separators.decimal == frozenset("٫")

    def test_locale_code_and_repr(self) -> None:
        parser = LocalizedNumberParser("en-IN")
        assert parser.locale_code == "en-IN"
        assert repr(parser) == "LocalizedNumberParser('en-IN')"

    def test_immutable(self) -> None:
        parser = LocalizedNumberParser("en")
        with pytest.raises(AttributeError):
            parser.extra = 1  # type: ignore[attr-defined]
        with pytest.raises(dataclasses.FrozenInstanceError):
            parser.separators.group = frozenset()  # type: ignore[misc]

    def test_construction_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="localizednumbers.parsing.numbers"):
            LocalizedNumberParser("de")
        assert "Number parser for 'de'" in caplog.text


class TestDigitIndex:
    """DigitIndex invariants."""

    def test_from_descending_numerals(self) -> None:
        index = DigitIndex.from_numerals(reversed("٩٨٧٦٥٤٣٢١٠"))
        assert index["٠"] == 0
        assert index["٩"] == 9
        assert len(index) == 10
        assert list(index) == list("٠١٢٣٤٥٦٧٨٩")

    def test_membership(self) -> None:
        index = DigitIndex("0123456789")
        assert "7" in index
        assert "a" not in index

    def test_too_few_numerals(self) -> None:
        with pytest.raises(ValueError, match="ten distinct"):
            DigitIndex("012345678")

    def test_duplicate_numerals(self) -> None:
        with pytest.raises(ValueError, match="ten distinct"):
            DigitIndex("0012345678")


class TestSeparatorSet:
    """SeparatorSet extraction from formatted parts."""

    def test_from_parts(self) -> None:
        parts = (
            NumberPart(NumberPartType.MINUS_SIGN, "−"),
            NumberPart(NumberPartType.INTEGER, "12"),
            NumberPart(NumberPartType.GROUP, " "),
            NumberPart(NumberPartType.INTEGER, "345"),
            NumberPart(NumberPartType.DECIMAL, ","),
            NumberPart(NumberPartType.FRACTION, "6"),
        )
        separators = SeparatorSet.from_parts(parts)
        assert separators == SeparatorSet(
            group=frozenset(" "), decimal=frozenset(","), minus_sign="−"
        )

    def test_missing_parts_match_nothing(self) -> None:
        separators = SeparatorSet.from_parts([NumberPart(NumberPartType.INTEGER, "12345")])
        assert separators.group == frozenset()
        assert separators.decimal == frozenset()
        assert separators.minus_sign == ""


class TestParseNumber:
    """Test the parse_number convenience function."""

    def test_explicit_locale(self) -> None:
        assert parse_number("1,23,45,678.9", "en-IN") == 12345678.9

    def test_default_locale_resolved_at_call(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without a locale, the system locale is queried once per call."""
        calls: list[None] = []

        def fake_system_locale() -> str:
            calls.append(None)
            return "de_DE"

        monkeypatch.setattr(
            "localizednumbers.parsing.numbers.get_system_locale", fake_system_locale
        )
        assert parse_number("12.345.678,9") == 12345678.9
        assert parse_number("1.234,5") == 1234.5
        assert len(calls) == 2

    def test_default_matches_explicit_construction(self) -> None:
        """Equivalent to a parser built for the environment's active locale."""
        system_locale = get_system_locale()
        explicit = LocalizedNumberParser(system_locale)
        context = LocaleContext.create(system_locale)
        formatted = (
            context.format_number(1234567.891),
            context.format_number(-9876.5),
            context.format_integer(42),
        )
        for text in (*formatted, "1234", "0", "", "abc"):
            result = parse_number(text)
            expected = explicit.parse(text)
            assert result == expected or (math.isnan(result) and math.isnan(expected))

    def test_invalid_text_returns_nan(self) -> None:
        assert math.isnan(parse_number("not a number", "en"))
