"""Tests for tolerant numeric field parsing."""

from decimal import Decimal

import pytest

from tipcalc.utils.parsing import parse_flag, parse_number, parse_optional_number


class TestParseOptionalNumber:
    """Tests for parse_optional_number."""

    @pytest.mark.parametrize("text,expected", [
        ("50", Decimal("50")),
        ("50.00", Decimal("50.00")),
        ("3.5", Decimal("3.5")),
        (".5", Decimal("0.5")),
        ("5.", Decimal("5")),
        ("-2.25", Decimal("-2.25")),
        ("+7", Decimal("7")),
        ("1e3", Decimal("1000")),
        ("2.5E-1", Decimal("0.25")),
        ("  12.5  ", Decimal("12.5")),
    ])
    def test_valid_literals(self, text, expected):
        assert parse_optional_number(text) == expected

    @pytest.mark.parametrize("text", [
        None,
        "",
        "   ",
        "abc",
        "12abc",
        "$12.50",
        "1,234.56",
        "1_000",
        "1.2.3",
        ".",
        "-",
        "e5",
        "NaN",
        "Infinity",
        "-inf",
        "1e999999",
        "٥",
    ])
    def test_unparseable_is_none(self, text):
        assert parse_optional_number(text) is None

    def test_zero_is_present_not_absent(self):
        """Typing 0 must stay distinguishable from typing nothing."""
        value = parse_optional_number("0")
        assert value is not None
        assert value == Decimal("0")

    def test_accepts_json_numbers(self):
        assert parse_optional_number(12) == Decimal("12")
        assert parse_optional_number(3.5) == Decimal("3.5")


class TestParseNumber:
    """Tests for parse_number defaults."""

    def test_returns_parsed_value(self):
        assert parse_number("33.00", Decimal("0")) == Decimal("33.00")

    def test_blank_uses_default(self):
        assert parse_number("", Decimal("20")) == Decimal("20")

    def test_garbage_uses_default(self):
        assert parse_number("twenty", Decimal("20")) == Decimal("20")

    def test_none_uses_default(self):
        assert parse_number(None, Decimal("0")) == Decimal("0")


class TestParseFlag:
    """Tests for the round-up toggle."""

    @pytest.mark.parametrize("value", [True, "on", "true", "TRUE", "1", "yes", " on "])
    def test_truthy(self, value):
        assert parse_flag(value) is True

    @pytest.mark.parametrize("value", [False, None, "", "off", "false", "0", "no", "maybe"])
    def test_falsy(self, value):
        assert parse_flag(value) is False


class TestMagnitudeBounds:
    """Tests for the accepted range of magnitudes."""

    @pytest.mark.parametrize("text", ["99999999999", "1e10", "-99999999999.99", "1e-100"])
    def test_within_bounds(self, text):
        assert parse_optional_number(text) == Decimal(text)

    @pytest.mark.parametrize("text", ["100000000000", "1e11", "1e26", "1e50", "-1e11", "1e-101"])
    def test_outside_bounds_is_none(self, text):
        assert parse_optional_number(text) is None

    def test_long_literals_keep_every_digit(self):
        value = parse_optional_number("1.000000000000000000000000000001")
        assert value.as_tuple().digits == (1,) + (0,) * 29 + (1,)
