"""Test amount normalization."""
import pytest
from decimal import Decimal
from bill_extraction.international.number_parsing import normalize_amount


class TestNormalizeAmount:
    def test_turkish_thousands_and_decimal(self):
        assert normalize_amount("1.234,56") == Decimal("1234.56")

    def test_turkish_decimal_only(self):
        assert normalize_amount("89,99") == Decimal("89.99")

    def test_plain_integer(self):
        assert normalize_amount("250") == Decimal("250.00")

    def test_large_turkish_number(self):
        assert normalize_amount("12.345.678,90") == Decimal("12345678.90")

    def test_english_thousands_recovered(self):
        # "1,234" -> "1.234" -> three digits after the dot -> thousands
        assert normalize_amount("1,234") == Decimal("1234")

    def test_english_thousands_with_cents_misread(self):
        # Dots are dropped first, so the comma becomes the decimal point
        assert normalize_amount("1,234.56") == Decimal("1.23")

    def test_dot_decimal_is_dropped(self):
        # "89.99" loses its dot in the first step
        assert normalize_amount("89.99") == Decimal("8999.00")

    def test_two_decimal_precision(self):
        result = normalize_amount("1.234,56")
        assert result.as_tuple().exponent == -2

    def test_zero_rejected(self):
        assert normalize_amount("0,00") is None

    def test_zero_integer_rejected(self):
        assert normalize_amount("0") is None

    def test_negative_rejected(self):
        assert normalize_amount("-5,00") is None

    def test_letters_rejected(self):
        assert normalize_amount("abc") is None

    def test_empty_rejected(self):
        assert normalize_amount("") is None

    def test_whitespace_rejected(self):
        assert normalize_amount("   ") is None

    @pytest.mark.parametrize("raw", ["NaN", "Infinity", "-Infinity", "sNaN"])
    def test_non_finite_rejected(self, raw):
        assert normalize_amount(raw) is None

    def test_huge_value_rejected_without_raising(self):
        assert normalize_amount("9" * 60) is None

    def test_multiple_commas(self):
        # "1,2,3" -> "1.2.3" is not a number
        assert normalize_amount("1,2,3") is None

    def test_surrounding_whitespace(self):
        assert normalize_amount(" 45,50 ") == Decimal("45.50")


class TestNormalizeAmountDotDecimal:
    def test_english_cents(self):
        assert normalize_amount("89.99", decimal_separator=".") == Decimal("89.99")

    def test_english_thousands_and_cents(self):
        assert normalize_amount("1,234.56", decimal_separator=".") == Decimal("1234.56")

    def test_english_thousands_only(self):
        assert normalize_amount("12,500", decimal_separator=".") == Decimal("12500.00")

    def test_three_decimals_read_as_thousands(self):
        assert normalize_amount("1.234", decimal_separator=".") == Decimal("1234.00")

    def test_zero_rejected(self):
        assert normalize_amount("0.00", decimal_separator=".") is None
