"""Unit tests for currency text parsing"""

from surety_gateway.utils.currency import parse_amount


def test_parse_amount_locale_formatted():
    """Test IDR formatted text with prefix and thousands separators"""
    assert parse_amount("Rp 1.250.000") == 1_250_000
    assert parse_amount("Rp1.250.000") == 1_250_000
    assert parse_amount("500.000.000") == 500_000_000


def test_parse_amount_strips_all_non_digits():
    """Test signs and decimal separators are dropped with the rest"""
    assert parse_amount("-2.500") == 2_500
    assert parse_amount("1.000,50") == 100_050


def test_parse_amount_degrades_to_zero():
    """Test empty and unparseable text give 0 rather than an error"""
    assert parse_amount("") == 0
    assert parse_amount(None) == 0
    assert parse_amount("Rp") == 0
    assert parse_amount("abc") == 0


def test_parse_amount_integer_passthrough():
    """Test already-numeric input"""
    assert parse_amount(42) == 42
