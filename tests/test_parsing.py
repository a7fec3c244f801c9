# tests/test_parsing.py
from decimal import Decimal

from inventory.parsing import INVALID_NUMBER, parse_decimal, parse_int


def test_parse_int():
    assert parse_int("42").value == 42
    assert parse_int(" -3 ").value == -3
    assert parse_int("+7").value == 7
    bad = parse_int("4.5")
    assert not bad.ok
    assert bad.error == INVALID_NUMBER


def test_parse_int_rejects_underscores_and_non_ascii_digits():
    assert not parse_int("1_0").ok
    assert not parse_int("١٢").ok  # Arabic-Indic digits
    assert not parse_int("").ok


def test_parse_decimal():
    assert parse_decimal("19.99").value == Decimal("19.99")
    assert parse_decimal("-1").value == Decimal("-1")
    assert parse_decimal(".5").value == Decimal("0.5")
    assert parse_decimal("1e3").value == Decimal("1000")
    assert not parse_decimal("").ok
    assert not parse_decimal("ten").ok
    assert not parse_decimal("NaN").ok
    assert not parse_decimal("Infinity").ok
    assert not parse_decimal("1_000.5").ok
    assert not parse_decimal("١.5").ok


def test_parse_decimal_rejects_huge_values():
    assert not parse_decimal("1e999999999").ok
    assert not parse_decimal("-1e20").ok
    assert parse_decimal("999999999999999").ok
    assert not parse_decimal("0e999999999").ok
    assert parse_decimal("0").value == Decimal("0")
