"""Digit coercion for values read back from the string-only local store."""

from __future__ import annotations

import pytest

from settings_store.core.coerce import parse_digits


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("42", 42),
        ("007", 7),
        ("0", 0),
        ("12345678901234567890", 12345678901234567890),
    ],
)
def test_all_digit_strings_become_int(raw, expected):
    result = parse_digits(raw)
    assert result == expected
    assert isinstance(result, int)


@pytest.mark.parametrize(
    "raw",
    ["", "4.5", "-1", "+1", " 42", "42 ", "42\n", "1e3", "dark", "٣", "12a"],
)
def test_anything_else_is_returned_unchanged(raw):
    assert parse_digits(raw) is raw


def test_digits_beyond_int_conversion_limit_stay_string():
    raw = "1" * 5000
    assert parse_digits(raw) is raw
