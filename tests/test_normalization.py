from __future__ import annotations

from decimal import Decimal

import pytest

from utils.normalization import (
    amount_in_cents,
    clean_text,
    format_amount,
    format_phone_e164,
    normalize_phone_for_storage,
    parse_amount,
    phone_digits,
)


def test_clean_text_strips_control_characters() -> None:
    assert clean_text("  Alice\u200b ") == "Alice"
    assert clean_text(None) == ""
    assert clean_text(42) == "42"


def test_phone_digits() -> None:
    assert phone_digits("+1 (555) 010-9999") == "15550109999"
    assert phone_digits(None) == ""


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("555 010 9999", "+15550109999"),
        ("1-555-010-9999", "+15550109999"),
        ("+44 20 7946 0958", "+442079460958"),
        ("12345", "12345"),
        (None, ""),
    ],
)
def test_format_phone_e164(value, expected) -> None:
    assert format_phone_e164(value) == expected


def test_normalize_phone_for_storage_keeps_digits_only() -> None:
    assert normalize_phone_for_storage("(555) 010-9999") == "15550109999"
    assert normalize_phone_for_storage("+1 555 010 9999") == "15550109999"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("25.50", Decimal("25.50")),
        ("$1,200.50", Decimal("1200.50")),
        (" € 3 ", Decimal("3")),
        (7, Decimal("7")),
        ("abc", None),
        ("", None),
        ("Infinity", None),
        (None, None),
    ],
)
def test_parse_amount(value, expected) -> None:
    assert parse_amount(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [("25.5", "$25.50"), (25.5, "$25.50"), ("2.005", "$2.01"), (None, "$0.00"), ("oops", "$0.00")],
)
def test_format_amount(value, expected) -> None:
    assert format_amount(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("0.005", Decimal("0.01")),
        ("0.001", Decimal("0.00")),
        ("9999999999999.99", Decimal("9999999999999.99")),
        ("10000000000000", None),
        ("1e30", None),
        ("99999999999999999999999999999", None),
        ("abc", None),
    ],
)
def test_amount_in_cents(value, expected) -> None:
    assert amount_in_cents(value) == expected


@pytest.mark.parametrize("value", ["1e30", "99999999999999999999999999999"])
def test_format_amount_never_raises_on_huge_values(value) -> None:
    assert format_amount(value) == "$0.00"
