"""Utilities for normalising names, phone numbers and amounts."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional


_STRIP_CHARACTERS = "\u200b\u200c\u200d\ufeff\x00\x01\x02\x03\x04\x05\x06\x07\x08\x0b\x0c\x0e\x0f\x10\x11\x12\x13\x14\x15\x16\x17\x18\x19\x1a\x1b\x1c\x1d\x1e\x1f"  # control chars
_NON_DIGIT_RE = re.compile(r"\D")
_AMOUNT_SEPARATORS_RE = re.compile(r"[\s$€£,]")

CENT = Decimal("0.01")
# Largest amount a payment request may carry.
MAX_AMOUNT = Decimal("9999999999999.99")


def clean_text(value: object | None) -> str:
    """Return ``value`` as a string without control characters or outer whitespace."""

    if value is None:
        return ""
    candidate = value if isinstance(value, str) else str(value)
    candidate = candidate.translate({ord(ch): None for ch in _STRIP_CHARACTERS})
    return candidate.strip()


def phone_digits(value: object | None) -> str:
    """Return only the digits of ``value`` (``"+1 (555) 010-9999"`` -> ``"15550109999"``)."""

    return _NON_DIGIT_RE.sub("", clean_text(value))


def format_phone_e164(value: Optional[str]) -> str:
    """Return ``value`` in ``+<country><number>`` form when it looks complete.

    Ten digit numbers are treated as US numbers, eleven digit numbers with a
    leading ``1`` drop the trunk prefix and anything longer is assumed to
    carry its own country code. Shorter inputs are returned unchanged.
    """

    if value is None:
        return ""
    digits = phone_digits(value)
    if len(digits) == 10:
        return f"+1{digits}"
    if len(digits) == 11 and digits.startswith("1"):
        return f"+1{digits[1:]}"
    if len(digits) > 10:
        return f"+{digits}"
    return value


def normalize_phone_for_storage(value: Optional[str]) -> str:
    """Return the digits-only representation stored in ``*_phone`` columns."""

    return phone_digits(format_phone_e164(value))


def parse_amount(value: object | None) -> Decimal | None:
    """Return ``value`` as a :class:`~decimal.Decimal` or ``None`` when unparsable."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    else:
        cleaned = _AMOUNT_SEPARATORS_RE.sub("", clean_text(value))
        if not cleaned:
            return None
        try:
            amount = Decimal(cleaned)
        except InvalidOperation:
            return None
    if not amount.is_finite():
        return None
    return amount


def amount_in_cents(value: object | None) -> Decimal | None:
    """Return ``value`` rounded half-up to whole cents.

    ``None`` when the value is unparsable, exceeds :data:`MAX_AMOUNT` or
    cannot be quantized within the decimal context.
    """

    amount = parse_amount(value)
    if amount is None or abs(amount) > MAX_AMOUNT:
        return None
    try:
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None


def format_amount(value: object | None) -> str:
    """Return ``value`` formatted as dollars with exactly two decimals (``$25.50``)."""

    amount = amount_in_cents(value)
    if amount is None:
        amount = Decimal("0.00")
    return f"${amount:.2f}"


__all__ = [
    "CENT",
    "MAX_AMOUNT",
    "amount_in_cents",
    "clean_text",
    "format_amount",
    "format_phone_e164",
    "normalize_phone_for_storage",
    "parse_amount",
    "phone_digits",
]
