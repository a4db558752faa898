"""Utility helpers for the BuzzPay app."""

from __future__ import annotations

from .normalization import format_amount, format_phone_e164, phone_digits

__all__ = [
    "format_amount",
    "format_phone_e164",
    "phone_digits",
]
