"""Total predicates used by the wizard steps.

Each predicate accepts the raw widget value (usually a string, possibly
empty or ``None``) and returns ``False`` instead of raising.
"""

from __future__ import annotations

from typing import Callable

from utils.normalization import amount_in_cents, clean_text, phone_digits
from wizard.types import FormData, StepPredicate

NAME_MIN_LENGTH = 2
PHONE_MIN_DIGITS = 6


def is_value_present(value: object | None) -> bool:
    """Return ``True`` when ``value`` contains non-whitespace text."""

    return bool(clean_text(value))


def is_valid_name(value: object | None) -> bool:
    return len(clean_text(value)) >= NAME_MIN_LENGTH


def is_valid_phone(value: object | None) -> bool:
    return len(phone_digits(value)) >= PHONE_MIN_DIGITS


def is_valid_amount(value: object | None) -> bool:
    """Return ``True`` when ``value`` is still positive once rounded to cents."""

    amount = amount_in_cents(value)
    return amount is not None and amount > 0


def field_predicate(key: str, check: Callable[[object | None], bool]) -> StepPredicate:
    """Lift a single-value check into a predicate over the whole form data."""

    def _predicate(form_data: FormData) -> bool:
        return check(form_data.get(key))

    _predicate.__name__ = f"{check.__name__}[{key}]"
    return _predicate


__all__ = [
    "NAME_MIN_LENGTH",
    "PHONE_MIN_DIGITS",
    "field_predicate",
    "is_valid_amount",
    "is_valid_name",
    "is_valid_phone",
    "is_value_present",
]
