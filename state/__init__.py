"""Session state utilities."""

from .ensure_state import (
    discard_create_wizard,
    ensure_state,
    get_create_wizard,
    get_phone_verification,
    reset_state,
)

__all__ = [
    "discard_create_wizard",
    "ensure_state",
    "get_create_wizard",
    "get_phone_verification",
    "reset_state",
]
