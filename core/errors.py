"""Custom exception types for the wizard, the record store and sharing."""

from __future__ import annotations

from typing import Sequence


class BuzzPayError(Exception):
    """Base exception for BuzzPay related issues."""


class InvalidArgument(BuzzPayError, ValueError):
    """Raised when a caller passes an argument outside the accepted range."""


class WizardValidationError(BuzzPayError):
    """Raised when a wizard is submitted while some steps are still invalid."""

    def __init__(self, invalid_keys: Sequence[str], message: str | None = None) -> None:
        self.invalid_keys: tuple[str, ...] = tuple(invalid_keys)
        super().__init__(message or "Please complete all fields correctly")


STORE_UNAVAILABLE_MESSAGE = "An unexpected error occurred while talking to the payment request store."


class StoreError(BuzzPayError):
    """Raised when the hosted record store rejects or fails a request."""

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        details: str | None = None,
        hint: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message or STORE_UNAVAILABLE_MESSAGE)
        self.code = code
        self.details = details
        self.hint = hint
        self.status_code = status_code


class RecordNotFound(StoreError):
    """Raised when a payment request id does not exist in the store."""

    def __init__(self, record_id: str) -> None:
        super().__init__("Payment request not found", status_code=404)
        self.record_id = record_id


class StoreConfigurationError(StoreError):
    """Raised when the store URL or API key is missing."""


class ShareTargetUnavailable(BuzzPayError):
    """Raised when no external share target could be opened."""


__all__ = [
    "BuzzPayError",
    "InvalidArgument",
    "RecordNotFound",
    "STORE_UNAVAILABLE_MESSAGE",
    "ShareTargetUnavailable",
    "StoreConfigurationError",
    "StoreError",
    "WizardValidationError",
]
