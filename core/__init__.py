"""Core package for BuzzPay errors and payment request use-cases."""

from .errors import (
    BuzzPayError,
    InvalidArgument,
    RecordNotFound,
    ShareTargetUnavailable,
    StoreConfigurationError,
    StoreError,
    WizardValidationError,
)

__all__ = [
    "BuzzPayError",
    "InvalidArgument",
    "RecordNotFound",
    "ShareTargetUnavailable",
    "StoreConfigurationError",
    "StoreError",
    "WizardValidationError",
]
