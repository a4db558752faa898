"""Pydantic models for payment requests."""

from .payment_request import (
    PAYMENT_METHODS,
    NewPaymentRequest,
    PaymentMethod,
    PaymentRequest,
    PaymentStatus,
    get_payment_method,
)

__all__ = [
    "NewPaymentRequest",
    "PAYMENT_METHODS",
    "PaymentMethod",
    "PaymentRequest",
    "PaymentStatus",
    "get_payment_method",
]
