"""Pydantic models for payment requests stored in the hosted record store."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from utils.normalization import MAX_AMOUNT, amount_in_cents, clean_text, normalize_phone_for_storage


class PaymentStatus(StrEnum):
    """Lifecycle states of a payment request."""

    PENDING = "pending"
    PROCESSING = "processing"
    PAID = "paid"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class PaymentMethod:
    """A selectable (mocked) payment method."""

    id: str
    name: str
    icon: str


PAYMENT_METHODS: tuple[PaymentMethod, ...] = (
    PaymentMethod(id="card", name="Credit Card", icon="💳"),
    PaymentMethod(id="mobile", name="Mobile Money", icon="📱"),
    PaymentMethod(id="bank", name="Bank Transfer", icon="🏦"),
)


def get_payment_method(method_id: str | None) -> PaymentMethod | None:
    """Return the :class:`PaymentMethod` for ``method_id`` if it is known."""

    for method in PAYMENT_METHODS:
        if method.id == method_id:
            return method
    return None


class NewPaymentRequest(BaseModel):
    """Fields sent to the store when a sender creates a request."""

    model_config = ConfigDict(extra="forbid")

    amount: Decimal = Field(gt=0)
    description: str = ""
    recipient: str
    sender: str
    sender_phone: str
    recipient_phone: str
    status: PaymentStatus = PaymentStatus.PENDING

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value: object) -> Decimal:
        """Accept strings such as ``"25.50"`` or ``"$1,200"`` and round to cents."""

        amount = amount_in_cents(value)
        if amount is None:
            raise ValueError(f"amount must be a number no larger than {MAX_AMOUNT}")
        return amount

    @field_validator("description", "recipient", "sender", mode="before")
    @classmethod
    def _clean_text(cls, value: object) -> str:
        return clean_text(value)

    @field_validator("sender_phone", "recipient_phone", mode="before")
    @classmethod
    def _normalise_phone(cls, value: object) -> str:
        """Store phone numbers as digits only."""

        if value is None:
            return ""
        return normalize_phone_for_storage(str(value))

    @field_serializer("amount")
    def _serialize_amount(self, amount: Decimal) -> float:
        return float(amount)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON payload for the store's insert endpoint."""

        return self.model_dump(mode="json")


class PaymentRequest(NewPaymentRequest):
    """A payment request row as returned by the store."""

    model_config = ConfigDict(extra="ignore")

    id: str
    # Rows written by other clients may carry a zero amount.
    amount: Decimal = Field(ge=0)
    sender: str = ""
    sender_phone: str = ""
    recipient_phone: str = ""
    created_at: Optional[str] = None
    payment_method: Optional[str] = None
    payment_date: Optional[str] = None
    note: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def is_paid(self) -> bool:
        return self.status is PaymentStatus.PAID

    @property
    def payment_method_name(self) -> str:
        """Return the display name of the chosen payment method."""

        method = get_payment_method(self.payment_method)
        if method is not None:
            return method.name
        return self.payment_method or ""


__all__ = [
    "NewPaymentRequest",
    "PAYMENT_METHODS",
    "PaymentMethod",
    "PaymentRequest",
    "PaymentStatus",
    "get_payment_method",
]
