"""Payment request use-cases shared by the Streamlit views."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Mapping

from pydantic import ValidationError

from core.errors import InvalidArgument, WizardValidationError
from core.share import ShareResult, ShareTarget, share_request
from integrations.supabase_store import RecordStore
from models.payment_request import (
    NewPaymentRequest,
    PaymentRequest,
    PaymentStatus,
    get_payment_method,
)
from utils.normalization import clean_text, format_amount, format_phone_e164
from wizard import steps as wizard_steps
from wizard.controller import WizardController

logger = logging.getLogger(__name__)

PAYMENT_FAILED_MESSAGE = "Failed to process payment. Please try again."


def build_new_request(form_data: Mapping[str, str]) -> NewPaymentRequest:
    """Turn the create wizard's form data into a :class:`NewPaymentRequest`."""

    try:
        return NewPaymentRequest(
            sender=form_data.get(wizard_steps.SENDER, ""),
            sender_phone=form_data.get(wizard_steps.SENDER_PHONE, ""),
            recipient=form_data.get(wizard_steps.RECIPIENT, ""),
            recipient_phone=form_data.get(wizard_steps.RECIPIENT_PHONE, ""),
            amount=form_data.get(wizard_steps.AMOUNT, ""),
            description=form_data.get(wizard_steps.DESCRIPTION, ""),
            status=PaymentStatus.PENDING,
        )
    except ValidationError as exc:
        invalid = [str(error["loc"][0]) for error in exc.errors() if error.get("loc")]
        raise WizardValidationError(invalid) from exc


def create_request(controller: WizardController, store: RecordStore) -> PaymentRequest:
    """Submit the create wizard to ``store``."""

    return controller.submit(lambda data: store.create(build_new_request(data)))


def create_and_share(
    controller: WizardController,
    store: RecordStore,
    target: ShareTarget,
    *,
    host: str | None = None,
) -> tuple[PaymentRequest, ShareResult]:
    """Create the request, then hand the share message to ``target``."""

    record = create_request(controller, store)
    return record, share_request(record, target, host=host)


def load_request(store: RecordStore, record_id: str) -> PaymentRequest:
    return store.get(record_id)


def list_requests(store: RecordStore) -> list[PaymentRequest]:
    """Return every request, newest first."""

    return store.list(order_by="created_at", descending=True)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def pay_request(
    store: RecordStore,
    record_id: str,
    method_id: str,
    *,
    now: Callable[[], datetime] = _utc_now,
) -> dict[str, str]:
    """Mark ``record_id`` as paid with ``method_id`` and return the patched fields.

    No money moves: the payment methods are a mocked selector.
    """

    if get_payment_method(method_id) is None:
        raise InvalidArgument(f"Unknown payment method '{method_id}'")
    fields = {
        "status": PaymentStatus.PAID.value,
        "payment_method": method_id,
        "payment_date": now().isoformat(),
    }
    store.update(record_id, fields)
    logger.info("Payment request %s paid via %s", record_id, method_id)
    return fields


def save_note(store: RecordStore, record_id: str, note: str | None) -> str:
    """Store ``note`` on the receipt of ``record_id`` and return the cleaned text."""

    cleaned = clean_text(note)
    store.update(record_id, {"note": cleaned})
    return cleaned


def format_timestamp(value: str | None) -> str:
    """Return the date part of an ISO timestamp, or ``-`` when missing."""

    if not value:
        return "-"
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        return value


def render_receipt_text(request: PaymentRequest) -> str:
    """Return a plain-text receipt for download."""

    lines = [
        "BuzzPay receipt",
        "===============",
        f"Request: {request.id}",
        f"Status: {request.status.value}",
        f"Amount: {format_amount(request.amount)}",
        f"From: {request.sender} ({format_phone_e164(request.sender_phone)})",
        f"To: {request.recipient}",
        f"Description: {request.description or '-'}",
        f"Payment method: {request.payment_method_name or '-'}",
        f"Payment date: {format_timestamp(request.payment_date)}",
    ]
    if request.note:
        lines.append(f"Note: {request.note}")
    return "\n".join(lines) + "\n"


__all__ = [
    "PAYMENT_FAILED_MESSAGE",
    "build_new_request",
    "create_and_share",
    "create_request",
    "format_timestamp",
    "list_requests",
    "load_request",
    "pay_request",
    "render_receipt_text",
    "save_note",
]
