"""Declarative step sequences for the BuzzPay wizards.

Adding, removing or reordering a step only touches these tuples; the
controller has no knowledge of individual fields.
"""

from __future__ import annotations

import config as app_config
from wizard.types import InputKind, WizardStep
from wizard.validation import (
    field_predicate,
    is_valid_amount,
    is_valid_name,
    is_valid_phone,
    is_value_present,
)

SENDER = "sender"
SENDER_PHONE = "sender_phone"
RECIPIENT = "recipient"
RECIPIENT_PHONE = "recipient_phone"
AMOUNT = "amount"
DESCRIPTION = "description"
VERIFY_PHONE = "phone"


def build_create_request_steps(
    *,
    delay: float | None = None,
    description_optional_when_idle: bool = True,
) -> tuple[WizardStep, ...]:
    """Return the six steps a sender walks through to create a request."""

    step_delay = app_config.CREATE_STEP_DELAY if delay is None else delay
    return (
        WizardStep(
            key=SENDER,
            label="Your Name",
            placeholder="Enter your name",
            validate=field_predicate(SENDER, is_valid_name),
            delay=step_delay,
        ),
        WizardStep(
            key=SENDER_PHONE,
            label="Your Phone Number",
            placeholder="Sender Phone Number",
            validate=field_predicate(SENDER_PHONE, is_valid_phone),
            input_kind=InputKind.PHONE,
            delay=step_delay,
        ),
        WizardStep(
            key=RECIPIENT,
            label="Recipient Name",
            placeholder="Enter recipient's name",
            validate=field_predicate(RECIPIENT, is_valid_name),
            delay=step_delay,
        ),
        WizardStep(
            key=RECIPIENT_PHONE,
            label="Recipient Phone Number",
            placeholder="Enter recipient's phone number",
            validate=field_predicate(RECIPIENT_PHONE, is_valid_phone),
            input_kind=InputKind.PHONE,
            delay=step_delay,
        ),
        WizardStep(
            key=AMOUNT,
            label="Amount",
            placeholder="Enter amount",
            validate=field_predicate(AMOUNT, is_valid_amount),
            input_kind=InputKind.AMOUNT,
            delay=step_delay,
        ),
        WizardStep(
            key=DESCRIPTION,
            label="Description",
            placeholder="Enter payment description",
            validate=field_predicate(DESCRIPTION, is_value_present),
            delay=step_delay,
            hide_when_idle=description_optional_when_idle,
        ),
    )


def build_verify_phone_steps(*, delay: float | None = None) -> tuple[WizardStep, ...]:
    """Return the single step a recipient completes before seeing a request."""

    step_delay = app_config.VERIFY_STEP_DELAY if delay is None else delay
    return (
        WizardStep(
            key=VERIFY_PHONE,
            label="Verify your phone number",
            placeholder="Enter your phone number",
            validate=field_predicate(VERIFY_PHONE, is_valid_phone),
            input_kind=InputKind.PHONE,
            delay=step_delay,
        ),
    )


__all__ = [
    "AMOUNT",
    "DESCRIPTION",
    "RECIPIENT",
    "RECIPIENT_PHONE",
    "SENDER",
    "SENDER_PHONE",
    "VERIFY_PHONE",
    "build_create_request_steps",
    "build_verify_phone_steps",
]
