"""Recipient phone verification for shared payment requests."""

from __future__ import annotations

import logging
from enum import StrEnum

from models.payment_request import PaymentRequest
from utils.normalization import normalize_phone_for_storage
from wizard.controller import WizardController
from wizard.steps import VERIFY_PHONE, build_verify_phone_steps
from wizard.timers import Clock, PendingTransition, TransitionKind

logger = logging.getLogger(__name__)

PHONE_MISMATCH_MESSAGE = "Phone number does not match. Please try again."


class VerificationOutcome(StrEnum):
    """Result of comparing an entered phone number with a request."""

    PENDING = "pending"
    VERIFIED = "verified"
    SENDER = "sender"
    MISMATCH = "mismatch"


def verify_phone(entered: str | None, request: PaymentRequest) -> VerificationOutcome:
    """Compare ``entered`` with the request's phones in their stored digit form.

    The recipient's phone unlocks the payment details, the sender's phone
    leads to the receipt and anything else is a mismatch.
    """

    digits = normalize_phone_for_storage(entered or "")
    if not digits:
        return VerificationOutcome.MISMATCH
    if digits == normalize_phone_for_storage(request.recipient_phone):
        return VerificationOutcome.VERIFIED
    if digits == normalize_phone_for_storage(request.sender_phone):
        return VerificationOutcome.SENDER
    return VerificationOutcome.MISMATCH


class PhoneVerification:
    """One-step wizard that verifies whoever opened a shared request link.

    Once the phone step is valid, the check runs automatically after the
    step's debounce delay; :meth:`verify` runs it immediately.
    """

    def __init__(
        self,
        request: PaymentRequest,
        *,
        delay: float | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.request = request
        self.wizard = WizardController(
            build_verify_phone_steps(delay=delay),
            name=f"verify:{request.id}",
            clock=clock,
            hide_idle_last_step=False,
        )
        self._check = PendingTransition(clock=clock)
        self._outcome = VerificationOutcome.PENDING

    @property
    def outcome(self) -> VerificationOutcome:
        return self._outcome

    @property
    def is_verified(self) -> bool:
        return self._outcome is VerificationOutcome.VERIFIED

    @property
    def phone(self) -> str:
        return self.wizard.form_data[VERIFY_PHONE]

    def set_phone(self, value: str | None) -> None:
        previous = self.phone
        self.wizard.set_field(VERIFY_PHONE, value)
        if self.phone == previous:
            return
        self._outcome = VerificationOutcome.PENDING
        self._check.cancel()
        if self.can_verify():
            self._check.schedule(TransitionKind.ADVANCE, 0, self.wizard.steps[0].delay)

    def can_verify(self) -> bool:
        return self.wizard.is_complete()

    def tick(self) -> VerificationOutcome:
        """Run the scheduled check once its debounce delay elapsed."""

        self.wizard.tick()
        if self._check.pop_due() is not None and self._outcome is VerificationOutcome.PENDING:
            return self.verify()
        return self._outcome

    def verify(self) -> VerificationOutcome:
        """Check the entered phone; a mismatch clears the input for another try."""

        self._check.cancel()
        if not self.can_verify():
            return self._outcome
        outcome = verify_phone(self.phone, self.request)
        self._outcome = outcome
        if outcome is VerificationOutcome.MISMATCH:
            logger.info("Phone verification failed for request %s", self.request.id)
            self.wizard.reset()
        else:
            logger.info("Phone verification for request %s: %s", self.request.id, outcome.value)
        return outcome


__all__ = [
    "PHONE_MISMATCH_MESSAGE",
    "PhoneVerification",
    "VerificationOutcome",
    "verify_phone",
]
