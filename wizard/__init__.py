"""Wizard helpers package."""

from __future__ import annotations

from .controller import SubmissionStatus, WizardController
from .steps import build_create_request_steps, build_verify_phone_steps
from .timers import PendingTransition, TransitionKind
from .types import InputKind, StepView, WizardStep
from .verification import PhoneVerification, VerificationOutcome, verify_phone

__all__ = [
    "InputKind",
    "PendingTransition",
    "PhoneVerification",
    "StepView",
    "SubmissionStatus",
    "TransitionKind",
    "VerificationOutcome",
    "WizardController",
    "WizardStep",
    "build_create_request_steps",
    "build_verify_phone_steps",
    "verify_phone",
]
