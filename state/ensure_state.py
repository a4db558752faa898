"""Helpers for initializing Streamlit session state and per-session wizards."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping, MutableMapping
from types import MappingProxyType
from typing import Any, Callable

import streamlit as st

import config as app_config
from constants.keys import StateKeys
from models.payment_request import PaymentRequest
from utils.logging_context import bind_log_context
from wizard.controller import WizardController
from wizard.steps import build_create_request_steps
from wizard.timers import Clock
from wizard.verification import PhoneVerification

logger = logging.getLogger(__name__)


_DEFAULT_STATE_FACTORIES: Mapping[str, Callable[[], Any]] = MappingProxyType(
    {
        StateKeys.SESSION_ID: lambda: uuid.uuid4().hex[:12],
        StateKeys.VERIFY_WIZARDS: dict,
        StateKeys.CREATED_REQUEST: lambda: None,
        StateKeys.SHARE_RESULT: lambda: None,
        StateKeys.SUBMIT_ERROR: lambda: None,
        StateKeys.PAYMENT_ERROR: lambda: None,
        StateKeys.NOTE_SAVED: lambda: False,
        StateKeys.DARK_MODE: lambda: False,
    }
)


def _session(state: MutableMapping[str, Any] | None) -> MutableMapping[str, Any]:
    return st.session_state if state is None else state


def ensure_state(state: MutableMapping[str, Any] | None = None) -> None:
    """Initialize session state with required keys.

    Existing keys are preserved to respect user interactions.
    """

    session = _session(state)
    for key, factory in _DEFAULT_STATE_FACTORIES.items():
        if key not in session:
            session[key] = factory()
    bind_log_context(session_id=str(session[StateKeys.SESSION_ID]))


def reset_state(state: MutableMapping[str, Any] | None = None) -> None:
    """Drop everything but the session id and re-apply defaults."""

    session = _session(state)
    session_id = session.get(StateKeys.SESSION_ID)
    for key in list(session.keys()):
        if key != StateKeys.SESSION_ID:
            del session[key]
    if session_id is not None:
        session[StateKeys.SESSION_ID] = session_id
    ensure_state(session)


def get_create_wizard(
    state: MutableMapping[str, Any] | None = None,
    *,
    clock: Clock | None = None,
) -> WizardController:
    """Return this session's create-request wizard, building it on first use."""

    session = _session(state)
    controller = session.get(StateKeys.CREATE_WIZARD)
    if isinstance(controller, WizardController):
        return controller
    controller = WizardController(
        build_create_request_steps(description_optional_when_idle=app_config.HIDE_IDLE_LAST_STEP),
        name="create",
        clock=clock,
        idle_timeout=app_config.LAST_STEP_IDLE_TIMEOUT,
        hide_idle_last_step=app_config.HIDE_IDLE_LAST_STEP,
    )
    logger.debug("Created wizard for session %s", session.get(StateKeys.SESSION_ID))
    session[StateKeys.CREATE_WIZARD] = controller
    return controller


def discard_create_wizard(state: MutableMapping[str, Any] | None = None) -> None:
    """Forget the create wizard and its results so the next visit starts fresh."""

    session = _session(state)
    for key in (StateKeys.CREATE_WIZARD, StateKeys.CREATED_REQUEST, StateKeys.SHARE_RESULT, StateKeys.SUBMIT_ERROR):
        session.pop(key, None)


def get_phone_verification(
    request: PaymentRequest,
    state: MutableMapping[str, Any] | None = None,
    *,
    clock: Clock | None = None,
) -> PhoneVerification:
    """Return the phone verification for ``request`` in this session."""

    session = _session(state)
    verifications = session.setdefault(StateKeys.VERIFY_WIZARDS, {})
    verification = verifications.get(request.id)
    if isinstance(verification, PhoneVerification):
        verification.request = request
        return verification
    verification = PhoneVerification(request, clock=clock)
    verifications[request.id] = verification
    return verification


__all__ = [
    "discard_create_wizard",
    "ensure_state",
    "get_create_wizard",
    "get_phone_verification",
    "reset_state",
]
