"""Recipient view: verify the phone number, then show the request details."""

from __future__ import annotations

import streamlit as st

import config as app_config
from constants.keys import UIKeys
from integrations.supabase_store import RecordStore
from models.payment_request import PaymentRequest
from state import get_phone_verification
from ui_views.common import load_or_report, render_request_summary, sync_widget_value
from ui_views.navigation import go_to
from ui_views.routes import Route, View
from utils.errors import display_error
from utils.logging_context import log_context
from wizard.verification import PHONE_MISMATCH_MESSAGE, PhoneVerification, VerificationOutcome


def _input_key(request: PaymentRequest) -> str:
    return f"{UIKeys.VERIFY_PHONE_INPUT}.{request.id}"


def _on_phone_change(verification: PhoneVerification, widget_key: str) -> None:
    verification.set_phone(st.session_state.get(widget_key, ""))


def _on_verify(verification: PhoneVerification) -> None:
    verification.verify()


@st.fragment(run_every=app_config.WIZARD_TICK_INTERVAL)
def _render_verification(request: PaymentRequest) -> None:
    with log_context(request_id=request.id):
        verification = get_phone_verification(request)
        outcome = verification.tick()
        if outcome is VerificationOutcome.VERIFIED:
            st.rerun()
        if outcome is VerificationOutcome.SENDER:
            go_to(Route(View.RECEIPT, request.id))

        step = verification.wizard.steps[0]
        widget_key = _input_key(request)
        sync_widget_value(st.session_state, widget_key, verification.phone)
        st.text_input(
            step.label,
            key=widget_key,
            placeholder=step.placeholder,
            on_change=_on_phone_change,
            args=(verification, widget_key),
        )
        if outcome is VerificationOutcome.MISMATCH:
            display_error(PHONE_MISMATCH_MESSAGE)
        st.button(
            "Verify",
            disabled=not verification.can_verify(),
            on_click=_on_verify,
            args=(verification,),
        )


def render(store: RecordStore, request_id: str) -> None:
    """Render ``/request/<id>``."""

    request = load_or_report(store, request_id)
    if request is None:
        return
    st.header("🔐 Payment request")
    if request.is_paid:
        st.info("This request has already been paid.")
        if st.button("View receipt"):
            go_to(Route(View.RECEIPT, request.id))
        return

    verification = get_phone_verification(request)
    if verification.outcome is VerificationOutcome.SENDER:
        go_to(Route(View.RECEIPT, request.id))
    if not verification.is_verified:
        st.write(f"{request.sender} sent you a payment request. Enter your phone number to view it.")
        _render_verification(request)
        return

    render_request_summary(request)
    if st.button("Proceed to Payment", type="primary", use_container_width=True):
        go_to(Route(View.PAY, request.id))


__all__ = ["render"]
