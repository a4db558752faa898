"""Payment wall: pick a (mocked) payment method and mark the request paid."""

from __future__ import annotations

import logging

import streamlit as st

from constants.keys import StateKeys, UIKeys
from core.errors import StoreError
from core.payments import PAYMENT_FAILED_MESSAGE, pay_request
from integrations.supabase_store import RecordStore
from models.payment_request import PAYMENT_METHODS, get_payment_method
from state import get_phone_verification
from ui_views.common import load_or_report, render_request_summary
from ui_views.navigation import go_to
from ui_views.routes import Route, View
from utils.errors import display_error, store_error_detail

logger = logging.getLogger(__name__)


def _method_label(method_id: str) -> str:
    method = get_payment_method(method_id)
    return f"{method.icon} {method.name}" if method else method_id


def render(store: RecordStore, request_id: str) -> None:
    """Render ``/request/<id>/pay``."""

    request = load_or_report(store, request_id)
    if request is None:
        return
    if request.is_paid:
        go_to(Route(View.RECEIPT, request.id))
    if not get_phone_verification(request).is_verified:
        go_to(Route(View.REQUEST, request.id))

    st.header("💳 Pay request")
    render_request_summary(request)
    method_id = st.radio(
        "Payment method",
        [method.id for method in PAYMENT_METHODS],
        format_func=_method_label,
        key=UIKeys.PAYMENT_METHOD,
    )

    payment_error = st.session_state.get(StateKeys.PAYMENT_ERROR)
    if payment_error:
        display_error(PAYMENT_FAILED_MESSAGE, payment_error)

    if st.button("Pay now", type="primary", use_container_width=True):
        try:
            pay_request(store, request.id, method_id)
        except StoreError as exc:
            logger.warning("Payment for request %s failed: %s", request.id, exc)
            st.session_state[StateKeys.PAYMENT_ERROR] = store_error_detail(exc) or str(exc)
            st.rerun()
        st.session_state.pop(StateKeys.PAYMENT_ERROR, None)
        go_to(Route(View.RECEIPT, request.id))


__all__ = ["render"]
