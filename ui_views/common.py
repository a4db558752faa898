"""Rendering helpers shared by the request, payment and receipt views."""

from __future__ import annotations

from typing import Any, MutableMapping

import streamlit as st

from core.errors import RecordNotFound, StoreError
from core.payments import format_timestamp, load_request
from integrations.supabase_store import RecordStore
from models.payment_request import PaymentRequest
from utils.errors import display_error, display_store_error
from utils.normalization import format_amount


def sync_widget_value(state: MutableMapping[str, Any], widget_key: str, value: str) -> bool:
    """Write ``value`` to ``widget_key`` only when it differs from the committed value.

    Any write makes Streamlit replace the browser field, including text typed
    but not yet committed. Returns ``True`` when a write happened.
    """

    if widget_key in state and state[widget_key] == value:
        return False
    state[widget_key] = value
    return True


def load_or_report(store: RecordStore, request_id: str) -> PaymentRequest | None:
    """Return the request or render the error and return ``None``."""

    try:
        return load_request(store, request_id)
    except RecordNotFound as exc:
        display_error(str(exc))
    except StoreError as exc:
        display_store_error(exc)
    return None


def render_request_summary(request: PaymentRequest) -> None:
    st.metric("Amount", format_amount(request.amount))
    st.markdown(
        f"**From:** {request.sender}  \n"
        f"**To:** {request.recipient}  \n"
        f"**Description:** {request.description or '-'}  \n"
        f"**Requested on:** {format_timestamp(request.created_at)}"
    )


__all__ = ["load_or_report", "render_request_summary", "sync_widget_value"]
