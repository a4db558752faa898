"""Overview of every payment request, newest first."""

from __future__ import annotations

import streamlit as st

from core.errors import StoreError
from core.payments import format_timestamp, list_requests
from integrations.supabase_store import RecordStore
from models.payment_request import PaymentStatus
from ui_views.navigation import go_to
from ui_views.routes import Route, View
from utils.errors import display_store_error
from utils.normalization import format_amount

_STATUS_ICONS = {
    PaymentStatus.PENDING: "⏳",
    PaymentStatus.PROCESSING: "🔄",
    PaymentStatus.PAID: "✅",
    PaymentStatus.CANCELLED: "✖️",
}


def render(store: RecordStore) -> None:
    """Render ``/dashboard``."""

    st.header("📋 Payment requests")
    try:
        requests_ = list_requests(store)
    except StoreError as exc:
        display_store_error(exc)
        return
    if not requests_:
        st.info("No payment requests yet")
        return

    for request in requests_:
        with st.container(border=True):
            amount_column, details_column, action_column = st.columns([2, 4, 2])
            amount_column.metric(request.status.value.title(), format_amount(request.amount))
            details_column.markdown(
                f"{_STATUS_ICONS.get(request.status, '')} **{request.recipient}**  \n"
                f"{request.description or '-'}  \n"
                f"{format_timestamp(request.created_at)}"
            )
            if action_column.button("Receipt", key=f"dashboard.receipt.{request.id}"):
                go_to(Route(View.RECEIPT, request.id))


__all__ = ["render"]
