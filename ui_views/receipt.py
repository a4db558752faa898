"""Receipt view with an editable note and a plain-text download."""

from __future__ import annotations

import streamlit as st

from constants.keys import StateKeys, UIKeys
from core.errors import StoreError
from core.payments import format_timestamp, render_receipt_text, save_note
from integrations.supabase_store import RecordStore
from ui_views.common import load_or_report
from ui_views.navigation import go_to
from ui_views.routes import Route, View
from utils.errors import display_store_error
from utils.normalization import format_amount


def render(store: RecordStore, request_id: str) -> None:
    """Render ``/request/<id>/receipt``."""

    request = load_or_report(store, request_id)
    if request is None:
        return

    st.header("🧾 Receipt")
    if request.is_paid:
        st.success("Payment complete")
    else:
        st.info(f"Status: {request.status.value}")
    st.metric("Amount", format_amount(request.amount))
    st.markdown(
        f"**To:** {request.recipient}  \n"
        f"**Description:** {request.description or '-'}  \n"
        f"**Payment method:** {request.payment_method_name or '-'}  \n"
        f"**Payment date:** {format_timestamp(request.payment_date)}"
    )

    note_key = f"{UIKeys.RECEIPT_NOTE}.{request.id}"
    st.session_state.setdefault(note_key, request.note or "")
    note = st.text_area("Note", key=note_key, placeholder="Add a note to this receipt")
    if st.button("Save note"):
        try:
            save_note(store, request.id, note)
        except StoreError as exc:
            display_store_error(exc)
        else:
            st.session_state[StateKeys.NOTE_SAVED] = request.id
            st.rerun()
    if st.session_state.get(StateKeys.NOTE_SAVED) == request.id:
        st.caption("✅ Note saved")

    st.download_button(
        "Download Receipt",
        data=render_receipt_text(request),
        file_name=f"buzzpay-receipt-{request.id}.txt",
        mime="text/plain",
    )
    if st.button("View all requests"):
        go_to(Route(View.DASHBOARD))


__all__ = ["render"]
