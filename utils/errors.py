"""Error rendering for BuzzPay views and the admin debug gate behind it."""

from __future__ import annotations

from typing import Final

import streamlit as st

import config as app_config
from constants.keys import UIKeys
from core.errors import StoreError

_DETAILS_LABEL: Final[str] = "Details"

FOREIGN_KEY_VIOLATION = "23503"
FOREIGN_KEY_MESSAGE: Final[str] = (
    "Unable to create request. There might be an issue with user identification."
)


def debug_toggle_allowed() -> bool:
    """Return ``True`` when this deployment may show the sidebar debug toggle."""

    return bool(app_config.ADMIN_DEBUG_PANEL)


def show_error_details() -> bool:
    """Return ``True`` when store error details and the state dump should render."""

    return debug_toggle_allowed() and bool(st.session_state.get(UIKeys.DEBUG_TOGGLE))


def describe_store_error(error: StoreError) -> str:
    """Return a short, user-facing message for ``error``."""

    if error.code == FOREIGN_KEY_VIOLATION:
        return FOREIGN_KEY_MESSAGE
    return str(error)


def store_error_detail(error: StoreError) -> str | None:
    """Return the technical details of ``error`` (code, details, hint) as text."""

    parts = [
        f"{label}: {value}"
        for label, value in (
            ("status", error.status_code),
            ("code", error.code),
            ("details", error.details),
            ("hint", error.hint),
        )
        if value not in (None, "")
    ]
    return "\n".join(parts) or None


def display_error(msg: str, detail: str | None = None) -> None:
    """Render a user-facing error with optional debug details.

    Args:
        msg: Short error message for the user.
        detail: Optional technical detail shown when debug mode is enabled.
    """

    st.error(msg)
    if detail and show_error_details():
        with st.expander(_DETAILS_LABEL):
            st.code(detail)


def display_store_error(error: StoreError) -> None:
    """Render ``error`` raised by the record store."""

    display_error(describe_store_error(error), store_error_detail(error))
