# app.py - BuzzPay (Streamlit entrypoint)
from __future__ import annotations

import logging
import sys
from pathlib import Path

import streamlit as st

APP_ROOT = Path(__file__).resolve().parent
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))

import config as app_config  # noqa: E402
from constants.keys import StateKeys, UIKeys  # noqa: E402
from core.errors import StoreConfigurationError  # noqa: E402
from integrations.supabase_store import SupabaseRecordStore  # noqa: E402
from state import ensure_state  # noqa: E402
from ui_views import create_request, dashboard, payment_wall, receipt, request_view  # noqa: E402
from ui_views.navigation import current_route, go_to  # noqa: E402
from ui_views.routes import Route, View  # noqa: E402
from utils.errors import debug_toggle_allowed, display_error, show_error_details  # noqa: E402
from utils.logging_context import configure_logging, log_context  # noqa: E402

APP_VERSION = "1.0.0"

configure_logging(level=app_config.LOG_LEVEL)
logger = logging.getLogger("buzzpay.app")

st.set_page_config(page_title=app_config.APP_NAME, page_icon="🐝", layout="centered")
ensure_state()
st.session_state.setdefault("app_version", APP_VERSION)

_DARK_CSS = """
<style>
  .stApp { background-color: #111827; color: #f9fafb; }
  .stApp h1, .stApp h2, .stApp h3, .stApp label, .stApp p { color: #f9fafb; }
</style>
"""


@st.cache_resource(show_spinner=False)
def _get_store() -> SupabaseRecordStore:
    return SupabaseRecordStore.from_config()


def _render_sidebar() -> None:
    with st.sidebar:
        st.title(f"🐝 {app_config.APP_NAME}")
        if st.button("New request", use_container_width=True):
            go_to(Route(View.CREATE))
        if st.button("Dashboard", use_container_width=True):
            go_to(Route(View.DASHBOARD))
        st.toggle("Dark mode", key=StateKeys.DARK_MODE)
        if debug_toggle_allowed():
            st.toggle("Debug", key=UIKeys.DEBUG_TOGGLE)
        st.caption(f"v{APP_VERSION}")


def _render_debug_panel() -> None:
    if not show_error_details():
        return
    controller = st.session_state.get(StateKeys.CREATE_WIZARD)
    with st.expander("Session state"):
        st.json(
            {
                "session_id": st.session_state.get(StateKeys.SESSION_ID),
                "create_wizard": controller.snapshot() if controller is not None else None,
            }
        )


def main() -> None:
    _render_sidebar()
    if st.session_state.get(StateKeys.DARK_MODE):
        st.markdown(_DARK_CSS, unsafe_allow_html=True)

    try:
        store = _get_store()
    except StoreConfigurationError as exc:
        logger.error("Record store unavailable: %s", exc)
        display_error(str(exc), "Set SUPABASE_URL and SUPABASE_ANON_KEY in .env or Streamlit secrets.")
        return

    route = current_route()
    with log_context(request_id=route.request_id):
        logger.debug("Rendering %s", route.path)
        if route.view is View.DASHBOARD:
            dashboard.render(store)
        elif route.view is View.REQUEST and route.request_id:
            request_view.render(store, route.request_id)
        elif route.view is View.PAY and route.request_id:
            payment_wall.render(store, route.request_id)
        elif route.view is View.RECEIPT and route.request_id:
            receipt.render(store, route.request_id)
        else:
            create_request.render(store)
    _render_debug_panel()


main()
