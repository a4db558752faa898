"""Central configuration for the BuzzPay Streamlit app.

Values are resolved from Streamlit secrets first and fall back to environment
variables (a local ``.env`` file is loaded on import). ``SUPABASE_URL`` and
``SUPABASE_ANON_KEY`` point at the hosted record store; the remaining knobs
tune the share link and the wizard timers:

* ``CREATE_STEP_DELAY`` - debounce before the create wizard advances (0.5s)
* ``VERIFY_STEP_DELAY`` - debounce on the phone verification wizard (2.0s)
* ``LAST_STEP_IDLE_TIMEOUT`` - idle time before an empty last step is hidden
* ``HIDE_IDLE_LAST_STEP`` - disable to keep the description mandatory
"""

from __future__ import annotations

import logging
import os
import warnings
from typing import Mapping

import streamlit as st
from dotenv import load_dotenv

load_dotenv()


logger = logging.getLogger(__name__)

_TRUTHY_ENV_VALUES: tuple[str, ...] = ("1", "true", "yes", "y", "on")
_FALSY_ENV_VALUES: tuple[str, ...] = ("0", "false", "no", "n", "off")

APP_NAME = "BuzzPay"
CLIENT_INFO = "buzzpay-app/1.0.0"
PAYMENT_REQUESTS_TABLE = "payment_requests"


def _coerce_secret_value(value: object) -> str:
    """Return ``value`` as a trimmed string without raising on unexpected types."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="ignore").strip()
    return str(value).strip()


def get_setting(name: str, default: str = "") -> str:
    """Return ``name`` from Streamlit secrets, the ``supabase`` section or the environment."""

    try:
        direct_secret = st.secrets[name]
    except Exception:
        direct_secret = None
    value = _coerce_secret_value(direct_secret)
    if value:
        return value

    try:
        section = st.secrets["supabase"]
    except Exception:
        section = None
    if isinstance(section, Mapping):
        value = _coerce_secret_value(section.get(name))
        if value:
            return value

    value = _coerce_secret_value(os.getenv(name))
    return value or default


def _normalise_bool(value: object | None, *, default: bool = False) -> bool:
    """Return ``value`` converted to ``bool`` where possible."""

    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        candidate = value.strip().lower()
        if not candidate:
            return default
        if candidate in _TRUTHY_ENV_VALUES:
            return True
        if candidate in _FALSY_ENV_VALUES:
            return False
    warnings.warn(
        "Unsupported boolean value %r; falling back to %s." % (value, default),
        RuntimeWarning,
    )
    return default


def _normalise_seconds(value: object | None, *, name: str, default: float) -> float:
    """Return a positive duration in seconds."""

    if value is None:
        return default
    candidate = value
    if isinstance(candidate, str):
        stripped = candidate.strip()
        if not stripped:
            return default
        try:
            candidate = float(stripped)
        except ValueError:
            warnings.warn(
                "Unsupported %s '%s'; falling back to %.1f seconds." % (name, candidate, default),
                RuntimeWarning,
            )
            return default
    if isinstance(candidate, (int, float)) and not isinstance(candidate, bool):
        seconds = float(candidate)
        if seconds > 0:
            return seconds
    warnings.warn(
        "%s must be positive; falling back to %.1f seconds." % (name, default),
        RuntimeWarning,
    )
    return default


def _normalise_log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper() or "INFO")
    if isinstance(level, int):
        return level
    warnings.warn("Unsupported LOG_LEVEL %r; falling back to INFO." % value, RuntimeWarning)
    return logging.INFO


SUPABASE_URL = get_setting("SUPABASE_URL").rstrip("/")
SUPABASE_ANON_KEY = get_setting("SUPABASE_ANON_KEY")
SHARE_HOST = get_setting("SHARE_HOST", "buzzpay.co").strip("/")

STORE_REQUEST_TIMEOUT = _normalise_seconds(
    get_setting("STORE_REQUEST_TIMEOUT") or None, name="STORE_REQUEST_TIMEOUT", default=10.0
)
CREATE_STEP_DELAY = _normalise_seconds(get_setting("CREATE_STEP_DELAY") or None, name="CREATE_STEP_DELAY", default=0.5)
VERIFY_STEP_DELAY = _normalise_seconds(get_setting("VERIFY_STEP_DELAY") or None, name="VERIFY_STEP_DELAY", default=2.0)
LAST_STEP_IDLE_TIMEOUT = _normalise_seconds(
    get_setting("LAST_STEP_IDLE_TIMEOUT") or None, name="LAST_STEP_IDLE_TIMEOUT", default=10.0
)
HIDE_IDLE_LAST_STEP = _normalise_bool(get_setting("HIDE_IDLE_LAST_STEP") or None, default=True)

ADMIN_DEBUG_PANEL = _normalise_bool(get_setting("ADMIN_DEBUG_PANEL") or None, default=False)
LOG_LEVEL = _normalise_log_level(get_setting("LOG_LEVEL", "INFO"))

# Poll interval for the Streamlit fragment that drives wizard timers.
WIZARD_TICK_INTERVAL = 0.25


def is_store_configured() -> bool:
    """Return ``True`` when both the store URL and key are available."""

    return bool(SUPABASE_URL and SUPABASE_ANON_KEY)


if not is_store_configured():
    logger.info("SUPABASE_URL or SUPABASE_ANON_KEY not configured; the record store is unavailable.")
