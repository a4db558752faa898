from __future__ import annotations

from contextlib import nullcontext

import streamlit as st

import config
from constants.keys import UIKeys
from core.errors import InvalidArgument, RecordNotFound, StoreError, WizardValidationError
from utils import errors as error_utils


def test_error_hierarchy() -> None:
    assert issubclass(InvalidArgument, ValueError)
    assert isinstance(RecordNotFound("x"), StoreError)
    assert str(WizardValidationError(["amount"])) == "Please complete all fields correctly"
    assert "unexpected error" in str(StoreError())


def test_foreign_key_violation_gets_friendly_message() -> None:
    error = StoreError("insert violates foreign key", code="23503", details="Key (user_id)")

    assert error_utils.describe_store_error(error) == error_utils.FOREIGN_KEY_MESSAGE
    assert error_utils.store_error_detail(error) == "code: 23503\ndetails: Key (user_id)"
    assert error_utils.describe_store_error(StoreError("boom")) == "boom"
    assert error_utils.store_error_detail(StoreError("boom")) is None


def _capture_streamlit(monkeypatch) -> list[tuple[str, str]]:
    calls: list[tuple[str, str]] = []
    monkeypatch.setattr(st, "error", lambda msg: calls.append(("error", msg)))
    monkeypatch.setattr(st, "code", lambda text: calls.append(("code", text)))
    monkeypatch.setattr(st, "expander", lambda label: nullcontext())
    return calls


def test_display_error_hides_details_without_debug_panel(monkeypatch) -> None:
    calls = _capture_streamlit(monkeypatch)
    monkeypatch.setattr(config, "ADMIN_DEBUG_PANEL", False)
    st.session_state[UIKeys.DEBUG_TOGGLE] = True

    error_utils.display_error("Something failed", "trace")

    assert calls == [("error", "Something failed")]


def test_display_store_error_shows_details_in_debug_session(monkeypatch) -> None:
    calls = _capture_streamlit(monkeypatch)
    monkeypatch.setattr(config, "ADMIN_DEBUG_PANEL", True)
    st.session_state[UIKeys.DEBUG_TOGGLE] = True

    error_utils.display_store_error(StoreError("boom", code="PGRST116", status_code=406))

    assert calls == [("error", "boom"), ("code", "status: 406\ncode: PGRST116")]


def test_error_details_need_deployment_flag_and_sidebar_toggle(monkeypatch) -> None:
    monkeypatch.setattr(config, "ADMIN_DEBUG_PANEL", True)
    assert error_utils.debug_toggle_allowed()
    assert not error_utils.show_error_details()

    st.session_state[UIKeys.DEBUG_TOGGLE] = True
    assert error_utils.show_error_details()

    monkeypatch.setattr(config, "ADMIN_DEBUG_PANEL", False)
    assert not error_utils.debug_toggle_allowed()
    assert not error_utils.show_error_details()
