"""Sender view: walk through the create wizard, submit and share the request."""

from __future__ import annotations

import streamlit as st

import config as app_config
from constants.keys import StateKeys, UIKeys
from core.errors import StoreError, WizardValidationError
from core.payments import create_request
from core.share import ShareResult, share_request
from integrations.supabase_store import RecordStore
from models.payment_request import PaymentRequest
from state import discard_create_wizard, get_create_wizard
from ui_views.common import sync_widget_value
from ui_views.navigation import go_to
from ui_views.routes import Route, View
from ui_views.share_target import StreamlitShareTarget
from utils.errors import describe_store_error, display_error, store_error_detail
from utils.logging_context import log_context
from utils.normalization import format_amount
from wizard.controller import WizardController
from wizard.types import InputKind, StepView


def _widget_key(view: StepView) -> str:
    return f"{UIKeys.CREATE_FIELD_PREFIX}{view.step.key}"


def _on_field_change(controller: WizardController, index: int, widget_key: str) -> None:
    controller.set_field_value(index, st.session_state.get(widget_key, ""))
    st.session_state.pop(StateKeys.SUBMIT_ERROR, None)


def _on_edit(controller: WizardController, index: int) -> None:
    """Clear a completed step so the wizard rewinds to it."""

    controller.set_field_value(index, "")
    st.session_state.pop(StateKeys.SUBMIT_ERROR, None)


def _render_active_step(controller: WizardController, view: StepView) -> None:
    widget_key = _widget_key(view)
    sync_widget_value(st.session_state, widget_key, view.value)
    step = view.step
    st.text_input(
        step.label,
        key=widget_key,
        placeholder=step.placeholder,
        on_change=_on_field_change,
        args=(controller, view.index, widget_key),
        help="Amount in dollars, e.g. 25.50" if step.input_kind is InputKind.AMOUNT else None,
    )
    if view.value and not view.is_valid:
        st.caption("⚠️ Please check this value.")


def _render_read_only_step(controller: WizardController, view: StepView) -> None:
    value_column, edit_column = st.columns([6, 1], vertical_alignment="bottom")
    value = format_amount(view.value) if view.step.input_kind is InputKind.AMOUNT else view.value
    value_column.markdown(f"**{view.step.label}**  \n{value}")
    edit_column.button(
        "✏️",
        key=f"{_widget_key(view)}.edit",
        help="Edit",
        on_click=_on_edit,
        args=(controller, view.index),
    )


def _submit(controller: WizardController, store: RecordStore) -> None:
    try:
        record = create_request(controller, store)
    except WizardValidationError as exc:
        st.session_state[StateKeys.SUBMIT_ERROR] = (str(exc), ", ".join(exc.invalid_keys))
        return
    except StoreError as exc:
        st.session_state[StateKeys.SUBMIT_ERROR] = (describe_store_error(exc), store_error_detail(exc))
        return
    st.session_state[StateKeys.CREATED_REQUEST] = record
    st.session_state[StateKeys.SHARE_RESULT] = None
    st.rerun()


@st.fragment(run_every=app_config.WIZARD_TICK_INTERVAL)
def _render_wizard(store: RecordStore) -> None:
    controller = get_create_wizard()
    controller.tick()
    with log_context(wizard_step=controller.current_key):
        for view in controller.visible_steps():
            if view.is_active:
                _render_active_step(controller, view)
            else:
                _render_read_only_step(controller, view)

        submit_error = st.session_state.get(StateKeys.SUBMIT_ERROR)
        if submit_error:
            message, detail = submit_error
            display_error(message, detail)

        if controller.is_complete():
            if st.button("Create Payment Request", type="primary", use_container_width=True):
                _submit(controller, store)
        elif controller.hidden_steps:
            st.caption("Description skipped.")


def _render_share(record: PaymentRequest) -> ShareResult:
    result = st.session_state.get(StateKeys.SHARE_RESULT)
    if isinstance(result, ShareResult):
        return result
    result = share_request(record, StreamlitShareTarget())
    st.session_state[StateKeys.SHARE_RESULT] = result
    return result


def _render_created(record: PaymentRequest) -> None:
    with log_context(request_id=record.id):
        st.success(f"Payment request for {format_amount(record.amount)} sent to {record.recipient}.")
        result = _render_share(record)
        if result.notice:
            st.warning(result.notice)
        elif result.opened_url:
            st.link_button("Open WhatsApp again", result.opened_url, icon="💬")
        st.code(result.message, language=None)
        st.markdown(f"[{result.link}]({result.link})")

        new_column, dashboard_column = st.columns(2)
        if new_column.button("Create another request", use_container_width=True):
            discard_create_wizard()
            st.rerun()
        if dashboard_column.button("View all requests", use_container_width=True):
            discard_create_wizard()
            go_to(Route(View.DASHBOARD))


def render(store: RecordStore) -> None:
    """Render the create view."""

    st.header("💸 Request a payment")
    record = st.session_state.get(StateKeys.CREATED_REQUEST)
    if isinstance(record, PaymentRequest):
        _render_created(record)
        return
    _render_wizard(store)


__all__ = ["render"]
