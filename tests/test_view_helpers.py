from __future__ import annotations

from ui_views.common import sync_widget_value
from wizard.controller import WizardController
from wizard.steps import SENDER, SENDER_PHONE, build_create_request_steps


def test_sync_seeds_missing_widget_key() -> None:
    state: dict[str, object] = {}

    assert sync_widget_value(state, "ui.create.sender", "Al") is True
    assert state["ui.create.sender"] == "Al"


def test_sync_leaves_committed_value_alone_on_every_tick() -> None:
    state: dict[str, object] = {"ui.create.sender": "Al"}

    for _ in range(10):
        assert sync_widget_value(state, "ui.create.sender", "Al") is False
    assert state == {"ui.create.sender": "Al"}


def test_sync_writes_after_controller_changes_value(clock) -> None:
    now, advance = clock
    controller = WizardController(build_create_request_steps(delay=0.5), clock=now)
    state: dict[str, object] = {}
    key = f"ui.create.{SENDER}"

    controller.set_field(SENDER, "Al")
    sync_widget_value(state, key, controller.get_value(0))
    advance(0.5)
    controller.tick()
    controller.set_field(SENDER_PHONE, "555 010 1111")

    # Clearing an earlier step rewinds and must refresh the field.
    controller.set_field(SENDER, "")
    assert controller.current_key == SENDER
    assert sync_widget_value(state, key, controller.get_value(0)) is True
    assert state[key] == ""
