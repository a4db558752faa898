from __future__ import annotations

import contextvars
import logging
from typing import Any

import pytest

from core.errors import InvalidArgument
from utils.logging_context import (
    bind_log_context,
    configure_logging,
    current_log_context,
    log_context,
)
from wizard.controller import WizardController
from wizard.steps import SENDER, build_create_request_steps


def test_unbound_fields_default_to_dash() -> None:
    context = contextvars.Context().run(current_log_context)

    assert context == {"session_id": "-", "wizard_step": "-", "request_id": "-"}


def test_wizard_logging_includes_context(caplog: Any, clock) -> None:
    configure_logging()
    now, advance = clock
    controller = WizardController(build_create_request_steps(delay=0.5), name="create", clock=now)
    caplog.set_level(logging.DEBUG, logger="wizard.controller")

    def run() -> None:
        bind_log_context(session_id="session-123")
        with log_context(wizard_step=SENDER, request_id="req-1"):
            controller.set_field(SENDER, "Al")
            advance(0.5)
            controller.tick()

    contextvars.copy_context().run(run)

    records = [record for record in caplog.records if "advanced to step" in record.message]
    assert records, "Expected an advance log entry"
    record = records[0]
    assert record.session_id == "session-123"
    assert record.wizard_step == SENDER
    assert record.request_id == "req-1"


def test_context_values_reset_after_block(caplog: Any) -> None:
    configure_logging()
    logger = logging.getLogger("test.logging.context")
    caplog.set_level(logging.INFO, logger=logger.name)

    def run() -> None:
        bind_log_context(wizard_step="amount")
        with log_context(wizard_step="description", request_id="  "):
            logger.info("inside")
        logger.info("outside")

    contextvars.copy_context().run(run)

    inside, outside = caplog.records[-2:]
    assert inside.wizard_step == "description"
    assert inside.request_id == "-"
    assert outside.wizard_step == "amount"
    assert outside.request_id == "-"


def test_none_leaves_bound_field_unchanged() -> None:
    def run() -> dict[str, str]:
        bind_log_context(session_id="s-1", request_id="abc")
        with log_context(request_id=None, wizard_step="sender"):
            return current_log_context()

    context = contextvars.Context().run(run)

    assert context == {"session_id": "s-1", "wizard_step": "sender", "request_id": "abc"}


def test_unknown_field_is_rejected() -> None:
    with pytest.raises(InvalidArgument, match="user_id"):
        with log_context(user_id="u-1"):
            pass


def test_configure_logging_installs_factory_once(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "level", root.level)
    configure_logging()
    factory = logging.getLogRecordFactory()

    configure_logging(level=logging.DEBUG)

    assert logging.getLogRecordFactory() is factory
    assert logging.getLogger().level == logging.DEBUG
