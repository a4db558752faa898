from __future__ import annotations

from wizard.timers import PendingTransition, TransitionKind


def test_schedule_replaces_pending_transition(clock) -> None:
    now, advance = clock
    timer = PendingTransition(clock=now)

    timer.schedule(TransitionKind.ADVANCE, 0, 0.5)
    replacement = timer.schedule(TransitionKind.HIDE, 5, 10)

    assert timer.pending == replacement
    assert timer.seconds_remaining() == 10


def test_pop_due_only_after_deadline(clock) -> None:
    now, advance = clock
    timer = PendingTransition(clock=now)
    timer.schedule(TransitionKind.ADVANCE, 2, 0.5)

    assert timer.pop_due() is None
    advance(0.5)
    due = timer.pop_due()
    assert due is not None
    assert due.kind is TransitionKind.ADVANCE
    assert due.step_index == 2
    assert timer.pending is None
    assert timer.pop_due() is None


def test_cancel_returns_dropped_transition(clock) -> None:
    now, _ = clock
    timer = PendingTransition(clock=now)

    assert timer.cancel() is None
    scheduled = timer.schedule(TransitionKind.ADVANCE, 0, 1)
    assert timer.cancel() == scheduled
    assert timer.seconds_remaining() is None


def test_negative_delay_is_due_immediately(clock) -> None:
    now, _ = clock
    timer = PendingTransition(clock=now)
    timer.schedule(TransitionKind.HIDE, 0, -3)

    assert timer.seconds_remaining() == 0
    assert timer.pop_due() is not None
