"""Single-slot pending transition used to debounce wizard state changes."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable


Clock = Callable[[], float]


class TransitionKind(StrEnum):
    """Transitions the wizard can schedule."""

    ADVANCE = "advance"
    HIDE = "hide"


@dataclass(frozen=True)
class Transition:
    """A scheduled transition for ``step_index`` due at ``due_at``."""

    kind: TransitionKind
    step_index: int
    due_at: float


class PendingTransition:
    """Hold at most one scheduled transition; scheduling replaces the previous one."""

    def __init__(self, *, clock: Clock | None = None) -> None:
        self._clock = clock or time.monotonic
        self._pending: Transition | None = None

    @property
    def pending(self) -> Transition | None:
        return self._pending

    def schedule(self, kind: TransitionKind, step_index: int, delay: float) -> Transition:
        """Schedule ``kind`` for ``step_index`` ``delay`` seconds from now."""

        transition = Transition(kind=kind, step_index=step_index, due_at=self._clock() + max(delay, 0.0))
        self._pending = transition
        return transition

    def cancel(self) -> Transition | None:
        """Drop the pending transition and return it, if any."""

        cancelled, self._pending = self._pending, None
        return cancelled

    def pop_due(self) -> Transition | None:
        """Return and clear the pending transition once its deadline passed."""

        pending = self._pending
        if pending is None or self._clock() < pending.due_at:
            return None
        self._pending = None
        return pending

    def seconds_remaining(self) -> float | None:
        """Return the seconds until the pending transition fires."""

        if self._pending is None:
            return None
        return max(self._pending.due_at - self._clock(), 0.0)


__all__ = [
    "Clock",
    "PendingTransition",
    "Transition",
    "TransitionKind",
]
