"""Step-wise form controller with debounced auto-advance and rewind.

The controller owns the form data of one wizard instance (one per Streamlit
session and view). Every mutation cancels the pending transition and
reconciles the position:

* when a step at or before the current one is invalid, the wizard rewinds to
  the lowest invalid index right away;
* when every step up to the current one is valid, an advance is scheduled
  after the current step's ``delay`` and re-checked when it fires;
* when the active step is the last one, allows idle hiding and is still empty,
  a hide transition is scheduled after ``idle_timeout``.

Transitions only fire from :meth:`WizardController.tick`, which the view
calls on every rerun; the clock is injectable so tests never sleep.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any, Callable, Iterator, Mapping, Sequence, TypeVar

from core.errors import BuzzPayError, InvalidArgument, WizardValidationError
from wizard.timers import Clock, PendingTransition, Transition, TransitionKind
from wizard.types import StepView, WizardStep

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_IDLE_TIMEOUT = 10.0


class SubmissionStatus(StrEnum):
    """Outcome of the most recent submit attempt."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class WizardController:
    """Manage the position, visibility and submission of a multi-step form."""

    def __init__(
        self,
        steps: Sequence[WizardStep],
        *,
        name: str = "wizard",
        clock: Clock | None = None,
        idle_timeout: float = DEFAULT_IDLE_TIMEOUT,
        hide_idle_last_step: bool = True,
        form_data: Mapping[str, object] | None = None,
    ) -> None:
        if not steps:
            raise InvalidArgument("A wizard needs at least one step.")
        keys = [step.key for step in steps]
        if len(set(keys)) != len(keys):
            raise InvalidArgument(f"Wizard step keys must be unique: {keys}")
        self._steps: tuple[WizardStep, ...] = tuple(steps)
        self._name = name
        self._timer = PendingTransition(clock=clock)
        self._idle_timeout = idle_timeout
        self._hide_idle_last_step = hide_idle_last_step
        self._form_data: dict[str, str] = {key: "" for key in keys}
        for key, value in (form_data or {}).items():
            if key in self._form_data:
                self._form_data[key] = "" if value is None else str(value)
        self._current = 0
        self._hidden: set[int] = set()
        self._submission = SubmissionStatus.IDLE
        self._last_error: str | None = None
        self._reconcile()

    @property
    def name(self) -> str:
        return self._name

    @property
    def steps(self) -> tuple[WizardStep, ...]:
        return self._steps

    @property
    def current_step(self) -> int:
        return self._current

    @property
    def last_step_index(self) -> int:
        return len(self._steps) - 1

    @property
    def current_key(self) -> str:
        return self._steps[self._current].key

    @property
    def form_data(self) -> dict[str, str]:
        """Return a copy of the captured values keyed by step key."""

        return dict(self._form_data)

    @property
    def hidden_steps(self) -> frozenset[int]:
        return frozenset(self._hidden)

    @property
    def pending_transition(self) -> Transition | None:
        return self._timer.pending

    @property
    def submission_status(self) -> SubmissionStatus:
        return self._submission

    @property
    def last_error(self) -> str | None:
        return self._last_error

    def step_index(self, key: str) -> int:
        """Return the index of the step capturing ``key``."""

        for index, step in enumerate(self._steps):
            if step.key == key:
                return index
        raise InvalidArgument(f"Unknown wizard field '{key}'")

    def get_value(self, step_index: int) -> str:
        self._check_index(step_index)
        return self._form_data[self._steps[step_index].key]

    def set_field_value(self, step_index: int, value: object) -> None:
        """Store ``value`` for ``step_index`` and re-evaluate the position."""

        self._check_index(step_index)
        step = self._steps[step_index]
        text = "" if value is None else str(value)
        if self._form_data[step.key] == text:
            return
        self._form_data[step.key] = text
        if step_index in self._hidden and text.strip():
            self._hidden.discard(step_index)
            logger.debug("%s: step '%s' edited, showing it again", self._name, step.key)
        self._timer.cancel()
        self._reconcile()

    def set_field(self, key: str, value: object) -> None:
        self.set_field_value(self.step_index(key), value)

    def evaluate(self) -> tuple[bool, ...]:
        """Return the validity of every step for the current form data."""

        snapshot = dict(self._form_data)
        return tuple(step.is_valid(snapshot) for step in self._steps)

    def tick(self) -> bool:
        """Fire a due transition and reconcile; return ``True`` when the position changed."""

        before = (self._current, frozenset(self._hidden))
        due = self._timer.pop_due()
        if due is not None:
            self._fire(due)
        self._reconcile()
        return before != (self._current, frozenset(self._hidden))

    def seconds_until_transition(self) -> float | None:
        return self._timer.seconds_remaining()

    def visible_steps(self) -> Iterator[StepView]:
        """Yield the steps up to the current one, skipping hidden steps."""

        validity = self.evaluate()
        for index in range(self._current + 1):
            if index in self._hidden:
                continue
            step = self._steps[index]
            yield StepView(
                index=index,
                step=step,
                value=self._form_data[step.key],
                is_valid=validity[index],
                is_active=index == self._current,
            )

    def invalid_step_keys(self) -> list[str]:
        """Return the keys of visible steps whose predicate fails."""

        validity = self.evaluate()
        return [
            step.key
            for index, step in enumerate(self._steps)
            if not validity[index] and index not in self._hidden
        ]

    def is_complete(self) -> bool:
        return not self.invalid_step_keys()

    def assembled_data(self) -> dict[str, str]:
        """Return the form data handed to the submit handler."""

        data = dict(self._form_data)
        for index in self._hidden:
            data[self._steps[index].key] = ""
        return data

    def submit(self, handler: Callable[[dict[str, str]], T]) -> T:
        """Hand the assembled form data to ``handler`` once every step is valid.

        Raises:
            WizardValidationError: Some visible step is still invalid.
            BuzzPayError: Re-raised from ``handler`` (usually a ``StoreError``);
                the wizard keeps its position.
        """

        invalid = self.invalid_step_keys()
        if invalid:
            raise WizardValidationError(invalid)
        self._submission = SubmissionStatus.SUBMITTING
        self._last_error = None
        try:
            result = handler(self.assembled_data())
        except BuzzPayError as exc:
            self._submission = SubmissionStatus.FAILED
            self._last_error = str(exc)
            logger.warning("%s: submission failed: %s", self._name, exc)
            raise
        self._submission = SubmissionStatus.SUCCEEDED
        logger.info("%s: submission succeeded", self._name)
        return result

    def reset(self) -> None:
        """Clear all captured values and return to the first step."""

        self._timer.cancel()
        self._form_data = {step.key: "" for step in self._steps}
        self._current = 0
        self._hidden.clear()
        self._submission = SubmissionStatus.IDLE
        self._last_error = None
        self._reconcile()

    def snapshot(self) -> dict[str, Any]:
        """Return a JSON-friendly view of the controller state for debugging."""

        pending = self._timer.pending
        return {
            "name": self._name,
            "current_step": self._current,
            "form_data": dict(self._form_data),
            "hidden": sorted(self._hidden),
            "validity": list(self.evaluate()),
            "pending": None if pending is None else {"kind": pending.kind.value, "step": pending.step_index},
            "submission": self._submission.value,
        }

    def _check_index(self, step_index: int) -> None:
        if isinstance(step_index, bool) or not isinstance(step_index, int):
            raise InvalidArgument(f"Step index must be an integer, got {step_index!r}")
        if not 0 <= step_index <= self.last_step_index:
            raise InvalidArgument(
                f"Step index {step_index} out of range for {len(self._steps)} steps"
            )

    def _can_hide_when_idle(self, step_index: int) -> bool:
        return (
            self._hide_idle_last_step
            and step_index == self.last_step_index
            and self._steps[step_index].hide_when_idle
        )

    def _fire(self, transition: Transition) -> None:
        if transition.step_index != self._current:
            logger.debug("%s: dropping stale %s transition", self._name, transition.kind)
            return
        step = self._steps[self._current]
        if transition.kind is TransitionKind.ADVANCE:
            if step.is_valid(self._form_data) and self._current < self.last_step_index:
                self._current += 1
                logger.debug("%s: advanced to step %d (%s)", self._name, self._current, self.current_key)
        elif transition.kind is TransitionKind.HIDE:
            if not self._form_data[step.key].strip():
                self._hidden.add(self._current)
                logger.debug("%s: step '%s' left empty, hiding it", self._name, step.key)

    def _rewind(self, step_index: int) -> None:
        logger.debug("%s: rewinding from step %d to %d", self._name, self._current, step_index)
        self._current = max(step_index, 0)
        self._hidden = {index for index in self._hidden if index <= self._current}
        self._timer.cancel()

    def _reconcile(self) -> None:
        validity = self.evaluate()
        first_invalid = next(
            (
                index
                for index in range(self._current + 1)
                if not validity[index] and index not in self._hidden
            ),
            None,
        )
        if first_invalid is not None and first_invalid < self._current:
            self._rewind(first_invalid)
            return

        pending = self._timer.pending
        current = self._current
        if first_invalid is None:
            if current < self.last_step_index:
                if pending is None or pending.kind is not TransitionKind.ADVANCE or pending.step_index != current:
                    self._timer.schedule(TransitionKind.ADVANCE, current, self._steps[current].delay)
            elif pending is not None:
                self._timer.cancel()
            return

        # The current step is invalid and waits for input.
        if self._can_hide_when_idle(current) and not self._form_data[self._steps[current].key].strip():
            if pending is None or pending.kind is not TransitionKind.HIDE or pending.step_index != current:
                self._timer.schedule(TransitionKind.HIDE, current, self._idle_timeout)
        elif pending is not None:
            self._timer.cancel()


__all__ = [
    "DEFAULT_IDLE_TIMEOUT",
    "SubmissionStatus",
    "WizardController",
]
