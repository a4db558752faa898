"""Shared types for the wizard package."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Mapping


FormData = Mapping[str, str]
StepPredicate = Callable[[FormData], bool]


class InputKind(StrEnum):
    """Render hint telling the view which widget to draw for a step."""

    TEXT = "text"
    PHONE = "phone"
    AMOUNT = "amount"


@dataclass(frozen=True)
class WizardStep:
    """Static description of a single wizard step.

    ``validate`` receives the whole form data so predicates can look at other
    fields, but must stay total: it returns ``False`` instead of raising for
    empty or malformed values. ``delay`` is the debounce in seconds before the
    wizard advances past a valid step. ``hide_when_idle`` only has an effect on
    the last step, which then becomes optional once it stayed empty for the
    controller's idle timeout.
    """

    key: str
    label: str
    validate: StepPredicate
    placeholder: str = ""
    input_kind: InputKind = InputKind.TEXT
    delay: float = 0.5
    hide_when_idle: bool = False

    def is_valid(self, form_data: FormData) -> bool:
        return bool(self.validate(form_data))


@dataclass(frozen=True)
class StepView:
    """Render-ready snapshot of a step for the presentation layer."""

    index: int
    step: WizardStep
    value: str
    is_valid: bool
    is_active: bool

    @property
    def is_read_only(self) -> bool:
        return not self.is_active


__all__ = [
    "FormData",
    "InputKind",
    "StepPredicate",
    "StepView",
    "WizardStep",
]
