from pathlib import Path
import sys
from dataclasses import dataclass

import streamlit as st

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@dataclass
class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""

    def clear(self) -> None:  # type: ignore[override]
        super().clear()


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state = _SessionDict()
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    yield


def _clock_generator(start: float = 0.0):
    current = {"value": start}

    def _tick() -> float:
        return current["value"]

    def _advance(delta: float) -> float:
        current["value"] += delta
        return current["value"]

    return _tick, _advance


@pytest.fixture
def clock():
    """Return a ``(clock, advance)`` pair for driving wizard timers by hand."""

    return _clock_generator()
