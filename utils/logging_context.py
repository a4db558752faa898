"""Logging context for BuzzPay script runs.

Every log record carries ``session_id``, ``wizard_step`` and ``request_id``
attributes (``"-"`` when unbound). The session id is bound once per run by
``state.ensure_state``; views scope the request and wizard step with
:func:`log_context` around the code that renders them.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from types import MappingProxyType
from typing import Iterator, Mapping

from core.errors import InvalidArgument

CONTEXT_FIELDS: tuple[str, ...] = ("session_id", "wizard_step", "request_id")
UNBOUND = "-"

_LOG_FORMAT = (
    "%(asctime)s %(levelname)s [session=%(session_id)s step=%(wizard_step)s "
    "request=%(request_id)s] %(name)s: %(message)s"
)

_context: contextvars.ContextVar[Mapping[str, str]] = contextvars.ContextVar(
    "buzzpay_log_context", default=MappingProxyType({})
)
_base_record_factory = logging.getLogRecordFactory()
_factory_installed = False


def _merge(fields: Mapping[str, str | None]) -> Mapping[str, str]:
    unknown = set(fields) - set(CONTEXT_FIELDS)
    if unknown:
        raise InvalidArgument(f"Unknown logging context fields: {', '.join(sorted(unknown))}")
    merged = dict(_context.get())
    for name, value in fields.items():
        if value is not None:
            merged[name] = value.strip() or UNBOUND
    return MappingProxyType(merged)


def current_log_context() -> dict[str, str]:
    """Return the bound context with ``"-"`` for unbound fields."""

    bound = _context.get()
    return {name: bound.get(name, UNBOUND) for name in CONTEXT_FIELDS}


def _record_factory(*args: object, **kwargs: object) -> logging.LogRecord:
    record = _base_record_factory(*args, **kwargs)
    for name, value in current_log_context().items():
        setattr(record, name, value)
    return record


def configure_logging(*, level: int = logging.INFO) -> None:
    """Install the context-aware record factory and the root format once."""

    global _factory_installed
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_LOG_FORMAT)
    root.setLevel(level)
    if not _factory_installed:
        logging.setLogRecordFactory(_record_factory)
        _factory_installed = True


def bind_log_context(**fields: str | None) -> None:
    """Bind ``fields`` for the rest of the current script run; ``None`` leaves a field as is."""

    _context.set(_merge(fields))


@contextmanager
def log_context(**fields: str | None) -> Iterator[None]:
    """Bind ``fields`` for the duration of the ``with`` block."""

    token = _context.set(_merge(fields))
    try:
        yield
    finally:
        _context.reset(token)


__all__ = [
    "CONTEXT_FIELDS",
    "bind_log_context",
    "configure_logging",
    "current_log_context",
    "log_context",
]
