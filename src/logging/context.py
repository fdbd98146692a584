# src/logging/context.py — v2
"""Contextual logging support: attach the unit and toolchain to log records."""

from __future__ import annotations

import contextvars
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

# Set per decision by the engine.
_unit: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "unit", default=None
)
_toolchain: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "toolchain", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    unit: str | None = None
    toolchain: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(unit=_unit.get(), toolchain=_toolchain.get())


@contextmanager
def unit_context(unit: str, toolchain: str | None = None) -> Iterator[LogContext]:
    """Scope the unit context to a block, restoring the previous values."""
    unit_token = _unit.set(unit)
    toolchain_token = _toolchain.set(toolchain)
    try:
        yield get_context()
    finally:
        _toolchain.reset(toolchain_token)
        _unit.reset(unit_token)


def clear_context() -> None:
    """Reset all context variables."""
    _unit.set(None)
    _toolchain.set(None)
