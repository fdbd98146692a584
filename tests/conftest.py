# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides a compilation unit laid out under tmp_path, a sample command and a
helper to pin file mtimes so staleness checks are deterministic.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from rebuildcheck.core.models import BuildCommand, CompilationUnit
from rebuildcheck.logging.context import clear_context


def touch(path: Path, mtime_ns: int, content: str = "") -> Path:
    """Create ``path`` with ``content`` and pin its mtime."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    os.utime(path, ns=(mtime_ns, mtime_ns))
    return path


@pytest.fixture
def set_mtime():
    """Return the touch() helper."""
    return touch


@pytest.fixture
def unit(tmp_path: Path) -> CompilationUnit:
    """Unit whose files live in tmp_path; nothing exists on disk yet."""
    return CompilationUnit(src=tmp_path / "main.c", dst=tmp_path / "main.o")


@pytest.fixture
def command(unit: CompilationUnit) -> BuildCommand:
    return BuildCommand(
        program="cc",
        args=["-c", str(unit.src), "-o", str(unit.dst), "-O2"],
    )


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()
