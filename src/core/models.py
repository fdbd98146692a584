# src/core/models.py — v2
"""Shared Pydantic domain models used across modules.

No module redefines these types; all imports come from core.models.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


# === TOOLCHAIN ===


class Toolchain(str, Enum):
    """Compiler family, selects the dependency side-channel format."""

    MSVC = "msvc"
    GNU = "gnu"


# === UNIT OF WORK ===


class CompilationUnit(BaseModel):
    """One source file mapped to one compiled output."""

    model_config = ConfigDict(frozen=True)

    src: Path
    dst: Path


class BuildCommand(BaseModel):
    """The exact invocation that would produce a unit's output.

    Never executed here. Only its textual form matters: it is persisted as
    the unit's fingerprint and compared on the next decision.
    """

    model_config = ConfigDict(frozen=True)

    program: str
    args: list[str] = Field(default_factory=list)
    env: dict[str, str] = Field(default_factory=dict)
    cwd: Path | None = None

    @classmethod
    def from_argv(cls, argv: list[str], **kwargs: object) -> BuildCommand:
        """Build a command from a full argv list (program first)."""
        if not argv:
            raise ValueError("argv must contain at least the program")
        return cls(program=argv[0], args=list(argv[1:]), **kwargs)  # type: ignore[arg-type]

    def render(self) -> str:
        """Stable debug form: every token double-quoted, space-separated.

        Environment overrides (sorted by key) and the working directory are
        prefixed so that changing either changes the fingerprint.
        """
        parts: list[str] = []
        if self.cwd is not None:
            parts.append(f"cd {_quote(str(self.cwd))} &&")
        for key in sorted(self.env):
            parts.append(f"{key}={_quote(self.env[key])}")
        parts.append(_quote(self.program))
        parts.extend(_quote(a) for a in self.args)
        return " ".join(parts)

    def __str__(self) -> str:
        return self.render()


def _quote(token: str) -> str:
    escaped = token.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


# === DECISION ===


class WriteStatus(str, Enum):
    """Outcome of a fingerprint update."""

    WRITTEN = "written"
    NO_WRITE = "no_write"


class RebuildReason(str, Enum):
    """Which staleness signal settled the decision."""

    SIDECAR_COLLISION = "sidecar_collision"
    COMMAND_CHANGED = "command_changed"
    FINGERPRINT_ERROR = "fingerprint_error"
    OUTPUT_MISSING = "output_missing"
    DEPENDENCIES_UNKNOWN = "dependencies_unknown"
    INPUT_NEWER = "input_newer"
    CHECK_FAILED = "check_failed"
    UP_TO_DATE = "up_to_date"


class RebuildDecision(BaseModel):
    """Verdict for one compilation unit."""

    rebuild: bool
    reason: RebuildReason
    detail: str = ""

    def __bool__(self) -> bool:
        return self.rebuild
