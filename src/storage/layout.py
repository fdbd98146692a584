# src/storage/layout.py — v2
"""Sidecar path conventions.

Every sidecar lives next to the compiled output and shares its stem; only
the extension differs, so sidecars never collide with the artifact or with
each other.
"""

from __future__ import annotations

from pathlib import Path

# Default sidecar markers (extension without the leading dot)
FINGERPRINT_EXT = "command"
MSVC_DEPS_EXT = "json"
GNU_DEPS_EXT = "dep"


def sidecar_path(dst: Path, extension: str) -> Path:
    """Return dst with its extension replaced by ``extension``."""
    return Path(dst).with_suffix(f".{extension}")


def fingerprint_path(dst: Path, extension: str = FINGERPRINT_EXT) -> Path:
    """Return the command fingerprint sidecar for an output."""
    return sidecar_path(dst, extension)


def collides_with_output(sidecar: Path, dst: Path) -> bool:
    """True when a sidecar would be the output file itself.

    Names are compared case-insensitively (``a.O`` and ``a.o``).
    """
    sidecar, dst = Path(sidecar), Path(dst)
    return sidecar.parent == dst.parent and sidecar.name.lower() == dst.name.lower()
