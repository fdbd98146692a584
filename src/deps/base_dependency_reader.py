# src/deps/base_dependency_reader.py — v1
"""Abstract reader interface for compiler dependency side-channels."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from rebuildcheck.core.models import CompilationUnit, Toolchain
from rebuildcheck.storage.layout import sidecar_path


class BaseDependencyReader(ABC):
    """Recovers the inputs a previous compiler run actually consumed.

    Readers are read-only. ``read`` returns None whenever no reliable record
    exists, which callers must treat as "rebuild".
    """

    def __init__(self, extension: str | None = None) -> None:
        self._extension = extension or self.default_extension

    @property
    @abstractmethod
    def toolchain(self) -> Toolchain:
        """Toolchain family whose side-channel this reader parses."""

    @property
    @abstractmethod
    def default_extension(self) -> str:
        """Side-channel extension used when none is configured."""

    @property
    def extension(self) -> str:
        return self._extension

    def side_channel_path(self, unit: CompilationUnit) -> Path:
        """Return the side-channel file for ``unit``."""
        return sidecar_path(unit.dst, self._extension)

    @abstractmethod
    def read(self, unit: CompilationUnit) -> list[str] | None:
        """Return the recorded dependency paths, or None if unknown."""
