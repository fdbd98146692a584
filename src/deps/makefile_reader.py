# src/deps/makefile_reader.py — v1
"""GCC/Clang Makefile-style dependency reader (``-MD -MF`` output).

Expected text::

    foo.o: foo.c include/a.h \
      include/b.h

Every backslash is removed, the text is split on whitespace and the first
token (the rule target, i.e. the output itself) is dropped.
"""

from __future__ import annotations

import logging

from rebuildcheck.core.models import CompilationUnit, Toolchain
from rebuildcheck.deps.base_dependency_reader import BaseDependencyReader
from rebuildcheck.storage.layout import GNU_DEPS_EXT

logger = logging.getLogger(__name__)


def parse_makefile_deps(text: str) -> list[str]:
    """Return the prerequisites of a single Makefile rule, in order."""
    tokens = text.replace("\\", "").split()
    return tokens[1:]


class MakefileDependencyReader(BaseDependencyReader):
    """Reads ``<dst stem>.dep`` written by gcc or clang."""

    def __init__(
        self, extension: str | None = None, empty_is_unknown: bool = True
    ) -> None:
        super().__init__(extension)
        self._empty_is_unknown = empty_is_unknown

    @property
    def toolchain(self) -> Toolchain:
        return Toolchain.GNU

    @property
    def default_extension(self) -> str:
        return GNU_DEPS_EXT

    def read(self, unit: CompilationUnit) -> list[str] | None:
        path = self.side_channel_path(unit)
        if not path.is_file():
            logger.debug("No dependency record at %s", path)
            return None

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Unreadable dependency record %s: %s", path, e)
            return None

        deps = parse_makefile_deps(text)
        if not deps and self._empty_is_unknown:
            # A real rule always lists at least the source file.
            logger.warning("Dependency record %s lists no prerequisites", path)
            return None
        return deps
