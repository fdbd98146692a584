# src/deps/json_reader.py — v2
"""MSVC structured dependency reader (``/sourceDependencies`` output).

Expected document::

    {"Version": "1.2", "Data": {"Source": "...", "Includes": ["a.h", ...]}}

The source file is not listed among the includes but is always a
dependency, so it is appended to the result.
"""

from __future__ import annotations

import json
import logging

from rebuildcheck.core.models import CompilationUnit, Toolchain
from rebuildcheck.deps.base_dependency_reader import BaseDependencyReader
from rebuildcheck.storage.layout import MSVC_DEPS_EXT

logger = logging.getLogger(__name__)

DATA_KEY = "Data"
INCLUDES_KEY = "Includes"


class JsonDependencyReader(BaseDependencyReader):
    """Reads ``<dst stem>.json`` written by cl.exe."""

    @property
    def toolchain(self) -> Toolchain:
        return Toolchain.MSVC

    @property
    def default_extension(self) -> str:
        return MSVC_DEPS_EXT

    def read(self, unit: CompilationUnit) -> list[str] | None:
        path = self.side_channel_path(unit)
        if not path.is_file():
            logger.debug("No dependency record at %s", path)
            return None

        try:
            document = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
            logger.warning("Unreadable dependency record %s: %s", path, e)
            return None

        includes = _extract_includes(document)
        if includes is None:
            logger.warning(
                "Dependency record %s lacks %s.%s", path, DATA_KEY, INCLUDES_KEY
            )
            return None

        return [v for v in includes if isinstance(v, str)] + [str(unit.src)]


def _extract_includes(document: object) -> list[object] | None:
    if not isinstance(document, dict):
        return None
    data = document.get(DATA_KEY)
    if not isinstance(data, dict):
        return None
    includes = data.get(INCLUDES_KEY)
    if not isinstance(includes, list):
        return None
    return includes
