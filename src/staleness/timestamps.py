# src/staleness/timestamps.py — v1
"""Last-modified time lookup that tolerates missing files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

# Nanoseconds since the epoch, as reported by st_mtime_ns.
Timestamp = int


def get_modified_time(path: str | os.PathLike[str]) -> Timestamp | None:
    """Return the mtime of ``path`` in nanoseconds, or None if unavailable.

    Missing files, permission errors and transient I/O failures all map to
    None. There is no retry and no caching.
    """
    try:
        return Path(path).stat().st_mtime_ns
    except (OSError, ValueError) as e:
        logger.debug("No timestamp for %s: %s", path, e)
        return None
