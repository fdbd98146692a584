# src/cache/fingerprint.py — v2
"""Command fingerprint store.

Persists the textual form of the command that last produced an output, so a
changed command line (flags, defines, output path) forces a rebuild even when
no file on disk changed.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rebuildcheck.core.models import BuildCommand, CompilationUnit, WriteStatus
from rebuildcheck.storage.layout import FINGERPRINT_EXT, fingerprint_path

logger = logging.getLogger(__name__)


def write_if_changed(path: Path, content: str) -> WriteStatus:
    """Write ``content`` to ``path`` unless the file already holds it.

    An absent or unreadable file counts as different. Write errors are
    raised as OSError; callers decide what a failed write means.

    Returns:
        WriteStatus.WRITTEN if the file was (re)written, else NO_WRITE.
    """
    path = Path(path)
    try:
        current = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("No readable fingerprint at %s (%s)", path, e)
        current = None

    if current == content:
        return WriteStatus.NO_WRITE

    path.write_text(content, encoding="utf-8")
    logger.debug("Fingerprint written: %s", path)
    return WriteStatus.WRITTEN


def update_fingerprint(
    unit: CompilationUnit,
    command: BuildCommand,
    extension: str = FINGERPRINT_EXT,
) -> WriteStatus:
    """Record ``command`` as the fingerprint of ``unit.dst``."""
    return write_if_changed(fingerprint_path(unit.dst, extension), command.render())
