# src/engine/decision.py — v2
"""Rebuild decision for a single compilation unit.

Signals are checked in order and the first one that fires wins:

1. a sidecar would be the output file itself,
2. command fingerprint changed (or could not be written),
3. output missing,
4. no usable dependency record,
5. an input at least as new as the output.

``evaluate`` is the one place where lower-level failures are converted into
a verdict. Every failure becomes "rebuild"; nothing here raises.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rebuildcheck.cache.fingerprint import update_fingerprint
from rebuildcheck.config.settings import Settings
from rebuildcheck.core.models import (
    BuildCommand,
    CompilationUnit,
    RebuildDecision,
    RebuildReason,
    Toolchain,
    WriteStatus,
)
from rebuildcheck.deps.reader_factory import create_dependency_reader
from rebuildcheck.logging.context import unit_context
from rebuildcheck.staleness.comparator import is_any_input_newer_than_output
from rebuildcheck.storage.layout import FINGERPRINT_EXT, collides_with_output, fingerprint_path

logger = logging.getLogger(__name__)


def evaluate(
    unit: CompilationUnit,
    command: BuildCommand,
    toolchain: Toolchain | str,
    settings: Settings | None = None,
) -> RebuildDecision:
    """Decide whether ``unit`` must be rebuilt with ``command``.

    Side effect: the unit's fingerprint sidecar is rewritten when the
    command text changed.
    """
    toolchain_name = toolchain.value if isinstance(toolchain, Toolchain) else str(toolchain)
    with unit_context(str(unit.dst), toolchain_name):
        try:
            decision = _decide(unit, command, toolchain, settings)
        except Exception as e:
            logger.warning("Rebuild check failed for %s: %r", unit.dst, e, exc_info=True)
            decision = RebuildDecision(
                rebuild=True, reason=RebuildReason.CHECK_FAILED, detail=repr(e)
            )
        logger.debug(
            "%s: %s%s",
            "rebuild" if decision.rebuild else "skip",
            decision.reason.value,
            f" ({decision.detail})" if decision.detail else "",
        )
        return decision


def is_run_needed(
    unit: CompilationUnit,
    command: BuildCommand,
    toolchain: Toolchain | str,
    settings: Settings | None = None,
) -> bool:
    """Return True when ``unit`` must be rebuilt."""
    return evaluate(unit, command, toolchain, settings).rebuild


def _decide(
    unit: CompilationUnit,
    command: BuildCommand,
    toolchain: Toolchain | str,
    settings: Settings | None,
) -> RebuildDecision:
    fingerprint_ext = FINGERPRINT_EXT if settings is None else settings.fingerprint_extension

    # Never write the fingerprint over the artifact.
    fingerprint = fingerprint_path(unit.dst, fingerprint_ext)
    if collides_with_output(fingerprint, unit.dst):
        logger.warning("Fingerprint sidecar %s is the output itself", fingerprint)
        return RebuildDecision(
            rebuild=True, reason=RebuildReason.SIDECAR_COLLISION, detail=str(fingerprint)
        )

    try:
        status = update_fingerprint(unit, command, fingerprint_ext)
    except (OSError, ValueError) as e:
        logger.warning("Could not update fingerprint for %s: %s", unit.dst, e)
        return RebuildDecision(
            rebuild=True, reason=RebuildReason.FINGERPRINT_ERROR, detail=str(e)
        )
    if status is WriteStatus.WRITTEN:
        return RebuildDecision(rebuild=True, reason=RebuildReason.COMMAND_CHANGED)

    if not _is_regular_file(unit.dst):
        return RebuildDecision(rebuild=True, reason=RebuildReason.OUTPUT_MISSING)

    try:
        reader = create_dependency_reader(toolchain, settings)
    except ValueError as e:
        logger.warning("Dependency lookup failed for %s: %s", unit.dst, e)
        return RebuildDecision(rebuild=True, reason=RebuildReason.DEPENDENCIES_UNKNOWN)

    record = reader.side_channel_path(unit)
    if collides_with_output(record, unit.dst):
        logger.warning("Dependency record %s is the output itself", record)
        return RebuildDecision(
            rebuild=True, reason=RebuildReason.SIDECAR_COLLISION, detail=str(record)
        )

    dependencies = reader.read(unit)
    if dependencies is None:
        return RebuildDecision(rebuild=True, reason=RebuildReason.DEPENDENCIES_UNKNOWN)

    if is_any_input_newer_than_output(unit.dst, dependencies):
        return RebuildDecision(rebuild=True, reason=RebuildReason.INPUT_NEWER)

    return RebuildDecision(rebuild=False, reason=RebuildReason.UP_TO_DATE)


def _is_regular_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False
