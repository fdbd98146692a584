# src/staleness/comparator.py — v1
"""Output-versus-inputs staleness check.

Ties count as stale: on filesystems with coarse timestamps an input written
in the same tick as the previous output must still trigger a rebuild.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from rebuildcheck.staleness.timestamps import Timestamp, get_modified_time

logger = logging.getLogger(__name__)


def is_stale(
    output_time: Timestamp | None,
    input_times: Iterable[Timestamp | None],
) -> bool:
    """Decide staleness from already-resolved timestamps.

    Stale when the output time is unknown, when any input time is unknown,
    or when any input time is greater than or equal to the output time.
    """
    if output_time is None:
        return True
    for input_time in input_times:
        if input_time is None or input_time >= output_time:
            return True
    return False


def is_any_input_newer_than_output(
    out_path: str | os.PathLike[str],
    in_paths: Iterable[str | os.PathLike[str]],
) -> bool:
    """Resolve timestamps lazily and stop at the first stale input."""
    output_time = get_modified_time(out_path)
    return is_stale(output_time, (get_modified_time(p) for p in in_paths))


def find_stale_inputs(
    out_path: str | os.PathLike[str],
    in_paths: Iterable[str | os.PathLike[str]],
) -> list[str]:
    """Return every input that makes the output stale.

    If the output itself has no timestamp, all inputs are returned.
    """
    paths = [str(p) for p in in_paths]
    output_time = get_modified_time(out_path)
    if output_time is None:
        return paths
    stale = [p for p in paths if is_stale(output_time, [get_modified_time(p)])]
    if stale:
        logger.debug("%d of %d inputs newer than %s", len(stale), len(paths), out_path)
    return stale
