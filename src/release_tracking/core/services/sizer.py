from __future__ import annotations

"""
File Size Collection Service.

Issues one stat call per path on a thread pool and gathers all results
before returning. A single failing path aborts the whole batch.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence

from release_tracking.domain.config import DEFAULT_MAX_WORKERS
from release_tracking.domain.errors import StatError
from release_tracking.domain.snapshot_models import PathSizeRecord

logger = logging.getLogger(__name__)


def collect_sizes(paths: Sequence[str], max_workers: int = DEFAULT_MAX_WORKERS) -> List[PathSizeRecord]:
    """
    Stat every path concurrently and pair it with its size.

    Args:
        paths: File paths to measure.
        max_workers: Upper bound on concurrent stat calls.

    Returns:
        List[PathSizeRecord]: Records in the same order as paths.

    Raises:
        StatError: If any path cannot be stat'ed.
    """
    if not paths:
        return []

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="SizeCollector") as executor:
        records = list(executor.map(stat_path, paths))

    logger.debug(f"Collected sizes for {len(records)} files.")
    return records


def stat_path(path: str) -> PathSizeRecord:
    """Measure a single file, following symlinks."""
    try:
        st = os.stat(path)
    except OSError as e:
        raise StatError(path, e.strerror or str(e)) from e
    return PathSizeRecord(path=path, size=st.st_size)
