from __future__ import annotations

"""
File Discovery Service.

Walks a release tree and lists every file beneath it, dependency directory
included. Directories themselves are never reported.
"""

import logging
import os
from typing import List, Set

from release_tracking.domain.errors import EnumerationError
from release_tracking.infra.fs import join_record_path

logger = logging.getLogger(__name__)


def enumerate_files(root: str, include_hidden: bool = False) -> List[str]:
    """
    Recursively list files under root in a deterministic (sorted) order.

    Entries whose name starts with '.' are skipped unless include_hidden is
    set; hidden directories are pruned before descending. Symlinked
    directories (npm link, workspaces) are walked through their link path,
    each real directory at most once.

    Args:
        root: Scan root; it prefixes every returned path.
        include_hidden: Whether dot-prefixed files and directories are listed.

    Returns:
        List[str]: POSIX-style file paths.

    Raises:
        EnumerationError: If root is not a readable directory or the walk fails.
    """
    if not os.path.isdir(root):
        raise EnumerationError(f"Scan root is not a directory: {root}")
    if not os.access(root, os.R_OK | os.X_OK):
        raise EnumerationError(f"Scan root is not readable: {root}")

    def _on_error(err: OSError) -> None:
        raise EnumerationError(f"Directory walk failed at '{err.filename}': {err.strerror}") from err

    files: List[str] = []
    walked: Set[str] = set()
    for dirpath, dirs, names in os.walk(root, onerror=_on_error, followlinks=True):
        # Symlinked directories are followed once; a target already walked
        # (including an ancestor, i.e. a cycle) is skipped entirely
        real = os.path.realpath(dirpath)
        if real in walked:
            logger.debug(f"Skipping already walked directory '{dirpath}' -> '{real}'.")
            dirs[:] = []
            continue
        walked.add(real)

        # In-place pruning keeps os.walk from descending into hidden dirs
        if not include_hidden:
            dirs[:] = [d for d in dirs if not d.startswith(".")]
        dirs.sort()

        for name in sorted(names):
            if not include_hidden and name.startswith("."):
                continue
            rel_path = os.path.relpath(os.path.join(dirpath, name), root)
            files.append(join_record_path(root, rel_path))

    logger.info(f"Discovered {len(files)} files under '{root}'.")
    return files
