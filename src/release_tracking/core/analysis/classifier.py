from __future__ import annotations

"""
Dependency Path Classification.

Decides whether a recorded path belongs to a third-party package and, if so,
which top-level package owns it. Paths are compared literally: callers are
responsible for producing POSIX-style paths that share the prefix's root.
"""

from typing import List

DEFAULT_DEPENDENCY_PREFIX = "package/node_modules/"

# Bucket for dependency files that sit above package depth
UNKNOWN_PACKAGE = "(unknown)"


def dependency_prefix(root: str, dependency_dir: str) -> str:
    """
    Build the literal prefix that marks dependency files under a scan root.

    Args:
        root: Scan root exactly as it prefixes the recorded paths.
        dependency_dir: Name of the dependency directory (e.g. 'node_modules').

    Returns:
        str: Prefix ending with a single '/'.
    """
    root = root.replace("\\", "/")
    name = dependency_dir.strip("/")
    if not root or root == ".":
        return f"{name}/"
    return f"{root.rstrip('/')}/{name}/"


def is_dependency_path(path: str, prefix: str = DEFAULT_DEPENDENCY_PREFIX) -> bool:
    """Return True when the path lies under the dependency directory."""
    return path.startswith(prefix)


def extract_package_name(path: str, prefix: str = DEFAULT_DEPENDENCY_PREFIX) -> str:
    """
    Extract the owning package name from a dependency path.

    The name is the segment right after the dependency directory. Scoped
    packages ('@scope/name') keep both segments, and nested dependency
    directories are accounted to the outermost package. Paths that do not
    reach package depth (the directory itself, loose files directly inside
    it) fall into UNKNOWN_PACKAGE.

    Args:
        path: A path for which is_dependency_path() holds.
        prefix: The dependency prefix used for classification.

    Returns:
        str: Package name, or UNKNOWN_PACKAGE.
    """
    segments: List[str] = path[len(prefix):].split("/")

    # A package needs at least one segment below its own directory
    if len(segments) < 2 or not segments[0]:
        return UNKNOWN_PACKAGE

    head = segments[0]
    if head.startswith("@"):
        if len(segments) < 3 or not segments[1]:
            return UNKNOWN_PACKAGE
        return f"{head}/{segments[1]}"

    return head
