from __future__ import annotations

"""
Snapshot Domain Data Models.

Defines the immutable records produced while measuring a release tree:
per-file size records, per-package groups and the final snapshot that is
published to the remote store.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from release_tracking.infra.fs import display_text

# -----------------------------------------------------------------------------
# MEASUREMENT RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PathSizeRecord:
    """
    Size of a single discovered file.

    Attributes:
        path: POSIX-style path, prefixed with the scan root.
        size: Size in bytes.
    """
    path: str
    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"Negative size for '{self.path}': {self.size}")

    def to_dict(self) -> Dict[str, Any]:
        return {"path": display_text(self.path), "size": self.size}


@dataclass(frozen=True)
class PackageGroup:
    """
    Cumulative size of every file belonging to one dependency package.

    Attributes:
        module_name: Top-level package name (scoped packages keep their scope).
        size: Sum of all file sizes in bytes.
    """
    module_name: str
    size: int

    def to_dict(self) -> Dict[str, Any]:
        return {"moduleName": display_text(self.module_name), "size": self.size}

# -----------------------------------------------------------------------------
# AGGREGATE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ReleaseSnapshot:
    """
    One complete measurement of a scanned release tree.

    Attributes:
        total_node_module_size: Sum of every dependency package size.
        total_project_size: Sum of every project-owned file size.
        total_size: Sum of the two totals above.
        project_stats: Project files in enumeration order.
        node_module_stats: Package groups in first-seen order.
    """
    total_node_module_size: int = 0
    total_project_size: int = 0
    total_size: int = 0
    project_stats: Tuple[PathSizeRecord, ...] = field(default_factory=tuple)
    node_module_stats: Tuple[PackageGroup, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON shape stored under the branch collection."""
        return {
            "totalNodeModuleSize": self.total_node_module_size,
            "totalProjectSize": self.total_project_size,
            "totalSize": self.total_size,
            "projectStats": [r.to_dict() for r in self.project_stats],
            "nodeModuleStats": [g.to_dict() for g in self.node_module_stats],
        }
