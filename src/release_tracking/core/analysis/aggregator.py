from __future__ import annotations

"""
Size Aggregation.

Folds flat path/size records into a ReleaseSnapshot: dependency files are
grouped per package, project files are kept as-is, and every group is summed.
"""

import logging
from typing import Dict, Iterable, List, Tuple

from release_tracking.core.analysis.classifier import (
    DEFAULT_DEPENDENCY_PREFIX,
    extract_package_name,
    is_dependency_path,
)
from release_tracking.domain.snapshot_models import (
    PackageGroup,
    PathSizeRecord,
    ReleaseSnapshot,
)

logger = logging.getLogger(__name__)


def aggregate(
        records: Iterable[PathSizeRecord],
        prefix: str = DEFAULT_DEPENDENCY_PREFIX,
) -> ReleaseSnapshot:
    """
    Aggregate file size records into an immutable release snapshot.

    Args:
        records: Size records in enumeration order.
        prefix: Literal path prefix of the dependency directory.

    Returns:
        ReleaseSnapshot: Totals, project files and per-package groups.
    """
    dependency_records, project_records = partition_records(records, prefix)

    node_module_stats = group_by_package(dependency_records, prefix)
    project_stats = tuple(project_records)

    total_node_module_size = sum(g.size for g in node_module_stats)
    total_project_size = sum(r.size for r in project_stats)

    logger.debug(
        f"Aggregated {len(dependency_records)} dependency files into "
        f"{len(node_module_stats)} packages, {len(project_stats)} project files."
    )

    return ReleaseSnapshot(
        total_node_module_size=total_node_module_size,
        total_project_size=total_project_size,
        total_size=total_node_module_size + total_project_size,
        project_stats=project_stats,
        node_module_stats=node_module_stats,
    )


def partition_records(
        records: Iterable[PathSizeRecord],
        prefix: str = DEFAULT_DEPENDENCY_PREFIX,
) -> Tuple[List[PathSizeRecord], List[PathSizeRecord]]:
    """Split records into (dependency, project), preserving order in both."""
    dependency: List[PathSizeRecord] = []
    project: List[PathSizeRecord] = []
    for record in records:
        if is_dependency_path(record.path, prefix):
            dependency.append(record)
        else:
            project.append(record)
    return dependency, project


def group_by_package(
        records: Iterable[PathSizeRecord],
        prefix: str = DEFAULT_DEPENDENCY_PREFIX,
) -> Tuple[PackageGroup, ...]:
    """Sum dependency record sizes per package, in first-seen order."""
    sizes: Dict[str, int] = {}
    for record in records:
        name = extract_package_name(record.path, prefix)
        sizes[name] = sizes.get(name, 0) + record.size

    return tuple(PackageGroup(module_name=name, size=size) for name, size in sizes.items())
