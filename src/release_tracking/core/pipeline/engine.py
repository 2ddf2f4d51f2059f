from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates a complete tracking run:
1. Validates configuration and the scan root.
2. Enumerates every file under the root.
3. Collects file sizes concurrently (scatter/gather).
4. Aggregates sizes into a release snapshot.
5. Publishes the snapshot to the remote store.

Any failure stops the run; nothing is published unless every step succeeded.
"""

import logging
import os
from typing import Any, Dict, Optional

from release_tracking.core.analysis.aggregator import aggregate
from release_tracking.core.analysis.classifier import dependency_prefix
from release_tracking.core.pipeline.validator import validate_config
from release_tracking.core.services.scanner import enumerate_files
from release_tracking.core.services.sizer import collect_sizes
from release_tracking.domain.errors import ReleaseTrackingError
from release_tracking.domain.pipeline_models import (
    TrackingResult,
    create_error_result,
    create_success_result,
)
from release_tracking.infra.fs import normalize_path
from release_tracking.infra.network import publish_snapshot

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
) -> TrackingResult:
    """
    Execute the full tracking pipeline.

    Args:
        config: The configuration dictionary (raw or partial).
        dry_run: If True, measure and aggregate but skip publishing.

    Returns:
        TrackingResult: Status, snapshot and summary of the run.
    """
    logger.info("Tracking run started.")

    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    base_path = normalize_path(cfg["input_path"], os.getcwd())
    prefix = dependency_prefix(base_path, cfg["dependency_dir"])
    logger.debug(f"Dependency prefix: {prefix}")

    try:
        files = enumerate_files(base_path, include_hidden=cfg["include_hidden"])
        records = collect_sizes(files, max_workers=cfg["max_workers"])
        snapshot = aggregate(records, prefix)

        logger.info(
            f"Total size: {snapshot.total_size} bytes "
            f"(project {snapshot.total_project_size}, dependencies {snapshot.total_node_module_size})."
        )

        entry_id = ""
        if dry_run:
            logger.info("Dry run: Skipping publication to the remote store.")
        else:
            entry_id = publish_snapshot(snapshot, cfg["database_url"], cfg["branch"])

    except ReleaseTrackingError as e:
        # Reported once, by the caller rendering the error result
        logger.debug(f"{type(e).__name__}: {e}")
        return create_error_result(
            str(e), cfg, base_path,
            summary_extra={"error_type": type(e).__name__}
        )

    summary = {
        "files": len(records),
        "project_files": len(snapshot.project_stats),
        "dependency_files": len(records) - len(snapshot.project_stats),
        "packages": len(snapshot.node_module_stats),
        "dependency_prefix": prefix,
        "database_url": cfg["database_url"],
        "dry_run": dry_run,
    }

    logger.info("Tracking run completed successfully.")
    return create_success_result(cfg, base_path, snapshot, entry_id, dry_run, summary)
