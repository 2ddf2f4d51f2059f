from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object handed from the tracking pipeline to the CLI,
along with factory functions for the success and failure cases.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from release_tracking.domain.snapshot_models import ReleaseSnapshot

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TrackingResult:
    """
    Outcome of a complete tracking run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        base_path: Scan root as it prefixes every recorded path.
        branch: Remote branch the snapshot targets.
        snapshot: Aggregated measurement (absent on failure).
        entry_id: Key generated by the remote store for the new entry.
        published: Whether the snapshot reached the remote store.
        dry_run: Whether publishing was skipped on purpose.
        summary: Execution statistics.
    """
    ok: bool
    error: str

    base_path: str
    branch: str

    snapshot: Optional[ReleaseSnapshot] = None
    entry_id: str = ""
    published: bool = False
    dry_run: bool = False

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        base_path: str,
        summary_extra: Optional[Dict[str, Any]] = None
) -> TrackingResult:
    """Create a failed tracking result. No snapshot is attached."""
    return TrackingResult(
        ok=False,
        error=error,
        base_path=base_path,
        branch=cfg.get("branch", ""),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        base_path: str,
        snapshot: ReleaseSnapshot,
        entry_id: str = "",
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None
) -> TrackingResult:
    """
    Create a successful tracking result.

    Args:
        cfg: Final configuration used during execution.
        base_path: Normalized scan root.
        snapshot: The aggregated measurement.
        entry_id: Remote entry key, empty on dry runs.
        dry_run: Whether publishing was skipped.
        summary_extra: Final execution metrics.

    Returns:
        TrackingResult: An immutable success result object.
    """
    return TrackingResult(
        ok=True,
        error="",
        base_path=base_path,
        branch=cfg.get("branch", ""),
        snapshot=snapshot,
        entry_id=entry_id,
        published=bool(entry_id),
        dry_run=dry_run,
        summary=summary_extra or {},
    )
