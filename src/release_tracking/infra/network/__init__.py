from __future__ import annotations

"""
Network Communication Infrastructure.

Remote store access for published snapshots.
"""

from release_tracking.infra.network.firebase_client import (
    branch_endpoint,
    publish_snapshot,
)

__all__ = [
    "branch_endpoint",
    "publish_snapshot",
]
