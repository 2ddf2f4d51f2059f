from __future__ import annotations

"""
Domain Error Taxonomy.

Every failure of a tracking run is terminal: the run stops and no snapshot
is published.
"""


class ReleaseTrackingError(Exception):
    """Base class for all failures of a tracking run."""


class EnumerationError(ReleaseTrackingError):
    """The scan root is unreadable or the directory walk failed."""


class StatError(ReleaseTrackingError):
    """A discovered file could not be stat'ed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot stat '{path}': {reason}")
        self.path = path
        self.reason = reason


class PublishError(ReleaseTrackingError):
    """The snapshot could not be written to the remote store."""
