from __future__ import annotations

from release_tracking import __version__

USER_AGENT = f"ReleaseTracking-Client/{__version__}"
DEFAULT_TIMEOUT = 10
