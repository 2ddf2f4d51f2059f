from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from release_tracking.domain.errors import PublishError
from release_tracking.domain.snapshot_models import ReleaseSnapshot
from release_tracking.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


def branch_endpoint(database_url: str, branch: str) -> str:
    """Build the REST endpoint of a branch collection ('/branch/<branch>/')."""
    base = database_url.rstrip("/")
    return f"{base}/branch/{branch.strip('/')}.json"


def publish_snapshot(snapshot: ReleaseSnapshot, database_url: str, branch: str) -> str:
    """
    Append a snapshot as a new entry of the branch collection.

    Uses the Realtime Database REST 'push' (POST), which stores the payload
    under a server-generated key.

    Returns:
        str: The generated entry key.

    Raises:
        PublishError: On transport errors, HTTP errors or a malformed reply.
    """
    url = branch_endpoint(database_url, branch)
    logger.info(f"Network: Publishing snapshot to {url}")
    return _push(url, snapshot.to_dict())


def _push(url: str, data: Dict[str, Any]) -> str:
    """Execute the JSON POST and extract the generated key."""
    headers = {"User-Agent": USER_AGENT}
    try:
        response = requests.post(url, json=data, headers=headers, timeout=DEFAULT_TIMEOUT)
        response.raise_for_status()
        reply = response.json()
    except requests.exceptions.Timeout as e:
        raise PublishError(f"Remote store timed out after {DEFAULT_TIMEOUT}s") from e
    except requests.exceptions.RequestException as e:
        raise PublishError(f"Remote store request failed: {e}") from e
    except ValueError as e:
        raise PublishError(f"Remote store returned a non-JSON reply: {e}") from e

    if not isinstance(reply, dict) or not reply.get("name"):
        raise PublishError(f"Remote store reply carries no entry key: {reply!r}")

    entry_id = str(reply["name"])
    logger.info(f"Network: Snapshot stored as entry '{entry_id}'.")
    return entry_id
