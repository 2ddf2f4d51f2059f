from __future__ import annotations

"""
Integration tests for the remote store client.

Utilizes mocking to verify the Realtime Database push request and its
failure modes without making real network calls.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from release_tracking.domain.errors import PublishError
from release_tracking.domain.snapshot_models import PackageGroup, PathSizeRecord, ReleaseSnapshot
from release_tracking.infra.network import branch_endpoint, publish_snapshot

DB_URL = "https://example-tracking.firebaseio.com"


@pytest.fixture
def snapshot() -> ReleaseSnapshot:
    return ReleaseSnapshot(
        total_node_module_size=30,
        total_project_size=5,
        total_size=35,
        project_stats=(PathSizeRecord("package/src/z.js", 5),),
        node_module_stats=(PackageGroup("a", 30),),
    )


def _response(status: int = 200, payload=None) -> MagicMock:
    mock_response = MagicMock()
    mock_response.status_code = status
    mock_response.json.return_value = payload
    if status >= 400:
        mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status} Error")
    return mock_response


def test_branch_endpoint() -> None:
    assert branch_endpoint(DB_URL + "/", "master") == f"{DB_URL}/branch/master.json"
    assert branch_endpoint(DB_URL, "/feature/") == f"{DB_URL}/branch/feature.json"


def test_publish_posts_snapshot_and_returns_key(snapshot: ReleaseSnapshot) -> None:
    with patch("requests.post", return_value=_response(200, {"name": "-Nabc123"})) as mock_post:
        entry_id = publish_snapshot(snapshot, DB_URL, "master")

    assert entry_id == "-Nabc123"
    args, kwargs = mock_post.call_args
    assert args[0] == f"{DB_URL}/branch/master.json"
    assert kwargs["json"] == snapshot.to_dict()
    assert "User-Agent" in kwargs["headers"]
    assert kwargs["timeout"] > 0


def test_publish_http_error(snapshot: ReleaseSnapshot) -> None:
    with patch("requests.post", return_value=_response(401, {"error": "Permission denied"})):
        with pytest.raises(PublishError, match="401"):
            publish_snapshot(snapshot, DB_URL, "master")


def test_publish_connection_error(snapshot: ReleaseSnapshot) -> None:
    with patch("requests.post", side_effect=requests.exceptions.ConnectionError("unreachable")):
        with pytest.raises(PublishError, match="unreachable"):
            publish_snapshot(snapshot, DB_URL, "master")


def test_publish_timeout(snapshot: ReleaseSnapshot) -> None:
    with patch("requests.post", side_effect=requests.exceptions.Timeout()):
        with pytest.raises(PublishError, match="timed out"):
            publish_snapshot(snapshot, DB_URL, "master")


def test_publish_reply_without_key(snapshot: ReleaseSnapshot) -> None:
    with patch("requests.post", return_value=_response(200, None)):
        with pytest.raises(PublishError, match="no entry key"):
            publish_snapshot(snapshot, DB_URL, "master")


def test_publish_non_json_reply(snapshot: ReleaseSnapshot) -> None:
    bad = _response(200)
    bad.json.side_effect = ValueError("Expecting value")

    with patch("requests.post", return_value=bad):
        with pytest.raises(PublishError):
            publish_snapshot(snapshot, DB_URL, "master")
