from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and release trees.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """Return a valid, complete configuration dictionary for testing."""
    return {
        "input_path": "package",
        "dependency_dir": "node_modules",
        "include_hidden": False,
        "max_workers": 4,
        "database_url": "https://example-tracking.firebaseio.com",
        "branch": "master",
    }


@pytest.fixture
def release_tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Create an unpacked release tree and chdir next to it.

    Structure (sizes in bytes):
    package/
      package.json            (20)
      src/index.js            (100)
      .npmrc                  (5, hidden)
      node_modules/
        a/index.js            (10)
        a/lib/util.js         (20)
        @scope/b/main.js      (40)
        c/node_modules/d/x.js (8)
    """
    root = tmp_path / "package"
    files = {
        "package.json": 20,
        "src/index.js": 100,
        ".npmrc": 5,
        "node_modules/a/index.js": 10,
        "node_modules/a/lib/util.js": 20,
        "node_modules/@scope/b/main.js": 40,
        "node_modules/c/node_modules/d/x.js": 8,
    }
    for rel, size in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(b"x" * size)

    monkeypatch.chdir(tmp_path)
    return root
