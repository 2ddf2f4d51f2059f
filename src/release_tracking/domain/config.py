from __future__ import annotations

"""
Configuration Domain Defaults.

The tracker has no persistent configuration: every run starts from these
defaults and applies command-line overrides on top.
"""

import os
from typing import Any, Dict

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_DATABASE_URL = "https://release-tracking.firebaseio.com"
DEFAULT_BRANCH = "master"
DEFAULT_DEPENDENCY_DIR = "node_modules"
DEFAULT_MAX_WORKERS = 16


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Scan
        "input_path": os.getcwd(),
        "dependency_dir": DEFAULT_DEPENDENCY_DIR,
        "include_hidden": False,
        "max_workers": DEFAULT_MAX_WORKERS,

        # Remote store
        "database_url": DEFAULT_DATABASE_URL,
        "branch": DEFAULT_BRANCH,
    }
