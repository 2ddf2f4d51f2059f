from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides for the tracking pipeline.
"""

import argparse
import sys
from typing import Any, Dict, NoReturn

from release_tracking import __version__
from release_tracking.domain.config import (
    DEFAULT_BRANCH,
    DEFAULT_DATABASE_URL,
    DEFAULT_DEPENDENCY_DIR,
    DEFAULT_MAX_WORKERS,
)

ERROR_PREFIX = "Unable to track release:"
EXIT_FAILURE = 1

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

class TrackingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors exit like any other failed run."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{ERROR_PREFIX} {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the release-tracking CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = TrackingArgumentParser(
        prog="release-tracking",
        description="Measure a release tree and publish a size snapshot.",
    )

    p.add_argument(
        "input_path",
        help="Root directory to scan (e.g. an unpacked 'package' tarball).",
    )

    # --- Scan ---
    p.add_argument(
        "--dependency-dir",
        dest="dependency_dir",
        default=None,
        help=f"Dependency directory name under the root (default: {DEFAULT_DEPENDENCY_DIR}).",
    )
    p.add_argument(
        "--include-hidden",
        action="store_true",
        help="Also measure files and directories whose name starts with '.'.",
    )
    p.add_argument(
        "--workers",
        dest="max_workers",
        type=int,
        default=None,
        help=f"Concurrent size lookups (default: {DEFAULT_MAX_WORKERS}).",
    )

    # --- Remote store ---
    p.add_argument(
        "--branch",
        default=None,
        help=f"Branch collection receiving the snapshot (default: {DEFAULT_BRANCH}).",
    )
    p.add_argument(
        "--database-url",
        dest="database_url",
        default=None,
        help=f"Realtime Database URL (default: {DEFAULT_DATABASE_URL}).",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Measure and print the snapshot without publishing it.",
    )

    # --- Output & diagnostics ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the snapshot as JSON instead of a summary.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Unset options map to None so that defaults survive the merge.
    """
    overrides: Dict[str, Any] = {
        "input_path": args.input_path,
        "dependency_dir": args.dependency_dir,
        "max_workers": args.max_workers,
        "branch": args.branch,
        "database_url": args.database_url,
    }

    if args.include_hidden:
        overrides["include_hidden"] = True

    return overrides
