from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Bootstraps logging, merges command-line overrides into the default
configuration, runs the tracking pipeline and renders its result.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from release_tracking.core.pipeline.engine import run_pipeline
from release_tracking.core.pipeline.validator import validate_config
from release_tracking.domain.config import get_default_config
from release_tracking.domain.pipeline_models import TrackingResult
from release_tracking.infra.fs import display_text
from release_tracking.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from release_tracking.interface.cli import args as cli_args
from release_tracking.interface.cli.args import ERROR_PREFIX, EXIT_FAILURE

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, 1 for failure).
    """
    # Unencodable characters are escaped rather than aborting the report
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(errors="backslashreplace")

    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    try:
        return _run(args)
    finally:
        # Flush queued records before the process exits
        shutdown_logging()


def _run(args: Any) -> int:
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    try:
        result = run_pipeline(clean_conf, dry_run=bool(args.dry_run))
        if result.ok:
            _render(result, json_output=bool(args.json_output))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"{ERROR_PREFIX} {e}", file=sys.stderr)
        return EXIT_FAILURE

    if not result.ok:
        print(f"{ERROR_PREFIX} {result.error}", file=sys.stderr)
        return EXIT_FAILURE

    return 0


def _render(result: TrackingResult, json_output: bool) -> None:
    if json_output:
        print(json.dumps(result.snapshot.to_dict(), indent=2))
    else:
        _print_human_summary(result)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge known, non-None override values into base."""
    out = dict(base)
    for k in base:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: TrackingResult) -> None:
    """Render a successful result as a short terminal report."""
    snapshot = result.snapshot
    if snapshot is None:
        return

    print(f"Release tree: {display_text(result.base_path)}")
    print(f"Total size: {_fmt_bytes(snapshot.total_size)}")
    print(f"  Project files ({len(snapshot.project_stats)}): {_fmt_bytes(snapshot.total_project_size)}")
    print(f"  Dependencies ({len(snapshot.node_module_stats)} packages): "
          f"{_fmt_bytes(snapshot.total_node_module_size)}")

    if snapshot.node_module_stats:
        print("\nLargest dependencies:")
        largest = sorted(snapshot.node_module_stats, key=lambda g: g.size, reverse=True)
        for group in largest[:10]:
            print(f"  - {display_text(group.module_name)}: {_fmt_bytes(group.size)}")

    if result.dry_run:
        print("\nDry run: snapshot not published.")
    elif result.published:
        print(f"\nPublished to branch '{result.branch}' as entry {result.entry_id}")


def _fmt_bytes(size: int) -> str:
    """Format a byte count, e.g. '1,234 B (1.2 KB)'."""
    value = float(size)
    for unit in ("KB", "MB", "GB"):
        value /= 1024
        if value < 1024:
            break
    return f"{size:,} B ({value:.1f} {unit})"


if __name__ == "__main__":
    sys.exit(main())
