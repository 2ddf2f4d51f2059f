from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. The positional scan root.
2. Mapping of optional flags to configuration keys.
3. Merging overrides into defaults.
"""

import pytest

from release_tracking.domain.config import get_default_config
from release_tracking.interface.cli.app import _fmt_bytes, _merge_config
from release_tracking.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_positional_root_only():
    args = parse_args(["package"])
    overrides = args_to_overrides(args)

    assert overrides["input_path"] == "package"
    assert overrides["branch"] is None
    assert "include_hidden" not in overrides
    assert args.dry_run is False
    assert args.json_output is False


def test_optional_flags_mapping():
    args = parse_args([
        "build/package",
        "--branch", "release-2",
        "--database-url", "https://x.firebaseio.com",
        "--dependency-dir", "vendor",
        "--workers", "4",
        "--include-hidden",
        "--dry-run",
        "--json",
    ])
    overrides = args_to_overrides(args)

    assert overrides == {
        "input_path": "build/package",
        "dependency_dir": "vendor",
        "max_workers": 4,
        "branch": "release-2",
        "database_url": "https://x.firebaseio.com",
        "include_hidden": True,
    }
    assert args.dry_run is True
    assert args.json_output is True


def test_missing_root_exits_as_failure(capsys):
    with pytest.raises(SystemExit) as exc_info:
        parse_args([])

    assert exc_info.value.code == 1
    assert "Unable to track release:" in capsys.readouterr().err


def test_invalid_workers_exits_as_failure(capsys):
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["package", "--workers", "x"])

    assert exc_info.value.code == 1
    assert "--workers" in capsys.readouterr().err


def test_version_exits_cleanly():
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["--version"])
    assert exc_info.value.code == 0


def test_merge_ignores_unset_overrides():
    base = get_default_config()
    merged = _merge_config(base, {"input_path": "package", "branch": None, "unknown": 1})

    assert merged["input_path"] == "package"
    assert merged["branch"] == base["branch"]
    assert "unknown" not in merged


def test_fmt_bytes():
    assert _fmt_bytes(0) == "0 B (0.0 KB)"
    assert _fmt_bytes(2048) == "2,048 B (2.0 KB)"
    assert _fmt_bytes(5 * 1024 * 1024) == "5,242,880 B (5.0 MB)"
