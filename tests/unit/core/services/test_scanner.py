from __future__ import annotations

"""
Unit tests for the File Discovery Service.

Verifies recursive listing (dependency directory included), hidden entry
handling, path shape and enumeration failures.
"""

import os
from pathlib import Path

import pytest

from release_tracking.core.services.scanner import enumerate_files
from release_tracking.domain.errors import EnumerationError


def test_enumerate_lists_files_recursively(release_tree: Path) -> None:
    files = enumerate_files("package")

    # Top-down walk: a directory's own files come before its subdirectories
    assert files == [
        "package/package.json",
        "package/node_modules/@scope/b/main.js",
        "package/node_modules/a/index.js",
        "package/node_modules/a/lib/util.js",
        "package/node_modules/c/node_modules/d/x.js",
        "package/src/index.js",
    ]


def test_enumerate_never_reports_directories(release_tree: Path) -> None:
    files = enumerate_files("package")
    assert all(os.path.isfile(f) for f in files)


def test_enumerate_includes_hidden_on_request(release_tree: Path) -> None:
    (release_tree / ".git").mkdir()
    (release_tree / ".git" / "HEAD").write_text("ref", encoding="utf-8")

    default = enumerate_files("package")
    hidden = enumerate_files("package", include_hidden=True)

    assert "package/.npmrc" not in default
    assert "package/.npmrc" in hidden
    assert "package/.git/HEAD" in hidden
    assert not any("/.git/" in f for f in default)


def test_enumerate_from_working_directory(release_tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Scanning '.' yields plain relative paths."""
    monkeypatch.chdir(release_tree)

    files = enumerate_files(".")

    assert "package.json" in files
    assert "node_modules/a/index.js" in files


def test_enumerate_absolute_root(release_tree: Path) -> None:
    files = enumerate_files(str(release_tree))
    expected = str(release_tree).replace(os.sep, "/") + "/src/index.js"
    assert expected in files


def test_enumerate_empty_directory(tmp_path: Path) -> None:
    assert enumerate_files(str(tmp_path)) == []


def test_enumerate_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(EnumerationError, match="not a directory"):
        enumerate_files(str(tmp_path / "missing"))


def test_enumerate_file_root_raises(tmp_path: Path) -> None:
    f = tmp_path / "file.txt"
    f.write_text("x", encoding="utf-8")

    with pytest.raises(EnumerationError):
        enumerate_files(str(f))


def test_walk_errors_are_enumeration_errors(release_tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_walk(top, onerror=None, **kwargs):
        onerror(PermissionError(13, "Permission denied", str(top)))
        return iter(())

    monkeypatch.setattr("release_tracking.core.services.scanner.os.walk", failing_walk)

    with pytest.raises(EnumerationError, match="Permission denied"):
        enumerate_files("package")


requires_symlinks = pytest.mark.skipif(
    not hasattr(os, "symlink") or os.name == "nt", reason="requires POSIX symlinks"
)


@requires_symlinks
def test_enumerate_follows_symlinked_package(release_tree: Path, tmp_path: Path) -> None:
    """Linked packages (npm link, workspaces) are measured under their link path."""
    shared = tmp_path / "workspace" / "linked-lib"
    shared.mkdir(parents=True)
    (shared / "index.js").write_bytes(b"x" * 12)
    os.symlink(str(shared), str(release_tree / "node_modules" / "linked-lib"))

    files = enumerate_files("package")

    assert "package/node_modules/linked-lib/index.js" in files


@requires_symlinks
def test_enumerate_survives_symlink_cycles(release_tree: Path) -> None:
    os.symlink("..", str(release_tree / "src" / "loop"))

    files = enumerate_files("package")

    assert len(files) == len(set(files))
    assert not any("/loop/" in f for f in files)
    assert "package/src/index.js" in files
