from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path helpers shared by the scanner and the pipeline. Recorded paths always
use '/' separators so that dependency classification is a literal prefix
comparison on every platform.
"""

import os
from typing import Optional


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a user-supplied directory path without making it absolute.

    Expands user home shortcuts (~/) and environment variables, collapses
    redundant separators and '.' segments, and reverts to fallback when the
    input is empty. Relative roots stay relative so that recorded paths keep
    the shape the operator typed (e.g. 'package/...').

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.normpath(p)


def to_posix(path: str) -> str:
    """Convert native separators to '/'."""
    if os.sep != "/":
        path = path.replace(os.sep, "/")
    return path


def display_text(name: str) -> str:
    """
    Make a filesystem-derived string safe to encode as UTF-8.

    Undecodable bytes in file names reach Python as lone surrogates; they
    are rendered as backslash escapes (e.g. 'bad\\xff.js').
    """
    try:
        name.encode("utf-8")
        return name
    except UnicodeEncodeError:
        return os.fsencode(name).decode("utf-8", "backslashreplace")


def join_record_path(root: str, rel_path: str) -> str:
    """
    Build the recorded path of a file from the scan root and its relative path.

    A root of '.' is dropped so that scanning the working directory yields
    plain relative paths.
    """
    rel = to_posix(rel_path)
    root = to_posix(root)
    if not root or root == ".":
        return rel
    return f"{root.rstrip('/')}/{rel}"
