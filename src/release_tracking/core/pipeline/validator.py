from __future__ import annotations

"""
Configuration Validator.

Ensures the configuration dictionary passed to the pipeline carries valid
types and normalized values, filling gaps from the defaults.
"""

import logging
from typing import Any, Dict, List, Tuple

from release_tracking.domain.config import get_default_config

logger = logging.getLogger(__name__)


def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the configuration dictionary.

    Args:
        config: The raw configuration dictionary (or untrusted input).
        strict: If True, raises TypeError/ValueError on invalid data.

    Returns:
        Tuple[Dict, List[str]]: (Normalized Config, List of Warnings).
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    string_fields = ["input_path", "dependency_dir", "database_url", "branch"]
    bool_fields = ["include_hidden"]
    positive_int_fields = ["max_workers"]

    for field in string_fields:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in bool_fields:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field in positive_int_fields:
        merged[field] = _as_positive_int(merged.get(field), defaults[field], field, warnings, strict)

    merged["dependency_dir"] = _normalize_dir_name(merged["dependency_dir"], defaults["dependency_dir"], warnings, strict)
    merged["database_url"] = _normalize_url(merged["database_url"], defaults["database_url"], warnings, strict)

    return merged, warnings


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Ensure value is a non-empty string."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback
    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce value to boolean."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_positive_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce value to an integer greater than zero."""
    if value is None:
        return fallback

    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    elif isinstance(value, str) and not strict and value.strip().isdigit():
        number = int(value.strip())
        warnings.append(f"Field '{field}' converted from '{value}' to {number}.")
    else:
        msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if number < 1:
        msg = f"Invalid field '{field}': must be at least 1, received {number}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    return number


def _normalize_dir_name(name: str, fallback: str, warnings: List[str], strict: bool) -> str:
    """Ensure the dependency directory is a single path segment."""
    cleaned = name.strip("/\\")
    if cleaned and "/" not in cleaned and "\\" not in cleaned:
        return cleaned
    msg = f"Invalid dependency directory '{name}': must be a single directory name."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback


def _normalize_url(url: str, fallback: str, warnings: List[str], strict: bool) -> str:
    """Ensure the database URL is an http(s) URL without a trailing slash."""
    if url.startswith(("https://", "http://")):
        return url.rstrip("/")
    msg = f"Invalid database URL '{url}': expected http(s) scheme."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback
