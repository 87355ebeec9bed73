from __future__ import annotations

"""
Configuration Validation Service.

Normalizes the runtime configuration dictionary: fills missing keys with
defaults, coerces CLI string inputs into their expected types and rejects
values that cannot drive a run.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlparse

from companytree.domain.config import get_default_config
from companytree.domain.errors import ConfigError

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "no", "n", "off"}


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise ConfigError instead of falling back to defaults.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        _reject(msg, warnings, strict)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if v is not None})

    for field in ("companies_url", "travels_url"):
        merged[field] = _as_url(merged[field], defaults[field], field, warnings, strict)

    merged["root_parent_id"] = _as_str(
        merged["root_parent_id"], defaults["root_parent_id"], "root_parent_id", warnings, strict
    )
    merged["output_path"] = _as_str(merged["output_path"], "", "output_path", warnings, strict)
    merged["timeout"] = _as_timeout(merged["timeout"], defaults["timeout"], warnings, strict)
    merged["indent"] = _as_indent(merged["indent"], defaults["indent"], warnings, strict)
    merged["show_timing"] = _as_bool(
        merged["show_timing"], defaults["show_timing"], "show_timing", warnings, strict
    )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _reject(msg: str, warnings: List[str], strict: bool) -> None:
    if strict:
        raise ConfigError(msg)
    warnings.append(f"{msg} Using fallback.")
    logger.warning(msg)


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    _reject(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_url(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    text = _as_str(value, fallback, field, warnings, strict)
    parsed = urlparse(text)
    if parsed.scheme in ("http", "https") and parsed.netloc:
        return text
    _reject(f"Invalid field '{field}': '{text}' is not an http(s) URL.", warnings, strict)
    return fallback


def _as_timeout(value: Any, fallback: float, warnings: List[str], strict: bool) -> Optional[float]:
    """Positive seconds; zero or negative disables the timeout."""
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        _reject(f"Invalid field 'timeout': '{value}' is not a number.", warnings, strict)
        return fallback
    return seconds if seconds > 0 else None


def _as_indent(value: Any, fallback: int, warnings: List[str], strict: bool) -> int:
    try:
        indent = int(value)
    except (TypeError, ValueError):
        _reject(f"Invalid field 'indent': '{value}' is not an integer.", warnings, strict)
        return fallback
    return max(indent, 0)


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in _TRUE_VALUES:
            return True
        if v in _FALSE_VALUES:
            return False
    _reject(f"Invalid field '{field}': expected bool, received {value!r}.", warnings, strict)
    return fallback
