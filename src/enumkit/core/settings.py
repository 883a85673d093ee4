"""
Runtime configuration for enumkit.

The only knob is strict definition checking. Factories trust their caller
(a code generator that has already rejected duplicate names), so the extra
checks are off unless ENUMKIT_STRICT turns them on.

Environment values for ENUMKIT_STRICT:
    - 1, true, yes, on: strict checks enabled
    - 0, false, no, off, or unset (default): strict checks disabled

Usage:
    from enumkit.core.settings import get_settings

    if get_settings().strict:
        ...
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

# Environment variable name
ENUMKIT_STRICT_VAR = "ENUMKIT_STRICT"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


class RuntimeSettings(BaseModel):
    """Settings read from the environment."""

    strict: bool = False

    model_config = ConfigDict(frozen=True)


def _parse_flag(var: str, default: bool) -> bool:
    raw = os.environ.get(var, "").lower().strip()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return default
    logger.warning(
        "Unknown %s value '%s'. Valid values: %s. Using default '%s'.",
        var,
        raw,
        ", ".join(sorted(_TRUTHY | (_FALSY - {""}))),
        default,
    )
    return default


def get_settings() -> RuntimeSettings:
    """Read the current settings from the environment.

    The environment is read on every call so tests and CLIs can flip
    ENUMKIT_STRICT without reloading the package.

    Examples:
        >>> import os
        >>> os.environ["ENUMKIT_STRICT"] = "1"
        >>> get_settings().strict
        True
    """
    return RuntimeSettings(strict=_parse_flag(ENUMKIT_STRICT_VAR, False))


def resolve_strict(strict: bool | None) -> bool:
    """Use an explicit ``strict`` argument, or fall back to the environment."""
    if strict is not None:
        return strict
    return get_settings().strict
