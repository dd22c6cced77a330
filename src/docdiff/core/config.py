"""
Configuration for docdiff comparisons.

Limits guard the quadratic worst case of the line matcher. A limit of 0
disables it.
"""

import os
from dataclasses import dataclass, replace
from typing import Any, Optional
import logging

logger = logging.getLogger(__name__)

# Indentation of canonical JSON and XML output
CANONICAL_INDENT = 2


@dataclass(frozen=True)
class DiffConfig:
    """Size and time limits applied to a comparison."""
    max_input_bytes: int = 5 * 1024 * 1024
    max_input_lines: int = 50_000
    timeout_seconds: float = 10.0

    @classmethod
    def from_env(cls) -> "DiffConfig":
        """
        Build a config from DOCDIFF_* environment variables.

        Reads DOCDIFF_MAX_BYTES, DOCDIFF_MAX_LINES and DOCDIFF_TIMEOUT;
        unset or malformed variables fall back to the defaults.
        """
        defaults = cls()
        return cls(
            max_input_bytes=_env_number("DOCDIFF_MAX_BYTES", defaults.max_input_bytes, int),
            max_input_lines=_env_number("DOCDIFF_MAX_LINES", defaults.max_input_lines, int),
            timeout_seconds=_env_number("DOCDIFF_TIMEOUT", defaults.timeout_seconds, float),
        )

    def with_overrides(self, **kwargs: Any) -> "DiffConfig":
        """Return a copy with the non-None keyword values applied."""
        return replace(self, **{k: v for k, v in kwargs.items() if v is not None})


def _env_number(name: str, default: Any, cast: type) -> Any:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


# Global config instance
_global_config: Optional[DiffConfig] = None


def configure(**kwargs: Any) -> DiffConfig:
    """
    Configure the global comparison limits.

    Args:
        **kwargs: DiffConfig fields to override

    Returns:
        The configured DiffConfig
    """
    global _global_config
    _global_config = get_config().with_overrides(**kwargs)
    return _global_config


def get_config() -> DiffConfig:
    """
    Get the global config, reading the environment on first use.

    Returns:
        The global DiffConfig
    """
    global _global_config
    if _global_config is None:
        _global_config = DiffConfig.from_env()
    return _global_config


def reset_config() -> None:
    """Drop the global config so the next get_config() re-reads the environment."""
    global _global_config
    _global_config = None
