"""
Core data models, errors and configuration for docdiff.
"""

from .models import (
    DocumentFormat,
    LineKind,
    DiffLine,
    DiffStats,
    DiffResult,
    EditScript,
)
from .errors import (
    DocDiffError,
    DocumentParseError,
    InputTooLargeError,
    UnsupportedFormatError,
)
from .config import DiffConfig, configure, get_config, reset_config

__all__ = [
    "DocumentFormat",
    "LineKind",
    "DiffLine",
    "DiffStats",
    "DiffResult",
    "EditScript",
    "DocDiffError",
    "DocumentParseError",
    "InputTooLargeError",
    "UnsupportedFormatError",
    "DiffConfig",
    "configure",
    "get_config",
    "reset_config",
]
