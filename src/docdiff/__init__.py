"""
DocDiff - Structural diff for JSON and XML documents

Canonicalizes two documents so formatting and key order do not matter,
then reports a line-level diff with added / removed / changed counts.
"""

__version__ = "0.1.0"

from .canonical import canonicalize, validate, beautify, minify
from .diff import DocumentDiffEngine, compare, compare_with_timeout, compute_matching, classify
from .core.config import DiffConfig, configure, get_config
from .core.errors import (
    DocDiffError,
    DocumentParseError,
    InputTooLargeError,
    UnsupportedFormatError,
)
from .core.models import DocumentFormat, LineKind, DiffLine, DiffStats, DiffResult

__all__ = [
    # Version
    "__version__",
    # Canonicalization
    "canonicalize",
    "validate",
    "beautify",
    "minify",
    # Comparison
    "DocumentDiffEngine",
    "compare",
    "compare_with_timeout",
    "compute_matching",
    "classify",
    # Configuration
    "DiffConfig",
    "configure",
    "get_config",
    # Errors
    "DocDiffError",
    "DocumentParseError",
    "InputTooLargeError",
    "UnsupportedFormatError",
    # Data models
    "DocumentFormat",
    "LineKind",
    "DiffLine",
    "DiffStats",
    "DiffResult",
]
