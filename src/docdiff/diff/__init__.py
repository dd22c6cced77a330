"""
Diff engine for comparing canonical documents.
"""

from .myers import compute_matching
from .classifier import classify
from .comparator import DocumentDiffEngine, compare, compare_with_timeout

__all__ = [
    "compute_matching",
    "classify",
    "DocumentDiffEngine",
    "compare",
    "compare_with_timeout",
]
