"""
Data structures for document comparisons.

A DiffResult holds the outcome of comparing two documents: the equality
flag, any error, the classified line sequence and summary counts.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from .errors import UnsupportedFormatError


# Ordered (left_index, right_index) pairs of identical lines
EditScript = List[Tuple[int, int]]


class DocumentFormat(Enum):
    """Formats the canonicalizer understands."""
    JSON = "json"
    XML = "xml"

    @classmethod
    def parse(cls, value: Union[str, "DocumentFormat"]) -> "DocumentFormat":
        """
        Resolve a format name to a DocumentFormat.

        Args:
            value: Format name ("json" / "xml", case-insensitive) or member

        Returns:
            The matching DocumentFormat

        Raises:
            UnsupportedFormatError: If the value names no known format
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedFormatError(value)


class LineKind(Enum):
    """Classification of a single output line."""
    SAME = "same"
    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"


@dataclass
class DiffLine:
    """One row of a line-level diff."""
    kind: LineKind
    left: str = ""
    right: str = ""
    ordinal: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "kind": self.kind.value,
            "left": self.left,
            "right": self.right,
            "ordinal": self.ordinal,
        }


@dataclass
class DiffStats:
    """Counts of non-identical lines in a diff."""
    added: int = 0
    removed: int = 0
    changed: int = 0

    @property
    def total(self) -> int:
        """Number of lines that differ."""
        return self.added + self.removed + self.changed

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary."""
        return {
            "added": self.added,
            "removed": self.removed,
            "changed": self.changed,
        }


@dataclass
class DiffResult:
    """
    Complete result of comparing two documents.

    When error is set, lines is empty, stats are zero and both
    normalized texts are None.
    """
    equal: bool = False
    error: Optional[str] = None
    lines: List[DiffLine] = field(default_factory=list)
    stats: DiffStats = field(default_factory=DiffStats)

    left_normalized: Optional[str] = None
    right_normalized: Optional[str] = None

    # Position of the parse failure, when the parser reported one
    error_line: Optional[int] = None
    error_column: Optional[int] = None

    @classmethod
    def failure(
        cls,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> "DiffResult":
        """Build an error result with no lines and zeroed stats."""
        return cls(equal=False, error=message, error_line=line, error_column=column)

    @property
    def unchanged(self) -> int:
        """Number of lines identical on both sides."""
        return sum(1 for line in self.lines if line.kind == LineKind.SAME)

    def summary(self) -> str:
        """One-line description of the result."""
        if self.error:
            return f"Error: {self.error}"
        if self.equal:
            return "Documents are equivalent"
        return (
            f"{self.stats.added} added, {self.stats.removed} removed, "
            f"{self.stats.changed} changed, {self.unchanged} unchanged"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "equal": self.equal,
            "error": self.error,
            "errorLine": self.error_line,
            "errorColumn": self.error_column,
            "stats": self.stats.to_dict(),
            "lines": [line.to_dict() for line in self.lines],
            "leftNormalized": self.left_normalized,
            "rightNormalized": self.right_normalized,
        }
