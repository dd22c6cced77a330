"""
Exceptions raised by the docdiff engine.

Only UnsupportedFormatError is meant to reach callers of compare(); the
others are converted into DiffResult.error by the comparison facade.
"""

from typing import Any, Dict, Optional


class DocDiffError(Exception):
    """Base class for all docdiff errors."""
    pass


class DocumentParseError(DocDiffError):
    """
    Raised when a document cannot be canonicalized.

    Attributes:
        message: Human-readable parser diagnostic
        line: 1-based line of the failure, if the parser reported one
        column: 1-based column of the failure, if the parser reported one
    """

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "message": self.message,
            "line": self.line,
            "column": self.column,
        }


class InputTooLargeError(DocDiffError):
    """Raised when an input exceeds a configured size limit."""

    def __init__(self, limit_name: str, limit: int, actual: int):
        self.limit_name = limit_name
        self.limit = limit
        self.actual = actual
        self.message = f"Input exceeds {limit_name} limit ({actual:,} > {limit:,})"
        super().__init__(self.message)


class UnsupportedFormatError(DocDiffError, ValueError):
    """Raised when a caller asks for a format other than json or xml."""

    def __init__(self, fmt: Any):
        self.format = fmt
        super().__init__(f"Unsupported format: {fmt!r} (expected 'json' or 'xml')")
