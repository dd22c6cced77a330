"""
Comparison facade for JSON and XML documents.

Canonicalizes both sides, matches their lines with the Myers engine and
classifies the result. Every failure other than an unknown format is
returned as data in the DiffResult, never raised.
"""

from typing import Optional, Union
import asyncio
import logging

from ..canonical import canonicalize
from ..core.config import DiffConfig, get_config
from ..core.errors import DocumentParseError, InputTooLargeError
from ..core.models import DiffResult, DocumentFormat
from .classifier import classify
from .myers import compute_matching

logger = logging.getLogger(__name__)

FormatLike = Union[str, DocumentFormat]

EMPTY_INPUT_MESSAGE = "Both inputs are required"


class DocumentDiffEngine:
    """
    Engine for comparing two documents line by line.

    Holds only its immutable config, so one instance can serve
    concurrent callers.
    """

    def __init__(self, config: Optional[DiffConfig] = None):
        """
        Initialize the engine.

        Args:
            config: Size and time limits (defaults to the global config)
        """
        self.config = config or get_config()

    def diff(self, left_text: str, right_text: str, fmt: FormatLike) -> DiffResult:
        """
        Compare two documents.

        Args:
            left_text: First document (baseline)
            right_text: Second document (comparison)
            fmt: "json" or "xml"

        Returns:
            DiffResult with classified lines and stats, or with error set

        Raises:
            UnsupportedFormatError: If fmt is not a known format
        """
        document_format = DocumentFormat.parse(fmt)

        if not left_text or not left_text.strip() or not right_text or not right_text.strip():
            return DiffResult.failure(EMPTY_INPUT_MESSAGE)

        try:
            self._check_bytes(left_text)
            self._check_bytes(right_text)
            left_normalized = canonicalize(left_text, document_format)
            right_normalized = canonicalize(right_text, document_format)
        except DocumentParseError as e:
            logger.debug(f"Canonicalization failed: {e.message}")
            return DiffResult.failure(e.message, line=e.line, column=e.column)
        except InputTooLargeError as e:
            logger.warning(f"Comparison rejected: {e.message}")
            return DiffResult.failure(e.message)

        a = left_normalized.split("\n")
        b = right_normalized.split("\n")

        try:
            self._check_lines(a)
            self._check_lines(b)
        except InputTooLargeError as e:
            logger.warning(f"Comparison rejected: {e.message}")
            return DiffResult.failure(e.message)

        matching = compute_matching(a, b)
        lines, stats = classify(a, b, matching)

        return DiffResult(
            equal=left_normalized == right_normalized,
            lines=lines,
            stats=stats,
            left_normalized=left_normalized,
            right_normalized=right_normalized,
        )

    async def diff_with_timeout(
        self,
        left_text: str,
        right_text: str,
        fmt: FormatLike,
        timeout: Optional[float] = None,
    ) -> DiffResult:
        """
        Compare two documents on a worker thread under a wall-clock deadline.

        The comparison itself cannot be interrupted; when the deadline
        passes the worker is abandoned and an error result is returned.

        Args:
            left_text: First document
            right_text: Second document
            fmt: "json" or "xml"
            timeout: Deadline in seconds (defaults to config.timeout_seconds;
                0 disables it)

        Returns:
            DiffResult, with error set on timeout
        """
        DocumentFormat.parse(fmt)
        deadline = self.config.timeout_seconds if timeout is None else timeout
        work = asyncio.to_thread(self.diff, left_text, right_text, fmt)

        if not deadline:
            return await work

        try:
            return await asyncio.wait_for(work, timeout=deadline)
        except asyncio.TimeoutError:
            logger.warning(f"Comparison timed out after {deadline:g}s")
            return DiffResult.failure(f"Comparison timed out after {deadline:g}s")

    def normalize(self, text: str, fmt: FormatLike) -> str:
        """
        Canonicalize one document under the byte limit.

        Raises:
            UnsupportedFormatError: If fmt is not a known format
            InputTooLargeError: If the text exceeds max_input_bytes
            DocumentParseError: If the text is malformed
        """
        document_format = DocumentFormat.parse(fmt)
        self._check_bytes(text)
        return canonicalize(text, document_format)

    async def normalize_with_timeout(
        self,
        text: str,
        fmt: FormatLike,
        timeout: Optional[float] = None,
    ) -> str:
        """
        Canonicalize one document on a worker thread under a deadline.

        Raises the same errors as normalize, plus asyncio.TimeoutError
        when the deadline passes.
        """
        DocumentFormat.parse(fmt)
        deadline = self.config.timeout_seconds if timeout is None else timeout
        work = asyncio.to_thread(self.normalize, text, fmt)

        if not deadline:
            return await work
        return await asyncio.wait_for(work, timeout=deadline)

    def _check_bytes(self, text: str) -> None:
        limit = self.config.max_input_bytes
        if limit:
            size = len(text.encode("utf-8"))
            if size > limit:
                raise InputTooLargeError("byte", limit, size)

    def _check_lines(self, lines: list) -> None:
        limit = self.config.max_input_lines
        if limit and len(lines) > limit:
            raise InputTooLargeError("line", limit, len(lines))


def compare(
    left_text: str,
    right_text: str,
    fmt: FormatLike,
    config: Optional[DiffConfig] = None,
) -> DiffResult:
    """
    Compare two documents using the global (or given) config.

    See DocumentDiffEngine.diff.
    """
    return DocumentDiffEngine(config).diff(left_text, right_text, fmt)


async def compare_with_timeout(
    left_text: str,
    right_text: str,
    fmt: FormatLike,
    timeout: Optional[float] = None,
    config: Optional[DiffConfig] = None,
) -> DiffResult:
    """
    Compare two documents under a wall-clock deadline.

    See DocumentDiffEngine.diff_with_timeout.
    """
    engine = DocumentDiffEngine(config)
    return await engine.diff_with_timeout(left_text, right_text, fmt, timeout=timeout)
