"""
Canonicalization of JSON and XML documents.

canonicalize() turns raw text into a deterministic representation that is
insensitive to formatting (and, for JSON, to key order), so two equivalent
documents produce identical text.
"""

from typing import Callable, Dict, Optional, Union
import logging

from ..core.errors import DocumentParseError
from ..core.models import DocumentFormat
from .json_format import beautify_json, canonicalize_json, minify_json
from .xml_format import beautify_xml, canonicalize_xml, minify_xml

logger = logging.getLogger(__name__)

FormatLike = Union[str, DocumentFormat]

_CANONICALIZERS: Dict[DocumentFormat, Callable[[str], str]] = {
    DocumentFormat.JSON: canonicalize_json,
    DocumentFormat.XML: canonicalize_xml,
}
_BEAUTIFIERS: Dict[DocumentFormat, Callable[[str], str]] = {
    DocumentFormat.JSON: beautify_json,
    DocumentFormat.XML: beautify_xml,
}
_MINIFIERS: Dict[DocumentFormat, Callable[[str], str]] = {
    DocumentFormat.JSON: minify_json,
    DocumentFormat.XML: minify_xml,
}


def canonicalize(text: str, fmt: FormatLike) -> str:
    """
    Canonicalize a document.

    Args:
        text: Raw document text
        fmt: "json" or "xml"

    Returns:
        The canonical form of the document

    Raises:
        DocumentParseError: If the document is malformed
        UnsupportedFormatError: If fmt is not a known format
    """
    document_format = DocumentFormat.parse(fmt)
    canonical = _CANONICALIZERS[document_format](text)
    line_count = canonical.count("\n") + 1
    logger.debug(
        f"Canonicalized {document_format.value} document: "
        f"{len(text)} chars -> {line_count} lines"
    )
    return canonical


def validate(text: str, fmt: FormatLike) -> Optional[DocumentParseError]:
    """
    Check whether a document parses.

    Blank input is neither valid nor invalid and yields None, as does a
    well-formed document.

    Returns:
        The parse failure, or None
    """
    document_format = DocumentFormat.parse(fmt)
    if not text or not text.strip():
        return None
    try:
        _CANONICALIZERS[document_format](text)
    except DocumentParseError as e:
        return e
    return None


def beautify(text: str, fmt: FormatLike) -> str:
    """Pretty-print a document with 2-space indentation."""
    return _BEAUTIFIERS[DocumentFormat.parse(fmt)](text)


def minify(text: str, fmt: FormatLike) -> str:
    """Serialize a document without formatting whitespace."""
    return _MINIFIERS[DocumentFormat.parse(fmt)](text)


__all__ = [
    "canonicalize",
    "validate",
    "beautify",
    "minify",
    "canonicalize_json",
    "canonicalize_xml",
]
