"""
XML canonicalization.

The document is parsed into a DOM (through defusedxml, so entity expansion
and external references are refused), serialized back, stripped of
whitespace that sits only between tags, and re-indented one tag per line.
"""

import re
from typing import Iterable, List
from xml.dom.minidom import Document
from xml.parsers.expat import ExpatError

from defusedxml import DefusedXmlException
from defusedxml import minidom as safe_minidom

from ..core.config import CANONICAL_INDENT
from ..core.errors import DocumentParseError

_LINE_PATTERN = re.compile(r"line\s*(?:number)?\s*:?\s*(\d+)", re.IGNORECASE)
_COLUMN_PATTERN = re.compile(r"column\s*(?:number)?\s*:?\s*(\d+)", re.IGNORECASE)

# Whitespace-only runs between a closing '>' and the next '<'
_INTER_TAG_WHITESPACE = re.compile(r">\s+<")
_TAG_BOUNDARY = re.compile(r"(?<=>)(?=<)")

_CLOSING_TAG = re.compile(r"^</[^>]+>$")
_OPENING_TAG = re.compile(r"^<[^!?/][^>]*>$")


def parse_error_from_diagnostic(diagnostic: str) -> DocumentParseError:
    """
    Build a DocumentParseError from a parser diagnostic.

    The message is the first line of the diagnostic; line and column are
    the numbers following "line" and "column" when present.
    """
    message = diagnostic.split("\n")[0].strip() or "Invalid XML"
    line_match = _LINE_PATTERN.search(diagnostic)
    column_match = _COLUMN_PATTERN.search(diagnostic)
    return DocumentParseError(
        message,
        line=int(line_match.group(1)) if line_match else None,
        column=int(column_match.group(1)) if column_match else None,
    )


def parse_xml(text: str) -> Document:
    """
    Parse XML text into a DOM document.

    Raises:
        DocumentParseError: If the text is not well-formed or is refused
            by defusedxml
    """
    try:
        return safe_minidom.parseString(text)
    except ExpatError as e:
        raise parse_error_from_diagnostic(str(e)) from e
    except DefusedXmlException as e:
        raise DocumentParseError(f"Forbidden XML construct: {e}") from e
    except ValueError as e:
        raise parse_error_from_diagnostic(str(e)) from e


def minify_xml(text: str) -> str:
    """Serialize an XML document with inter-tag whitespace removed."""
    document = parse_xml(text)
    # minidom serializes recursively
    try:
        serialized = document.toxml()
    except RecursionError as e:
        raise DocumentParseError("XML document is nested too deeply") from e
    return _INTER_TAG_WHITESPACE.sub("><", serialized).strip()


def indent_fragments(fragments: Iterable[str], indent: int = CANONICAL_INDENT) -> List[str]:
    """
    Indent tag fragments by nesting depth.

    A closing tag steps out before it is printed; an opening tag that is
    not self-closing, a declaration or a comment steps in after it.
    """
    lines: List[str] = []
    depth = 0

    for fragment in fragments:
        fragment = fragment.strip()
        if not fragment:
            continue

        if _CLOSING_TAG.match(fragment):
            depth = max(0, depth - 1)

        lines.append(" " * (indent * depth) + fragment)

        if _is_opening_tag(fragment):
            depth += 1

    return lines


def _is_opening_tag(fragment: str) -> bool:
    return bool(_OPENING_TAG.match(fragment)) and not fragment.endswith("/>")


def canonicalize_xml(text: str) -> str:
    """Return the canonical form of an XML document."""
    minified = minify_xml(text)
    return "\n".join(indent_fragments(_TAG_BOUNDARY.split(minified)))


def beautify_xml(text: str) -> str:
    """Re-indent an XML document one tag per line."""
    return canonicalize_xml(text)

