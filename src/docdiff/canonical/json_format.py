"""
JSON canonicalization.

Objects are rewritten with sorted keys at every depth, arrays keep their
order, integral numbers lose their fraction or exponent, and the result is
serialized with fixed 2-space indentation. Two documents differing only in
key order, whitespace or number spelling produce the same text.
"""

import json
from typing import Any, Optional, Tuple

from ..core.config import CANONICAL_INDENT
from ..core.errors import DocumentParseError

# Integral values at or above this print in exponent form, so they stay floats
_MAX_PLAIN_INTEGER = 1e21


def parse_json(text: str) -> Any:
    """
    Parse JSON text.

    Args:
        text: Raw JSON document

    Returns:
        The parsed Python value

    Raises:
        DocumentParseError: If the text is not valid JSON
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        line, column = position_from_offset(text, e.pos)
        raise DocumentParseError(str(e), line=line, column=column) from e
    except RecursionError as e:
        raise DocumentParseError("JSON document is nested too deeply") from e


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are accepted by the json module but are not JSON
    raise DocumentParseError(f"Unexpected token {name} in JSON")


def position_from_offset(text: str, offset: Optional[int]) -> Tuple[Optional[int], Optional[int]]:
    """
    Convert a character offset into a 1-based (line, column) pair.

    Returns (None, None) when the offset is unknown.
    """
    if offset is None:
        return None, None
    preceding = text[:offset]
    line = preceding.count("\n") + 1
    column = offset - preceding.rfind("\n")
    return line, column


def sort_keys(value: Any) -> Any:
    """
    Recursively rewrite a parsed value with object keys in ascending order.

    Integral floats become ints so that 1, 1.0 and 1e0 share one spelling.
    """
    if isinstance(value, list):
        return [sort_keys(item) for item in value]
    if isinstance(value, dict):
        return {key: sort_keys(value[key]) for key in sorted(value)}
    if isinstance(value, float):
        return normalize_number(value)
    return value


def normalize_number(value: float) -> Any:
    """Return an int for integral floats below 1e21, otherwise the float."""
    if value.is_integer() and abs(value) < _MAX_PLAIN_INTEGER:
        return int(value)
    return value


def _dump(value: Any, **kwargs: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, **kwargs)
    except RecursionError as e:
        raise DocumentParseError("JSON document is nested too deeply") from e


def canonicalize_json(text: str) -> str:
    """Return the canonical form of a JSON document."""
    value = parse_json(text)
    try:
        value = sort_keys(value)
    except RecursionError as e:
        raise DocumentParseError("JSON document is nested too deeply") from e
    return _dump(value, indent=CANONICAL_INDENT)


def beautify_json(text: str) -> str:
    """Re-indent a JSON document, keeping its key order."""
    return _dump(parse_json(text), indent=CANONICAL_INDENT)


def minify_json(text: str) -> str:
    """Serialize a JSON document without insignificant whitespace."""
    return _dump(parse_json(text), separators=(",", ":"))
