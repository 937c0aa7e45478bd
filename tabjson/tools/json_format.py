"""JSON pretty-printing and minifying."""

import json

from .exceptions import JsonFormatError


def _load(text: str):
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise JsonFormatError(f"Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e


def format_json(text: str, indent: int = 2) -> str:
    """
    Re-indent a JSON document

    Args:
        text: JSON text
        indent: Indentation width (default: 2)

    Returns:
        Indented JSON, or "" for blank input

    Raises:
        JsonFormatError: If text is not valid JSON
    """
    if not text or not text.strip():
        return ""
    return json.dumps(_load(text), indent=indent, ensure_ascii=False)


def minify_json(text: str) -> str:
    """Serialize a JSON document without whitespace ("" for blank input)"""
    if not text or not text.strip():
        return ""
    return json.dumps(_load(text), separators=(",", ":"), ensure_ascii=False)
