"""Shape coercion for loosely-typed JSON-LD values.

schema.org publishers are free to write the same property as a string, a
number, an array or an object. These helpers are the only place the
extractor inspects value shapes; everything else works on their output.
"""

from __future__ import annotations

import re
from typing import Any


_TAG_RE = re.compile(r"<[^>]+>")

_SCALAR_TYPES = (str, int, float)


def strip_html(text: str) -> str:
    """Remove ``<...>`` tags and surrounding whitespace."""
    return _TAG_RE.sub("", text).strip()


def _scalar_to_str(value: Any) -> str | None:
    # bool is an int subclass but never a meaningful text value.
    if isinstance(value, bool) or not isinstance(value, _SCALAR_TYPES):
        return None
    text = str(value).strip()
    return text or None


def to_single_string(value: Any) -> str | None:
    """Coerce a value to one string.

    Strings and numbers are returned as text, arrays yield their first
    element, anything else (objects, null, empty text) yields None.
    """
    if isinstance(value, list):
        return to_single_string(value[0]) if value else None
    return _scalar_to_str(value)


def to_string_list(value: Any) -> list[str]:
    """Coerce a value to a flat list of strings.

    A single string or number becomes a one-element list, an array keeps
    its scalar elements in order, and anything else gives an empty list.
    Empty strings are dropped; duplicates are kept.
    """
    if isinstance(value, list):
        items = (_scalar_to_str(item) for item in value)
        return [item for item in items if item is not None]
    text = _scalar_to_str(value)
    return [text] if text is not None else []


def to_first_url(value: Any) -> str | None:
    """Resolve an ``image``-style value to a single URL.

    Accepts a URL string, an array (the first element is resolved
    recursively) or an ``ImageObject`` exposing ``url``.
    """
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, list):
        return to_first_url(value[0]) if value else None
    if isinstance(value, dict):
        url = value.get("url")
        return to_first_url(url) if isinstance(url, str) else None
    return None


def has_type(item: Any, type_name: str) -> bool:
    """Check an object's ``@type``, which may be a string or a list."""
    if not isinstance(item, dict):
        return False
    declared = item.get("@type")
    if isinstance(declared, list):
        return type_name in declared
    return declared == type_name
