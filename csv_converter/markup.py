"""
Render records as an XML document.

Element names are the record keys with every character outside
[A-Za-z0-9_] removed. Distinct keys can collapse to the same name; that is
left as-is unless ``strict`` is requested.
"""

from __future__ import annotations

import re
from typing import Any, List, Mapping, Optional, Sequence
from xml.sax.saxutils import escape

from .cells import to_text
from .errors import InvalidArgumentError
from .records import check_records, to_records
from .rules import (
    DEFAULT_HAS_HEADERS,
    DEFAULT_ROOT_NAME,
    DEFAULT_ROW_NAME,
    DEFAULT_SEPARATOR,
    XML_DECLARATION,
)

_NAME_INVALID = re.compile(r"[^A-Za-z0-9_]")
_ENTITIES = {'"': "&quot;", "'": "&apos;"}
INDENT = "  "


def sanitize_name(name: str) -> str:
    return _NAME_INVALID.sub("", name)


def escape_text(value: Any) -> str:
    # escape() covers & < >; quotes are added explicitly
    return escape(to_text(value), _ENTITIES)


def _element_names(record: Mapping[str, Any], strict: bool) -> List[str]:
    names = [sanitize_name(str(key)) for key in record]
    if strict:
        seen = {}
        for key, name in zip(record, names):
            if not name:
                raise InvalidArgumentError("records", f"key {key!r} has no usable characters")
            if name in seen:
                raise InvalidArgumentError(
                    "records", f"keys {seen[name]!r} and {key!r} both map to <{name}>"
                )
            seen[name] = key
    return names


def _checked_name(argument: str, name: str) -> str:
    cleaned = sanitize_name(name)
    if not cleaned:
        raise InvalidArgumentError(argument, f"{argument} {name!r} has no usable characters")
    return cleaned


def to_markup(
    records: Optional[Sequence[Mapping[str, Any]]],
    root_name: str = DEFAULT_ROOT_NAME,
    row_name: str = DEFAULT_ROW_NAME,
    strict: bool = False,
) -> str:
    root = _checked_name("root_name", root_name)
    row_tag = _checked_name("row_name", row_name)

    if not records:
        return f"{XML_DECLARATION}\n<{root}/>"
    check_records(records)

    lines = [XML_DECLARATION, f"<{root}>"]
    for record in records:
        lines.append(f"{INDENT}<{row_tag}>")
        for name, value in zip(_element_names(record, strict), record.values()):
            lines.append(f"{INDENT * 2}<{name}>{escape_text(value)}</{name}>")
        lines.append(f"{INDENT}</{row_tag}>")
    lines.append(f"</{root}>")
    return "\n".join(lines)


def delimited_to_markup(
    text: Optional[str],
    separator: str = DEFAULT_SEPARATOR,
    root_name: str = DEFAULT_ROOT_NAME,
    row_name: str = DEFAULT_ROW_NAME,
) -> str:
    """Parse delimited text with a header row and render the records as XML."""
    return to_markup(to_records(text, DEFAULT_HAS_HEADERS, separator), root_name, row_name)
