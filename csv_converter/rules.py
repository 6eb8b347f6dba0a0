"""
Conversion rules and documented defaults.

This file exists to make the recognized options explicit and enforceable.
"""

from __future__ import annotations

from .errors import InvalidArgumentError

DEFAULT_SEPARATOR = ","
DEFAULT_HAS_HEADERS = True
QUOTE = '"'

# Only ASCII whitespace is trimmed from unquoted fields.
ASCII_WHITESPACE = " \t\n\r\x0b\x0c"

GENERATED_HEADER_PREFIX = "col"

DEFAULT_ROOT_NAME = "root"
DEFAULT_ROW_NAME = "row"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

SUPPORTED_UPLOAD_SUFFIXES = (".csv", ".tsv", ".txt", ".psv")

_FORBIDDEN_SEPARATORS = (QUOTE, "\r", "\n")


def validate_separator(separator: str) -> str:
    """Return ``separator`` unchanged if it is usable, else raise."""
    if not isinstance(separator, str) or len(separator) != 1:
        raise InvalidArgumentError(
            "separator", f"separator must be a single character, got {separator!r}"
        )
    if separator in _FORBIDDEN_SEPARATORS:
        raise InvalidArgumentError(
            "separator", f"separator cannot be a quote or line break, got {separator!r}"
        )
    return separator
