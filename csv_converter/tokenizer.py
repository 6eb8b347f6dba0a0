"""
Quoting-aware tokenizer for delimiter-separated text.

Rules:
- Unquoted fields are trimmed of ASCII whitespace; quoted content is kept verbatim.
- A quote outside a quoted field discards whatever the field held so far.
- "" inside a quoted field is a literal quote.
- Separators and line breaks inside quotes are literal.
- CRLF counts as one line break; blank rows are dropped.
- Unterminated quotes run to the end of input.
"""

from __future__ import annotations

import logging
from typing import List

from .errors import InvalidArgumentError
from .rules import ASCII_WHITESPACE, DEFAULT_SEPARATOR, QUOTE, validate_separator

logger = logging.getLogger(__name__)

Row = List[str]
Grid = List[Row]


def _finish_field(field: str, quoted_end: int | None) -> str:
    if quoted_end is None:
        return field.strip(ASCII_WHITESPACE)
    # Only the text after the closing quote is outside the quotes.
    return field[:quoted_end] + field[quoted_end:].rstrip(ASCII_WHITESPACE)


def parse(text: str, separator: str = DEFAULT_SEPARATOR) -> Grid:
    """
    Parse delimited text into a list of rows of text fields.

    The whole input is trimmed and a newline is appended so the last
    field and row are flushed by the same code path as every other line.
    """
    if not isinstance(text, str):
        raise InvalidArgumentError("text", f"text must be a string, got {type(text).__name__}")
    validate_separator(separator)

    rows: Grid = []
    row: Row = []
    field = ""
    quoted_end: int | None = None
    in_quotes = False

    data = text.strip(ASCII_WHITESPACE) + "\n"
    n = len(data)
    i = 0

    while i < n:
        char = data[i]

        if in_quotes:
            if char == QUOTE:
                if i + 1 < n and data[i + 1] == QUOTE:
                    field += QUOTE
                    i += 1
                else:
                    in_quotes = False
                    quoted_end = len(field)
            else:
                field += char
        elif char == QUOTE:
            field = ""
            quoted_end = None
            in_quotes = True
        elif char == separator:
            row.append(_finish_field(field, quoted_end))
            field = ""
            quoted_end = None
        elif char in ("\n", "\r"):
            if char == "\r" and i + 1 < n and data[i + 1] == "\n":
                i += 1

            row.append(_finish_field(field, quoted_end))
            if any(row):
                rows.append(row)

            row = []
            field = ""
            quoted_end = None
        else:
            field += char

        i += 1

    if in_quotes:
        # unterminated quote swallowed the synthetic newline
        row.append(field[:-1])
        if any(row):
            rows.append(row)

    logger.debug("parsed %d rows with separator %r", len(rows), separator)
    return rows
