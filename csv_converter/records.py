"""
Conversion between delimited text and records.

A record is a dict keyed by header name, in header order. Every record
produced from one text has the same keys; missing trailing fields are None.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence

from .cells import format_cell
from .errors import InvalidArgumentError
from .rules import (
    DEFAULT_HAS_HEADERS,
    DEFAULT_SEPARATOR,
    GENERATED_HEADER_PREFIX,
    validate_separator,
)
from .tokenizer import parse

logger = logging.getLogger(__name__)

Record = Dict[str, Optional[str]]


def generated_headers(count: int) -> List[str]:
    return [f"{GENERATED_HEADER_PREFIX}{i + 1}" for i in range(count)]


def to_records(
    text: Optional[str],
    has_headers: bool = DEFAULT_HAS_HEADERS,
    separator: str = DEFAULT_SEPARATOR,
) -> List[Record]:
    """
    Parse delimited text into a list of records.

    With ``has_headers`` the first row names the columns; otherwise columns
    are named col1..colN after the width of the first row. Short rows are
    padded with None and surplus fields are dropped.
    """
    validate_separator(separator)
    if text is None or text == "":
        return []

    rows = parse(text, separator)
    if not rows:
        return []

    if has_headers:
        headers = rows[0]
        data_rows = rows[1:]
    else:
        headers = generated_headers(len(rows[0]))
        data_rows = rows
        logger.debug("generated %d column names", len(headers))

    result: List[Record] = []
    for row in data_rows:
        result.append(
            {header: row[i] if i < len(row) else None for i, header in enumerate(headers)}
        )
    return result


def check_records(records: Any) -> None:
    if not isinstance(records, (list, tuple)):
        raise InvalidArgumentError(
            "records", f"records must be a list of mappings, got {type(records).__name__}"
        )
    for i, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise InvalidArgumentError(
                "records", f"record {i} must be a mapping, got {type(record).__name__}"
            )


def _check_headers(headers: Any) -> None:
    if isinstance(headers, str) or not isinstance(headers, Sequence):
        raise InvalidArgumentError(
            "headers", f"headers must be a list of strings, got {type(headers).__name__}"
        )
    for header in headers:
        if not isinstance(header, str):
            raise InvalidArgumentError(
                "headers", f"header names must be strings, got {header!r}"
            )


def to_delimited(
    records: Optional[Sequence[Mapping[str, Any]]],
    headers: Optional[Sequence[str]] = None,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """
    Serialize records as delimited text: one header line, then one line per record.

    ``headers`` picks the columns and their order; without it the keys of the
    first record are used. A record lacking a column gets an empty cell.
    Lines are joined with "\\n" and there is no trailing line break.
    """
    validate_separator(separator)
    if not records:
        return ""
    check_records(records)

    if headers is None:
        headers = list(records[0].keys())
        logger.debug("inferred headers from first record: %s", headers)
    else:
        _check_headers(headers)

    lines = [separator.join(format_cell(h, separator) for h in headers)]
    for record in records:
        lines.append(separator.join(format_cell(record.get(h), separator) for h in headers))

    return "\n".join(lines)
