from __future__ import annotations

from typing import Any

from .rules import DEFAULT_SEPARATOR, QUOTE


def to_text(value: Any) -> str:
    if value is None:
        return ""
    # records usually arrive as JSON, so booleans keep their JSON spelling
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def needs_quotes(text: str, separator: str = DEFAULT_SEPARATOR) -> bool:
    return separator in text or QUOTE in text or "\n" in text or "\r" in text


def format_cell(value: Any, separator: str = DEFAULT_SEPARATOR) -> str:
    """
    Render one value as a delimited-text cell.

    None becomes an empty unquoted cell. Text containing the separator, a
    quote or a line break is quoted with inner quotes doubled; anything else
    is emitted unchanged.
    """
    text = to_text(value)
    if needs_quotes(text, separator):
        return QUOTE + text.replace(QUOTE, QUOTE * 2) + QUOTE
    return text
