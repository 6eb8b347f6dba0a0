from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

from .rules import (
    DEFAULT_HAS_HEADERS,
    DEFAULT_ROOT_NAME,
    DEFAULT_ROW_NAME,
    DEFAULT_SEPARATOR,
    validate_separator,
)


class ConversionOptions(BaseModel):
    """Every option the converters recognize, with its default."""

    separator: str = Field(default=DEFAULT_SEPARATOR, examples=[",", ";", "|", "\t"])
    has_headers: bool = DEFAULT_HAS_HEADERS

    @field_validator("separator")
    @classmethod
    def _separator_is_usable(cls, value: str) -> str:
        return validate_separator(value)


class DecodingReport(BaseModel):
    detected: Optional[str] = None
    decode_used: str
    decode_fallback: bool = False
    size_bytes: int = 0


class ParseResponse(BaseModel):
    rows: List[List[str]]
    row_count: int
    decoding: DecodingReport


class RecordsSummary(BaseModel):
    records: int = 0
    columns: List[str] = Field(default_factory=list)
    separator: str = DEFAULT_SEPARATOR
    has_headers: bool = DEFAULT_HAS_HEADERS


class RecordsResponse(BaseModel):
    records: List[Dict[str, Optional[str]]]
    summary: RecordsSummary
    decoding: DecodingReport


class DelimitedRequest(BaseModel):
    records: List[Dict[str, Any]]
    headers: Optional[List[str]] = None
    separator: str = DEFAULT_SEPARATOR

    @field_validator("separator")
    @classmethod
    def _separator_is_usable(cls, value: str) -> str:
        return validate_separator(value)


class MarkupRequest(BaseModel):
    records: List[Dict[str, Any]]
    root_name: str = DEFAULT_ROOT_NAME
    row_name: str = DEFAULT_ROW_NAME
    strict: bool = False


class ErrorResponse(BaseModel):
    detail: str
    argument: Optional[str] = None


class HealthResponse(BaseModel):
    ok: bool = True
