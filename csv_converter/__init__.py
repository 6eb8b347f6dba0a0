"""Delimited text to records and back, plus XML rendering of records."""

from .cells import format_cell
from .errors import InvalidArgumentError
from .markup import delimited_to_markup, to_markup
from .models import ConversionOptions
from .records import to_delimited, to_records
from .tokenizer import parse

__all__ = [
    "ConversionOptions",
    "InvalidArgumentError",
    "delimited_to_markup",
    "format_cell",
    "parse",
    "to_delimited",
    "to_markup",
    "to_records",
]
