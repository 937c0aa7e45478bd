"""
Parsers for turning textual table dumps into structured records

Parsers are responsible for:
- Recognising the table layout (bordered or delimited)
- Locating the header row and the data rows
- Coercing cell text into null / integer / float / string values

Parsing is pure: the same text always yields the same ParsedTable or
the same error.
"""

from .table import TabularTextParser, parse_table, convert
from .coercion import coerce_cell
from .exceptions import (
    TableParseError,
    EmptyInputError,
    NoHeaderError,
    NoDataError,
    MalformedCellError,
)

__all__ = [
    "TabularTextParser",
    "parse_table",
    "convert",
    "coerce_cell",
    "TableParseError",
    "EmptyInputError",
    "NoHeaderError",
    "NoDataError",
    "MalformedCellError",
]
