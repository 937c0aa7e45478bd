"""
Parsed table schema

ParsedTable is the result of one parse call: the detected layout, the header
row and the ordered, coerced records. It is created fresh on every parse and
never mutated by the parser afterwards.
"""

import json
from typing import Any

from pydantic import BaseModel, Field

from .types import TableFormat, CellValue


class ParsedTable(BaseModel):
    """
    Ordered sequence of homogeneous records recovered from a text table

    Attributes:
        table_format: Layout detected for the input
        headers: Column names in header order (duplicates allowed)
        rows: Records keyed by column name, insertion order = header order
        dropped_rows: Data lines after the header that produced no record
            (arity mismatch in delimited input, no "|" in bordered input)

    Example:
        >>> table = TabularTextParser().parse("id\\tval\\n1\\t10\\n")
        >>> table.rows
        [{'id': 1, 'val': 10}]
        >>> print(table.to_json())
    """

    table_format: TableFormat
    headers: list[str]
    rows: list[dict[str, CellValue]] = Field(default_factory=list)
    dropped_rows: int = 0

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.headers)

    def to_json(self, indent: int | None = 2) -> str:
        """
        Serialize records to a JSON document

        Args:
            indent: Indentation width, None for a single-line document

        Returns:
            JSON text; non-ASCII characters are kept verbatim

        Raises:
            ValueError: If a row holds NaN or infinity, which JSON cannot represent
        """
        return json.dumps(self.rows, indent=indent, ensure_ascii=False, allow_nan=False)

    def to_dataframe(self) -> "Any":
        """
        Convert records into a pandas DataFrame

        Columns follow header order; duplicated header names appear once.

        Returns:
            pandas DataFrame with one row per record
        """
        try:
            import pandas as pd
        except ImportError as exc:  # pragma: no cover - import guard
            raise ImportError(
                "pandas is required for ParsedTable.to_dataframe(). "
                "Install it with: pip install pandas"
            ) from exc

        columns = list(dict.fromkeys(self.headers))
        return pd.DataFrame(self.rows, columns=columns)
