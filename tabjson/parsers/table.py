"""Tabular text parser for converting table dumps into typed records.

This module defines TabularTextParser, which is responsible for:
- Detecting whether a dump is bordered (| and +---+) or delimited (tabs / spaces)
- Classifying lines into separator, header and data lines
- Extracting cells and aligning them with the header row
- Coercing cells to None / int / float / str

Design principles:
- Core input is always plain text (str)
- Parsing is a pure function of the input: no caching, no shared state
- Bordered rows are zipped positionally (missing cells -> ""), delimited
  rows must match the header arity exactly or they are dropped
- An empty result is an error, never a silently returned empty list
"""

import logging
import re

from ..schemas import ParsedTable, TableFormat, BorderDetection, CellValue
from .coercion import coerce_cell
from .exceptions import EmptyInputError, NoHeaderError, NoDataError

logger = logging.getLogger(__name__)


class TabularTextParser:
    """Parse bordered or delimited text tables into a ParsedTable.

    Supported inputs:
    - Bordered tables as printed by database shells and Markdown:

        +----+-------+        | name  | age |
        | id | name  |        |-------|-----|
        +----+-------+        | Alice | 30  |
        |  1 | Alice |
        +----+-------+

    - Delimited dumps: tab separated, or columns separated by two or more
      spaces (single spaces stay inside a cell)

    Usage:
        >>> parser = TabularTextParser()
        >>> table = parser.parse(text)
        >>> table.rows
        [{'name': 'Alice', 'age': 30}]

    Notes:
        - Only the first header-like line is the header; repeated headers
          further down (paginated dumps) are parsed as data rows
        - In LEGACY border detection any "-" makes the input bordered, so
          delimited data with negative numbers or dashes is misread
        - Instances hold only configuration and may be shared across threads
    """

    # Border rule / Markdown separator line
    SEPARATOR_PATTERN = re.compile(r"[+\-|\s]+")
    # Cell fragment left over from a border rule
    NOISE_PATTERN = re.compile(r"[+\-\s]+")
    # Column gap in space-delimited dumps
    COLUMN_GAP_PATTERN = re.compile(r"\s{2,}")

    def __init__(self, border_detection: BorderDetection | str = BorderDetection.STRUCTURAL):
        """
        Initialize parser

        Args:
            border_detection: Heuristic used to recognise bordered tables
                ("structural" or "legacy")
        """
        self.border_detection = BorderDetection(border_detection)

    @classmethod
    def from_settings(cls, settings) -> "TabularTextParser":
        """Create a parser from a Settings instance"""
        return cls(border_detection=settings.border_detection)

    # ------------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------------
    def parse(self, text: str) -> ParsedTable:
        """Parse a text table into records.

        Args:
            text: Raw table dump, lines separated by "\\n"

        Returns:
            ParsedTable with at least one row

        Raises:
            EmptyInputError: If the text is empty after trimming
            NoHeaderError: If no header row can be located
            NoDataError: If the header is found but no row is usable
        """

        if text is None or not text.strip():
            raise EmptyInputError()

        lines = [line.strip() for line in text.split("\n") if line.strip()]

        table_format = self.detect_format(lines)
        logger.debug(f"Detected {table_format.value} table ({len(lines)} non-blank lines)")

        if table_format is TableFormat.BORDERED:
            headers, rows, dropped = self._parse_bordered(lines)
        else:
            headers, rows, dropped = self._parse_delimited(lines)

        if dropped:
            logger.debug(f"Dropped {dropped} line(s) that did not fit the table")

        if not rows:
            raise NoDataError()

        return ParsedTable(
            table_format=table_format,
            headers=headers,
            rows=rows,
            dropped_rows=dropped,
        )

    def detect_format(self, lines: list[str]) -> TableFormat:
        """Decide whether the lines form a bordered or a delimited table.

        STRUCTURAL: a line containing "|", or a rule line made only of
        "+", "-", "|" and whitespace that has both "+" and "-".
        LEGACY: a line containing any of "|", "+" or "-".
        """

        for line in lines:
            if "|" in line:
                return TableFormat.BORDERED

            if self.border_detection is BorderDetection.LEGACY:
                if "+" in line or "-" in line:
                    return TableFormat.BORDERED
            elif self._is_separator(line) and "+" in line and "-" in line:
                return TableFormat.BORDERED

        return TableFormat.DELIMITED

    # ------------------------------------------------------------------
    # Bordered tables
    # ------------------------------------------------------------------
    def _parse_bordered(self, lines: list[str]) -> tuple[list[str], list[dict[str, CellValue]], int]:
        header_index = -1
        headers: list[str] = []

        for index, line in enumerate(lines):
            if self._is_separator(line):
                continue
            if "|" in line:
                header_index = index
                headers = [cell for cell in self._split_bordered(line) if cell]
                break

        if not headers:
            raise NoHeaderError()

        rows: list[dict[str, CellValue]] = []
        dropped = 0
        for line in lines[header_index + 1:]:
            if self._is_separator(line):
                continue
            if "|" not in line:
                dropped += 1
                continue

            cells = self._split_bordered(line)
            if not cells:
                dropped += 1
                continue

            rows.append(self._build_row(headers, cells))

        return headers, rows, dropped

    def _split_bordered(self, line: str) -> list[str]:
        """Split a bordered line into trimmed cells.

        The fragments outside a leading/trailing "|" are the table edge, not
        cells. Border noise ("+---") is removed, empty cells are kept as "".
        """

        parts = line.split("|")
        if line.startswith("|"):
            parts = parts[1:]
        if line.endswith("|"):
            parts = parts[:-1]

        cells = [part.strip() for part in parts]
        return [cell for cell in cells if not self.NOISE_PATTERN.fullmatch(cell)]

    # ------------------------------------------------------------------
    # Delimited tables
    # ------------------------------------------------------------------
    def _parse_delimited(self, lines: list[str]) -> tuple[list[str], list[dict[str, CellValue]], int]:
        headers = self._split_delimited(lines[0])
        if not headers:
            raise NoHeaderError()

        rows: list[dict[str, CellValue]] = []
        dropped = 0
        for line in lines[1:]:
            values = self._split_delimited(line)
            # Empty cells make space-delimited boundaries ambiguous
            if len(values) != len(headers):
                dropped += 1
                continue
            rows.append(self._build_row(headers, values))

        return headers, rows, dropped

    def _split_delimited(self, line: str) -> list[str]:
        if "\t" in line:
            return [value.strip() for value in line.split("\t")]
        return [value.strip() for value in self.COLUMN_GAP_PATTERN.split(line) if value.strip()]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _is_separator(self, line: str) -> bool:
        return bool(self.SEPARATOR_PATTERN.fullmatch(line))

    @staticmethod
    def _build_row(headers: list[str], cells: list[str]) -> dict[str, CellValue]:
        row: dict[str, CellValue] = {}
        for index, header in enumerate(headers):
            # Later duplicate headers overwrite the same key
            row[header] = coerce_cell(cells[index]) if index < len(cells) else ""
        return row


def parse_table(text: str, border_detection: BorderDetection | str = BorderDetection.STRUCTURAL) -> ParsedTable:
    """Parse a text table with a one-off parser"""
    return TabularTextParser(border_detection=border_detection).parse(text)


def convert(
    text: str,
    indent: int | None = 2,
    border_detection: BorderDetection | str = BorderDetection.STRUCTURAL,
) -> str:
    """
    Convert a text table to a JSON document

    Args:
        text: Raw table dump
        indent: JSON indentation (2 by default, None for compact output)
        border_detection: "structural" (default) or "legacy"

    Returns:
        JSON array of records

    Raises:
        TableParseError: EmptyInputError, NoHeaderError or NoDataError

    Example:
        >>> print(convert("id\\tval\\n1\\t10"))
        [
          {
            "id": 1,
            "val": 10
          }
        ]
    """
    return parse_table(text, border_detection=border_detection).to_json(indent=indent)
