"""
Table-to-JSON conversion session

TableConverter is the orchestration boundary around TabularTextParser: it
turns parse failures into a single message, keeps the current output/error
pair, and remembers successful conversions in the history.
"""

import logging
from typing import Optional

from .history import HistoryManager
from .parsers import TabularTextParser, TableParseError
from .schemas import ConversionResult, HistoryItem, ParsedTable

logger = logging.getLogger(__name__)


class TableConverter:
    """
    Stateful converter mirroring an input/output form

    State rules:
    - Blank input clears output and error (nothing to report)
    - A failure clears the previous output and sets the error message
    - A success clears the error and replaces the output
    - Successful conversions are saved to history when one is attached

    Args:
        parser: Parser used for every conversion (default: structural borders)
        history: Optional HistoryManager receiving successful conversions
        indent: JSON indentation of the output

    Example:
        >>> converter = TableConverter(history=HistoryManager(MemoryHistoryStore()))
        >>> result = converter.convert("| a | b |\\n| 1 | 2 |")
        >>> result.output
        '[\\n  {\\n    "a": 1,\\n    "b": 2\\n  }\\n]'
    """

    def __init__(
        self,
        parser: Optional[TabularTextParser] = None,
        history: Optional[HistoryManager] = None,
        indent: int | None = 2,
    ):
        self.parser = parser or TabularTextParser()
        self.history = history
        self.indent = indent
        self.output = ""
        self.error: Optional[str] = None
        self.table: Optional[ParsedTable] = None

    @classmethod
    def from_settings(cls, settings, history: Optional[HistoryManager] = None) -> "TableConverter":
        """Create a converter configured from Settings"""
        return cls(
            parser=TabularTextParser.from_settings(settings),
            history=history,
            indent=settings.indent,
        )

    @property
    def result(self) -> ConversionResult:
        return ConversionResult(output=self.output, error=self.error)

    def convert(self, text: str) -> ConversionResult:
        """
        Convert text and update the session state

        Returns:
            ConversionResult with either output or error set
        """
        if not text or not text.strip():
            return self.clear()

        try:
            table = self.parser.parse(text)
        except TableParseError as e:
            logger.debug(f"Conversion failed: {e}")
            self.output = ""
            self.error = str(e)
            self.table = None
            return self.result

        self.table = table
        self.output = table.to_json(indent=self.indent)
        self.error = None

        if self.history is not None:
            self.history.record(
                raw=text,
                formatted=self.output,
                name=f"{len(table)} rows",
            )

        return self.result

    def clear(self) -> ConversionResult:
        """Reset output and error"""
        self.table = None
        self.output = ""
        self.error = None
        return self.result

    def restore(self, index: int) -> HistoryItem:
        """
        Load a history entry back as the current output

        Args:
            index: History position, 0 = newest

        Returns:
            The restored entry (its raw field is the original input)
        """
        if self.history is None:
            raise IndexError("No history attached to this converter")

        item = self.history.get(index)
        self.table = None
        self.output = item.formatted
        self.error = None
        return item
