"""
Schemas module - Core data structures
"""

from .types import TableFormat, BorderDetection, CellValue
from .table import ParsedTable
from .history import HistoryItem, ConversionResult

__all__ = [
    # Enums
    "TableFormat",
    "BorderDetection",
    # Cell type
    "CellValue",
    # Parse results
    "ParsedTable",
    # History
    "HistoryItem",
    "ConversionResult",
]
