"""
tabjson - textual table dumps to JSON
"""

import logging
from rich.console import Console
from rich.logging import RichHandler

__version__ = "0.1.0"

# Configure rich logging; stderr keeps stdout clean for converted output
_console = Console(stderr=True)
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    handlers=[RichHandler(
        console=_console,
        rich_tracebacks=True,
        show_time=True,
        show_path=False
    )]
)

# Reduce verbosity of the history cache backend
logging.getLogger("diskcache").setLevel(logging.WARNING)

# Exceptions
from .exceptions import (
    TabJsonError,
    ConfigurationError,
    ResourceError,
)

# Core schemas
from .schemas import (
    TableFormat,
    BorderDetection,
    ParsedTable,
    HistoryItem,
    ConversionResult,
)

# Parsers
from .parsers import (
    TabularTextParser,
    parse_table,
    convert,
    coerce_cell,
    TableParseError,
    EmptyInputError,
    NoHeaderError,
    NoDataError,
    MalformedCellError,
)

# Settings
from .config import Settings

# History
from .history import (
    BaseHistoryStore,
    MemoryHistoryStore,
    DiskHistoryStore,
    HistoryManager,
)

# Conversion session
from .converter import TableConverter

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "TabJsonError",
    "ConfigurationError",
    "ResourceError",
    "TableParseError",
    "EmptyInputError",
    "NoHeaderError",
    "NoDataError",
    "MalformedCellError",
    # Schemas
    "TableFormat",
    "BorderDetection",
    "ParsedTable",
    "HistoryItem",
    "ConversionResult",
    # Parsers
    "TabularTextParser",
    "parse_table",
    "convert",
    "coerce_cell",
    # Settings
    "Settings",
    # History
    "BaseHistoryStore",
    "MemoryHistoryStore",
    "DiskHistoryStore",
    "HistoryManager",
    # Conversion
    "TableConverter",
]
