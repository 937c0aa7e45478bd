"""
Type definitions for schemas module

This module contains all enum types used across the schema system.
"""

from enum import Enum
from typing import Optional, Union


class TableFormat(str, Enum):
    """Layout of a textual table dump"""

    BORDERED = "bordered"    # | column separators, optional +---+ rules
    DELIMITED = "delimited"  # tab or multi-space separated, no border


class BorderDetection(str, Enum):
    """Heuristic used to tell bordered tables from delimited ones"""

    # | anywhere, or a +---+ rule line
    STRUCTURAL = "structural"
    # any |, + or - anywhere (delimited data containing "-" is misread)
    LEGACY = "legacy"


# A coerced table cell
CellValue = Optional[Union[int, float, str]]
