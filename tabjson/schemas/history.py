"""
History and conversion result schemas
"""

from typing import Optional
from pydantic import BaseModel


class HistoryItem(BaseModel):
    """
    One remembered conversion

    Attributes:
        name: Display label, e.g. "3 rows (2024-05-01 09:30)"
        raw: Input text as submitted (trimmed)
        formatted: Output document produced for it
        time: Creation time in epoch milliseconds
    """

    name: str
    raw: str
    formatted: str
    time: int


class ConversionResult(BaseModel):
    """Output/error pair shown to the user after a conversion"""

    output: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
