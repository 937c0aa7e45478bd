"""
Companion tool exceptions
"""

from ..exceptions import TabJsonError


class ToolError(TabJsonError):
    """Base exception for companion tool errors"""
    pass


class JsonFormatError(ToolError):
    """Input is not valid JSON"""
    pass


class Base64Error(ToolError):
    """Input cannot be Base64 encoded or decoded"""
    pass


class TimestampError(ToolError):
    """Timestamp or date text cannot be converted"""
    pass
