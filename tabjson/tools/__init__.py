"""
Companion tools of the converter: JSON formatting, Base64, timestamps
"""

from .json_format import format_json, minify_json
from .base64_codec import encode_base64, decode_base64
from .timestamp import (
    TimestampView,
    timestamp_to_datetime,
    datetime_to_timestamp,
    current_timestamp,
)
from .exceptions import ToolError, JsonFormatError, Base64Error, TimestampError

__all__ = [
    "format_json",
    "minify_json",
    "encode_base64",
    "decode_base64",
    "TimestampView",
    "timestamp_to_datetime",
    "datetime_to_timestamp",
    "current_timestamp",
    "ToolError",
    "JsonFormatError",
    "Base64Error",
    "TimestampError",
]
