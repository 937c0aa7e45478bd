"""UTF-8 text <-> Base64."""

import base64
import binascii
import re

from .exceptions import Base64Error

_DATA_URL_PREFIX = re.compile(r"^data:[^,]*;base64,", re.IGNORECASE)


def encode_base64(text: str) -> str:
    """Encode text as UTF-8 and return its Base64 form"""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_base64(text: str) -> str:
    """
    Decode Base64 into UTF-8 text

    A "data:<mime>;base64," prefix (as produced for uploaded files) is
    stripped, as is surrounding whitespace.

    Raises:
        Base64Error: If the input is not valid Base64 or not UTF-8 text
    """
    payload = _DATA_URL_PREFIX.sub("", text.strip())
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise Base64Error(f"Invalid Base64 input: {e}") from e

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise Base64Error("Decoded bytes are not UTF-8 text") from e
