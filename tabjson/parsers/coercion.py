"""Cell type coercion: NULL -> None, integers, decimals, everything else as text."""

import math
import re

from ..schemas.types import CellValue

_INTEGER_PATTERN = re.compile(r"-?[0-9]+")
_FLOAT_PATTERN = re.compile(r"-?[0-9]+\.[0-9]+")


def coerce_cell(value: str) -> CellValue:
    """
    Coerce a raw cell into None, int, float or str

    Precedence:
        1. "NULL" in any letter case -> None
        2. optional minus + digits -> int
        3. optional minus + digits + "." + digits -> float (text if it overflows)
        4. the trimmed string (empty stays empty)

    Examples:
        >>> coerce_cell(" NuLL ")
        >>> coerce_cell("-12")
        -12
        >>> coerce_cell("3.50")
        3.5
        >>> coerce_cell("1e5")
        '1e5'
    """
    text = value.strip()

    if text.upper() == "NULL":
        return None

    if _INTEGER_PATTERN.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # Beyond the interpreter's int/str conversion limit
            return text

    if _FLOAT_PATTERN.fullmatch(text):
        number = float(text)
        if math.isinf(number):
            # Too many digits for a double
            return text
        return number

    return text
