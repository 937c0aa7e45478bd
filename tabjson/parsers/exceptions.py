"""
Parser exceptions
"""

from ..exceptions import TabJsonError


class TableParseError(TabJsonError):
    """Base exception for table parsing errors"""

    default_message = "Unable to parse table"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class EmptyInputError(TableParseError):
    """No input text was given"""

    default_message = "No input provided"


class NoHeaderError(TableParseError):
    """No header row could be located"""

    default_message = "Unable to identify table header"


class NoDataError(TableParseError):
    """A header was found but no usable data rows"""

    default_message = "No valid data found"


class MalformedCellError(TableParseError):
    """Reserved for stricter cell validation; coercion never raises it"""

    default_message = "Malformed cell value"
