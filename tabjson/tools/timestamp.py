"""
Unix timestamp <-> date conversion

Timestamps below 10_000_000_000 are read as seconds, larger ones as
milliseconds. Dates are shown two ways: local "YYYY/MM/DD HH:MM:SS" and
ISO-8601 UTC with milliseconds ("2024-01-01T00:00:00.000Z").
"""

import time
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

from pydantic import BaseModel

from .exceptions import TimestampError

MILLISECONDS_THRESHOLD = 10_000_000_000

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

LOCAL_FORMAT = "%Y/%m/%d %H:%M:%S"

# Accepted in addition to ISO-8601
_DATE_FORMATS = (
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d",
    "%Y-%m-%d",
)


class TimestampView(BaseModel):
    """One instant rendered for display"""

    timestamp: int  # epoch seconds
    local: str
    iso: str


def _to_view(moment: datetime, tz: Optional[tzinfo]) -> TimestampView:
    try:
        utc = moment.astimezone(timezone.utc)
        local = moment.astimezone(tz) if tz is not None else moment.astimezone()
        return TimestampView(
            timestamp=int(moment.timestamp()),
            local=local.strftime(LOCAL_FORMAT),
            iso=f"{utc:%Y-%m-%dT%H:%M:%S}.{utc.microsecond // 1000:03d}Z",
        )
    except (OverflowError, OSError, ValueError) as e:
        # Near datetime.min / datetime.max the zone shift leaves the calendar
        raise TimestampError(f"Date out of range: {moment.isoformat()}") from e


def timestamp_to_datetime(value: str | int, tz: Optional[tzinfo] = None) -> TimestampView:
    """
    Render a Unix timestamp

    Args:
        value: Seconds or milliseconds since the epoch (int or digit string)
        tz: Zone for the local rendering (default: system local time)

    Raises:
        TimestampError: If value is not an integer or out of range
    """
    try:
        number = int(str(value).strip())
    except ValueError as e:
        raise TimestampError(f"Invalid timestamp: {value!r}") from e

    millis = number * 1000 if abs(number) < MILLISECONDS_THRESHOLD else number
    try:
        moment = EPOCH + timedelta(milliseconds=millis)
    except (OverflowError, OSError, ValueError) as e:
        raise TimestampError(f"Timestamp out of range: {value}") from e

    return _to_view(moment, tz)


def datetime_to_timestamp(text: str, tz: Optional[tzinfo] = None) -> TimestampView:
    """
    Parse a date and return its timestamp

    Accepts ISO-8601 (a trailing "Z" means UTC) and the formats in
    _DATE_FORMATS. Dates without an offset are read in tz, or in system
    local time when tz is None.

    Raises:
        TimestampError: If the text matches no known format
    """
    raw = text.strip()
    if not raw:
        raise TimestampError("Empty date")

    moment = None
    try:
        moment = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        for fmt in _DATE_FORMATS:
            try:
                moment = datetime.strptime(raw, fmt)
                break
            except ValueError:
                continue

    if moment is None:
        raise TimestampError(f"Invalid date: {text!r}")

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=tz) if tz is not None else moment.astimezone()

    return _to_view(moment, tz)


def current_timestamp(tz: Optional[tzinfo] = None) -> TimestampView:
    """Render the current time"""
    return timestamp_to_datetime(int(time.time()), tz=tz)
