from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone
from typing import Any, Union

# "/Date(1705334400000-0800)/" - epoch milliseconds plus an optional UTC offset
WSDOT_DATE_RE = re.compile(r"^/Date\((-?\d+)([+-]\d{4})?\)/$")
# "01/15/2024" or "01/15/2024 02:30:00 PM"
MDY_DATE_RE = re.compile(
    r"^(\d{1,2})/(\d{1,2})/(\d{4})(?:\s+(\d{1,2}):(\d{2})(?::(\d{2}))?\s*([AaPp][Mm])?)?$"
)


class DateParseError(ValueError):
    """Raised when a vendor date string cannot be parsed."""


def format_date(value: date) -> str:
    """
    Render a date as YYYY-MM-DD from its own calendar fields.

    Datetimes are not shifted to UTC first; a 23:30 local datetime keeps its
    local day.
    """
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def is_wsdot_date(value: Any) -> bool:
    return isinstance(value, str) and WSDOT_DATE_RE.match(value) is not None


def parse_wsdot_date(value: str) -> datetime:
    """
    Parse "/Date(ms[+-]hhmm)/" into an aware datetime.

    The offset only selects the timezone the instant is expressed in; the
    millisecond count is always UTC-based. Without an offset the result is UTC.
    """
    match = WSDOT_DATE_RE.match(value or "")
    if match is None:
        raise DateParseError(f"Not a WSDOT date: {value!r}")

    millis = int(match.group(1))
    tz = timezone.utc
    offset = match.group(2)
    if offset:
        sign = -1 if offset[0] == "-" else 1
        minutes = int(offset[1:3]) * 60 + int(offset[3:5])
        try:
            tz = timezone(sign * timedelta(minutes=minutes))
        except ValueError as exc:
            raise DateParseError(f"Invalid UTC offset in {value!r}") from exc

    epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
    try:
        instant = epoch + timedelta(milliseconds=millis)
    except OverflowError as exc:
        raise DateParseError(f"WSDOT date out of range: {value!r}") from exc
    try:
        return instant.astimezone(tz)
    except OverflowError:
        # DateTime.MinValue/MaxValue shifted past year 1 or 9999; keep UTC
        return instant


def parse_mdy_date(value: str) -> Union[date, datetime]:
    """Parse "MM/DD/YYYY" into a date, or "MM/DD/YYYY hh:mm[:ss] [AM|PM]" into a naive datetime."""
    match = MDY_DATE_RE.match((value or "").strip())
    if match is None:
        raise DateParseError(f"Not a MM/DD/YYYY date: {value!r}")

    month, day, year = (int(match.group(i)) for i in (1, 2, 3))
    if match.group(4) is None:
        hour = minute = second = None
    else:
        hour = int(match.group(4))
        minute = int(match.group(5))
        second = int(match.group(6) or 0)
        meridiem = (match.group(7) or "").upper()
        if meridiem:
            if not 1 <= hour <= 12:
                raise DateParseError(f"Invalid 12-hour time in {value!r}")
            hour = hour % 12 + (12 if meridiem == "PM" else 0)

    try:
        if hour is None:
            return date(year, month, day)
        return datetime(year, month, day, hour, minute, second)
    except ValueError as exc:
        raise DateParseError(f"Invalid calendar date {value!r}: {exc}") from exc


def convert_dates(value: Any) -> Any:
    """
    Recursively replace "/Date(...)/" strings in a decoded JSON value.

    Other strings are returned untouched; MM/DD/YYYY fields are left to the
    response models since plain strings of that shape are not always dates.
    """
    if isinstance(value, str):
        if not is_wsdot_date(value):
            return value
        try:
            return parse_wsdot_date(value)
        except DateParseError:
            return value
    if isinstance(value, list):
        return [convert_dates(v) for v in value]
    if isinstance(value, dict):
        return {k: convert_dates(v) for k, v in value.items()}
    return value


__all__ = [
    "DateParseError",
    "format_date",
    "is_wsdot_date",
    "parse_wsdot_date",
    "parse_mdy_date",
    "convert_dates",
]
