#!/usr/bin/env python3
"""
YYYYMMDD Encoding Utilities

Pure functions for the 8-digit integer date encoding used by YMDFlag.

Encoding:
- A date is stored as YYYY*10000 + MM*100 + DD, e.g. 20230704
- The value 0 is reserved for "unset"; it is never a date
- Valid values lie in [0, 99999999]

Key Principles:
- Validation is strict: day 32 is an error, never the 1st of next month
- Calendar rules are those of datetime.date (proleptic Gregorian, years 1-9999)
- Nothing here reads the clock except today_ymd()
"""

import os
from collections.abc import Callable
from datetime import date, datetime, timezone, tzinfo

from .errors import (
    YMDCalendarError,
    YMDFormatError,
    YMDParseError,
    YMDRangeError,
    YMDValidationError,
)
from .timezones import local_timezone

MAX_YMD = 99999999
YMD_DIGITS = 8

# Returned for unset values by the non-resolving accessors
ZERO_DATETIME = datetime.min.replace(tzinfo=timezone.utc)

Clock = Callable[[tzinfo | None], datetime]


def split_ymd(ymd: int) -> tuple[int, int, int]:
    """
    Decompose a YYYYMMDD integer into its fields.

    Args:
        ymd: Encoded date (not validated)

    Returns:
        Tuple of (year, month, day); (0, 0, 0) for an unset value

    Example:
        split_ymd(20220102) -> (2022, 1, 2)
    """
    return ymd // 10000, (ymd % 10000) // 100, ymd % 100


def validate_ymd(ymd: int) -> None:
    """
    Check that an integer is a proper YYYYMMDD value.

    Zero is valid and means "unset". This is not forgiving the way datetime
    arithmetic can be: 20221032 is not treated as 20221101.

    Args:
        ymd: Integer to check

    Raises:
        YMDFormatError: If ymd is not an int
        YMDRangeError: If ymd is negative or has more than 8 digits
        YMDCalendarError: If the digits are not a real calendar date
    """
    if isinstance(ymd, bool) or not isinstance(ymd, int):
        raise YMDFormatError(f"yyyymmdd must be an int, got {type(ymd).__name__}")
    if ymd == 0:
        return
    if ymd < 0:
        raise YMDRangeError("yyyymmdd is negative")
    if ymd > MAX_YMD:
        raise YMDRangeError("yyyymmdd is more than 8 digits")

    year, month, day = split_ymd(ymd)
    try:
        dt = date(year, month, day)
    except ValueError as e:
        raise YMDCalendarError("yyyymmdd is bad or unnormalized") from e
    if (dt.year, dt.month, dt.day) != (year, month, day):
        raise YMDCalendarError("yyyymmdd is bad or unnormalized")


def is_valid_ymd(ymd: int) -> bool:
    """Check whether ymd passes validate_ymd()."""
    try:
        validate_ymd(ymd)
    except (YMDValidationError, YMDFormatError):
        return False
    return True


def parse_ymd(value: str) -> int:
    """
    Parse YYYYMMDD text into its integer form.

    Args:
        value: Empty string (unset) or exactly 8 ASCII digits like "20230704"

    Returns:
        Encoded date; 0 for the empty string

    Raises:
        YMDFormatError: If value is not empty and not 8 ASCII digits
        YMDParseError: If the digits fail validation
    """
    if not isinstance(value, str):
        raise YMDFormatError(f"expect string of format YYYYMMDD, got {type(value).__name__}")
    if value == "":
        return 0
    if len(value) != YMD_DIGITS or not (value.isascii() and value.isdigit()):
        raise YMDFormatError(f"expect string of format YYYYMMDD, got {value!r}")

    ymd = int(value)
    try:
        validate_ymd(ymd)
    except YMDValidationError as e:
        raise YMDParseError(f"cannot parse {value!r}: {e}") from e
    return ymd


def ymd_to_string(ymd: int) -> str:
    """Format as 8 zero-padded digits, or "" when unset."""
    if ymd == 0:
        return ""
    return f"{ymd:08d}"


def ymd_to_datetime(ymd: int, location: tzinfo | None = None) -> datetime:
    """
    Get midnight of a YYYYMMDD date as an aware datetime.

    The value is not validated; call validate_ymd() first for untrusted input.

    Args:
        ymd: Encoded date
        location: Timezone for midnight; None means local time

    Returns:
        Midnight in location, or ZERO_DATETIME when ymd is 0
    """
    if ymd == 0:
        return ZERO_DATETIME
    year, month, day = split_ymd(ymd)
    if location is None:
        try:
            return datetime(year, month, day).astimezone()
        except (ValueError, OverflowError, OSError):
            # the host cannot resolve local time this far back; use today's offset
            return datetime(year, month, day, tzinfo=local_timezone())
    return datetime(year, month, day, tzinfo=location)


def datetime_to_ymd(value: date | datetime | None) -> int:
    """
    Encode a date or datetime as YYYYMMDD.

    A datetime is encoded from its own wall-clock fields, in its own zone.

    Args:
        value: Date to encode; None means absent

    Returns:
        Encoded date, or 0 for None
    """
    if value is None:
        return 0
    return 10000 * value.year + 100 * value.month + value.day


def format_dir_path(ymd: int, separator: str = os.sep) -> str:
    """
    Format a YYYYMMDD value as a directory path.

    Args:
        ymd: Encoded date
        separator: Single path separator character

    Returns:
        "YYYY<sep>MM<sep>DD", or "" when ymd is 0

    Example:
        format_dir_path(20220102, "/") -> "2022/01/02"
    """
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    if ymd == 0:
        return ""
    year, month, day = split_ymd(ymd)
    return f"{year:04d}{separator}{month:02d}{separator}{day:02d}"


def today_ymd(location: tzinfo | None = None, clock: Clock | None = None) -> int:
    """
    Get today's date as YYYYMMDD.

    Args:
        location: Timezone deciding what "today" is; None means local time
        clock: Callable taking a tzinfo and returning the current datetime
            (default: datetime.now)

    Returns:
        Encoded current date
    """
    now = (clock or datetime.now)(location)
    return datetime_to_ymd(now)
