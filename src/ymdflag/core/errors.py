#!/usr/bin/env python3
"""
YMD Error Types

Exception hierarchy for YYYYMMDD validation, parsing and timezone lookup.
All errors derive from ValueError so callers that only care about "bad input"
can catch the builtin.
"""


class YMDError(ValueError):
    """Base class for all ymdflag errors."""

    pass


class YMDValidationError(YMDError):
    """Raised when an integer is not a valid YYYYMMDD value."""

    pass


class YMDRangeError(YMDValidationError):
    """Raised when a YYYYMMDD integer is negative or has more than 8 digits."""

    pass


class YMDCalendarError(YMDValidationError):
    """Raised when YYYYMMDD digits do not form a real calendar date."""

    pass


class YMDParseError(YMDError):
    """Raised when text cannot be parsed into a YYYYMMDD value."""

    pass


class YMDFormatError(YMDParseError):
    """Raised when text is not empty and not exactly 8 ASCII digits."""

    pass


class YMDTimezoneError(YMDError):
    """Raised when a named location cannot be resolved."""

    pass
