#!/usr/bin/env python3
"""
YMDFlag Value Type

Integer-backed YYYYMMDD date for command line options.

A YMDFlag holds a `ymd` integer and an optional `location`:
- ymd == 0 means "unset"; the first resolving access fills in today's date
- location None means the process-local timezone is used for "today" and
  for midnight when converting to a datetime

Accessors come in two kinds. Pure ones (`ymd`, `as_string`, `as_dir_path`,
`as_year_month_day`, `as_datetime_no_check`, `str()`) never read the clock.
Resolving ones (`as_ymd`, `as_datetime`, `as_date`) call `resolve_or_today`
first and may therefore change an unset value.

Instances are not thread-safe; serialize access to a shared flag.
"""

import logging
import os
from dataclasses import dataclass
from datetime import date, datetime, tzinfo

from .ymd import (
    Clock,
    datetime_to_ymd,
    format_dir_path,
    parse_ymd,
    split_ymd,
    today_ymd,
    validate_ymd,
    ymd_to_datetime,
    ymd_to_string,
)

logger = logging.getLogger(__name__)


@dataclass
class YMDFlag:
    """
    YYYYMMDD date value with lazy "today" defaulting.

    Examples:
        >>> flag = YMDFlag.from_int(20230704)
        >>> str(flag)
        '20230704'
        >>> flag.as_dir_path("/")
        '2023/07/04'

        >>> unset = YMDFlag()
        >>> str(unset)
        ''
        >>> unset.is_unset()
        True
    """

    TYPE_NAME = "YMDFlag"

    ymd: int = 0
    location: tzinfo | None = None

    def __setattr__(self, name: str, value: object) -> None:
        # every assignment to ymd is validated, including the one in __init__
        if name == "ymd":
            validate_ymd(value)  # type: ignore[arg-type]
        super().__setattr__(name, value)

    @classmethod
    def from_date(cls, value: date | datetime | None, location: tzinfo | None = None) -> "YMDFlag":
        """
        Create from a date or datetime.

        Args:
            value: Date to encode; None gives an unset flag
            location: Location to bind; defaults to an aware datetime's tzinfo

        Returns:
            YMDFlag object
        """
        if location is None and isinstance(value, datetime):
            location = value.tzinfo
        return cls(ymd=datetime_to_ymd(value), location=location)

    @classmethod
    def from_int(cls, ymd: int, location: tzinfo | None = None) -> "YMDFlag":
        """
        Create from an integer like 20230704. Zero is a valid, unset value.

        Raises:
            YMDValidationError: If ymd is not a proper YYYYMMDD value
        """
        return cls(ymd=ymd, location=location)

    @classmethod
    def from_string(cls, value: str, location: tzinfo | None = None) -> "YMDFlag":
        """Create from "YYYYMMDD" text; "" gives an unset flag."""
        return cls(ymd=parse_ymd(value), location=location)

    @classmethod
    def with_location(cls, location: tzinfo | None) -> "YMDFlag":
        """
        Create an unset flag bound to a location.

        Prepares a flag for a specific timezone before option parsing fills it.
        """
        return cls(ymd=0, location=location)

    @classmethod
    def today(cls, location: tzinfo | None = None, clock: Clock | None = None) -> "YMDFlag":
        """Get a flag holding today's date in location."""
        flag = cls.with_location(location)
        flag.resolve_or_today(clock=clock)
        return flag

    # Option value protocol

    def type_name(self) -> str:
        """Type tag for help text. Returns "YMDFlag"."""
        return self.TYPE_NAME

    def set(self, value: str) -> None:
        """
        Set from option text.

        The empty string resets the flag to unset, so it resolves lazily.

        Raises:
            YMDParseError: If value is not "" or a valid "YYYYMMDD"
        """
        self.ymd = parse_ymd(value)

    def __str__(self) -> str:
        return self.as_string()

    # Pure accessors

    def is_unset(self) -> bool:
        """Check if the flag is unset. The location is ignored."""
        return self.ymd == 0

    def as_string(self) -> str:
        """Format as "YYYYMMDD", or "" when unset."""
        return ymd_to_string(self.ymd)

    def as_year_month_day(self) -> tuple[int, int, int]:
        """Get (year, month, day); (0, 0, 0) when unset."""
        return split_ymd(self.ymd)

    def as_dir_path(self, separator: str = os.sep) -> str:
        """
        Format as "YYYY/MM/DD" using the given separator.

        An unset flag gives "" instead of resolving to today.
        """
        return format_dir_path(self.ymd, separator)

    def as_datetime_no_check(self, location: tzinfo | None = None) -> datetime:
        """
        Get midnight of the date without resolving.

        Returns ZERO_DATETIME when unset; check is_unset() first when a real
        date is required.
        """
        return ymd_to_datetime(self.ymd, location if location is not None else self.location)

    # Resolving accessors

    def resolve_or_today(self, location: tzinfo | None = None, clock: Clock | None = None) -> None:
        """
        Fill an unset flag with today's date.

        Does nothing if the flag is already set.

        Args:
            location: Timezone deciding what "today" is; defaults to the
                flag's location, then local time
            clock: Source of the current datetime (default: datetime.now)
        """
        if self.ymd != 0:
            return
        if location is None:
            location = self.location
        self.ymd = today_ymd(location, clock)
        logger.debug("Resolved unset YMDFlag to today: %08d", self.ymd)

    def as_ymd(self) -> int:
        """Get the YYYYMMDD integer, resolving an unset flag to today first."""
        self.resolve_or_today()
        return self.ymd

    def as_datetime(self, location: tzinfo | None = None) -> datetime:
        """
        Get midnight of the date as an aware datetime.

        An unset flag is resolved to today first, in location if given.

        Args:
            location: Timezone override; defaults to the flag's location,
                then local time
        """
        if location is None:
            location = self.location
        self.resolve_or_today(location)
        return ymd_to_datetime(self.ymd, location)

    def as_date(self) -> date:
        """Get the date, resolving an unset flag to today first."""
        return self.as_datetime().date()

    # Mutators

    def set_location(self, location: tzinfo | None) -> None:
        """Set the location used by future conversions."""
        self.location = location

    def reset(self) -> None:
        """Return to the unset state."""
        self.ymd = 0
