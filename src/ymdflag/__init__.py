"""
ymdflag - YYYYMMDD Dates for Command Line Options

A small date value type encoded as an 8-digit integer, with strict validation,
lazy "today" defaulting and optional timezone binding. It plugs into click
as an option type.

Packages:
- core: YMDFlag value type, YYYYMMDD utilities, timezones, configuration
- cli: click option type and the ymdflag command

Example Usage:
    import click
    from ymdflag import YMDFlag
    from ymdflag.cli.params import ymd_option

    @click.command()
    @ymd_option("--date", "-d", help="YYYYMMDD date; defaults to today")
    def main(date: YMDFlag) -> None:
        click.echo(date.as_datetime())

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "Neomantra BV"

from .core.dates import YMDFlag
from .core.errors import (
    YMDCalendarError,
    YMDError,
    YMDFormatError,
    YMDParseError,
    YMDRangeError,
    YMDTimezoneError,
    YMDValidationError,
)
from .core.timezones import load_location
from .core.ymd import (
    datetime_to_ymd,
    format_dir_path,
    parse_ymd,
    split_ymd,
    validate_ymd,
    ymd_to_datetime,
)

__all__ = [
    # Value type
    "YMDFlag",

    # Errors
    "YMDError",
    "YMDValidationError",
    "YMDRangeError",
    "YMDCalendarError",
    "YMDParseError",
    "YMDFormatError",
    "YMDTimezoneError",

    # Utilities
    "validate_ymd",
    "parse_ymd",
    "split_ymd",
    "ymd_to_datetime",
    "datetime_to_ymd",
    "format_dir_path",
    "load_location",
]
