"""
Core Package

The YMDFlag value type and the YYYYMMDD utilities it is built on.

This package provides:
- YMDFlag, an integer-backed date with lazy "today" defaulting
- Pure YYYYMMDD validation, parsing and formatting functions
- Timezone lookup for binding dates to a location
- Configuration management for the command line tools
"""

from .config import (
    Config,
    Environment,
    get_config,
    reload_config,
)
from .dates import YMDFlag
from .errors import (
    YMDCalendarError,
    YMDError,
    YMDFormatError,
    YMDParseError,
    YMDRangeError,
    YMDTimezoneError,
    YMDValidationError,
)
from .timezones import load_location, local_timezone, location_name
from .ymd import (
    MAX_YMD,
    ZERO_DATETIME,
    datetime_to_ymd,
    format_dir_path,
    is_valid_ymd,
    parse_ymd,
    split_ymd,
    today_ymd,
    validate_ymd,
    ymd_to_datetime,
    ymd_to_string,
)

__all__ = [
    "MAX_YMD",
    "ZERO_DATETIME",
    # Configuration
    "Config",
    "Environment",
    # Errors
    "YMDCalendarError",
    "YMDError",
    # Value type
    "YMDFlag",
    "YMDFormatError",
    "YMDParseError",
    "YMDRangeError",
    "YMDTimezoneError",
    "YMDValidationError",
    # YYYYMMDD utilities
    "datetime_to_ymd",
    "format_dir_path",
    "get_config",
    "is_valid_ymd",
    # Timezones
    "load_location",
    "local_timezone",
    "location_name",
    "parse_ymd",
    "reload_config",
    "split_ymd",
    "today_ymd",
    "validate_ymd",
    "ymd_to_datetime",
    "ymd_to_string",
]
