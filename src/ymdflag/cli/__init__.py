"""
Command Line Interface Package

click integration for YMDFlag dates.

This package provides:
- YMDParamType, a click parameter type producing YMDFlag values
- ymd_option, a click.option preset for lazily-defaulted date options
- Main CLI entry point (ymdflag)

Command Structure:
- ymdflag show: midnight of a date in a time zone and in UTC
- ymdflag range: UTC span covering a start and end date
- ymdflag path: YYYY/MM/DD directory path for a date
- ymdflag version, ymdflag config: utility commands
"""

from .params import YMD, YMDParamType, ymd_option

__all__ = [
    "YMD",
    "YMDParamType",
    "ymd_option",
]
