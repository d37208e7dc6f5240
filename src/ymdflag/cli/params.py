#!/usr/bin/env python3
"""
click Option Type for YYYYMMDD Dates

Registers YMDFlag as a click parameter type so commands receive a validated
YMDFlag instead of raw text.

Example:
    @click.command()
    @ymd_option("--date", "-d", help="YYYYMMDD date; defaults to today")
    def show(date: YMDFlag) -> None:
        click.echo(date.as_datetime())

An omitted option yields an unset YMDFlag, which resolves to today on first
resolving access in the option's location.
"""

import copy
from datetime import date, tzinfo
from typing import Any

import click

from ..core.dates import YMDFlag
from ..core.errors import YMDError
from ..core.timezones import location_name


class YMDParamType(click.ParamType):
    """click parameter type converting "YYYYMMDD" text into YMDFlag."""

    name = "yyyymmdd"

    def __init__(self, location: tzinfo | None = None) -> None:
        self.location = location

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> YMDFlag:
        try:
            if isinstance(value, YMDFlag):
                flag = copy.copy(value)
            elif isinstance(value, date):
                flag = YMDFlag.from_date(value)
            elif isinstance(value, int) and not isinstance(value, bool):
                flag = YMDFlag.from_int(value)
            else:
                flag = YMDFlag()
                flag.set(value)
        except YMDError as e:
            self.fail(str(e), param, ctx)

        # values carrying their own zone keep it
        if flag.location is None:
            flag.set_location(self.location)
        return flag

    def __repr__(self) -> str:
        return f"YMD({location_name(self.location)})"


YMD = YMDParamType()


def ymd_option(*param_decls: str, location: tzinfo | None = None, **attrs: Any) -> Any:
    """
    Declare a click option holding a YMDFlag.

    Defaults to an unset flag so the date resolves lazily to today.

    Args:
        *param_decls: Option names, e.g. "--date", "-d"
        location: Timezone bound to the parsed flag; None means local time
        **attrs: Extra click.option arguments

    Returns:
        click.option decorator
    """
    attrs.setdefault("type", YMDParamType(location))
    attrs.setdefault("default", "")
    attrs.setdefault("metavar", "YYYYMMDD")
    return click.option(*param_decls, **attrs)
