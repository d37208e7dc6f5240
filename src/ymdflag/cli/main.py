#!/usr/bin/env python3
"""
Main CLI Entry Point for ymdflag

Small commands showing YYYYMMDD options in use: a single date, a date bound
to a timezone, a start/end range and directory path formatting.
"""

import logging
import os
from datetime import datetime, timezone, tzinfo

import click

from ..core.config import get_config, reload_config
from ..core.dates import YMDFlag
from ..core.errors import YMDTimezoneError
from ..core.timezones import load_location, location_name
from .params import ymd_option

logger = logging.getLogger(__name__)


def resolve_location(ctx: click.Context, tz_name: str | None) -> tzinfo | None:
    """
    Pick the location for date options: --tz if given, else the configured default.

    Raises:
        click.ClickException: If the timezone name is unknown
    """
    if tz_name is None:
        return ctx.obj["config"].location
    try:
        return load_location(tz_name)
    except YMDTimezoneError as e:
        raise click.ClickException(str(e)) from e


def bind_location(flag: YMDFlag, location: tzinfo | None) -> None:
    """Bind location to a flag that has none of its own."""
    if flag.location is None:
        flag.set_location(location)


tz_option = click.option(
    "--tz",
    "tz_name",
    metavar="NAME",
    help="Time zone such as Antarctica/Syowa (default: YMDFLAG_TIMEZONE or local time)",
)


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    ymdflag - YYYYMMDD dates for command line options

    Dates are given as 8 digits such as 20230704. An omitted date means today.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    if config_env:
        os.environ["YMDFLAG_ENV"] = config_env

    # Configure debug logging if requested
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("ymdflag").setLevel(logging.DEBUG)

    try:
        config = reload_config() if (config_env or debug) else get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Time zone: {location_name(config.location)}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
@ymd_option("--date", "-d", help="YYYYMMDD date; defaults to today")
@tz_option
@click.pass_context
def show(ctx: click.Context, date: YMDFlag, tz_name: str | None) -> None:
    """
    Show midnight of a date in its time zone and in UTC.

    Examples:
      ymdflag show
      ymdflag show --date 20230704
      ymdflag show -d 20230704 --tz Antarctica/Syowa
    """
    location = resolve_location(ctx, tz_name)
    bind_location(date, location)

    was_unset = date.is_unset()
    midnight = date.as_datetime()
    if was_unset:
        logger.info("No date given, using today: %s", date)

    click.echo(f"location: {location_name(date.location)}")
    click.echo(f"date: {date}")
    click.echo(f"time: {midnight.isoformat()}")
    try:
        utc_text = midnight.astimezone(timezone.utc).isoformat()
    except OverflowError:
        # midnight of 00010101 east of UTC falls before year 1
        utc_text = "before 0001-01-01T00:00:00+00:00"
    click.echo(f"timeUTC: {utc_text}")


@main.command(name="range")
@ymd_option("--start", "-s", help="YYYYMMDD start date; defaults to end date")
@ymd_option("--end", "-e", help="YYYYMMDD end date; defaults to today")
@tz_option
@click.pass_context
def date_range(ctx: click.Context, start: YMDFlag, end: YMDFlag, tz_name: str | None) -> None:
    """
    Show the UTC time span covering a start and end date.

    Examples:
      ymdflag range --start 20230701 --end 20230704
      ymdflag range -e 20230704
    """
    location = resolve_location(ctx, tz_name)
    bind_location(start, location)
    bind_location(end, location)

    # if start is not set, default to end
    if start.is_unset():
        start = YMDFlag(ymd=end.as_ymd(), location=end.location)

    start_date, end_date = start.as_date(), end.as_date()
    if end_date < start_date:
        raise click.ClickException("--start must be before --end")

    start_time = datetime(start_date.year, start_date.month, start_date.day, 0, 0, 0, tzinfo=timezone.utc)
    end_time = datetime(end_date.year, end_date.month, end_date.day, 23, 59, 59, tzinfo=timezone.utc)
    logger.info("Date range %s to %s", start, end)

    click.echo(f"startTime: {start_time.isoformat()}")
    click.echo(f"endTime: {end_time.isoformat()}")


@main.command()
@ymd_option("--date", "-d", help="YYYYMMDD date; required unless --today")
@click.option("--sep", help="Path separator (default: YMDFLAG_PATH_SEPARATOR or the OS separator)")
@click.option("--today", "use_today", is_flag=True, help="Use today when no date is given")
@tz_option
@click.pass_context
def path(
    ctx: click.Context, date: YMDFlag, sep: str | None, use_today: bool, tz_name: str | None
) -> None:
    """
    Show a date as a YYYY/MM/DD directory path.

    Examples:
      ymdflag path --date 20230704
      ymdflag path --today --sep -
    """
    config = ctx.obj["config"]
    separator = sep if sep is not None else config.path_separator
    if len(separator) != 1:
        raise click.BadParameter(f"must be a single character, got {separator!r}", param_hint="--sep")

    if date.is_unset():
        if not use_today:
            raise click.UsageError("No date given; pass --date or --today")
        date.resolve_or_today(resolve_location(ctx, tz_name))

    click.echo(date.as_dir_path(separator))


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from ymdflag import __author__, __version__

    click.echo(f"ymdflag v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Time Zone: {location_name(config_obj.location)}")
    click.echo(f"  Path Separator: {config_obj.path_separator}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


if __name__ == "__main__":
    main()
