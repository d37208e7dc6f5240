#!/usr/bin/env python3
"""
Location Lookup

Resolves timezone names into tzinfo objects for YMD values. A location of
None always means the process-local timezone.
"""

import logging
from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import YMDTimezoneError

logger = logging.getLogger(__name__)

LOCAL_NAME = "Local"


def load_location(name: str | None) -> tzinfo | None:
    """
    Resolve a timezone name to a tzinfo.

    Args:
        name: IANA zone name such as "Antarctica/Syowa", "UTC", or
            ""/"Local"/None for the process-local timezone

    Returns:
        tzinfo for the zone, or None for local time

    Raises:
        YMDTimezoneError: If the name is not a known zone
    """
    if not name or name == LOCAL_NAME:
        return None
    if name == "UTC":
        return timezone.utc
    try:
        location = ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise YMDTimezoneError(f"unknown time zone {name!r}") from e
    logger.debug("Loaded location %s", name)
    return location


def local_timezone() -> tzinfo:
    """Get the process-local timezone as an aware tzinfo."""
    local = datetime.now().astimezone().tzinfo
    if local is None:
        raise YMDTimezoneError("cannot determine the local time zone")
    return local


def location_name(location: tzinfo | None) -> str:
    """Display name for a location."""
    if location is None:
        return LOCAL_NAME
    if isinstance(location, ZoneInfo):
        return location.key
    return str(location)
