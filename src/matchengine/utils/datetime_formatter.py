"""Date and time serialization for the booking API.

Bookings are sent as local wall-clock times carrying the UTC offset that
applies in the venue's IANA time zone on that date, e.g.
``2025-01-15T10:00:00+01:00`` for Europe/Berlin in winter.

Two interchangeable formatters produce that string. ``ZoneInfoFormatter``
relies on the system time zone database through :mod:`zoneinfo`;
``DateutilFormatter`` uses :mod:`dateutil.tz`. :func:`get_default_formatter`
picks one per process. Both render the same string for the same input:

- a wall-clock time inside a DST gap keeps its wall clock and carries the
  offset in force before the transition (``fold=0``);
- a wall-clock time inside a DST overlap takes the first occurrence;
- historical offsets with seconds (local mean time) are rounded to the
  nearest minute.
"""

import functools
import logging
from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, tzinfo
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.tz import datetime_exists, gettz

logger = logging.getLogger(__name__)


class UnknownTimezoneError(ValueError):
    """Raised when a time zone name cannot be resolved"""

    def __init__(self, timezone: str):
        self.timezone = timezone
        super().__init__(f"Unknown time zone: '{timezone}'")


class DateTimeFormatter(ABC):
    """Formats a datetime as ISO 8601 with the offset of a named zone"""

    name = "base"

    @abstractmethod
    def format(self, value: datetime, timezone: str) -> str:
        """Render ``value`` as ``YYYY-MM-DDTHH:MM:SS+HH:MM`` in ``timezone``.

        Naive values are read as wall-clock time in ``timezone``; aware
        values are converted to it first.
        """
        pass

    @staticmethod
    def _localize(value: datetime, zone: tzinfo) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=zone, fold=0)
        return value.astimezone(zone)

    @staticmethod
    def _render(localized: datetime, offset: timedelta) -> str:
        wall_clock = (
            f"{localized.year:04d}-{localized.month:02d}-{localized.day:02d}"
            f"T{localized.hour:02d}:{localized.minute:02d}:{localized.second:02d}"
        )
        return wall_clock + format_utc_offset(offset)


class ZoneInfoFormatter(DateTimeFormatter):
    """Primary formatter backed by the standard library zoneinfo database"""

    name = "zoneinfo"

    def format(self, value: datetime, timezone: str) -> str:
        localized = self._localize(value, self._get_zone(timezone))
        return self._render(localized, localized.utcoffset())

    @staticmethod
    def _get_zone(timezone: str) -> ZoneInfo:
        try:
            return ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise UnknownTimezoneError(timezone) from e

    @staticmethod
    def is_available() -> bool:
        """Whether a time zone database is installed on this system"""
        try:
            ZoneInfo("Europe/Berlin")
        except ZoneInfoNotFoundError:
            return False
        return True


class DateutilFormatter(DateTimeFormatter):
    """Fallback formatter backed by dateutil's zone data"""

    name = "dateutil"

    def format(self, value: datetime, timezone: str) -> str:
        zone = gettz(timezone) if timezone else None
        if zone is None:
            raise UnknownTimezoneError(timezone)

        localized = self._localize(value, zone)
        return self._render(localized, self._offset(localized))

    @staticmethod
    def _offset(localized: datetime) -> timedelta:
        if datetime_exists(localized):
            return localized.utcoffset()
        # Inside a gap: the offset a day earlier is the one before the transition
        return (localized - timedelta(days=1)).utcoffset()


def format_utc_offset(offset: timedelta) -> str:
    """Render an offset as ``+HH:MM``, rounded to the minute; zero is ``+00:00``"""
    total_seconds = int(offset.total_seconds())
    sign = "-" if total_seconds < 0 else "+"
    hours, minutes = divmod((abs(total_seconds) + 30) // 60, 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


@functools.lru_cache(maxsize=None)
def get_default_formatter() -> DateTimeFormatter:
    """Select the formatter for this process, once"""
    if ZoneInfoFormatter.is_available():
        formatter: DateTimeFormatter = ZoneInfoFormatter()
    else:
        formatter = DateutilFormatter()
    logger.debug(f"Using {formatter.name} datetime formatter")
    return formatter


def format_datetime_with_timezone(value: datetime, timezone: str) -> str:
    return get_default_formatter().format(value, timezone)


def format_date(value: Union[date, datetime]) -> str:
    """Format a calendar date as ``YYYY-MM-DD``.

    Aware datetimes are read in the caller's local time zone; naive
    datetimes and dates are used as given.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        value = value.date()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
