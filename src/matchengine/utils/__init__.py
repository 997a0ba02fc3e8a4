"""Serialization helpers for the MatchEngine SDK."""

from .datetime_formatter import (
    DateTimeFormatter,
    DateutilFormatter,
    UnknownTimezoneError,
    ZoneInfoFormatter,
    format_date,
    format_datetime_with_timezone,
    get_default_formatter,
)

__all__ = [
    "DateTimeFormatter",
    "DateutilFormatter",
    "UnknownTimezoneError",
    "ZoneInfoFormatter",
    "format_date",
    "format_datetime_with_timezone",
    "get_default_formatter",
]
