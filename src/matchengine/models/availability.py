"""Availability models."""

from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from .base import ApiModel


class AvailabilityWindow(ApiModel):
    """A priced, bookable interval on a given date"""
    date: str
    start_time: str
    end_time: str
    price_per_hour: Decimal
    currency: str = "EUR"
    label: str = ""


class BookedSlot(ApiModel):
    start_datetime: str
    end_datetime: str
    booking_id: str


class UnavailablePeriod(ApiModel):
    start_datetime: str
    end_datetime: str
    reason: str = ""


class AvailabilityResponse(ApiModel):
    """Availability of one resource over a date range.

    ``timezone`` is the venue's IANA zone; pass it on to booking creation.
    """
    resource_id: int
    resource_name: str = ""
    start_date: str
    end_date: str
    timezone: str
    booking_interval_minutes: int = 30
    min_duration_minutes: int = 60
    max_duration_minutes: Optional[int] = None
    prevent_unbookable_gaps: bool = False
    min_advance_booking_minutes: int = 0
    max_advance_booking_days: int = 0
    windows: List[AvailabilityWindow] = Field(default_factory=list)
    booked_slots: List[BookedSlot] = Field(default_factory=list)
    unavailable_periods: List[UnavailablePeriod] = Field(default_factory=list)
