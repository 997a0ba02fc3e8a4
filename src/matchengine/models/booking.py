"""Booking models."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from dateutil.parser import isoparse

from .base import ApiModel


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PAID = "paid"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"
    NO_SHOW = "no_show"


class Booking(ApiModel):
    """A booking record.

    ``status`` is kept as the raw string so statuses added by the backend
    do not break deserialization; compare against BookingStatus values.
    """
    id: int
    reference_code: str
    resource: Optional[int] = None
    resource_name: str = ""
    venue_name: str = ""
    venue_address: Optional[str] = None
    start_datetime: str
    end_datetime: str
    duration_minutes: int = 0
    participant_count: int = 1
    price_per_unit: Optional[Decimal] = None
    pricing_unit: Optional[str] = None
    total_price: Decimal = Decimal("0")
    currency: str = "EUR"
    status: str
    can_cancel: bool = False
    is_upcoming: bool = False
    notes: str = ""
    created_at: Optional[str] = None
    paid_at: Optional[str] = None
    cancelled_at: Optional[str] = None

    @property
    def is_paid(self) -> bool:
        return self.status == BookingStatus.PAID.value

    @property
    def is_pending(self) -> bool:
        """Whether the booking still awaits payment"""
        return self.status == BookingStatus.PENDING.value

    @property
    def is_cancelled(self) -> bool:
        """Cancelled or refunded bookings both count as cancelled"""
        return self.status in (BookingStatus.CANCELLED.value, BookingStatus.REFUNDED.value)

    @property
    def starts_at(self) -> datetime:
        return isoparse(self.start_datetime)

    @property
    def ends_at(self) -> datetime:
        return isoparse(self.end_datetime)
