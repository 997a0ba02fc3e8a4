"""Resource models."""

from decimal import Decimal
from typing import Optional

from .base import ApiModel


class ResourceMapping(ApiModel):
    """Link between the integrator's resource ID and a MatchEngine resource"""
    external_id: str
    resource_id: int
    resource_name: str = ""
    venue_name: str = ""
    created: bool = False


class VenueResource(ApiModel):
    """A bookable resource (court, pitch, room) within a venue"""
    id: int
    name: str
    external_id: Optional[str] = None
    capacity: int = 1
    is_active: bool = True
    is_bookable: bool = True
    base_price: Optional[Decimal] = None
    currency: str = "EUR"
    booking_interval_minutes: int = 30
    min_booking_duration_minutes: int = 60
    max_booking_duration_minutes: Optional[int] = None
    description: Optional[str] = None
