"""
Response models for the MatchEngine SDK

Immutable snapshots of API payloads. They carry derived predicates only and
no reference back to the client.
"""

from .availability import AvailabilityResponse, AvailabilityWindow, BookedSlot, UnavailablePeriod
from .base import ApiModel, Page
from .booking import Booking, BookingStatus
from .payment import PaymentIntent
from .resource import ResourceMapping, VenueResource
from .user import UserMapping
from .venue import (
    OpeningDay,
    OpeningRange,
    Venue,
    VenueAmenity,
    VenueDetail,
    VenueImage,
    VenueMapping,
    VenueWithResources,
)

__all__ = [
    'ApiModel',
    'Page',
    'AvailabilityResponse',
    'AvailabilityWindow',
    'BookedSlot',
    'UnavailablePeriod',
    'Booking',
    'BookingStatus',
    'PaymentIntent',
    'ResourceMapping',
    'VenueResource',
    'UserMapping',
    'OpeningDay',
    'OpeningRange',
    'Venue',
    'VenueAmenity',
    'VenueDetail',
    'VenueImage',
    'VenueMapping',
    'VenueWithResources',
]
