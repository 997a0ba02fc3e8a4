"""
API Endpoints Package for the MatchEngine Client

Contains endpoint classes for the different booking platform operations.
"""

from .base_endpoint import BaseEndpoint
from .user_endpoints import UserEndpoints
from .resource_endpoints import ResourceEndpoints
from .venue_endpoints import VenueEndpoints
from .availability_endpoints import AvailabilityEndpoints
from .booking_endpoints import BookingEndpoints

__all__ = [
    'BaseEndpoint',
    'UserEndpoints',
    'ResourceEndpoints',
    'VenueEndpoints',
    'AvailabilityEndpoints',
    'BookingEndpoints'
]
