"""
MatchEngine API Client Package

HTTP transport with uniform error normalization, and the endpoint groups
built on top of it.
"""

from .client import HTTPClient
from .authentication import TokenAuth
from .request_builder import RequestBuilder, RequestDescriptor
from .response_handler import ResponseHandler, StatusCodeHandler
from .endpoints.base_endpoint import BaseEndpoint
from .endpoints.user_endpoints import UserEndpoints
from .endpoints.resource_endpoints import ResourceEndpoints
from .endpoints.venue_endpoints import VenueEndpoints
from .endpoints.availability_endpoints import AvailabilityEndpoints
from .endpoints.booking_endpoints import BookingEndpoints

__all__ = [
    'HTTPClient',
    'TokenAuth',
    'RequestBuilder',
    'RequestDescriptor',
    'ResponseHandler',
    'StatusCodeHandler',
    'BaseEndpoint',
    'UserEndpoints',
    'ResourceEndpoints',
    'VenueEndpoints',
    'AvailabilityEndpoints',
    'BookingEndpoints'
]
