"""MatchEngine client facade.

Single entry point combining the endpoint groups behind one object.

Example::

    client = MatchEngineClient(
        base_url="https://api.matchengine.de",
        api_token="your-api-token",
        stripe_publishable_key="pk_test_xxx",
    )

    venue = client.get_venue_with_resources("venue-123")
    availability = client.get_availability_by_id(
        resource_id=venue.resources[0].id,
        start_date=date.today(),
        end_date=date.today() + timedelta(days=7),
    )
    booking = client.create_booking(
        resource_external_id="resource-123",
        user_external_id="user-123",
        start_datetime=datetime(2025, 1, 15, 10, 0),
        end_datetime=datetime(2025, 1, 15, 11, 30),
        timezone=availability.timezone,
    )
"""

from datetime import date, datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import requests
from pydantic import ValidationError

from .api.client import HTTPClient
from .api.endpoints import (
    AvailabilityEndpoints,
    BookingEndpoints,
    ResourceEndpoints,
    UserEndpoints,
    VenueEndpoints,
)
from .core.config_manager import ClientConfig, ConfigManager, ConfigurationError
from .models import (
    AvailabilityResponse,
    Booking,
    Page,
    PaymentIntent,
    ResourceMapping,
    UserMapping,
    Venue,
    VenueDetail,
    VenueMapping,
    VenueResource,
    VenueWithResources,
)
from .utils.datetime_formatter import DateTimeFormatter


class MatchEngineClient:
    """Client for the MatchEngine booking platform.

    The client keeps only its read-only configuration between calls, so it
    can be shared between threads.
    """

    def __init__(
        self,
        base_url: str,
        api_token: str,
        stripe_publishable_key: str,
        timeout_ms: Optional[int] = None,
        *,
        datetime_formatter: Optional[DateTimeFormatter] = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ):
        try:
            config = ClientConfig(
                base_url=base_url,
                api_token=api_token,
                stripe_publishable_key=stripe_publishable_key,
                timeout_ms=timeout_ms,
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
        self._setup(config, datetime_formatter, session_factory)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        *,
        datetime_formatter: Optional[DateTimeFormatter] = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> 'MatchEngineClient':
        client = cls.__new__(cls)
        client._setup(config, datetime_formatter, session_factory)
        return client

    @classmethod
    def from_environment(
        cls,
        config_path: Optional[Union[str, Path]] = None,
        environment: Optional[str] = None,
        **overrides: Any
    ) -> 'MatchEngineClient':
        """Build a client from YAML config files and MATCHENGINE_* variables"""
        manager = ConfigManager(Path(config_path) if config_path else None, environment)
        return cls.from_config(manager.load_config(**overrides))

    def _setup(self, config, datetime_formatter, session_factory):
        self.config = config
        self.http = HTTPClient(config, session_factory=session_factory)
        self.users = UserEndpoints(self.http)
        self.resources = ResourceEndpoints(self.http)
        self.venues = VenueEndpoints(self.http)
        self.availability = AvailabilityEndpoints(self.http)
        self.bookings = BookingEndpoints(self.http, datetime_formatter=datetime_formatter)

    @property
    def stripe_publishable_key(self) -> str:
        return self.config.stripe_publishable_key

    def __repr__(self) -> str:
        return f"MatchEngineClient(base_url={self.config.base_url!r})"

    # User API

    def register_user(self, external_id: str, email: str, first_name: str = '',
                      last_name: str = '') -> UserMapping:
        return self.users.register_user(external_id, email, first_name, last_name)

    def lookup_user(self, external_id: str) -> Optional[UserMapping]:
        return self.users.lookup_user(external_id)

    # Resource API

    def register_resource(self, external_id: str, matchengine_resource_id: int,
                          external_data: Optional[Dict[str, Any]] = None) -> ResourceMapping:
        return self.resources.register_resource(external_id, matchengine_resource_id, external_data)

    def lookup_resource(self, external_id: str) -> Optional[ResourceMapping]:
        return self.resources.lookup_resource(external_id)

    def list_resources(self, venue_id: Optional[int] = None, venue_slug: Optional[str] = None,
                       is_active: Optional[bool] = None,
                       is_bookable: Optional[bool] = None) -> Page[VenueResource]:
        return self.resources.list_resources(venue_id, venue_slug, is_active, is_bookable)

    # Venue API

    def register_venue(self, external_id: str, matchengine_venue_id: int,
                       external_data: Optional[Dict[str, Any]] = None) -> VenueMapping:
        return self.venues.register_venue(external_id, matchengine_venue_id, external_data)

    def lookup_venue(self, external_id: str) -> Optional[VenueMapping]:
        return self.venues.lookup_venue(external_id)

    def get_venue_with_resources(self, venue_external_id: str) -> VenueWithResources:
        return self.venues.get_venue_with_resources(venue_external_id)

    def list_venues(self, city: Optional[str] = None, venue_type: Optional[str] = None,
                    search: Optional[str] = None, is_active: Optional[bool] = None,
                    is_featured: Optional[bool] = None, page: Optional[int] = None,
                    page_size: Optional[int] = None) -> Page[Venue]:
        return self.venues.list_venues(city, venue_type, search, is_active, is_featured,
                                       page, page_size)

    def get_venue(self, venue_id: int) -> VenueDetail:
        return self.venues.get_venue(venue_id)

    def get_venue_by_slug(self, slug: str) -> VenueDetail:
        return self.venues.get_venue_by_slug(slug)

    # Availability API

    def get_availability_by_id(self, resource_id: int, start_date: Union[date, str],
                               end_date: Union[date, str]) -> AvailabilityResponse:
        return self.availability.get_availability_by_id(resource_id, start_date, end_date)

    def get_availability(self, resource_external_id: str, start_date: Union[date, str],
                         end_date: Union[date, str]) -> AvailabilityResponse:
        return self.availability.get_availability(resource_external_id, start_date, end_date)

    # Booking API

    def create_booking(self, resource_external_id: str, user_external_id: str,
                       start_datetime: datetime, end_datetime: datetime, timezone: str,
                       participant_count: int = 1, notes: str = '') -> Booking:
        return self.bookings.create_booking(
            resource_external_id, user_external_id, start_datetime, end_datetime,
            timezone, participant_count, notes
        )

    def get_booking(self, booking_id: Union[int, str],
                    user_external_id: Optional[str] = None) -> Booking:
        return self.bookings.get_booking(booking_id, user_external_id)

    def list_bookings(self, status: Optional[str] = None,
                      upcoming_only: bool = False) -> List[Booking]:
        return self.bookings.list_bookings(status, upcoming_only)

    def create_payment_intent(self, booking_id: int, user_external_id: str) -> PaymentIntent:
        return self.bookings.create_payment_intent(booking_id, user_external_id)

    def cancel_booking(self, booking_id: int, user_external_id: str,
                       reason: str = 'user_request', notes: str = '') -> Booking:
        return self.bookings.cancel_booking(booking_id, user_external_id, reason, notes)
