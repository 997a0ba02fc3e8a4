"""
Unit tests for the MatchEngine endpoint groups.

The HTTP client is mocked so each test checks the call an operation makes
and how it treats the decoded response.
"""

from datetime import date, datetime
from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from matchengine.api.client import HTTPClient
from matchengine.api.endpoints import (
    AvailabilityEndpoints,
    BookingEndpoints,
    ResourceEndpoints,
    UserEndpoints,
    VenueEndpoints,
)
from matchengine.core.error_handler import ErrorKind, MatchEngineError
from matchengine.utils.datetime_formatter import DateutilFormatter
from tests.fixtures.sample_data import (
    SAMPLE_AVAILABILITY,
    SAMPLE_BOOKING,
    SAMPLE_PAYMENT_INTENT,
    SAMPLE_RESOURCE_MAPPING,
    SAMPLE_RESOURCES,
    SAMPLE_USER_MAPPING,
    SAMPLE_VENUE,
    SAMPLE_VENUE_DETAIL,
    SAMPLE_VENUE_MAPPING,
    SAMPLE_VENUE_WITH_RESOURCES,
)


@pytest.fixture
def mock_http_client():
    """Mock HTTP client for endpoint tests"""
    return Mock(spec=HTTPClient)


class TestUserEndpoints:
    """Test suite for UserEndpoints"""

    @pytest.fixture
    def users(self, mock_http_client):
        return UserEndpoints(mock_http_client)

    @pytest.mark.unit
    def test_register_user(self, users, mock_http_client):
        mock_http_client.request.return_value = SAMPLE_USER_MAPPING

        mapping = users.register_user("user-123", "player@example.com", first_name="Ana")

        mock_http_client.request.assert_called_once_with(
            'POST', '/client/users/register/',
            data={
                'external_id': 'user-123',
                'email': 'player@example.com',
                'first_name': 'Ana',
                'last_name': '',
            },
            params=None, headers=None
        )
        assert mapping.external_id == "user-123"
        assert mapping.created is True

    @pytest.mark.unit
    def test_lookup_user_found(self, users, mock_http_client):
        mock_http_client.get.return_value = SAMPLE_USER_MAPPING

        mapping = users.lookup_user("user-123")

        mock_http_client.get.assert_called_once_with(
            '/client/users/lookup/', params={'external_id': 'user-123'}
        )
        assert mapping.user_id == SAMPLE_USER_MAPPING["user_id"]

    @pytest.mark.unit
    def test_lookup_user_not_found_returns_none(self, users, mock_http_client):
        mock_http_client.get.side_effect = MatchEngineError(ErrorKind.NOT_FOUND, "Not found.")

        assert users.lookup_user("ghost") is None

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", [
        ErrorKind.AUTHENTICATION_FAILED,
        ErrorKind.REQUEST_TIMEOUT,
        ErrorKind.GENERIC,
    ])
    def test_lookup_user_other_errors_propagate(self, users, mock_http_client, kind):
        mock_http_client.get.side_effect = MatchEngineError(kind)

        with pytest.raises(MatchEngineError) as exc_info:
            users.lookup_user("user-123")

        assert exc_info.value.kind is kind


class TestResourceEndpoints:
    """Test suite for ResourceEndpoints"""

    @pytest.fixture
    def resources(self, mock_http_client):
        return ResourceEndpoints(mock_http_client)

    @pytest.mark.unit
    def test_register_resource_defaults_external_data(self, resources, mock_http_client):
        mock_http_client.request.return_value = SAMPLE_RESOURCE_MAPPING

        mapping = resources.register_resource("court-1", 42)

        args, kwargs = mock_http_client.request.call_args
        assert args == ('POST', '/client/resources/register/')
        assert kwargs['data'] == {'external_id': 'court-1', 'resource_id': 42, 'external_data': {}}
        assert mapping.resource_id == 42

    @pytest.mark.unit
    def test_lookup_resource_not_found(self, resources, mock_http_client):
        mock_http_client.get.side_effect = MatchEngineError(ErrorKind.NOT_FOUND)

        assert resources.lookup_resource("court-9") is None
        mock_http_client.get.assert_called_once_with(
            '/client/resources/lookup/', params={'external_id': 'court-9'}
        )

    @pytest.mark.unit
    def test_list_resources_formats_booleans(self, resources, mock_http_client):
        mock_http_client.request.return_value = {"results": SAMPLE_RESOURCES, "count": 3}

        page = resources.list_resources(venue_id=7, is_active=True, is_bookable=False)

        args, kwargs = mock_http_client.request.call_args
        assert args == ('GET', '/resources/')
        assert kwargs['params'] == [('venue', '7'), ('is_active', 'true'), ('is_bookable', 'false')]
        assert page.count == 3
        assert page.results[0].name == "Court 1"

    @pytest.mark.unit
    def test_list_resources_without_filters(self, resources, mock_http_client):
        mock_http_client.request.return_value = {"results": []}

        resources.list_resources()

        assert mock_http_client.request.call_args.kwargs['params'] == []


class TestVenueEndpoints:
    """Test suite for VenueEndpoints"""

    @pytest.fixture
    def venues(self, mock_http_client):
        return VenueEndpoints(mock_http_client)

    @pytest.mark.unit
    def test_register_venue(self, venues, mock_http_client):
        mock_http_client.request.return_value = SAMPLE_VENUE_MAPPING

        mapping = venues.register_venue("venue-123", 7, {"source": "crm"})

        args, kwargs = mock_http_client.request.call_args
        assert args == ('POST', '/client/venues/register/')
        assert kwargs['data']['external_data'] == {"source": "crm"}
        assert mapping.venue_id == 7

    @pytest.mark.unit
    def test_lookup_venue_not_found(self, venues, mock_http_client):
        mock_http_client.get.side_effect = MatchEngineError(ErrorKind.NOT_FOUND)

        assert venues.lookup_venue("venue-x") is None

    @pytest.mark.unit
    def test_get_venue_with_resources(self, venues, mock_http_client):
        mock_http_client.request.return_value = SAMPLE_VENUE_WITH_RESOURCES

        venue = venues.get_venue_with_resources("venue-123")

        args, kwargs = mock_http_client.request.call_args
        assert args == ('GET', '/venues/resources/')
        assert kwargs['params'] == [('venue_external_id', 'venue-123')]
        assert [r.id for r in venue.bookable_resources] == [42]

    @pytest.mark.unit
    def test_list_venues_sends_only_given_filters(self, venues, mock_http_client):
        mock_http_client.request.return_value = {"results": [SAMPLE_VENUE], "count": 1}

        page = venues.list_venues(city="Berlin", is_featured=False, page=0, page_size=20)

        assert mock_http_client.request.call_args.kwargs['params'] == [
            ('city', 'Berlin'), ('is_featured', 'false'), ('page_size', '20'),
        ]
        assert page.results[0].slug == "padel-arena-berlin"

    @pytest.mark.unit
    def test_get_venue(self, venues, mock_http_client):
        mock_http_client.request.return_value = SAMPLE_VENUE_DETAIL

        venue = venues.get_venue(7)

        assert mock_http_client.request.call_args.args == ('GET', '/venues/7/')
        assert venue.opening_hours["sunday"].closed is True
        assert venue.amenities[0].name == "Showers"

    @pytest.mark.unit
    def test_get_venue_by_slug_requires_exact_match(self, venues, mock_http_client):
        near_miss = {**SAMPLE_VENUE, "id": 8, "slug": "padel-arena-berlin-mitte"}
        mock_http_client.request.side_effect = [
            {"results": [near_miss, SAMPLE_VENUE], "count": 2},
            SAMPLE_VENUE_DETAIL,
        ]

        venue = venues.get_venue_by_slug("padel-arena-berlin")

        first, second = mock_http_client.request.call_args_list
        assert first.kwargs['params'] == [('search', 'padel-arena-berlin')]
        assert second.args == ('GET', '/venues/7/')
        assert venue.id == 7

    @pytest.mark.unit
    def test_get_venue_by_slug_not_found(self, venues, mock_http_client):
        near_miss = {**SAMPLE_VENUE, "slug": "padel-arena-berlin-mitte"}
        mock_http_client.request.return_value = {"results": [near_miss], "count": 1}

        with pytest.raises(MatchEngineError) as exc_info:
            venues.get_venue_by_slug("padel-arena-berlin")

        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        assert exc_info.value.message == "Venue with slug 'padel-arena-berlin' not found"
        assert mock_http_client.request.call_count == 1


class TestAvailabilityEndpoints:
    """Test suite for AvailabilityEndpoints"""

    @pytest.fixture
    def availability(self, mock_http_client):
        return AvailabilityEndpoints(mock_http_client)

    @pytest.mark.unit
    def test_get_availability_by_id(self, availability, mock_http_client):
        mock_http_client.request.return_value = SAMPLE_AVAILABILITY

        result = availability.get_availability_by_id(42, date(2025, 1, 15), date(2025, 1, 16))

        args, kwargs = mock_http_client.request.call_args
        assert args == ('GET', '/resources/42/availability/')
        assert kwargs['params'] == [('start_date', '2025-01-15'), ('end_date', '2025-01-16')]
        assert result.timezone == "Europe/Berlin"
        assert result.windows[0].label == "Morning"
        assert result.booked_slots[0].booking_id == "991"

    @pytest.mark.unit
    def test_get_availability_by_external_id(self, availability, mock_http_client):
        mock_http_client.request.return_value = SAMPLE_AVAILABILITY

        availability.get_availability("court-1", "2025-01-15", datetime(2025, 1, 16, 23, 30))

        args, kwargs = mock_http_client.request.call_args
        assert args == ('GET', '/resources/availability/')
        assert kwargs['params'] == [
            ('resource_external_id', 'court-1'),
            ('start_date', '2025-01-15'),
            ('end_date', '2025-01-16'),
        ]


class TestBookingEndpoints:
    """Test suite for BookingEndpoints"""

    @pytest.fixture
    def bookings(self, mock_http_client):
        return BookingEndpoints(mock_http_client, datetime_formatter=DateutilFormatter())

    @pytest.mark.unit
    def test_create_booking_formats_with_zone_offset(self, bookings, mock_http_client):
        mock_http_client.request.return_value = SAMPLE_BOOKING

        booking = bookings.create_booking(
            resource_external_id="court-1",
            user_external_id="user-123",
            start_datetime=datetime(2025, 1, 15, 10, 0),
            end_datetime=datetime(2025, 1, 15, 11, 30),
            timezone="Europe/Berlin",
            participant_count=4,
        )

        args, kwargs = mock_http_client.request.call_args
        assert args == ('POST', '/bookings/')
        assert kwargs['data'] == {
            'resource_external_id': 'court-1',
            'start_datetime': '2025-01-15T10:00:00+01:00',
            'end_datetime': '2025-01-15T11:30:00+01:00',
            'participant_count': 4,
            'notes': '',
        }
        assert kwargs['headers'] == {'X-User-External-ID': 'user-123'}
        assert booking.is_pending

    @pytest.mark.unit
    def test_create_booking_unknown_zone_sends_nothing(self, bookings, mock_http_client):
        with pytest.raises(MatchEngineError) as exc_info:
            bookings.create_booking(
                "court-1", "user-123",
                datetime(2025, 1, 15, 10, 0), datetime(2025, 1, 15, 11, 0),
                timezone="Invalid/Zone",
            )

        assert exc_info.value.kind is ErrorKind.VALIDATION
        assert "timezone" in exc_info.value.field_errors
        mock_http_client.request.assert_not_called()

    @pytest.mark.unit
    def test_create_booking_slot_taken_propagates(self, bookings, mock_http_client):
        mock_http_client.request.side_effect = MatchEngineError(
            ErrorKind.SLOT_NOT_AVAILABLE, "Time slot is not available"
        )

        with pytest.raises(MatchEngineError) as exc_info:
            bookings.create_booking(
                "court-1", "user-123",
                datetime(2025, 7, 1, 18, 0), datetime(2025, 7, 1, 19, 0),
                timezone="Europe/Berlin",
            )

        assert exc_info.value.kind is ErrorKind.SLOT_NOT_AVAILABLE

    @pytest.mark.unit
    def test_get_booking_without_user(self, bookings, mock_http_client):
        mock_http_client.request.return_value = SAMPLE_BOOKING

        booking = bookings.get_booking(1001)

        args, kwargs = mock_http_client.request.call_args
        assert args == ('GET', '/bookings/1001/')
        assert kwargs['headers'] is None
        assert booking.reference_code == "ME-7K2Q9"

    @pytest.mark.unit
    def test_list_bookings_accepts_bare_list(self, bookings, mock_http_client):
        mock_http_client.request.return_value = [SAMPLE_BOOKING]

        result = bookings.list_bookings()

        assert [b.id for b in result] == [1001]
        assert mock_http_client.request.call_args.kwargs['params'] == []

    @pytest.mark.unit
    def test_list_bookings_accepts_envelope(self, bookings, mock_http_client):
        mock_http_client.request.return_value = {"results": [SAMPLE_BOOKING], "count": 1}

        result = bookings.list_bookings(status="pending", upcoming_only=True)

        assert len(result) == 1
        assert mock_http_client.request.call_args.kwargs['params'] == [
            ('status', 'pending'), ('upcoming', 'true'),
        ]

    @pytest.mark.unit
    @pytest.mark.parametrize("payload", [{"count": 0}, {"results": None}, None, "unexpected"])
    def test_list_bookings_odd_payloads_are_empty(self, bookings, mock_http_client, payload):
        mock_http_client.request.return_value = payload

        assert bookings.list_bookings() == []

    @pytest.mark.unit
    def test_create_payment_intent_has_no_body(self, bookings, mock_http_client):
        mock_http_client.request.return_value = SAMPLE_PAYMENT_INTENT

        intent = bookings.create_payment_intent(1001, "user-123")

        args, kwargs = mock_http_client.request.call_args
        assert args == ('POST', '/bookings/1001/create-payment-intent/')
        assert kwargs['data'] is None
        assert kwargs['headers'] == {'X-User-External-ID': 'user-123'}
        assert intent.amount == 4800

    @pytest.mark.unit
    def test_cancel_booking(self, bookings, mock_http_client):
        mock_http_client.request.return_value = {**SAMPLE_BOOKING, "status": "cancelled"}

        booking = bookings.cancel_booking(1001, "user-123", notes="Rain")

        args, kwargs = mock_http_client.request.call_args
        assert args == ('POST', '/bookings/1001/cancel/')
        assert kwargs['data'] == {'reason': 'user_request', 'notes': 'Rain'}
        assert booking.is_cancelled


class TestUnexpectedResponseBodies:
    """A 2xx body that does not fit the response model fails as a MatchEngineError"""

    @pytest.mark.unit
    def test_payment_intent_missing_field(self, mock_http_client):
        body = {key: value for key, value in SAMPLE_PAYMENT_INTENT.items() if key != "currency"}
        mock_http_client.request.return_value = body

        with pytest.raises(MatchEngineError) as exc_info:
            BookingEndpoints(mock_http_client).create_payment_intent(1001, "user-123")

        assert exc_info.value.kind is ErrorKind.GENERIC
        assert "currency" in exc_info.value.message
        assert exc_info.value.response_data == body
        assert isinstance(exc_info.value.__cause__, ValidationError)

    @pytest.mark.unit
    def test_lookup_with_malformed_body(self, mock_http_client):
        mock_http_client.get.return_value = {"external_id": "user-123"}

        with pytest.raises(MatchEngineError) as exc_info:
            UserEndpoints(mock_http_client).lookup_user("user-123")

        assert exc_info.value.kind is ErrorKind.GENERIC

    @pytest.mark.unit
    def test_list_bookings_with_malformed_item(self, mock_http_client):
        mock_http_client.request.return_value = [SAMPLE_BOOKING, {"id": "not-a-number"}]

        with pytest.raises(MatchEngineError) as exc_info:
            BookingEndpoints(mock_http_client).list_bookings()

        assert exc_info.value.kind is ErrorKind.GENERIC
        assert exc_info.value.response_data == {"id": "not-a-number"}

    @pytest.mark.unit
    def test_page_with_wrong_shape(self, mock_http_client):
        mock_http_client.request.return_value = {"results": "nope"}

        with pytest.raises(MatchEngineError) as exc_info:
            VenueEndpoints(mock_http_client).list_venues()

        assert exc_info.value.kind is ErrorKind.GENERIC
        assert exc_info.value.message.startswith("Unexpected Page[Venue] response")
