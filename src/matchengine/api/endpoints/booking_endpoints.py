"""
Booking Endpoints for the MatchEngine API Client

Handles booking creation, retrieval, listing, cancellation and payment
intent issuance.
"""

from datetime import datetime
from typing import Any, List, Optional, Union

from ...core.error_handler import MatchEngineError
from ...models import Booking, PaymentIntent
from ...utils.datetime_formatter import (
    DateTimeFormatter,
    UnknownTimezoneError,
    get_default_formatter,
)
from ..client import HTTPClient
from .base_endpoint import BaseEndpoint


class BookingEndpoints(BaseEndpoint):
    """
    Booking API endpoints.

    Operations acting for a specific user send the integrator's user ID in
    the ``X-User-External-ID`` header.
    """

    def __init__(self, client: HTTPClient, datetime_formatter: Optional[DateTimeFormatter] = None):
        super().__init__(client)
        self.datetime_formatter = datetime_formatter or get_default_formatter()

    def _get_base_path(self) -> str:
        return '/bookings'

    def create_booking(
        self,
        resource_external_id: str,
        user_external_id: str,
        start_datetime: datetime,
        end_datetime: datetime,
        timezone: str,
        participant_count: int = 1,
        notes: str = ''
    ) -> Booking:
        """
        Create a new booking in pending status

        ``start_datetime`` and ``end_datetime`` are wall-clock times in
        ``timezone`` (the IANA zone from the AvailabilityResponse) and are
        sent with that zone's UTC offset on the booking date.

        Args:
            resource_external_id: The integrator's resource ID
            user_external_id: The integrator's user ID
            start_datetime: Booking start
            end_datetime: Booking end
            timezone: IANA time zone of the venue, e.g. "Europe/Berlin"
            participant_count: Number of participants
            notes: Free-text notes

        Raises:
            MatchEngineError: VALIDATION with ``field_errors['timezone']``
                if the zone is unknown; no request is sent in that case
        """
        try:
            start = self.datetime_formatter.format(start_datetime, timezone)
            end = self.datetime_formatter.format(end_datetime, timezone)
        except UnknownTimezoneError as e:
            raise MatchEngineError.validation(
                str(e), field_errors={'timezone': [str(e)]}
            ) from e

        data = self._request(
            'create_booking', 'POST', self._build_endpoint(),
            data={
                'resource_external_id': resource_external_id,
                'start_datetime': start,
                'end_datetime': end,
                'participant_count': participant_count,
                'notes': notes,
            },
            headers=self._user_headers(user_external_id)
        )
        return self._parse(Booking, data, 'create_booking')

    def get_booking(self, booking_id: Union[int, str], user_external_id: Optional[str] = None) -> Booking:
        """Get booking details, optionally on behalf of a user"""
        data = self._request(
            'get_booking', 'GET', self._build_endpoint(booking_id),
            headers=self._user_headers(user_external_id)
        )
        return self._parse(Booking, data, 'get_booking')

    def list_bookings(self, status: Optional[str] = None, upcoming_only: bool = False) -> List[Booking]:
        """
        List bookings

        Args:
            status: Only bookings in this status
            upcoming_only: Only bookings that have not started yet

        Returns:
            Flat list of bookings, whether or not the server paginates
        """
        params = self._handle_common_parameters(
            status=status or None,
            upcoming='true' if upcoming_only else None,
        )
        data = self._request('list_bookings', 'GET', self._build_endpoint(), params=params)
        return [self._parse(Booking, item, 'list_bookings') for item in self.unwrap_results(data)]

    @staticmethod
    def unwrap_results(data: Any) -> List[Any]:
        """Return a bare list unchanged, or the ``results`` of an envelope"""
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            return data.get('results') or []
        return []

    def create_payment_intent(self, booking_id: int, user_external_id: str) -> PaymentIntent:
        """Create the Stripe PaymentIntent for a pending booking"""
        data = self._request(
            'create_payment_intent', 'POST', self._build_endpoint(booking_id, 'create-payment-intent'),
            headers=self._user_headers(user_external_id)
        )
        return self._parse(PaymentIntent, data, 'create_payment_intent')

    def cancel_booking(
        self,
        booking_id: int,
        user_external_id: str,
        reason: str = 'user_request',
        notes: str = ''
    ) -> Booking:
        """Cancel a booking on behalf of a user"""
        data = self._request(
            'cancel_booking', 'POST', self._build_endpoint(booking_id, 'cancel'),
            data={'reason': reason, 'notes': notes},
            headers=self._user_headers(user_external_id)
        )
        return self._parse(Booking, data, 'cancel_booking')
