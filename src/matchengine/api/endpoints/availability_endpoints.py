"""
Availability Endpoints for the MatchEngine API Client

Availability windows of a resource over a date range. Dates are sent as
``YYYY-MM-DD`` in the caller's local calendar.
"""

from datetime import date
from typing import Union

from ...models import AvailabilityResponse
from ...utils.datetime_formatter import format_date
from .base_endpoint import BaseEndpoint


class AvailabilityEndpoints(BaseEndpoint):
    """Availability API endpoints"""

    def _get_base_path(self) -> str:
        return '/resources'

    def get_availability_by_id(
        self,
        resource_id: int,
        start_date: Union[date, str],
        end_date: Union[date, str]
    ) -> AvailabilityResponse:
        """
        Get availability by MatchEngine resource ID

        Use this with resource IDs taken from get_venue_with_resources.

        Args:
            resource_id: MatchEngine resource ID
            start_date: First day of the range (date, datetime or 'YYYY-MM-DD')
            end_date: Last day of the range
        """
        data = self._request(
            'get_availability_by_id', 'GET', self._build_endpoint(resource_id, 'availability'),
            params=[
                ('start_date', self._format_day(start_date)),
                ('end_date', self._format_day(end_date)),
            ]
        )
        return self._parse(AvailabilityResponse, data, 'get_availability_by_id')

    def get_availability(
        self,
        resource_external_id: str,
        start_date: Union[date, str],
        end_date: Union[date, str]
    ) -> AvailabilityResponse:
        """Get availability by the integrator's resource ID"""
        data = self._request(
            'get_availability', 'GET', self._build_endpoint('availability'),
            params=[
                ('resource_external_id', resource_external_id),
                ('start_date', self._format_day(start_date)),
                ('end_date', self._format_day(end_date)),
            ]
        )
        return self._parse(AvailabilityResponse, data, 'get_availability')

    @staticmethod
    def _format_day(value: Union[date, str]) -> str:
        if isinstance(value, str):
            return value
        return format_date(value)
