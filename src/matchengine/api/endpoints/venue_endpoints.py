"""
Venue Endpoints for the MatchEngine API Client

Venue mapping registration and lookup plus the public venue catalogue.
"""

from typing import Any, Dict, Optional

from ...core.error_handler import ErrorKind, MatchEngineError
from ...models import Page, Venue, VenueDetail, VenueMapping, VenueWithResources
from .base_endpoint import BaseEndpoint


class VenueEndpoints(BaseEndpoint):
    """
    Venue API endpoints.

    Provides methods for:
    - Venue mapping registration and lookup
    - Venues with their resources by external ID
    - Public venue listing and details by ID or slug
    """

    MAPPING_PATH = '/client/venues'

    def _get_base_path(self) -> str:
        return '/venues'

    def register_venue(
        self,
        external_id: str,
        matchengine_venue_id: int,
        external_data: Optional[Dict[str, Any]] = None
    ) -> VenueMapping:
        """Register a venue mapping, or return the existing one"""
        data = self._request(
            'register_venue', 'POST', self._build_path(self.MAPPING_PATH, 'register'),
            data={
                'external_id': external_id,
                'venue_id': matchengine_venue_id,
                'external_data': external_data or {},
            }
        )
        return self._parse(VenueMapping, data, 'register_venue')

    def lookup_venue(self, external_id: str) -> Optional[VenueMapping]:
        """Look up a venue mapping; returns None if unknown"""
        return self._lookup(
            'lookup_venue', self._build_path(self.MAPPING_PATH, 'lookup'),
            external_id, VenueMapping
        )

    def get_venue_with_resources(self, venue_external_id: str) -> VenueWithResources:
        """Get a mapped venue with its resources"""
        data = self._request(
            'get_venue_with_resources', 'GET', self._build_endpoint('resources'),
            params=[('venue_external_id', venue_external_id)]
        )
        return self._parse(VenueWithResources, data, 'get_venue_with_resources')

    def list_venues(
        self,
        city: Optional[str] = None,
        venue_type: Optional[str] = None,
        search: Optional[str] = None,
        is_active: Optional[bool] = None,
        is_featured: Optional[bool] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None
    ) -> Page[Venue]:
        """
        List public venues

        Only the filters that are given are sent. ``page`` and
        ``page_size`` are omitted when zero or None.
        """
        params = self._handle_common_parameters(
            city=city or None,
            venue_type=venue_type or None,
            search=search or None,
            is_active=is_active,
            is_featured=is_featured,
            page=page or None,
            page_size=page_size or None,
        )
        data = self._request('list_venues', 'GET', self._build_endpoint(), params=params)
        return self._parse(Page[Venue], data, 'list_venues')

    def get_venue(self, venue_id: int) -> VenueDetail:
        """Get full venue details by MatchEngine venue ID"""
        data = self._request('get_venue', 'GET', self._build_endpoint(venue_id))
        return self._parse(VenueDetail, data, 'get_venue')

    def get_venue_by_slug(self, slug: str) -> VenueDetail:
        """
        Get full venue details by slug

        Searches the venue listing for the slug, keeps only an exact match
        and then fetches that venue's details.

        Raises:
            MatchEngineError: NOT_FOUND if no listed venue has this slug
        """
        page = self.list_venues(search=slug)
        venue = next((v for v in page.results if v.slug == slug), None)
        if venue is None:
            raise MatchEngineError(ErrorKind.NOT_FOUND, f"Venue with slug '{slug}' not found")

        return self.get_venue(venue.id)
