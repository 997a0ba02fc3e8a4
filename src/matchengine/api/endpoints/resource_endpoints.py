"""
Resource Endpoints for the MatchEngine API Client

Resource mapping registration and lookup, and the public resource listing.
"""

from typing import Any, Dict, Optional

from ...models import Page, ResourceMapping, VenueResource
from .base_endpoint import BaseEndpoint


class ResourceEndpoints(BaseEndpoint):
    """Resource API endpoints"""

    MAPPING_PATH = '/client/resources'

    def _get_base_path(self) -> str:
        return '/resources'

    def register_resource(
        self,
        external_id: str,
        matchengine_resource_id: int,
        external_data: Optional[Dict[str, Any]] = None
    ) -> ResourceMapping:
        """
        Register a resource mapping, or return the existing one

        Args:
            external_id: The integrator's resource ID
            matchengine_resource_id: MatchEngine resource ID to link to
            external_data: Free-form data stored with the mapping
        """
        data = self._request(
            'register_resource', 'POST', self._build_path(self.MAPPING_PATH, 'register'),
            data={
                'external_id': external_id,
                'resource_id': matchengine_resource_id,
                'external_data': external_data or {},
            }
        )
        return self._parse(ResourceMapping, data, 'register_resource')

    def lookup_resource(self, external_id: str) -> Optional[ResourceMapping]:
        """Look up a resource mapping; returns None if unknown"""
        return self._lookup(
            'lookup_resource', self._build_path(self.MAPPING_PATH, 'lookup'),
            external_id, ResourceMapping
        )

    def list_resources(
        self,
        venue_id: Optional[int] = None,
        venue_slug: Optional[str] = None,
        is_active: Optional[bool] = None,
        is_bookable: Optional[bool] = None
    ) -> Page[VenueResource]:
        """List resources, optionally filtered by venue and state"""
        params = self._handle_common_parameters(
            venue=venue_id,
            venue_slug=venue_slug,
            is_active=is_active,
            is_bookable=is_bookable,
        )
        data = self._request('list_resources', 'GET', self._build_endpoint(), params=params)
        return self._parse(Page[VenueResource], data, 'list_resources')
