"""
User Endpoints for the MatchEngine API Client

Maps the integrator's user IDs onto MatchEngine users.
"""

from typing import Optional

from ...models import UserMapping
from .base_endpoint import BaseEndpoint


class UserEndpoints(BaseEndpoint):
    """User mapping registration and lookup"""

    def _get_base_path(self) -> str:
        return '/client/users'

    def register_user(
        self,
        external_id: str,
        email: str,
        first_name: str = '',
        last_name: str = ''
    ) -> UserMapping:
        """
        Register a user, or return the existing mapping

        Args:
            external_id: The integrator's user ID
            email: User email address
            first_name: Optional first name
            last_name: Optional last name

        Returns:
            The user mapping; ``created``/``mapping_created`` tell whether
            anything new was stored
        """
        data = self._request(
            'register_user', 'POST', self._build_endpoint('register'),
            data={
                'external_id': external_id,
                'email': email,
                'first_name': first_name,
                'last_name': last_name,
            }
        )
        return self._parse(UserMapping, data, 'register_user')

    def lookup_user(self, external_id: str) -> Optional[UserMapping]:
        """Look up a user mapping; returns None if the user is unknown"""
        return self._lookup('lookup_user', self._build_endpoint('lookup'), external_id, UserMapping)
