"""
Authentication for the MatchEngine API Client

The backend authenticates integrators with a static client token sent in
the Authorization header.
"""

from typing import Dict

from ..core.config_manager import ClientConfig


class TokenAuth:
    """Token authentication (``Authorization: Token <token>``)"""

    scheme = "Token"

    def __init__(self, config: ClientConfig):
        self._token = config.api_token

    def get_headers(self) -> Dict[str, str]:
        """Headers carrying the client token"""
        return {'Authorization': f"{self.scheme} {self._token.get_secret_value()}"}

    def __repr__(self) -> str:
        return f"TokenAuth(scheme={self.scheme!r}, token='**********')"
