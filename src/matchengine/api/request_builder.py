"""
Request Builder for the MatchEngine API Client

Describes a single API call and turns the description into keyword
arguments for ``requests``: query pairs, headers and a JSON body.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .. import __version__
from ..core.config_manager import ClientConfig
from .authentication import TokenAuth

QueryParams = Union[Mapping[str, str], Sequence[Tuple[str, str]]]


@dataclass(frozen=True)
class RequestDescriptor:
    """One API call: verb, path below the API prefix, body, query and headers"""
    method: str
    path: str
    data: Optional[Dict[str, Any]] = None
    query_params: Optional[QueryParams] = None
    headers: Optional[Dict[str, str]] = None

    def query_pairs(self) -> List[Tuple[str, str]]:
        """Query parameters as ordered pairs; duplicate keys are kept"""
        if not self.query_params:
            return []
        if isinstance(self.query_params, Mapping):
            return list(self.query_params.items())
        return list(self.query_params)


class RequestBuilder:
    """
    Builds request keyword arguments for a RequestDescriptor.

    Every request carries the client token, JSON content-type and accept
    headers. Headers of the descriptor are applied last and win.
    """

    SENSITIVE_HEADERS = ('authorization',)

    def __init__(self, config: ClientConfig):
        self.auth = TokenAuth(config)
        self.logger = logging.getLogger(__name__)
        self.default_headers = {
            'User-Agent': f'matchengine-python/{__version__}',
            'Content-Type': 'application/json',
            'Accept': 'application/json'
        }

    def build_headers(self, extra_headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = self.default_headers.copy()
        headers.update(self.auth.get_headers())
        if extra_headers:
            headers.update(extra_headers)
        return headers

    def build_request(self, descriptor: RequestDescriptor) -> Dict[str, Any]:
        """
        Build request configuration for ``requests.Session.request``

        Args:
            descriptor: The call to perform

        Returns:
            Dictionary with headers, params and, when a body is present, data
        """
        request_config: Dict[str, Any] = {
            'headers': self.build_headers(descriptor.headers),
            'params': descriptor.query_pairs(),
        }

        if descriptor.data is not None:
            request_config['data'] = json.dumps(descriptor.data)

        self.logger.debug(f"Built request config: {self._sanitize_for_logging(request_config)}")
        return request_config

    def _sanitize_for_logging(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Mask credentials and truncate large bodies"""
        sanitized = config.copy()

        headers = sanitized['headers'].copy()
        for key in list(headers.keys()):
            if key.lower() in self.SENSITIVE_HEADERS:
                headers[key] = '[MASKED]'
        sanitized['headers'] = headers

        if 'data' in sanitized and len(sanitized['data']) > 1000:
            sanitized['data'] = sanitized['data'][:1000] + '... [TRUNCATED]'

        return sanitized
