"""
Core HTTP Client for the MatchEngine API

Performs exactly one HTTP request per call, bounded by a deadline of the
configured timeout, and normalizes every failure into a MatchEngineError.
"""

import time
import logging
from typing import Any, Callable, Dict, Optional

import requests
import urllib3
from requests.exceptions import RequestException, Timeout

from ..core.config_manager import ClientConfig
from ..core.error_handler import ErrorKind, MatchEngineError
from .request_builder import QueryParams, RequestBuilder, RequestDescriptor
from .response_handler import ResponseHandler

STREAM_CHUNK_SIZE = 64 * 1024


class DeadlineExceeded(Exception):
    """The overall request deadline passed while the response was being read"""


class HTTPClient:
    """
    HTTP transport for the MatchEngine REST API.

    Each call opens its own session inside a ``with`` block, so connections
    are released on success, error and timeout alike and calls share no
    mutable state. There are no retries: a failed call raises immediately.
    """

    def __init__(
        self,
        config: ClientConfig,
        session_factory: Callable[[], requests.Session] = requests.Session
    ):
        """
        Initialize HTTP client with configuration

        Args:
            config: Client configuration
            session_factory: Callable returning a fresh session per request
        """
        self.config = config
        self.request_builder = RequestBuilder(config)
        self.response_handler = ResponseHandler()
        self._session_factory = session_factory
        self.logger = logging.getLogger(__name__)

    def _build_url(self, path: str) -> str:
        """Build full URL from the API base and a path"""
        return f"{self.config.api_base_url}{path}"

    def execute(self, descriptor: RequestDescriptor) -> Any:
        """
        Perform the call described by ``descriptor``

        The configured timeout is a deadline for the whole exchange: the
        body is streamed and the call is abandoned as soon as the deadline
        passes, even while the server is still sending.

        Returns:
            Decoded JSON body of a 2xx response

        Raises:
            MatchEngineError: REQUEST_TIMEOUT when the timeout elapses, a
                status-specific kind for non-2xx responses, GENERIC for any
                other transport failure
        """
        url = self._build_url(descriptor.path)
        request_kwargs = self.request_builder.build_request(descriptor)
        start_time = time.monotonic()
        deadline = start_time + self.config.timeout_seconds

        self.logger.debug(f"Making {descriptor.method} request to {url}")

        try:
            with self._session_factory() as session:
                response = session.request(
                    descriptor.method,
                    url,
                    timeout=self.config.timeout_seconds,
                    stream=True,
                    **request_kwargs
                )
                try:
                    body = self._read_body(response, deadline)
                finally:
                    response.close()
        except (Timeout, urllib3.exceptions.TimeoutError, DeadlineExceeded) as e:
            self.logger.warning(
                f"{descriptor.method} {url} timed out after {self.config.timeout_ms} ms"
            )
            raise MatchEngineError.timeout() from e
        except (RequestException, urllib3.exceptions.HTTPError) as e:
            self.logger.warning(f"{descriptor.method} {url} failed: {e}")
            raise MatchEngineError(ErrorKind.GENERIC, str(e)) from e

        self.logger.debug(
            f"{descriptor.method} {url} returned {response.status_code} "
            f"in {time.monotonic() - start_time:.2f}s"
        )
        return self.response_handler.handle_response(response, body)

    @classmethod
    def _read_body(cls, response: requests.Response, deadline: float) -> bytes:
        """Read the streamed body, giving up once ``deadline`` has passed"""
        chunks = []
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise DeadlineExceeded()
            cls._limit_socket_wait(response, remaining)
            chunk = response.raw.read1(STREAM_CHUNK_SIZE, decode_content=True)
            if not chunk:
                break
            chunks.append(chunk)
        if deadline - time.monotonic() <= 0:
            raise DeadlineExceeded()
        return b''.join(chunks)

    @staticmethod
    def _limit_socket_wait(response: requests.Response, remaining: float):
        """Bound the next socket read by the time left before the deadline"""
        connection = getattr(response.raw, 'connection', None)
        sock = getattr(connection, 'sock', None)
        if sock is not None:
            sock.settimeout(remaining)

    def request(
        self,
        method: str,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[QueryParams] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Any:
        """
        Make an authenticated HTTP request

        Args:
            method: HTTP method (GET, POST, ...)
            path: API path below the /api/v1 prefix
            data: Request body, sent as JSON when not None
            params: Query parameters (mapping or ordered pairs)
            headers: Additional headers, overriding the defaults
        """
        return self.execute(RequestDescriptor(
            method=method.upper(),
            path=path,
            data=data,
            query_params=params,
            headers=headers
        ))

    def get(self, path: str, params: Optional[QueryParams] = None, **kwargs) -> Any:
        """Make GET request"""
        return self.request('GET', path, params=params, **kwargs)

    def post(self, path: str, data: Optional[Dict[str, Any]] = None, **kwargs) -> Any:
        """Make POST request"""
        return self.request('POST', path, data=data, **kwargs)
