"""
Response Handler for the MatchEngine API Client

Returns the decoded JSON of successful responses and converts every
unsuccessful one into a MatchEngineError of the matching kind.
"""

import json
import logging
from typing import Any, Optional

import requests

from ..core.error_handler import ErrorKind, MatchEngineError

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class StatusCodeHandler:
    """Maps unsuccessful HTTP responses to error kinds"""

    ERROR_MAPPINGS = {
        401: ErrorKind.AUTHENTICATION_FAILED,
        404: ErrorKind.NOT_FOUND,
    }

    @classmethod
    def build_error(cls, status_code: int, error_data: Any) -> MatchEngineError:
        """
        Create the error for an unsuccessful response

        Args:
            status_code: HTTP status of the response
            error_data: Parsed response body, ``{}`` when it was not JSON

        Returns:
            Error carrying the derived message and the raw body
        """
        message = cls.extract_error_message(error_data)

        if status_code == 400:
            kind = cls._classify_bad_request(message)
            return MatchEngineError(kind, message, response_data=error_data)

        kind = cls.ERROR_MAPPINGS.get(status_code)
        if kind is not None:
            return MatchEngineError(kind, message, response_data=error_data)

        return MatchEngineError(ErrorKind.GENERIC, message, status_code=status_code,
                                response_data=error_data)

    @staticmethod
    def _classify_bad_request(message: str) -> ErrorKind:
        lowered = message.lower()
        if 'not available' in lowered:
            return ErrorKind.SLOT_NOT_AVAILABLE
        if 'user' in lowered and 'not found' in lowered:
            return ErrorKind.USER_NOT_FOUND
        return ErrorKind.VALIDATION

    @staticmethod
    def extract_error_message(error_data: Any) -> str:
        """Derive a message from an error body, first match wins"""
        if not error_data:
            return UNKNOWN_ERROR_MESSAGE

        if isinstance(error_data, dict):
            if isinstance(error_data.get('error'), str):
                return error_data['error']
            if isinstance(error_data.get('detail'), str):
                return error_data['detail']
            non_field_errors = error_data.get('non_field_errors')
            if isinstance(non_field_errors, list) and non_field_errors:
                return str(non_field_errors[0])

        return json.dumps(error_data, separators=(',', ':'), ensure_ascii=False)


class ResponseParser:
    """Decodes response bodies"""

    @staticmethod
    def decode(response: requests.Response, body: Optional[bytes] = None) -> Any:
        """Decode JSON from ``body`` when it was read already, else from the response"""
        if body is None:
            return response.json()
        return json.loads(body)

    @classmethod
    def parse_error_body(cls, response: requests.Response, body: Optional[bytes] = None) -> Any:
        """Parse an error body, falling back to an empty mapping"""
        try:
            return cls.decode(response, body)
        except ValueError:
            return {}

    @classmethod
    def parse_json_response(cls, response: requests.Response, body: Optional[bytes] = None) -> Any:
        """Parse a successful JSON body"""
        try:
            return cls.decode(response, body)
        except ValueError as e:
            raise MatchEngineError(
                ErrorKind.GENERIC,
                f"Invalid JSON response: {e}",
                status_code=response.status_code,
            ) from e


class ResponseHandler:
    """
    Response handler for MatchEngine API responses.

    Successful (2xx) bodies are returned as decoded JSON without schema
    validation; anything else raises a MatchEngineError.
    """

    def __init__(self):
        self.status_handler = StatusCodeHandler()
        self.parser = ResponseParser()
        self.logger = logging.getLogger(__name__)

    def handle_response(self, response: requests.Response, body: Optional[bytes] = None) -> Any:
        """
        Process an HTTP response

        Args:
            response: requests.Response object
            body: Raw body when the caller streamed it already

        Returns:
            Decoded JSON body

        Raises:
            MatchEngineError: For any non-2xx status or undecodable body
        """
        if 200 <= response.status_code < 300:
            return self.parser.parse_json_response(response, body)

        error_data = self.parser.parse_error_body(response, body)
        error = self.status_handler.build_error(response.status_code, error_data)
        self.logger.debug(
            f"API error response: status={response.status_code} kind={error.kind.value} "
            f"message={error.message!r}"
        )
        raise error
