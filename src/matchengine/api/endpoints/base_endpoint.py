"""
Base Endpoint Class for the MatchEngine API

Common plumbing for endpoint groups: path building, query parameter
formatting, mapping lookups and error logging.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ...core.error_handler import ErrorHandler, ErrorKind, MatchEngineError
from ..client import HTTPClient

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseEndpoint(ABC):
    """
    Abstract base class for MatchEngine API endpoint groups.

    Endpoint groups hold no state besides the shared HTTP client, so one
    instance can serve concurrent calls.
    """

    USER_HEADER = 'X-User-External-ID'

    def __init__(self, client: HTTPClient):
        """
        Initialize endpoint with HTTP client

        Args:
            client: Configured HTTPClient instance
        """
        self.client = client
        self.logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")
        self.error_handler = ErrorHandler()
        self.base_path = self._get_base_path()

    @abstractmethod
    def _get_base_path(self) -> str:
        """Return the base API path for this endpoint (e.g., '/bookings')"""
        pass

    @staticmethod
    def _build_path(base_path: str, *segments: Any) -> str:
        """Join path segments below ``base_path`` with a trailing slash"""
        parts = [base_path.rstrip('/')] + [str(segment).strip('/') for segment in segments]
        return '/'.join(parts) + '/'

    def _build_endpoint(self, *segments: Any) -> str:
        return self._build_path(self.base_path, *segments)

    @staticmethod
    def _handle_common_parameters(**params: Any) -> List[Tuple[str, str]]:
        """
        Turn keyword filters into query pairs

        None values are dropped and booleans are sent as 'true'/'false'.
        """
        pairs = []
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = 'true' if value else 'false'
            pairs.append((key, str(value)))
        return pairs

    def _user_headers(self, user_external_id: Optional[str]) -> Optional[Dict[str, str]]:
        if not user_external_id:
            return None
        return {self.USER_HEADER: user_external_id}

    def _request(
        self,
        operation: str,
        method: str,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[List[Tuple[str, str]]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Any:
        """Perform a request, logging failures with operation context"""
        try:
            result = self.client.request(method, path, data=data, params=params, headers=headers)
        except MatchEngineError as error:
            self._handle_request_error(error, operation)
            raise

        self._log_operation(operation, path=path)
        return result

    def _lookup(self, operation: str, path: str, external_id: str,
                model: Type[ModelT]) -> Optional[ModelT]:
        """GET a mapping by external ID; NOT_FOUND yields None"""
        try:
            data = self.client.get(path, params={'external_id': external_id})
        except MatchEngineError as error:
            if error.kind is ErrorKind.NOT_FOUND:
                self.logger.debug(f"{operation}: no mapping for external_id={external_id!r}")
                return None
            self._handle_request_error(error, operation)
            raise

        self._log_operation(operation, path=path)
        return self._parse(model, data, operation)

    def _parse(self, model: Type[ModelT], data: Any, operation: str) -> ModelT:
        """
        Build a response model from a decoded body

        Raises:
            MatchEngineError: GENERIC carrying the body when it does not fit
                the model, e.g. a required field is missing
        """
        try:
            return model.model_validate(data)
        except ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first["loc"]) or "body"
            error = MatchEngineError(
                ErrorKind.GENERIC,
                f"Unexpected {model.__name__} response: {location}: {first['msg']}",
                response_data=data,
            )
            self._handle_request_error(error, operation)
            raise error from e

    def _handle_request_error(self, error: MatchEngineError, operation: str):
        """Log a failed operation; the caller re-raises"""
        self.error_handler.log_error(error, context=f"{self.__class__.__name__}.{operation}")

    def _log_operation(self, operation: str, path: str):
        self.logger.debug(f"Successfully completed {operation} ({path})")
