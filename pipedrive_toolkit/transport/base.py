"""Base class for HTTP transports."""

from abc import ABC, abstractmethod
from typing import Any

from pipedrive_toolkit.core.models import ApiResponse


class ConnectionFailure(Exception):
    """Raised when a request produced no response (network error, timeout)."""
    pass


class HttpTransport(ABC):
    """
    Abstract base class for the HTTP layer used by resource clients.

    Each method takes a path relative to the API base URL and an
    options dict that may contain:
        query: query string parameters
        body: form fields for the request body

    Implementations return an ApiResponse for every response the server
    sends, successful or not, and raise ConnectionFailure when there is
    no response at all.
    """

    @abstractmethod
    def get(self, url: str, options: dict[str, Any] | None = None) -> ApiResponse:
        pass

    @abstractmethod
    def post(self, url: str, options: dict[str, Any] | None = None) -> ApiResponse:
        pass

    @abstractmethod
    def put(self, url: str, options: dict[str, Any] | None = None) -> ApiResponse:
        pass

    @abstractmethod
    def delete(self, url: str, options: dict[str, Any] | None = None) -> ApiResponse:
        pass

    def close(self) -> None:
        """Release any resources held by the transport."""
        pass
