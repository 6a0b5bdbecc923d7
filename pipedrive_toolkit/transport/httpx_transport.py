"""
HTTP transport built on httpx.

Sends form-encoded requests to the API and wraps every response in an
ApiResponse. Retries are opt-in through ClientConfig.max_attempts.
"""

import logging
import time
from typing import Any

import httpx

from pipedrive_toolkit.core.models import ApiResponse, ClientConfig
from .base import ConnectionFailure, HttpTransport

logger = logging.getLogger(__name__)


class HttpxTransport(HttpTransport):
    """
    HttpTransport backed by an httpx.Client.

    Features:
    - Base URL joining and default headers from ClientConfig
    - Form-encoded request bodies, JSON response decoding
    - Optional retries with exponential backoff for 5xx and network errors
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        http_client: httpx.Client | None = None,
    ):
        """
        Initialize the transport.

        Args:
            config: Client configuration (defaults to ClientConfig())
            http_client: Optional httpx client (created if None)
        """
        self.config = config or ClientConfig()

        # Track if we own the HTTP client (for cleanup)
        self._owns_client = http_client is None

        if http_client is None:
            self.http_client = httpx.Client(timeout=self.config.timeout_seconds)
        else:
            self.http_client = http_client

    def close(self) -> None:
        """Close the HTTP client if we created it."""
        if self._owns_client and self.http_client:
            self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def _build_url(self, path: str) -> str:
        """
        Build full URL from base URL and path.

        Args:
            path: API path (e.g., "/deals/42")

        Returns:
            Full URL
        """
        base_url = self.config.base_url.rstrip("/")
        path = path.lstrip("/")
        return f"{base_url}/{path}"

    @staticmethod
    def _decode(response: httpx.Response) -> ApiResponse:
        body: Any = {}
        if response.content:
            try:
                body = response.json()
            except ValueError:
                logger.debug(f"Non-JSON response body from {response.request.url}")
        return ApiResponse(response.status_code, body, url=str(response.request.url))

    def request(
        self,
        method: str,
        path: str,
        options: dict[str, Any] | None = None,
    ) -> ApiResponse:
        """
        Make an HTTP request with optional retry logic.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path relative to the base URL
            options: {"query": {...}, "body": {...}}

        Returns:
            ApiResponse for the last response received

        Raises:
            ConnectionFailure: If no response was received
        """
        options = options or {}
        url = self._build_url(path)
        attempts = max(1, self.config.max_attempts)

        for attempt in range(attempts):
            try:
                logger.debug(f"{method} {url}")
                response = self.http_client.request(
                    method=method,
                    url=url,
                    headers=self.config.headers,
                    params=options.get("query"),
                    data=options.get("body"),
                )
                api_response = self._decode(response)

                # Only 5xx responses are worth another attempt
                if response.status_code < 500 or attempt == attempts - 1:
                    return api_response

                logger.warning(
                    f"Server error {response.status_code} from {method} {path}, "
                    f"attempt {attempt + 1} of {attempts}"
                )

            except httpx.RequestError as e:
                # Network errors and timeouts
                logger.warning(f"Request failed: {method} {path}: {e}")
                if attempt == attempts - 1:
                    raise ConnectionFailure(f"Request failed: {e}") from e

            # Wait before retry (exponential backoff)
            time.sleep(2 ** attempt)

        raise ConnectionFailure("Request failed after retries")

    def get(self, url: str, options: dict[str, Any] | None = None) -> ApiResponse:
        return self.request("GET", url, options)

    def post(self, url: str, options: dict[str, Any] | None = None) -> ApiResponse:
        return self.request("POST", url, options)

    def put(self, url: str, options: dict[str, Any] | None = None) -> ApiResponse:
        return self.request("PUT", url, options)

    def delete(self, url: str, options: dict[str, Any] | None = None) -> ApiResponse:
        return self.request("DELETE", url, options)
