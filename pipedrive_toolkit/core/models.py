"""Core data models for the Pipedrive toolkit."""

from dataclasses import dataclass, field
from typing import Any

DEFAULT_BASE_URL = "https://api.pipedrive.com/v1"

DEFAULT_HEADERS = {
    "User-Agent": "pipedrive-toolkit",
    "Accept": "application/json",
    "Content-Type": "application/x-www-form-urlencoded",
}


def resource_path(name: str) -> str:
    """
    Derive the API path for a resource type name.

    The first letter is lower-cased and the name is pluralized
    ("y" becomes "ies", anything else gets an "s"). The API is
    sensitive to capitalisation, so the rest of the name is kept.

    Args:
        name: Resource type name (e.g., "Deal", "pipedrive.Activity")

    Returns:
        Path such as "/deals" or "/activities"
    """
    simple = name.split("::")[-1].split(".")[-1].strip()
    if not simple:
        raise ValueError("Resource name must not be empty")

    segment = simple[0].lower() + simple[1:]
    if segment.endswith("y"):
        return f"/{segment[:-1]}ies"
    return f"/{segment}s"


@dataclass(frozen=True)
class ResourceDescriptor:
    """Static metadata for one resource type."""
    name: str
    path_segment: str | None = None

    @property
    def path(self) -> str:
        if self.path_segment:
            return "/" + self.path_segment.strip("/")
        return resource_path(self.name)


@dataclass
class ClientConfig:
    """Explicit configuration for a CRM client."""
    base_url: str = DEFAULT_BASE_URL
    api_token: str | None = None
    headers: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    timeout_seconds: float = 10.0
    max_attempts: int = 1
    max_pages: int = 1000

    def to_dict(self) -> dict[str, Any]:
        """Convert ClientConfig to a dictionary."""
        return {
            "base_url": self.base_url,
            "api_token": self.api_token,
            "headers": dict(self.headers),
            "timeout_seconds": self.timeout_seconds,
            "max_attempts": self.max_attempts,
            "max_pages": self.max_pages,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClientConfig":
        """Create ClientConfig from a dictionary."""
        if not isinstance(data, dict):
            raise ConfigError(f"Client config must be an object, got {type(data).__name__}")

        headers = dict(DEFAULT_HEADERS)
        headers.update(data.get("headers") or {})

        try:
            return cls(
                base_url=data.get("base_url", DEFAULT_BASE_URL),
                api_token=data.get("api_token"),
                headers=headers,
                timeout_seconds=float(data.get("timeout_seconds", 10.0)),
                max_attempts=int(data.get("max_attempts", 1)),
                max_pages=int(data.get("max_pages", 1000)),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid client config: {e}") from e


class ApiResponse:
    """
    Structured HTTP response returned by every transport.

    Wraps the status code and the decoded JSON envelope
    ({"success": ..., "data": ..., "additional_data": ...}).
    """

    def __init__(self, status_code: int, body: Any = None, url: str | None = None):
        self.status_code = status_code
        self.body = body if isinstance(body, dict) else {}
        self.url = url

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def success(self) -> bool:
        return self.ok and self.body.get("success", True) is not False

    def __getitem__(self, key: str) -> Any:
        return self.body[key]

    def __contains__(self, key: str) -> bool:
        return key in self.body

    def get(self, key: str, default: Any = None) -> Any:
        return self.body.get(key, default)

    @property
    def pagination(self) -> dict[str, Any]:
        additional = self.body.get("additional_data")
        if not isinstance(additional, dict):
            return {}
        return additional.get("pagination") or {}

    @property
    def has_more_items(self) -> bool:
        return bool(self.pagination.get("more_items_in_collection"))

    @property
    def next_start(self) -> int | None:
        return self.pagination.get("next_start")

    def __repr__(self) -> str:
        return f"<ApiResponse [{self.status_code}]>"


class Record:
    """
    One API entity instance.

    Attributes are a plain mapping of string keys to JSON values. They
    can be read by key, with the typed accessors, or as attributes:

        >>> deal = Record({"id": 1, "title": "Acme"})
        >>> deal.title
        'Acme'
        >>> deal.get_int("id")
        1
    """

    def __init__(self, attributes: dict[str, Any] | None = None, client: Any = None):
        object.__setattr__(self, "_attributes", {})
        object.__setattr__(self, "_client", client)
        if attributes:
            self.merge(attributes)

    @classmethod
    def from_envelope(cls, envelope: Any, client: Any = None) -> "Record":
        """
        Build a record from a response envelope.

        `data` is merged with `additional_data`; an envelope without
        `data` is used as the attribute map itself.
        """
        if isinstance(envelope, ApiResponse):
            envelope = envelope.body

        data = envelope.get("data") if isinstance(envelope, dict) else None
        if not isinstance(data, dict):
            return cls(envelope if isinstance(envelope, dict) else {}, client=client)

        attributes = dict(data)
        additional = envelope.get("additional_data")
        if isinstance(additional, dict):
            attributes.update(additional)
        return cls(attributes, client=client)

    def merge(self, values: dict[str, Any]) -> None:
        """Merge values over the current attributes in place."""
        for key, value in values.items():
            self._attributes[str(key)] = value

    def to_dict(self) -> dict[str, Any]:
        return dict(self._attributes)

    def keys(self):
        return self._attributes.keys()

    def get(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    def _typed(self, key: str, types: tuple, default: Any) -> Any:
        value = self._attributes.get(key)
        if value is None:
            return default
        if not isinstance(value, types) or (bool not in types and isinstance(value, bool)):
            raise TypeError(
                f"Attribute '{key}' is {type(value).__name__}, "
                f"expected {' or '.join(t.__name__ for t in types)}"
            )
        return value

    def get_str(self, key: str, default: str | None = None) -> str | None:
        return self._typed(key, (str,), default)

    def get_int(self, key: str, default: int | None = None) -> int | None:
        return self._typed(key, (int,), default)

    def get_float(self, key: str, default: float | None = None) -> float | None:
        return self._typed(key, (int, float), default)

    def get_bool(self, key: str, default: bool | None = None) -> bool | None:
        return self._typed(key, (bool,), default)

    def get_list(self, key: str, default: list | None = None) -> list | None:
        return self._typed(key, (list,), default)

    def get_dict(self, key: str, default: dict | None = None) -> dict | None:
        return self._typed(key, (dict,), default)

    def update(self, fields: dict[str, Any], api_token: str | None = None) -> bool:
        """
        Update this record on the server through the client that produced it.

        Returns:
            True on success, False otherwise
        """
        if self._client is None:
            raise RuntimeError("Record is not bound to a resource client")
        return self._client.update(self, fields, api_token)

    def __getitem__(self, key: str) -> Any:
        return self._attributes[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._attributes[str(key)] = value

    def __contains__(self, key: object) -> bool:
        return key in self._attributes

    def __iter__(self):
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __getattr__(self, name: str) -> Any:
        attributes = self.__dict__.get("_attributes", {})
        if name in attributes:
            return attributes[name]
        raise AttributeError(f"Record has no attribute '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        self._attributes[name] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Record):
            return self._attributes == other._attributes
        if isinstance(other, dict):
            return self._attributes == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Record({self._attributes!r})"


class TransportError(Exception):
    """Raised when a request to the API fails."""

    def __init__(
        self,
        message: str,
        context: Any = None,
        response: ApiResponse | None = None,
    ):
        super().__init__(message)
        self.context = context
        self.response = response

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None


class ResponseError(TransportError):
    """Raised when the server returned a structured failure response."""

    def __init__(self, response: ApiResponse, context: Any = None):
        error = response.get("error") or "request failed"
        super().__init__(
            f"API request failed: {response.status_code} {error}",
            context=context,
            response=response,
        )


class UnknownError(TransportError):
    """Raised when a request failed without a structured response."""

    def __init__(self, context: Any = None):
        super().__init__("Unknown error", context=context)


class PaginationLimitError(TransportError):
    """Raised when a listing still reports more items after the page limit."""

    def __init__(self, max_pages: int, records: list[Record], context: Any = None):
        super().__init__(
            f"Server still reports more items after {max_pages} pages",
            context=context,
        )
        self.max_pages = max_pages
        self.records = records


class ResourceNotFoundError(Exception):
    """Raised when a resource is not found in the registry."""
    pass


class ConfigError(Exception):
    """Raised when there is an error loading or saving configuration."""
    pass
