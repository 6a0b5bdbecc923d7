"""Core components for the Pipedrive toolkit."""

from .models import (
    DEFAULT_BASE_URL,
    DEFAULT_HEADERS,
    resource_path,
    ResourceDescriptor,
    ClientConfig,
    ApiResponse,
    Record,
    TransportError,
    ResponseError,
    UnknownError,
    PaginationLimitError,
    ResourceNotFoundError,
    ConfigError,
)
from .registry import (
    register_resource,
    get_resource,
    find_resource_by_path,
    list_resources,
    reset_registry,
)
from .config_store import config_from_env

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_HEADERS",
    "resource_path",
    "ResourceDescriptor",
    "ClientConfig",
    "ApiResponse",
    "Record",
    "TransportError",
    "ResponseError",
    "UnknownError",
    "PaginationLimitError",
    "ResourceNotFoundError",
    "ConfigError",
    "register_resource",
    "get_resource",
    "find_resource_by_path",
    "list_resources",
    "reset_registry",
    "config_from_env",
]
