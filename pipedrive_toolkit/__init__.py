"""
Pipedrive toolkit.

A generic client for the Pipedrive REST API: every resource type is
served by the same CRUD and pagination engine.
"""

from .core import (
    ApiResponse,
    ClientConfig,
    ConfigError,
    PaginationLimitError,
    Record,
    ResourceDescriptor,
    ResourceNotFoundError,
    ResponseError,
    TransportError,
    UnknownError,
    register_resource,
    resource_path,
)
from .transport import ConnectionFailure, HttpTransport, HttpxTransport
from .client import CRMClient, ResourceClient, build_client

__all__ = [
    "ApiResponse",
    "ClientConfig",
    "ConfigError",
    "PaginationLimitError",
    "Record",
    "ResourceDescriptor",
    "ResourceNotFoundError",
    "ResponseError",
    "TransportError",
    "UnknownError",
    "register_resource",
    "resource_path",
    "ConnectionFailure",
    "HttpTransport",
    "HttpxTransport",
    "CRMClient",
    "ResourceClient",
    "build_client",
]
