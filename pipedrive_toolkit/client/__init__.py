"""
Resource access layer.

ResourceClient implements the CRUD and pagination engine, CRMClient
shares one transport and auth token across resources, and build_client
assembles both from configuration.
"""

from .resource_client import ResourceClient
from .crm_client import CRMClient
from .builder import build_client

__all__ = [
    "ResourceClient",
    "CRMClient",
    "build_client",
]
