"""CRM client facade sharing one transport across resource clients."""

import logging

import httpx

from pipedrive_toolkit.core.models import (
    ClientConfig,
    ResourceDescriptor,
    ResourceNotFoundError,
)
from pipedrive_toolkit.core.registry import find_resource_by_path, get_resource
from pipedrive_toolkit.resources.pipedrive import register_default_resources
from pipedrive_toolkit.transport.base import HttpTransport
from pipedrive_toolkit.transport.httpx_transport import HttpxTransport
from .resource_client import ResourceClient

logger = logging.getLogger(__name__)


class CRMClient:
    """
    Entry point for talking to the CRM API.

    Holds the configuration, the transport and the default auth token,
    and hands out one ResourceClient per resource type:

        >>> with CRMClient(ClientConfig(api_token="secret")) as crm:
        ...     deals = crm.resource("Deal").list()
        ...     person = crm.persons.find(7)
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: HttpTransport | None = None,
        http_client: httpx.Client | None = None,
    ):
        """
        Initialize the CRM client.

        Args:
            config: Client configuration (base URL, headers, token, limits)
            transport: Optional transport (an HttpxTransport is created if None)
            http_client: Optional httpx client for the created HttpxTransport
        """
        self.config = config or ClientConfig()
        self.api_token = self.config.api_token

        # Track if we own the transport (for cleanup)
        self._owns_transport = transport is None
        self.transport = transport or HttpxTransport(self.config, http_client=http_client)

        self._resources: dict[str, ResourceClient] = {}

        # Default resources back the attribute shortcuts (crm.deals, crm.persons)
        register_default_resources()

    def close(self) -> None:
        """Close the transport if we created it."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def authenticate(self, token: str | None) -> None:
        """
        Set the default auth token for this client.

        Applies to every resource client handed out by this instance,
        including ones created earlier. Other CRMClient instances are
        not affected.
        """
        self.api_token = token
        for resource in self._resources.values():
            resource.authenticate(token)

    def resource(self, resource: str | ResourceDescriptor) -> ResourceClient:
        """
        Get the resource client for a resource type.

        Args:
            resource: Registered name (e.g., "Deal"), or a descriptor.
                Unregistered names get a descriptor derived from the name.

        Returns:
            ResourceClient bound to this client's transport and token
        """
        if isinstance(resource, ResourceDescriptor):
            descriptor = resource
        else:
            try:
                descriptor = get_resource(resource)
            except ResourceNotFoundError:
                descriptor = ResourceDescriptor(name=resource)

        if descriptor.path not in self._resources:
            logger.debug(f"Creating resource client for {descriptor.path}")
            self._resources[descriptor.path] = ResourceClient(
                descriptor,
                self.transport,
                api_token=self.api_token,
                max_pages=self.config.max_pages,
            )
        return self._resources[descriptor.path]

    def __getattr__(self, name: str) -> ResourceClient:
        """Shortcut for registered resources by path: crm.deals, crm.activities."""
        if name.startswith("_"):
            raise AttributeError(name)
        descriptor = find_resource_by_path(name)
        if descriptor is None:
            raise AttributeError(f"'{type(self).__name__}' has no resource '{name}'")
        return self.resource(descriptor)
