"""Resource registry for managing known resource types."""

import logging

from .models import ResourceDescriptor, ResourceNotFoundError

logger = logging.getLogger(__name__)

# In-memory storage for registered resources
_RESOURCES: dict[str, ResourceDescriptor] = {}


def register_resource(name: str, path_segment: str | None = None) -> ResourceDescriptor:
    """
    Register a resource type in the registry.

    Args:
        name: Resource type name (e.g., "Deal")
        path_segment: Explicit path segment; derived from the name if None

    Returns:
        The registered ResourceDescriptor

    Note:
        If the name already exists, it will be overwritten.
    """
    if name in _RESOURCES:
        logger.warning(f"Resource '{name}' already exists. Overwriting.")

    descriptor = ResourceDescriptor(name=name, path_segment=path_segment)
    _RESOURCES[name] = descriptor
    logger.debug(f"Registered resource: {name} ({descriptor.path})")

    return descriptor


def get_resource(name: str) -> ResourceDescriptor:
    """
    Retrieve a resource descriptor from the registry.

    Raises:
        ResourceNotFoundError: If the resource is not in the registry
    """
    if name not in _RESOURCES:
        raise ResourceNotFoundError(f"Resource '{name}' not found in registry")

    return _RESOURCES[name]


def find_resource_by_path(path: str) -> ResourceDescriptor | None:
    """Return the registered descriptor serving `path`, if any."""
    path = "/" + path.strip("/")
    for descriptor in _RESOURCES.values():
        if descriptor.path == path:
            return descriptor
    return None


def list_resources() -> list[ResourceDescriptor]:
    """
    List all registered resources.

    Returns:
        List of ResourceDescriptor objects sorted by name
    """
    return sorted(_RESOURCES.values(), key=lambda r: r.name)


def reset_registry() -> None:
    """
    Clear all resources from the registry.

    This is primarily intended for testing.
    """
    global _RESOURCES
    _RESOURCES = {}
    logger.debug("Registry reset")
