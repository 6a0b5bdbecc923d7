"""Default Pipedrive resource types."""

import logging

from pipedrive_toolkit.core.models import ResourceDescriptor, ResourceNotFoundError
from pipedrive_toolkit.core.registry import get_resource, register_resource

logger = logging.getLogger(__name__)

# Resource names as exposed by the Pipedrive v1 API. Paths are derived
# from the names ("Activity" -> "/activities", "DealField" -> "/dealFields").
PIPEDRIVE_RESOURCES = [
    "Activity",
    "ActivityType",
    "Currency",
    "Deal",
    "DealField",
    "File",
    "Filter",
    "Goal",
    "Note",
    "Organization",
    "OrganizationField",
    "Person",
    "PersonField",
    "Pipeline",
    "Product",
    "ProductField",
    "Role",
    "Stage",
    "User",
]


def register_default_resources() -> list[ResourceDescriptor]:
    """
    Register the Pipedrive resource types that are not registered yet.

    Returns:
        Descriptors for all default resources
    """
    descriptors = []
    for name in PIPEDRIVE_RESOURCES:
        try:
            descriptors.append(get_resource(name))
        except ResourceNotFoundError:
            descriptors.append(register_resource(name))

    logger.debug(f"Registered {len(descriptors)} Pipedrive resources")
    return descriptors
