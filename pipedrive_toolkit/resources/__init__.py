"""Resource type definitions."""

from .pipedrive import PIPEDRIVE_RESOURCES, register_default_resources

__all__ = ["PIPEDRIVE_RESOURCES", "register_default_resources"]
