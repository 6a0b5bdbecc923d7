"""
Builder module for CRM clients.

Wires configuration and the HTTP transport into a ready CRMClient.
"""

import logging
from typing import Any

import httpx

from pipedrive_toolkit.core.config_store import config_from_env
from pipedrive_toolkit.core.models import ClientConfig
from .crm_client import CRMClient

logger = logging.getLogger(__name__)


def build_client(
    api_token: str | None = None,
    settings: dict[str, Any] | None = None,
    http_client: httpx.Client | None = None,
) -> CRMClient:
    """
    Build a CRM client from explicit settings or the environment.

    Args:
        api_token: Auth token; overrides the configured one when given
        settings: Config values as accepted by ClientConfig.from_dict;
            the environment is used when None
        http_client: Optional httpx client for the transport

    Returns:
        Configured CRMClient ready to use

    Raises:
        ConfigError: If the settings or environment values are invalid

    Example:
        >>> crm = build_client("secret")
        >>> deals = crm.deals.list()
        >>> crm.close()
    """
    # Step 1: Load configuration
    if settings is not None:
        config = ClientConfig.from_dict(settings)
        logger.info("Using client config from settings")
    else:
        config = config_from_env()
        logger.info("Using client config from environment")

    if api_token is not None:
        config.api_token = api_token

    # Step 2: Create the client
    return CRMClient(config, http_client=http_client)
