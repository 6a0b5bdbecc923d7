"""Configuration loading for client settings."""

import logging
import os

from .models import ClientConfig, ConfigError, DEFAULT_BASE_URL

logger = logging.getLogger(__name__)


def config_from_env(prefix: str = "PIPEDRIVE_") -> ClientConfig:
    """
    Build a ClientConfig from environment variables.

    Reads {prefix}API_TOKEN, {prefix}BASE_URL and {prefix}TIMEOUT.
    Nothing is read from or written to disk.

    Raises:
        ConfigError: If the timeout is not a number
    """
    timeout = os.environ.get(f"{prefix}TIMEOUT", "10")
    try:
        timeout_seconds = float(timeout)
    except ValueError as e:
        raise ConfigError(f"Invalid {prefix}TIMEOUT value: {timeout!r}") from e

    config = ClientConfig(
        base_url=os.environ.get(f"{prefix}BASE_URL", DEFAULT_BASE_URL),
        api_token=os.environ.get(f"{prefix}API_TOKEN") or None,
        timeout_seconds=timeout_seconds,
    )
    logger.debug(f"Loaded client config from {prefix}* environment variables")
    return config
