"""HTTP transports used by resource clients."""

from .base import HttpTransport, ConnectionFailure
from .httpx_transport import HttpxTransport

__all__ = ["HttpTransport", "ConnectionFailure", "HttpxTransport"]
