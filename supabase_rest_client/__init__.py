import logging

from .client import AsyncSupabaseClient, SupabaseClient, create_async_client, create_client
from .config_types import ClientConfig
from .errors import ErrorKind, SupabaseError
from .filters import eq
from .payloads import AuthTokenResponse

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SupabaseClient",
    "AsyncSupabaseClient",
    "create_client",
    "create_async_client",
    "ClientConfig",
    "SupabaseError",
    "ErrorKind",
    "AuthTokenResponse",
    "eq",
]
