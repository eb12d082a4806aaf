"""Record store clients."""

from .airtable import AirtableClient
from .base import BaseStoreClient
from .exceptions import (
    StoreConfigurationError,
    StoreError,
    StoreHTTPError,
    StoreResponseError,
    StoreTimeoutError,
)
from .factory import get_store_client

__all__ = [
    "AirtableClient",
    "BaseStoreClient",
    "StoreConfigurationError",
    "StoreError",
    "StoreHTTPError",
    "StoreResponseError",
    "StoreTimeoutError",
    "get_store_client",
]
