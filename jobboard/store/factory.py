"""Factory for the configured record store client."""

import logging
from typing import Optional

from jobboard.config.environment import EnvironmentConfig
from jobboard.config.models import StoreConfig

from .airtable import AirtableClient
from .base import BaseStoreClient
from .exceptions import StoreConfigurationError

logger = logging.getLogger(__name__)


def get_store_client(
    env_config: EnvironmentConfig, store_config: StoreConfig
) -> Optional[BaseStoreClient]:
    """Build the store client, or return None when credentials are missing.

    Raises:
        StoreConfigurationError: If credentials are present but the client
            cannot be built from the settings
    """
    if not env_config.store_configured:
        logger.warning(
            "Record store credentials not configured",
            extra={"event": "store.not_configured", "component": "store"},
        )
        return None

    try:
        return AirtableClient(
            access_token=env_config.airtable_access_token,
            base_id=env_config.airtable_base_id,
            table_name=store_config.table_name,
            api_url=store_config.api_url,
            page_size=store_config.page_size,
            timeout=store_config.http_request_timeout,
            user_agent=store_config.user_agent,
        )
    except StoreConfigurationError:
        raise
    except Exception as e:
        raise StoreConfigurationError(f"Failed to create store client: {e}") from e
