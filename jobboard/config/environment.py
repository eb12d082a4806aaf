"""Environment variable loading and validation."""

import os
from typing import Optional

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        airtable_access_token: Optional[str] = None,
        airtable_base_id: Optional[str] = None,
        airtable_table_name: Optional[str] = None,
        app_url: Optional[str] = None,
        log_level: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        """Initialize environment configuration."""
        self.airtable_access_token = airtable_access_token
        self.airtable_base_id = airtable_base_id
        self.airtable_table_name = airtable_table_name
        self.app_url = app_url.rstrip("/") if app_url else None
        self.log_level = log_level
        self.environment = environment or "local"

    @property
    def store_configured(self) -> bool:
        """Whether both store credentials are present."""
        return bool(self.airtable_access_token and self.airtable_base_id)


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    Optional environment variables:
    - AIRTABLE_ACCESS_TOKEN: Personal access token for the record store
    - AIRTABLE_BASE_ID: Base holding the jobs table
    - AIRTABLE_TABLE_NAME: Override the configured table name
    - APP_URL: Override the configured public site URL
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - ENVIRONMENT: Environment label for logs (production, staging, local)

    Missing store credentials are not an error: the job repository then
    serves an empty job list.

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If a provided variable is invalid
    """
    errors = []

    airtable_access_token = os.getenv("AIRTABLE_ACCESS_TOKEN") or None
    airtable_base_id = os.getenv("AIRTABLE_BASE_ID") or None
    airtable_table_name = os.getenv("AIRTABLE_TABLE_NAME") or None
    app_url = os.getenv("APP_URL") or None
    log_level = os.getenv("LOG_LEVEL") or None
    environment = os.getenv("ENVIRONMENT") or None

    if app_url and not app_url.startswith(("http://", "https://")):
        errors.append(
            f"Invalid APP_URL: '{app_url}'. Must start with http:// or https://."
        )

    if log_level:
        if log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        else:
            log_level = log_level.upper()

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Copy .env.example to .env and fill in your credentials",
                "Verify APP_URL is a full http(s) URL",
            ],
        )

    return EnvironmentConfig(
        airtable_access_token=airtable_access_token,
        airtable_base_id=airtable_base_id,
        airtable_table_name=airtable_table_name,
        app_url=app_url,
        log_level=log_level,
        environment=environment,
    )
