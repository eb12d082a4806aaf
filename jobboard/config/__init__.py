"""Configuration management module for the job board."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import apply_environment_overrides, load_config, parse_config, validate_config_file
from .models import (
    BoardConfig,
    FeedConfig,
    FeedFormat,
    FeedFormatsConfig,
    JobListingsConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    SiteConfig,
    SortOrder,
    StoreConfig,
)

__all__ = [
    # Main loader functions
    "load_config",
    "parse_config",
    "apply_environment_overrides",
    "validate_config_file",
    "load_environment_config",
    # Configuration models
    "BoardConfig",
    "SiteConfig",
    "JobListingsConfig",
    "FeedConfig",
    "FeedFormatsConfig",
    "StoreConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "FeedFormat",
    "SortOrder",
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
