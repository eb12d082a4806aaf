"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for settings that are valid but probably unintended.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    site = config_dict.get("site", {})
    if isinstance(site, dict):
        url = site.get("url", "")
        if isinstance(url, str) and ("localhost" in url or "127.0.0.1" in url):
            warning_messages.append(
                f"site.url ({url}) points at a local address; feed links will not resolve publicly"
            )

    feed = config_dict.get("feed", {})
    if isinstance(feed, dict):
        if feed.get("enabled") is False:
            warning_messages.append("Feeds are disabled; every feed format will be unavailable")

        description_length = feed.get("description_length")
        if isinstance(description_length, int) and description_length > 2000:
            warning_messages.append(
                f"Large feed.description_length ({description_length}) produces heavy feed documents"
            )

    store = config_dict.get("store", {})
    if isinstance(store, dict):
        page_size = store.get("page_size")
        if isinstance(page_size, int) and 0 < page_size < 20:
            warning_messages.append(
                f"Small store.page_size ({page_size}) requires many requests per job fetch"
            )

    job_listings = config_dict.get("job_listings", {})
    if isinstance(job_listings, dict):
        per_page = job_listings.get("default_per_page")
        if isinstance(per_page, int) and per_page > 50:
            warning_messages.append(
                f"Large job_listings.default_per_page ({per_page}) makes listing pages long"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
