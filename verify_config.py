#!/usr/bin/env python3
"""Simple script to verify config.example.yaml structure without loading the package."""

import sys
from pathlib import Path

import yaml

SECTIONS = {
    "site": dict,
    "job_listings": dict,
    "feed": dict,
    "store": dict,
    "logging": dict,
}


def verify_config_structure():
    """Verify config.example.yaml has the expected structure."""
    config_file = Path("config.example.yaml")

    if not config_file.exists():
        print("✗ config.example.yaml not found")
        return False

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        print(f"✗ Failed to parse config.example.yaml: {e}")
        return False

    errors = []

    for key, expected_type in SECTIONS.items():
        if key in config and not isinstance(config[key], expected_type):
            errors.append(f"'{key}' must be of type {expected_type.__name__}")

    unknown = sorted(set(config) - set(SECTIONS))
    for key in unknown:
        errors.append(f"Unknown top-level key: {key}")

    site = config.get("site") or {}
    url = site.get("url", "")
    if url and not str(url).startswith(("http://", "https://")):
        errors.append(f"site.url must start with http:// or https://, got: {url}")

    listings = config.get("job_listings") or {}
    sort_order = listings.get("default_sort_order")
    if sort_order is not None and sort_order not in ("newest", "oldest", "salary"):
        errors.append(f"job_listings.default_sort_order has invalid value: {sort_order}")

    feed = config.get("feed") or {}
    formats = feed.get("formats") or {}
    if feed.get("enabled", True) and formats and not any(formats.get(f, True) for f in ("rss", "atom", "json")):
        errors.append("feed is enabled but every format is disabled")

    if errors:
        print("✗ config.example.yaml validation failed:")
        for error in errors:
            print(f"  - {error}")
        return False

    print("✓ config.example.yaml structure is valid")
    print(f"  - Site: {site.get('title', 'not set')} ({url or 'no url'})")
    print(f"  - Default sort: {sort_order or 'newest'}")
    enabled = [f for f in ("rss", "atom", "json") if formats.get(f, True)]
    print(f"  - Feed formats: {', '.join(enabled) if feed.get('enabled', True) else 'disabled'}")
    print(f"  - Store table: {(config.get('store') or {}).get('table_name', 'Jobs')}")
    return True


if __name__ == "__main__":
    success = verify_config_structure()
    sys.exit(0 if success else 1)
