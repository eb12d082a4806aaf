#!/usr/bin/env python3
"""Sample listing harness for end-to-end validation.

Runs the whole read path (store fetch, normalization, listing pipeline and
every feed format) without pytest. It can operate in two modes:

1. Fixture mode (default): Serves records from tests/fixtures/records.yaml
2. Real store mode: Reads the configured Airtable base (requires credentials)

Usage:
    # Run with fixtures (no network required)
    python scripts/run_sample_listing.py --config config.example.yaml

    # Run against the real store
    JOBBOARD_REAL_RUN=1 python scripts/run_sample_listing.py --config config.yaml

    # Write feeds somewhere else
    python scripts/run_sample_listing.py --output /tmp/feeds
"""

import argparse
import os
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from jobboard.config.loader import load_config
from jobboard.config.models import FeedFormat, SortOrder
from jobboard.feeds import build_feed, is_feed_enabled, render_feed
from jobboard.feeds.builder import FEED_PATHS
from jobboard.listing import ListingQuery, count_facets, run_listing
from jobboard.logging.config import configure_logging
from jobboard.repository import FetchStatus, JobRepository
from jobboard.salary import format_salary
from jobboard.store import get_store_client
from tests.helpers.fixture_store import DEFAULT_RECORDS_PATH, FixtureStoreClient


def print_header(title: str):
    """Print a formatted section header."""
    width = 80
    print("\n" + "=" * width)
    print(f" {title}")
    print("=" * width + "\n")


def print_summary_table(metrics):
    """Print (label, value) pairs as a box table."""
    max_label_width = max(len(label) for label, _ in metrics)

    print("┌" + "─" * (max_label_width + 2) + "┬" + "─" * 22 + "┐")
    print(f"│ {'Metric':<{max_label_width}} │ {'Value':<20} │")
    print("├" + "─" * (max_label_width + 2) + "┼" + "─" * 22 + "┤")

    for label, value in metrics:
        print(f"│ {label:<{max_label_width}} │ {str(value):<20} │")

    print("└" + "─" * (max_label_width + 2) + "┴" + "─" * 22 + "┘")


def main():
    """Main entry point for the sample listing harness."""
    parser = argparse.ArgumentParser(
        description="Run the job board read path for end-to-end validation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("config.example.yaml"),
        help="Path to configuration file (default: config.example.yaml)",
    )
    parser.add_argument(
        "--fixtures",
        type=Path,
        default=DEFAULT_RECORDS_PATH,
        help="Path to fixture records YAML file (default: tests/fixtures/records.yaml)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("data/sample_feeds"),
        help="Directory to write rendered feeds to (default: data/sample_feeds)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: WARNING)",
    )

    args = parser.parse_args()

    load_dotenv()

    use_real_store = os.environ.get("JOBBOARD_REAL_RUN", "0") == "1"

    print_header("Job Board - Sample Listing Harness")
    print(f"Configuration file: {args.config}")
    print(f"Feed output: {args.output}")
    print(f"Mode: {'real store' if use_real_store else f'fixtures ({args.fixtures})'}")

    board_config, env_config = load_config(args.config)
    configure_logging(
        level=args.log_level,
        format_type=board_config.logging.format,
        environment="validation",
    )

    if use_real_store:
        client = get_store_client(env_config, board_config.store)
        if client is None:
            print("\n❌ Error: AIRTABLE_ACCESS_TOKEN and AIRTABLE_BASE_ID must be set for real store mode")
            return 1
    else:
        if not args.fixtures.exists():
            print(f"\n❌ Error: Fixture file not found: {args.fixtures}")
            return 1
        client = FixtureStoreClient(args.fixtures)

    repository = JobRepository(client)
    try:
        result = repository.fetch_jobs()
    finally:
        client.close()

    if result.status != FetchStatus.SUCCESS:
        print(f"\n❌ Fetch failed ({result.status.value}): {result.error_message}")
        return 1

    jobs = result.jobs
    facets = count_facets(jobs)

    print_header("Fetch Summary")
    print_summary_table(
        [
            ("Active Jobs", len(jobs)),
            ("Skipped Records", result.skipped_records),
            ("Featured Jobs", sum(1 for job in jobs if job.featured)),
            ("Remote Jobs", facets.remote),
            ("Countries", len(facets.countries)),
            ("Languages", len(facets.languages)),
        ]
    )

    for order in SortOrder:
        print_header(f"First Page ({order.value})")
        query = ListingQuery(sort=order, per_page=board_config.job_listings.default_per_page)
        page = run_listing(jobs, query)
        for job in page.items:
            marker = "*" if job.featured else " "
            print(f"[{marker}] {job.title} at {job.company}: {format_salary(job.salary)} ({job.posted_date})")
        print(f"\nPage {page.page} of {max(page.total_pages, 1)}")

    print_header("Feeds")
    args.output.mkdir(parents=True, exist_ok=True)
    feed = build_feed(jobs, board_config.site, board_config.feed)
    for fmt in FeedFormat:
        if not is_feed_enabled(board_config.feed, fmt):
            print(f"{fmt.value}: disabled")
            continue
        path = args.output / FEED_PATHS[fmt].lstrip("/")
        path.write_text(render_feed(feed, fmt), encoding="utf-8")
        print(f"{fmt.value}: {len(feed.items)} items -> {path.absolute()}")

    print("\n" + "-" * 80)
    print(f"To clean up: rm -r {args.output.absolute()}")
    print("-" * 80 + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
