"""Command-line entry point for the job board data core."""

import argparse
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple
from urllib.parse import urlencode

from dotenv import load_dotenv

from jobboard.config.environment import EnvironmentConfig
from jobboard.config.exceptions import ConfigurationError
from jobboard.config.loader import load_config
from jobboard.config.models import BoardConfig, FeedFormat, SortOrder
from jobboard.constants import (
    CAREER_LEVEL_DISPLAY_NAMES,
    JOB_TYPE_DESCRIPTIONS,
    JOB_TYPE_DISPLAY_NAMES,
    get_display_name_from_code,
)
from jobboard.domain.models import Job
from jobboard.feeds import FeedError, build_feed, ensure_feed_enabled, render_feed
from jobboard.feeds.builder import format_location
from jobboard.listing import (
    FacetCounts,
    ListingQuery,
    SalaryRange,
    count_facets,
    jobs_for_career_level,
    jobs_for_language,
    jobs_for_location,
    jobs_for_type,
    run_listing,
)
from jobboard.logging import get_logger, log_context, new_request_id
from jobboard.logging.config import configure_logging
from jobboard.repository import FetchStatus, JobRepository, RequestCache
from jobboard.salary import format_salary, format_usd_approximation
from jobboard.store import StoreConfigurationError, get_store_client
from jobboard.utils.slugify import create_location_slug, generate_job_slug
from jobboard.utils.timestamps import format_job_date

logger = get_logger(__name__, component="cli")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[BoardConfig, EnvironmentConfig]:
    """
    Load configuration and settle the effective log level.

    Log level priority: CLI flag, then LOG_LEVEL, then the config file.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    board_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = board_config.logging.level

    return board_config, env_config


def build_repository(board_config: BoardConfig, env_config: EnvironmentConfig) -> JobRepository:
    """Wire the store client (if configured) into a repository."""
    return JobRepository(get_store_client(env_config, board_config.store))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jobboard",
        description="Job Board - fetch, filter and syndicate job postings",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml, then config/config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=LOG_LEVELS,
        help="Log level (overrides config and environment)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="Print one page of the job listing")
    list_parser.add_argument("-q", "--search", default="", help="Search title, company, city, country")
    list_parser.add_argument("--types", default="", help="Comma-separated employment types")
    list_parser.add_argument("--roles", default="", help="Comma-separated career levels")
    list_parser.add_argument("--remote", action="store_true", help="Remote jobs only")
    list_parser.add_argument("--visa", action="store_true", help="Jobs offering visa sponsorship only")
    list_parser.add_argument(
        "--salary",
        default="",
        help="Comma-separated salary ranges: " + ", ".join(r.value for r in SalaryRange),
    )
    list_parser.add_argument("--languages", default="", help="Comma-separated language codes")
    list_parser.add_argument("--sort", choices=[s.value for s in SortOrder], default=None)
    list_parser.add_argument("--page", type=int, default=1)
    list_parser.add_argument("--per-page", type=int, default=None)

    show_parser = subparsers.add_parser("show", help="Show one job by slug")
    show_parser.add_argument("slug", help="Job slug, e.g. senior-engineer-at-example-corp")

    feed_parser = subparsers.add_parser("feed", help="Render a syndication feed")
    feed_parser.add_argument(
        "--format",
        dest="feed_format",
        choices=[f.value for f in FeedFormat],
        default=FeedFormat.RSS.value,
    )
    feed_parser.add_argument("-o", "--output", type=Path, default=None, help="Write to file instead of stdout")

    subparsers.add_parser("check", help="Test the record store connection")

    browse_parser = subparsers.add_parser("browse", help="Show category counts or one category page")
    browse_parser.add_argument("kind", nargs="?", choices=["type", "level", "location", "language"])
    browse_parser.add_argument("slug", nargs="?", help="e.g. full-time, entrylevel, remote, germany, en")

    return parser


def _listing_params(args: argparse.Namespace) -> Dict[str, str]:
    params = {
        "q": args.search,
        "types": args.types,
        "roles": args.roles,
        "salary": args.salary,
        "languages": args.languages,
        "page": str(args.page),
    }
    if args.remote:
        params["remote"] = "true"
    if args.visa:
        params["visa"] = "true"
    if args.sort:
        params["sort"] = args.sort
    if args.per_page is not None:
        params["per_page"] = str(args.per_page)
    return params


def _job_line(job: Job) -> str:
    marker = "*" if job.featured else " "
    job_type = job.type.value if job.type else "-"
    return (
        f"[{marker}] {job.title} at {job.company} | {job_type} | {format_location(job)} | "
        f"{format_salary(job.salary)} | {format_job_date(job.posted_date)}\n"
        f"    {generate_job_slug(job.title, job.company)}"
    )


def cmd_list(args: argparse.Namespace, board_config: BoardConfig, repository: JobRepository) -> int:
    cache = RequestCache()
    jobs = repository.get_jobs(cache)
    query = ListingQuery.from_params(_listing_params(args), board_config.job_listings)
    page = run_listing(jobs, query)

    for job in page.items:
        print(_job_line(job))

    if not page.items:
        print("No positions found matching your search criteria.")
    print(f"Page {page.page} of {max(page.total_pages, 1)} ({page.total} positions)")
    if page.has_previous:
        print(f"Previous page: --page {page.page - 1}")
    if page.has_next:
        print(f"Next page: --page {page.page + 1}")
    print(f"Link: {board_config.site.url}/?{urlencode(query.to_params())}")
    return 0


def cmd_show(args: argparse.Namespace, board_config: BoardConfig, repository: JobRepository) -> int:
    job = repository.get_job_by_slug(args.slug, RequestCache())
    if job is None:
        print(f"Job not found: {args.slug}", file=sys.stderr)
        return 1

    lines = [
        f"{job.title} at {job.company}",
        f"Type: {job.type.value if job.type else 'Not specified'}",
        f"Location: {format_location(job)}",
        f"Salary: {format_salary(job.salary, True)}",
    ]
    approximation = format_usd_approximation(job.salary)
    if approximation:
        lines.append(f"         {approximation}")
    lines.extend(
        [
            "Career level: " + ", ".join(level.value for level in job.career_level),
            f"Visa sponsorship: {job.visa_sponsorship.value}",
        ]
    )
    if job.remote_region:
        lines.append(f"Remote region: {job.remote_region.value}")
    if job.languages:
        lines.append(
            "Languages: " + ", ".join(get_display_name_from_code(code) for code in job.languages)
        )
    lines.extend(
        [
            f"Posted: {format_job_date(job.posted_date)}",
            f"Apply: {job.apply_url}",
            "",
            job.description,
        ]
    )
    if job.benefits:
        lines.extend(["", "Benefits:", job.benefits])
    if job.application_requirements:
        lines.extend(["", "Application requirements:", job.application_requirements])

    print("\n".join(lines))
    return 0


def cmd_feed(args: argparse.Namespace, board_config: BoardConfig, repository: JobRepository) -> int:
    with log_context(feed_format=args.feed_format):
        try:
            ensure_feed_enabled(board_config.feed, args.feed_format)
            feed = build_feed(repository.get_jobs(RequestCache()), board_config.site, board_config.feed)
            output = render_feed(feed, args.feed_format)
        except FeedError as e:
            print(f"Error generating {args.feed_format} feed: {e}", file=sys.stderr)
            return 1

    if args.output:
        args.output.write_text(output, encoding="utf-8")
        logger.info(
            f"Wrote feed to {args.output}",
            extra={"event": "feed.written", "path": str(args.output), "items": len(feed.items)},
        )
    else:
        print(output)
    return 0


def cmd_check(args: argparse.Namespace, board_config: BoardConfig, repository: JobRepository) -> int:
    if not repository.configured:
        print("✗ Record store not configured (set AIRTABLE_ACCESS_TOKEN and AIRTABLE_BASE_ID)")
        return 1

    if not repository.test_connection():
        print("✗ Record store connection failed")
        return 1

    result = repository.fetch_jobs()
    if result.status != FetchStatus.SUCCESS:
        print(f"✗ Connected, but fetching jobs failed: {result.error_message}")
        return 1

    print(f"✓ Record store connection OK ({len(result.jobs)} active jobs)")
    if result.skipped_records:
        print(f"  {result.skipped_records} record(s) skipped during normalization")
    return 0


CATEGORY_VIEWS: Dict[str, Callable[[List[Job], str], Optional[List[Job]]]] = {
    "type": jobs_for_type,
    "level": jobs_for_career_level,
    "location": jobs_for_location,
    "language": jobs_for_language,
}


def _print_facets(jobs: List[Job]) -> None:
    facets = count_facets(jobs)

    print("Job types:")
    for kind, count in FacetCounts.by_count(facets.types):
        print(f"  {JOB_TYPE_DISPLAY_NAMES[kind]} ({count}) - {JOB_TYPE_DESCRIPTIONS[kind]}")

    print("Career levels:")
    for level, count in FacetCounts.by_count(facets.career_levels):
        print(f"  {CAREER_LEVEL_DISPLAY_NAMES[level]} ({count})")

    print("Locations:")
    print(f"  Remote ({facets.remote})")
    for country, count in FacetCounts.by_count(facets.countries):
        print(f"  {country} ({count}) [{create_location_slug(country)}]")

    print("Languages:")
    for code, count in FacetCounts.by_count(facets.languages):
        print(f"  {get_display_name_from_code(code)} ({count}) [{code}]")


def cmd_browse(args: argparse.Namespace, board_config: BoardConfig, repository: JobRepository) -> int:
    jobs = repository.get_jobs(RequestCache())

    if args.kind is None:
        _print_facets(jobs)
        return 0

    if args.slug is None:
        print(f"browse {args.kind} requires a category slug", file=sys.stderr)
        return 1

    matched = CATEGORY_VIEWS[args.kind](jobs, args.slug)
    if matched is None:
        print(f"Unknown {args.kind} category: {args.slug}", file=sys.stderr)
        return 1

    for job in matched:
        print(_job_line(job))
    print(f"{len(matched)} positions")
    return 0


COMMANDS: Dict[str, Callable[[argparse.Namespace, BoardConfig, JobRepository], int]] = {
    "list": cmd_list,
    "show": cmd_show,
    "feed": cmd_feed,
    "check": cmd_check,
    "browse": cmd_browse,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the jobboard CLI.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        board_config, env_config = load_runtime_config(args.config, args.log_level)

        configure_logging(
            level=env_config.log_level,
            format_type=board_config.logging.format,
            environment=env_config.environment,
        )

        with log_context(request_id=new_request_id(), command=args.command):
            logger.info(
                "Job board command starting",
                extra={
                    "event": "cli.command.starting",
                    "config_path": str(args.config) if args.config else None,
                    "store_configured": env_config.store_configured,
                },
            )

            repository = build_repository(board_config, env_config)
            try:
                exit_code = COMMANDS[args.command](args, board_config, repository)
            finally:
                if repository.client is not None:
                    repository.client.close()

            logger.info(
                "Job board command finished",
                extra={"event": "cli.command.finished", "exit_code": exit_code},
            )
            return exit_code

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1
    except StoreConfigurationError as e:
        print(f"Store Configuration Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
