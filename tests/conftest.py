"""Shared pytest fixtures."""

from pathlib import Path

import pytest

from jobboard.config.models import FeedConfig, SiteConfig
from jobboard.domain.models import Job
from jobboard.logging.context import clear_log_context
from jobboard.repository import JobRepository
from tests.helpers.fixture_store import FixtureStoreClient

FIXTURES_DIR = Path(__file__).parent / "fixtures"

ENV_VARS = (
    "AIRTABLE_ACCESS_TOKEN",
    "AIRTABLE_BASE_ID",
    "AIRTABLE_TABLE_NAME",
    "APP_URL",
    "LOG_LEVEL",
    "ENVIRONMENT",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep developer .env values and log context out of every test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def fixture_store():
    """Store client serving tests/fixtures/records.yaml."""
    return FixtureStoreClient(FIXTURES_DIR / "records.yaml")


@pytest.fixture
def repository(fixture_store):
    return JobRepository(fixture_store)


@pytest.fixture
def jobs(repository):
    """Normalized active jobs, newest posted_date first."""
    return repository.get_jobs()


@pytest.fixture
def site():
    return SiteConfig(title="Test Board", description="Jobs for testing", url="https://jobs.test.example")


@pytest.fixture
def feed_config():
    return FeedConfig()


@pytest.fixture
def make_job():
    """Factory for Job instances with sensible defaults."""
    counter = {"n": 0}

    def _make(**overrides) -> Job:
        counter["n"] += 1
        data = {
            "id": f"recTest{counter['n']:04d}",
            "title": f"Job {counter['n']}",
            "company": "Example Corp",
            "type": "Full-time",
            "description": "A job.",
            "apply_url": "https://example.com/apply",
            "posted_date": "2025-11-01",
            "status": "active",
        }
        data.update(overrides)
        return Job(**data)

    return _make
