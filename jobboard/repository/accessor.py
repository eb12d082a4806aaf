"""Job repository: the single source of the canonical job list."""

from typing import List, Optional

from jobboard.domain.models import Job
from jobboard.logging import get_logger
from jobboard.normalization.service import JobNormalizer
from jobboard.store.base import BaseStoreClient
from jobboard.store.exceptions import StoreError
from jobboard.utils.slugify import generate_job_slug

from .cache import RequestCache
from .models import FetchStatus, JobsFetchResult

logger = get_logger(__name__, component="repository")

JOBS_CACHE_KEY = "jobs"


class JobRepository:
    """Read-only access to normalized jobs.

    ``get_jobs`` and ``get_job`` never raise: a missing store client or any
    store failure is logged and degrades to an empty list or None. Callers
    that need to tell "no jobs" from "store down" use ``fetch_jobs``.
    """

    def __init__(
        self,
        client: Optional[BaseStoreClient],
        normalizer: Optional[JobNormalizer] = None,
    ):
        """Initialize the repository.

        Args:
            client: Store client, or None when credentials are not configured
            normalizer: Record normalizer (defaults to a new JobNormalizer)
        """
        self.client = client
        self.normalizer = normalizer or JobNormalizer()

    @property
    def configured(self) -> bool:
        return self.client is not None

    def fetch_jobs(self) -> JobsFetchResult:
        """Fetch and normalize every active job, newest posted_date first."""
        if self.client is None:
            logger.warning(
                "Store not configured, serving no jobs",
                extra={"event": "repository.jobs.not_configured"},
            )
            return JobsFetchResult(status=FetchStatus.NOT_CONFIGURED)

        try:
            records = self.client.list_active_records()
        except StoreError as e:
            logger.error(
                f"Failed to fetch jobs: {e}",
                extra={
                    "event": "repository.jobs.fetch_failed",
                    "error_type": type(e).__name__,
                },
            )
            return JobsFetchResult(status=FetchStatus.FETCH_ERROR, error_message=str(e))

        jobs = self.normalizer.normalize_batch(records)

        logger.info(
            "Loaded jobs",
            extra={
                "event": "repository.jobs.loaded",
                "count": len(jobs),
                "fetched": len(records),
            },
        )
        return JobsFetchResult(
            status=FetchStatus.SUCCESS,
            jobs=jobs,
            skipped_records=len(records) - len(jobs),
        )

    def get_jobs(self, cache: Optional[RequestCache] = None) -> List[Job]:
        """Return every active job; empty on missing configuration or error.

        With a cache, repeated calls return the same list object.
        """
        if cache is None:
            return self.fetch_jobs().jobs
        return cache.get_or_set(JOBS_CACHE_KEY, lambda: self.fetch_jobs().jobs)

    def get_job(self, job_id: str, cache: Optional[RequestCache] = None) -> Optional[Job]:
        """Return one active job by store id, or None."""
        if cache is None:
            return self._load_job(job_id)
        return cache.get_or_set(("job", job_id), lambda: self._load_job(job_id))

    def get_job_by_slug(self, slug: str, cache: Optional[RequestCache] = None) -> Optional[Job]:
        """Return the first active job whose slug matches.

        Slugs are not unique; on a collision the job posted most recently
        wins because the list is ordered by posted_date descending.
        """
        for job in self.get_jobs(cache):
            if generate_job_slug(job.title, job.company) == slug:
                return job
        return None

    def test_connection(self) -> bool:
        """Whether the store is reachable with the configured credentials."""
        if self.client is None:
            return False

        try:
            self.client.ping()
        except StoreError as e:
            logger.error(
                f"Store connection test failed: {e}",
                extra={"event": "repository.connection.failed", "error_type": type(e).__name__},
            )
            return False

        logger.info("Store connection OK", extra={"event": "repository.connection.ok"})
        return True

    def _load_job(self, job_id: str) -> Optional[Job]:
        if self.client is None or not job_id:
            return None

        try:
            record = self.client.get_record(job_id)
        except StoreError as e:
            logger.error(
                f"Failed to fetch job {job_id}: {e}",
                extra={
                    "event": "repository.job.fetch_failed",
                    "job_id": job_id,
                    "error_type": type(e).__name__,
                },
            )
            return None

        if record is None:
            return None

        jobs = self.normalizer.normalize_batch([record])
        if not jobs or not jobs[0].is_active:
            return None
        return jobs[0]
