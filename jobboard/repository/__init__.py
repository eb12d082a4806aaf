"""Job repository and its request-scoped cache."""

from .accessor import JobRepository
from .cache import RequestCache
from .models import FetchStatus, JobsFetchResult

__all__ = ["FetchStatus", "JobRepository", "JobsFetchResult", "RequestCache"]
