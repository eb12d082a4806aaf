"""Result types returned by the job repository."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from jobboard.domain.models import Job


class FetchStatus(str, Enum):
    """Outcome of a repository fetch."""

    SUCCESS = "success"
    NOT_CONFIGURED = "not_configured"
    FETCH_ERROR = "fetch_error"


@dataclass
class JobsFetchResult:
    """
    Outcome of loading every active job from the store.

    Attributes:
        status: Whether the fetch succeeded, was skipped, or failed
        jobs: Normalized jobs (empty unless status is SUCCESS)
        error_message: Failure description when status is FETCH_ERROR
        skipped_records: Records dropped because they failed validation
    """

    status: FetchStatus
    jobs: List[Job] = field(default_factory=list)
    error_message: Optional[str] = None
    skipped_records: int = 0

    @property
    def ok(self) -> bool:
        return self.status == FetchStatus.SUCCESS
