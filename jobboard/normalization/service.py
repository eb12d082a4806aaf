"""Record normalization service.

Converts raw ``StoreRecord`` rows into validated ``Job`` domain models by
running every field through the total normalizers in ``fields``.
"""

import logging
from typing import Iterable, List, Optional

from pydantic import ValidationError

from jobboard.domain.models import Job, StoreRecord
from jobboard.logging import get_logger
from jobboard.utils.markdown import normalize_markdown

from . import fields as f

logger = get_logger(__name__, component="normalization")

# Free-text fields copied through with only whitespace trimming
PASSTHROUGH_FIELDS = (
    "valid_through",
    "job_identifier",
    "job_source_name",
    "timezone_requirements",
    "workplace_city",
    "workplace_country",
    "skills",
    "qualifications",
    "education_requirements",
    "experience_requirements",
    "industry",
    "occupational_category",
    "responsibilities",
)


class JobNormalizer:
    """Builds Job models from store records."""

    def __init__(self, logger_instance: Optional[logging.Logger] = None):
        self.logger = logger_instance or logger

    def normalize(self, record: StoreRecord) -> Job:
        """Normalize a single record.

        Raises:
            ValidationError: If the normalized values still fail model validation
        """
        raw = record.fields

        data = {
            "id": record.id,
            "title": f.normalize_text(raw.get("title")),
            "company": f.normalize_text(raw.get("company")),
            "type": f.normalize_employment_type(raw.get("type")),
            "salary": f.normalize_salary(
                raw.get("salary_min"),
                raw.get("salary_max"),
                raw.get("salary_currency"),
                raw.get("salary_unit"),
            ),
            "description": normalize_markdown(raw.get("description")),
            "benefits": f.normalize_benefits(raw.get("benefits")),
            "application_requirements": f.normalize_application_requirements(
                raw.get("application_requirements")
            ),
            "apply_url": f.normalize_text(raw.get("apply_url")),
            "posted_date": f.normalize_text(raw.get("posted_date")),
            "status": f.normalize_status(raw.get("status")),
            "career_level": f.normalize_career_level(raw.get("career_level")),
            "visa_sponsorship": f.normalize_visa_sponsorship(raw.get("visa_sponsorship")),
            "featured": f.normalize_featured(raw.get("featured")),
            "workplace_type": f.normalize_workplace_type(raw.get("workplace_type")),
            "remote_region": f.normalize_remote_region(raw.get("remote_region")),
            "languages": f.normalize_languages(raw.get("languages")),
        }
        for name in PASSTHROUGH_FIELDS:
            data[name] = f.normalize_optional_text(raw.get(name))

        return Job(**data)

    def normalize_batch(self, records: Iterable[StoreRecord]) -> List[Job]:
        """Normalize many records, skipping (and logging) any that fail."""
        jobs: List[Job] = []
        skipped = 0

        for record in records:
            try:
                jobs.append(self.normalize(record))
            except ValidationError as e:
                skipped += 1
                self.logger.warning(
                    "Skipping record that failed validation",
                    extra={
                        "event": "normalization.record.skipped",
                        "record_id": record.id,
                        "error_count": e.error_count(),
                        "error": str(e).splitlines()[0],
                    },
                )

        self.logger.debug(
            "Normalized record batch",
            extra={
                "event": "normalization.batch.completed",
                "normalized": len(jobs),
                "skipped": skipped,
            },
        )
        return jobs
