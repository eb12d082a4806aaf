"""Human-readable names and descriptions for employment types."""

from typing import Dict

from jobboard.domain.models import EmploymentType

JOB_TYPE_DISPLAY_NAMES: Dict[EmploymentType, str] = {
    EmploymentType.FULL_TIME: "Full-time",
    EmploymentType.PART_TIME: "Part-time",
    EmploymentType.CONTRACT: "Contract",
    EmploymentType.FREELANCE: "Freelance",
}

JOB_TYPE_DESCRIPTIONS: Dict[EmploymentType, str] = {
    EmploymentType.FULL_TIME: "Permanent positions with standard working hours.",
    EmploymentType.PART_TIME: "Positions with reduced working hours.",
    EmploymentType.CONTRACT: "Fixed-term engagements with a defined end date.",
    EmploymentType.FREELANCE: "Project-based work for independent professionals.",
}
