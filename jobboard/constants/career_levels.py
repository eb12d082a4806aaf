"""Human-readable names for career levels."""

from typing import Dict

from jobboard.domain.models import CareerLevel

CAREER_LEVEL_DISPLAY_NAMES: Dict[CareerLevel, str] = {
    CareerLevel.INTERNSHIP: "Internship",
    CareerLevel.ENTRY_LEVEL: "Entry Level",
    CareerLevel.ASSOCIATE: "Associate",
    CareerLevel.JUNIOR: "Junior",
    CareerLevel.MID_LEVEL: "Mid Level",
    CareerLevel.SENIOR: "Senior",
    CareerLevel.STAFF: "Staff",
    CareerLevel.PRINCIPAL: "Principal",
    CareerLevel.LEAD: "Lead",
    CareerLevel.MANAGER: "Manager",
    CareerLevel.SENIOR_MANAGER: "Senior Manager",
    CareerLevel.DIRECTOR: "Director",
    CareerLevel.SENIOR_DIRECTOR: "Senior Director",
    CareerLevel.VP: "VP",
    CareerLevel.SVP: "SVP",
    CareerLevel.EVP: "EVP",
    CareerLevel.C_LEVEL: "C-Level",
    CareerLevel.FOUNDER: "Founder",
    CareerLevel.NOT_SPECIFIED: "Not Specified",
}
