"""Pydantic contracts shared by the scoring, search and verification services."""

from models.schemas.school import School
from models.schemas.user_profile import Certification, UserProfile
from models.schemas.fit_score import CriterionResult, FitScoreResult, SchoolFit
from models.schemas.license import (
    LicenseeInfo,
    LicenseFormatCheck,
    LicenseStatus,
    LicenseVerification,
    ProviderEligibility,
)

__all__ = [
    "School",
    "Certification",
    "UserProfile",
    "CriterionResult",
    "FitScoreResult",
    "SchoolFit",
    "LicenseeInfo",
    "LicenseFormatCheck",
    "LicenseStatus",
    "LicenseVerification",
    "ProviderEligibility",
]
