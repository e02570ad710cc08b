"""RN license verification results and provider eligibility."""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class LicenseStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    EXPIRED = "expired"
    SUSPENDED = "suspended"
    REVOKED = "revoked"
    PROBATION = "probation"
    NOT_FOUND = "not_found"
    ERROR = "error"


class LicenseeInfo(BaseModel):
    first_name: str = ""
    last_name: str = ""
    license_type: str = "RN"
    original_issue_date: date | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class LicenseVerification(BaseModel):
    """Outcome of a single license lookup.

    Failures are reported through ``status``/``error`` rather than raised.
    """
    verified: bool = False
    status: LicenseStatus = LicenseStatus.ERROR
    error: str | None = None
    expiration_date: date | None = None
    discipline: bool = False
    discipline_details: str | None = None
    licensee_info: LicenseeInfo | None = None
    compact_license: bool = False  # NLC multistate license
    verified_at: datetime | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class ProviderEligibility(BaseModel):
    eligible: bool = False
    reason: str | None = None
    warning: str | None = None
    message: str | None = None
    expires_in: int | None = None  # days
    requires_manual_review: bool = False

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class LicenseFormatCheck(BaseModel):
    valid: bool
    error: str | None = None
