"""Marketplace provider eligibility and license number formatting."""

import re
from datetime import date, timedelta

from models.schemas.license import (
    LicenseFormatCheck,
    LicenseStatus,
    LicenseVerification,
    ProviderEligibility,
)
from services.license.base import normalize_license_number

EXPIRY_WARNING_DAYS = 60

_ALNUM_RE = re.compile(r"^[A-Za-z0-9]+$")

_INELIGIBILITY_REASONS = {
    LicenseStatus.EXPIRED: "Your RN license has expired. Please renew before applying.",
    LicenseStatus.SUSPENDED: "Your license is currently suspended.",
    LicenseStatus.REVOKED: "Your license has been revoked.",
    LicenseStatus.PROBATION: "Your license is on probation. Manual review required.",
    LicenseStatus.NOT_FOUND: "License not found. Please verify the license number and state.",
    LicenseStatus.INACTIVE: "Your license is inactive. Please reactivate before applying.",
    LicenseStatus.ERROR: "Unable to verify license. Please try again.",
}


def check_provider_eligibility(
    result: LicenseVerification | None,
    today: date | None = None,
) -> ProviderEligibility:
    """Decide whether a verified license qualifies someone as a provider.

    A license expiring soon is still eligible (with a warning); that check
    runs before the discipline check.
    """
    if result is None:
        return ProviderEligibility(eligible=False, reason="No verification result provided")

    if not result.verified:
        return ProviderEligibility(
            eligible=False,
            reason=_INELIGIBILITY_REASONS.get(result.status, "License verification failed."),
        )

    today = today or date.today()
    if result.expiration_date and result.expiration_date < today + timedelta(days=EXPIRY_WARNING_DAYS):
        return ProviderEligibility(
            eligible=True,
            warning="Your license expires within 60 days. Please renew before expiration.",
            expires_in=(result.expiration_date - today).days,
        )

    if result.discipline:
        return ProviderEligibility(
            eligible=False,
            reason="License has disciplinary action. Please contact support for manual review.",
            requires_manual_review=True,
        )

    return ProviderEligibility(eligible=True, message="License verified successfully")


def validate_license_format(license_number: str | None) -> LicenseFormatCheck:
    """Cheap format check before calling a verifier."""
    if not license_number or not isinstance(license_number, str):
        return LicenseFormatCheck(valid=False, error="License number is required")

    clean = re.sub(r"[\s-]", "", license_number)
    if len(clean) < 4:
        return LicenseFormatCheck(valid=False, error="License number is too short")
    if len(clean) > 20:
        return LicenseFormatCheck(valid=False, error="License number is too long")
    if not _ALNUM_RE.match(clean):
        return LicenseFormatCheck(valid=False, error="License number contains invalid characters")
    return LicenseFormatCheck(valid=True)


def format_license_number(license_number: str | None, state: str | None) -> str:
    if not license_number:
        return ""
    clean = normalize_license_number(license_number)
    code = (state or "").upper()

    if code == "CA" and len(clean) >= 2:
        return f"{clean[:2]} {clean[2:]}"
    if code == "NY" and len(clean) >= 6:
        return f"{clean[:6]}-{clean[6:]}"
    return clean
