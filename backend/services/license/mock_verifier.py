"""Deterministic license verifier for development and tests.

Outcome is chosen by license-number pattern:
    contains INVALID    -> not_found
    contains EXPIRED    -> expired
    contains SUSPENDED  -> suspended, with discipline
    anything else       -> active, expiring one year from today
"""

import logging
from datetime import date, datetime, timezone
from typing import Callable

from models.schemas.license import LicenseeInfo, LicenseStatus, LicenseVerification
from services.license.base import LicenseVerifier

logger = logging.getLogger(__name__)

# Sample Nurse Licensure Compact states
COMPACT_STATES = frozenset({"TX", "FL", "AZ", "CO", "GA"})

_TEST_LICENSEE = LicenseeInfo(
    first_name="Test",
    last_name="User",
    license_type="RN",
    original_issue_date=date(2018, 1, 15),
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MockVerifier(LicenseVerifier):
    name = "mock"

    def __init__(self, clock: Callable[[], datetime] = _utcnow) -> None:
        self._clock = clock

    def _lookup(self, license_number: str, state: str) -> LicenseVerification:
        logger.info("[MOCK] Verifying license %s in %s", license_number, state)
        now = self._clock()

        if "INVALID" in license_number:
            return LicenseVerification(
                verified=False,
                status=LicenseStatus.NOT_FOUND,
                error="License not found in database",
            )

        if "EXPIRED" in license_number:
            return LicenseVerification(
                verified=False,
                status=LicenseStatus.EXPIRED,
                expiration_date=date(2023, 6, 30),
                licensee_info=_TEST_LICENSEE,
                verified_at=now,
            )

        if "SUSPENDED" in license_number:
            return LicenseVerification(
                verified=False,
                status=LicenseStatus.SUSPENDED,
                expiration_date=date(2025, 12, 31),
                discipline=True,
                discipline_details="License suspended pending investigation",
                licensee_info=_TEST_LICENSEE,
                verified_at=now,
            )

        return LicenseVerification(
            verified=True,
            status=LicenseStatus.ACTIVE,
            expiration_date=_one_year_after(now.date()),
            licensee_info=LicenseeInfo(
                first_name="Sarah",
                last_name="Johnson",
                license_type="RN",
                original_issue_date=date(2019, 5, 20),
            ),
            compact_license=state in COMPACT_STATES,
            verified_at=now,
        )


def _one_year_after(day: date) -> date:
    try:
        return day.replace(year=day.year + 1)
    except ValueError:
        # Feb 29 -> Mar 1
        return date(day.year + 1, 3, 1)
