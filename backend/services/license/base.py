"""Abstract base class for RN license verifiers."""

from abc import ABC, abstractmethod
import logging
import re

from models.schemas.license import LicenseStatus, LicenseVerification
from services.license.states import is_valid_state

logger = logging.getLogger(__name__)

_SEPARATORS_RE = re.compile(r"[\s-]")


def normalize_license_number(license_number: str) -> str:
    """Strip spaces and dashes and upper-case: "rn 123-456" -> "RN123456"."""
    return _SEPARATORS_RE.sub("", license_number).upper()


class LicenseVerifier(ABC):
    """Base class for license lookups.

    ``verify()`` validates and normalizes input, then delegates to
    ``_lookup()``. Subclasses report failures through the returned
    ``LicenseVerification`` instead of raising.
    """

    name: str = ""

    def verify(self, license_number: str | None, state: str | None) -> LicenseVerification:
        if not license_number or not isinstance(license_number, str) or not license_number.strip():
            return LicenseVerification(
                verified=False,
                status=LicenseStatus.ERROR,
                error="Invalid license number provided",
            )
        if not is_valid_state(state):
            return LicenseVerification(
                verified=False,
                status=LicenseStatus.ERROR,
                error="Invalid state code provided",
            )

        clean_number = normalize_license_number(license_number)
        normalized_state = state.strip().upper()
        logger.info("Verifying license in %s via %s verifier", normalized_state, self.name)
        return self._lookup(clean_number, normalized_state)

    @abstractmethod
    def _lookup(self, license_number: str, state: str) -> LicenseVerification:
        """Look up an already-normalized license number and state code."""

    def close(self) -> None:
        """Release any held resources. No-op unless the verifier owns a client."""
