"""License verifier backed by the Nursys e-Notify HTTP API."""

import logging
from datetime import date, datetime, timezone

import httpx

from models.schemas.license import LicenseeInfo, LicenseStatus, LicenseVerification
from services.license.base import LicenseVerifier

logger = logging.getLogger(__name__)

_STATUS_MAP = {status.value: status for status in LicenseStatus if status != LicenseStatus.ERROR}


def map_nursys_status(nursys_status: str | None) -> LicenseStatus:
    """Map an API status string onto ``LicenseStatus`` (unknown -> ERROR)."""
    if not isinstance(nursys_status, str) or not nursys_status:
        return LicenseStatus.ERROR
    return _STATUS_MAP.get(nursys_status.lower(), LicenseStatus.ERROR)


class HttpVerifier(LicenseVerifier):
    name = "nursys"

    def __init__(
        self,
        api_url: str,
        api_key: str,
        client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self._api_key = api_key
        self._client = client or httpx.Client(timeout=timeout)

    def _lookup(self, license_number: str, state: str) -> LicenseVerification:
        try:
            response = self._client.post(
                f"{self.api_url}/verify",
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "X-API-Version": "1.0",
                },
                json={
                    "licenseNumber": license_number,
                    "state": state,
                    "licenseType": "RN",
                },
            )
        except httpx.HTTPError as e:
            logger.error("Nursys API error: %s", e)
            return LicenseVerification(
                verified=False,
                status=LicenseStatus.ERROR,
                error="Failed to verify license. Please try again later.",
            )

        if response.status_code == 404:
            return LicenseVerification(
                verified=False,
                status=LicenseStatus.NOT_FOUND,
                error="License not found in Nursys database",
            )

        if not response.is_success:
            message = _error_message(response)
            logger.warning("Nursys API returned %d: %s", response.status_code, message)
            return LicenseVerification(
                verified=False,
                status=LicenseStatus.ERROR,
                error=message,
            )

        try:
            data = response.json()
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            return _to_verification(data)
        except (ValueError, TypeError) as e:
            logger.error("Failed to parse Nursys response: %s", e)
            return LicenseVerification(
                verified=False,
                status=LicenseStatus.ERROR,
                error="Failed to verify license. Please try again later.",
            )

    def close(self) -> None:
        self._client.close()


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = {}
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"API error: {response.status_code}"


def _to_verification(data: dict) -> LicenseVerification:
    status = map_nursys_status(data.get("status"))
    return LicenseVerification(
        verified=status == LicenseStatus.ACTIVE,
        status=status,
        expiration_date=_parse_date(data.get("expirationDate")),
        discipline=bool(data.get("discipline")),
        discipline_details=data.get("disciplineDetails") or None,
        licensee_info=LicenseeInfo(
            first_name=data.get("firstName") or "",
            last_name=data.get("lastName") or "",
            license_type=data.get("licenseType") or "RN",
            original_issue_date=_parse_date(data.get("originalIssueDate")),
        ),
        compact_license=bool(data.get("compactLicense")),
        verified_at=datetime.now(timezone.utc),
    )


def _parse_date(value: str | None) -> date | None:
    if not value:
        return None
    if not isinstance(value, str):
        logger.warning("Unparseable date from Nursys: %r", value)
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        logger.warning("Unparseable date from Nursys: %r", value)
        return None
