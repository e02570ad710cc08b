from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from models.schemas.fit_score import FitScoreResult
from models.schemas.license import LicenseVerification, ProviderEligibility

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


class FitScoreResponse(FitScoreResult):
    color: str = "red"  # green | yellow | red


class LicenseVerifyResponse(BaseModel):
    verification: LicenseVerification
    eligibility: ProviderEligibility
    formatted_number: str = ""

    model_config = _CAMEL


class ContentCheckResponse(BaseModel):
    has_profanity: bool = False
    found_words: list[str] = []
    censored: str = ""

    model_config = _CAMEL
