from fastapi import APIRouter, Depends, HTTPException, Request, Response
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_license_verifier, get_profanity_filter
from config import settings
from models.requests import (
    ContentCheckRequest,
    ContentValidateRequest,
    FitScoreRequest,
    LicenseVerifyRequest,
    RankSchoolsRequest,
    SchoolSearchRequest,
)
from models.responses import ContentCheckResponse, FitScoreResponse, LicenseVerifyResponse
from models.schemas.fit_score import SchoolFit
from models.schemas.school import School
from services.fit_score import calculate_fit_score, get_fit_score_color
from services.license.base import LicenseVerifier
from services.license.eligibility import (
    check_provider_eligibility,
    format_license_number,
    validate_license_format,
)
from services.profanity_filter import InappropriateContentError, ProfanityFilter
from services.school_ranking import rank_schools, search_schools

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "license_mock_mode": settings.use_mock_verifier,
    }


@router.post("/fit-score", response_model=FitScoreResponse)
async def fit_score(body: FitScoreRequest):
    result = calculate_fit_score(body.school, body.profile)
    return FitScoreResponse(
        **result.model_dump(),
        color=get_fit_score_color(result.score),
    )


@router.post("/fit-score/rank", response_model=list[SchoolFit])
async def rank(body: RankSchoolsRequest):
    return rank_schools(body.schools, body.profile, recommended_only=body.recommended_only)


@router.post("/schools/search", response_model=list[School])
async def search(body: SchoolSearchRequest):
    return search_schools(body.schools, body.query, limit=body.limit)


@router.post("/licenses/verify", response_model=LicenseVerifyResponse)
@limiter.limit(settings.license_verify_rate_limit)
def verify_license(
    request: Request,
    body: LicenseVerifyRequest,
    verifier: LicenseVerifier = Depends(get_license_verifier),
):
    # Reject obviously malformed numbers before hitting the verifier
    format_check = validate_license_format(body.license_number)
    if not format_check.valid:
        raise HTTPException(status_code=400, detail=format_check.error)

    verification = verifier.verify(body.license_number, body.state)
    return LicenseVerifyResponse(
        verification=verification,
        eligibility=check_provider_eligibility(verification),
        formatted_number=format_license_number(body.license_number, body.state),
    )


@router.post("/content/check", response_model=ContentCheckResponse)
async def check_content(
    body: ContentCheckRequest,
    content_filter: ProfanityFilter = Depends(get_profanity_filter),
):
    result = content_filter.check(body.text)
    return ContentCheckResponse(
        has_profanity=result.has_profanity,
        found_words=result.found_words,
        censored=content_filter.censor(body.text),
    )


@router.post("/content/validate", status_code=204)
async def validate_content(
    body: ContentValidateRequest,
    content_filter: ProfanityFilter = Depends(get_profanity_filter),
):
    try:
        content_filter.ensure_clean(*body.texts)
    except InappropriateContentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return Response(status_code=204)
