"""School list helpers: rank by fit score and typo-tolerant search."""

import logging

from rapidfuzz import fuzz

from models.schemas.fit_score import SchoolFit
from models.schemas.school import School
from models.schemas.user_profile import UserProfile
from services.fit_score import calculate_fit_score, get_fit_score_color

logger = logging.getLogger(__name__)

RECOMMENDED_MIN_SCORE = 60

# Field weights for search ranking (name dominates)
SEARCH_FIELD_WEIGHTS: dict[str, float] = {
    "name": 0.6,
    "city": 0.2,
    "state": 0.2,
}
SEARCH_MIN_SIMILARITY = 60  # 0-100, per field
SEARCH_MIN_QUERY_LENGTH = 2
DEFAULT_RESULTS_WITHOUT_QUERY = 10


def rank_schools(
    schools: list[School],
    profile: UserProfile,
    recommended_only: bool = False,
) -> list[SchoolFit]:
    """Score every school against ``profile``, best fit first.

    Ties are broken by school name so the order is stable across calls.
    """
    fits: list[SchoolFit] = []
    for school in schools:
        result = calculate_fit_score(school, profile)
        if recommended_only and result.score < RECOMMENDED_MIN_SCORE:
            continue
        fits.append(SchoolFit(
            school_id=school.id,
            name=school.name,
            state=school.state,
            fit_score=result,
            color=get_fit_score_color(result.score),
        ))

    fits.sort(key=lambda f: (-f.fit_score.score, f.name.lower()))
    logger.info(
        "Ranked %d/%d schools (recommended_only=%s)",
        len(fits), len(schools), recommended_only,
    )
    return fits


def search_schools(
    schools: list[School],
    query: str,
    limit: int = 20,
) -> list[School]:
    """Fuzzy search over school name, city and state.

    A blank query returns the first schools in list order.
    """
    query = query.strip().lower()
    if not query:
        return schools[:DEFAULT_RESULTS_WITHOUT_QUERY]
    if len(query) < SEARCH_MIN_QUERY_LENGTH:
        return []

    scored: list[tuple[float, int, School]] = []
    for index, school in enumerate(schools):
        field_scores = {
            field: _field_similarity(query, getattr(school, field))
            for field in SEARCH_FIELD_WEIGHTS
        }
        # Fields under the similarity floor contribute nothing
        weighted = sum(
            SEARCH_FIELD_WEIGHTS[field] * score
            for field, score in field_scores.items()
            if score >= SEARCH_MIN_SIMILARITY
        )
        if weighted <= 0:
            continue
        scored.append((weighted, index, school))

    scored.sort(key=lambda item: (-item[0], item[1]))
    return [school for _, _, school in scored[:limit]]


def _field_similarity(query: str, value: str | None) -> float:
    if not value:
        return 0.0
    value = value.lower()
    if query == value:
        return 100.0
    # Short fields (state codes) would fully match any query containing them
    if len(value) < len(query):
        return fuzz.ratio(query, value)
    return fuzz.partial_ratio(query, value)
