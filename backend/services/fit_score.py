"""Fit score: compare an applicant profile against a school's requirements.

Six rule-based criteria, each with a fixed point budget:

    GPA                25
    GRE                20
    ICU type           20
    Years experience   15
    CCRN               10  (full credit when the school does not require it)
    State match         5  bonus: added to earned points, never to the total

score = min(100, round_half_up(earned / total * 100))

Missing profile data never raises; it lands in an "unknown" or zero-credit
branch of the relevant rule.
"""

import logging
import math

from models.schemas.fit_score import CriterionResult, FitScoreResult
from models.schemas.school import School
from models.schemas.user_profile import UserProfile

logger = logging.getLogger(__name__)

GPA_WEIGHT = 25
GRE_WEIGHT = 20
EXPERIENCE_WEIGHT = 20
YEARS_WEIGHT = 15
CCRN_WEIGHT = 10
STATE_BONUS = 5

DEFAULT_MINIMUM_GPA = 3.0
DEFAULT_MINIMUM_YEARS = 1.0

# How far under the GPA minimum still earns partial credit (exclusive)
GPA_CLOSE_MARGIN = 0.3
# How far under the years minimum still earns the "close" tier (inclusive)
YEARS_CLOSE_MARGIN = 0.5

# Adult/general ICUs every program accepts
STANDARD_ICU_TYPES = frozenset({
    "micu", "sicu", "cvicu", "ccu", "cticu",
    "neuro_icu", "trauma_icu", "mixed_icu",
})

_ICU_LABELS = {
    "micu": "MICU",
    "sicu": "SICU",
    "cvicu": "CVICU",
    "ccu": "CCU",
    "cticu": "CTICU",
    "neuro_icu": "Neuro ICU",
    "trauma_icu": "Trauma ICU",
    "mixed_icu": "Mixed ICU",
    "nicu": "NICU",
    "picu": "PICU",
    "er": "ER",
}

_STATUS_ICONS = {
    "pass": "CheckCircle2",
    "warning": "AlertCircle",
    "info": "Info",
    "unknown": "HelpCircle",
    "bonus": "Star",
}


def calculate_fit_score(school: School, profile: UserProfile) -> FitScoreResult:
    """Score how well ``profile`` matches ``school`` (0-100)."""
    criteria = [
        (_check_gpa(school, profile), GPA_WEIGHT),
        (_check_gre(school, profile), GRE_WEIGHT),
        (_check_experience(school, profile), EXPERIENCE_WEIGHT),
        (_check_years_experience(school, profile), YEARS_WEIGHT),
        (_check_ccrn(school, profile), CCRN_WEIGHT),
        (_check_state(school, profile), 0),
    ]

    breakdown = [result for result, _ in criteria]
    earned_points = sum(result.points for result in breakdown)
    total_points = sum(weight for _, weight in criteria)

    score = min(100, _round_half_up(earned_points / total_points * 100))
    message = _encouraging_message(score, breakdown)

    logger.debug(
        "Fit score for %s: %d (%d/%d)",
        school.name or school.id, score, earned_points, total_points,
    )

    return FitScoreResult(
        score=score,
        breakdown=[result for result in breakdown if result.display],
        message=message,
        earned_points=earned_points,
        total_points=total_points,
    )


def get_fit_score_color(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 60:
        return "yellow"
    return "red"


def get_status_icon(status: str) -> str:
    """Icon component name for a criterion status."""
    return _STATUS_ICONS.get(status, "Circle")


def format_icu_type(icu_type: str | None) -> str:
    if not icu_type:
        return "ICU"
    return _ICU_LABELS.get(icu_type.lower(), icu_type.upper())


# ---------------------------------------------------------------------------
# Criteria
# ---------------------------------------------------------------------------

def _check_gpa(school: School, profile: UserProfile) -> CriterionResult:
    required = school.minimum_gpa if school.minimum_gpa is not None else DEFAULT_MINIMUM_GPA
    user_gpa = profile.science_gpa if profile.science_gpa is not None else profile.overall_gpa

    if user_gpa is None:
        return CriterionResult(
            id="gpa",
            label="GPA",
            status="unknown",
            icon="help",
            detail=f"Requires {_format_number(required)}+ (Add your GPA)",
            points=0,
        )

    detail = f"{_format_number(required)} required (You: {user_gpa:.2f})"
    if user_gpa >= required:
        return CriterionResult(
            id="gpa", label="GPA", status="pass", icon="check",
            detail=detail, points=GPA_WEIGHT,
        )

    points = 15 if user_gpa - required > -GPA_CLOSE_MARGIN else 5
    return CriterionResult(
        id="gpa", label="GPA", status="warning", icon="alert",
        detail=detail, points=points,
    )


def _check_gre(school: School, profile: UserProfile) -> CriterionResult:
    has_gre = profile.gre_quantitative is not None and profile.gre_verbal is not None

    if not school.gre_required:
        return CriterionResult(
            id="gre", label="GRE", status="pass", icon="check",
            detail="Not required", points=GRE_WEIGHT,
        )

    if school.gre_waived_for:
        return CriterionResult(
            id="gre",
            label="GRE",
            status="info",
            icon="info",
            detail=f"Required (waived for: {school.gre_waived_for})",
            points=GRE_WEIGHT if has_gre else 10,
        )

    if not has_gre:
        return CriterionResult(
            id="gre", label="GRE", status="warning", icon="alert",
            detail="Required (You: Not taken)", points=0,
        )

    total = profile.gre_quantitative + profile.gre_verbal
    return CriterionResult(
        id="gre", label="GRE", status="pass", icon="check",
        detail=f"Required (You: {total})", points=GRE_WEIGHT,
    )


def _check_experience(school: School, profile: UserProfile) -> CriterionResult:
    primary = (profile.primary_icu_type or "").lower()
    user_types = [primary] + [t.lower() for t in profile.additional_icu_types]

    if any(t in STANDARD_ICU_TYPES for t in user_types):
        return CriterionResult(
            id="experience", label="ICU Type", status="pass", icon="check",
            detail=f"Accepts {format_icu_type(primary)}", points=EXPERIENCE_WEIGHT,
        )

    # Specialty units only count when the school opts in, and only as primary
    specialty_accepted = {
        "nicu": school.accepts_nicu,
        "picu": school.accepts_picu,
        "er": school.accepts_er,
    }
    if specialty_accepted.get(primary):
        return CriterionResult(
            id="experience",
            label="ICU Type",
            status="pass",
            icon="check",
            detail=f"Accepts {format_icu_type(primary)} experience",
            points=EXPERIENCE_WEIGHT,
        )

    return CriterionResult(
        id="experience", label="ICU Type", status="warning", icon="alert",
        detail=f"May not accept {format_icu_type(primary)}", points=5,
    )


def _check_years_experience(school: School, profile: UserProfile) -> CriterionResult:
    required = (
        school.minimum_experience
        if school.minimum_experience is not None
        else DEFAULT_MINIMUM_YEARS
    )
    user_years = profile.total_years_experience
    required_text = _format_number(required)

    if user_years is None:
        return CriterionResult(
            id="years", label="Experience", status="unknown", icon="help",
            detail=f"{required_text}+ years required", points=0,
        )

    user_text = _format_number(user_years)
    if user_years >= required:
        return CriterionResult(
            id="years", label="Experience", status="pass", icon="check",
            detail=f"{required_text}+ years (You: {user_text})", points=YEARS_WEIGHT,
        )

    points = 10 if user_years >= required - YEARS_CLOSE_MARGIN else 5
    return CriterionResult(
        id="years",
        label="Experience",
        status="warning",
        icon="alert",
        detail=f"{required_text}+ years required (You: {user_text})",
        points=points,
    )


def _check_ccrn(school: School, profile: UserProfile) -> CriterionResult:
    if not school.ccrn_required:
        return CriterionResult(
            id="ccrn", label="CCRN", status="info", icon="info",
            detail="Not required", points=CCRN_WEIGHT, display=False,
        )

    has_ccrn = any(
        c.type == "ccrn" and c.status == "passed" for c in profile.certifications
    )
    if has_ccrn:
        return CriterionResult(
            id="ccrn", label="CCRN", status="pass", icon="check",
            detail="Required (You have it!)", points=CCRN_WEIGHT,
        )
    return CriterionResult(
        id="ccrn", label="CCRN", status="warning", icon="alert",
        detail="Required (You need this)", points=0,
    )


def _check_state(school: School, profile: UserProfile) -> CriterionResult:
    school_state = school.state or ""
    user_state = profile.hospital_state

    if not user_state:
        return CriterionResult(
            id="state", label="Location", status="info", icon="info",
            detail=school_state, points=0, display=False,
        )

    if school_state.lower() == user_state.lower():
        return CriterionResult(
            id="state", label="Location", status="bonus", icon="star",
            detail=f"Your state ({school_state})", points=STATE_BONUS,
        )
    return CriterionResult(
        id="state", label="Location", status="info", icon="info",
        detail=school_state, points=0, display=False,
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _encouraging_message(score: int, breakdown: list[CriterionResult]) -> str:
    warnings = [b for b in breakdown if b.status == "warning"]

    if score >= 90:
        return "Excellent match! You're highly competitive."
    if score >= 75:
        return "Strong match - you meet most requirements."
    if score >= 60:
        if len(warnings) == 1:
            return f"Good fit with one gap: {warnings[0].label}"
        return "Solid option - a few areas to strengthen."
    if score >= 40:
        return "Worth considering - work on key gaps."
    return "May need significant preparation."


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _format_number(value: float) -> str:
    """Render 3.0 as "3" and 2.5 as "2.5"."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
