"""Fit score output: overall match plus per-criterion breakdown."""

from typing import Literal

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

CriterionStatus = Literal["pass", "warning", "info", "unknown", "bonus"]


class CriterionResult(BaseModel):
    """One scored requirement (GPA, GRE, ICU type, ...)."""
    id: str
    label: str
    status: CriterionStatus
    icon: str  # check, alert, info, help, star
    detail: str = ""
    points: int = 0
    display: bool = True

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class FitScoreResult(BaseModel):
    score: int = 0  # 0-100
    breakdown: list[CriterionResult] = []  # displayed criteria only
    message: str = ""
    earned_points: int = 0
    total_points: int = 0

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class SchoolFit(BaseModel):
    """A school paired with its fit score, as returned by the ranker."""
    school_id: str | int | None = None
    name: str = ""
    state: str | None = None
    fit_score: FitScoreResult
    color: str = "red"

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
