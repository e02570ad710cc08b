"""Applicant profile used for fit scoring."""

from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel


class Certification(BaseModel):
    type: str = ""  # e.g. "ccrn", "acls"
    status: str = ""  # e.g. "passed", "scheduled"

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @field_validator("type", "status", mode="before")
    @classmethod
    def _null_is_blank(cls, value):
        return "" if value is None else value


class UserProfile(BaseModel):
    """Academic and clinical snapshot of an applicant.

    ``None`` means the applicant has not entered the value; ``0`` is a
    recorded value and is scored as such. Null list columns read as empty.
    """
    science_gpa: float | None = None
    overall_gpa: float | None = None

    gre_quantitative: int | None = None
    gre_verbal: int | None = None

    primary_icu_type: str | None = None  # micu, sicu, cvicu, nicu, ...
    additional_icu_types: list[str] = []
    total_years_experience: float | None = None

    certifications: list[Certification] = []
    hospital_state: str | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @field_validator("additional_icu_types", "certifications", mode="before")
    @classmethod
    def _null_list_is_empty(cls, value):
        return [] if value is None else value
