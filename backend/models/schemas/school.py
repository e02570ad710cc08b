"""School admission requirements, as stored for each CRNA program."""

from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel


class School(BaseModel):
    """Snapshot of a program's requirements.

    Accepts camelCase (client payloads) or snake_case (database rows).
    Optional numeric fields use ``None`` for "not published"; a null flag
    column reads as "no".
    """
    id: str | int | None = None
    name: str = ""
    city: str | None = None
    state: str | None = None

    minimum_gpa: float | None = None
    gre_required: bool = False
    gre_waived_for: str | None = None  # free text, e.g. "GPA >= 3.5"

    accepts_nicu: bool = False
    accepts_picu: bool = False
    accepts_er: bool = False
    minimum_experience: float | None = None  # years

    ccrn_required: bool = False

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @field_validator(
        "gre_required", "accepts_nicu", "accepts_picu", "accepts_er", "ccrn_required",
        mode="before",
    )
    @classmethod
    def _null_flag_is_false(cls, value):
        return False if value is None else value

    @field_validator("name", mode="before")
    @classmethod
    def _null_name_is_blank(cls, value):
        return "" if value is None else value
