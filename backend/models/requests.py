from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from models.schemas.school import School
from models.schemas.user_profile import UserProfile

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


class FitScoreRequest(BaseModel):
    school: School
    profile: UserProfile = UserProfile()

    model_config = _CAMEL


class RankSchoolsRequest(BaseModel):
    profile: UserProfile = UserProfile()
    schools: list[School] = Field(..., max_length=2000)
    recommended_only: bool = False

    model_config = _CAMEL


class SchoolSearchRequest(BaseModel):
    query: str = Field("", max_length=200)
    schools: list[School] = Field(..., max_length=2000)
    limit: int = Field(20, ge=1, le=100)


class LicenseVerifyRequest(BaseModel):
    license_number: str = Field(..., max_length=40)
    state: str = Field(..., max_length=2)

    model_config = _CAMEL


class ContentCheckRequest(BaseModel):
    text: str = Field(..., max_length=50000, description="Post title or body")


class ContentValidateRequest(BaseModel):
    texts: list[str] = Field(..., max_length=10, description="e.g. [title, content]")
