"""Shared test fixtures: school and applicant profile factories."""

import pytest

from models.schemas.school import School
from models.schemas.user_profile import UserProfile


def _make_school(**overrides) -> School:
    defaults = dict(
        id=1,
        name="Baylor College of Medicine",
        city="Houston",
        state="TX",
        minimum_gpa=3.0,
        gre_required=False,
        minimum_experience=1,
        ccrn_required=False,
    )
    defaults.update(overrides)
    return School(**defaults)


def _make_profile(**overrides) -> UserProfile:
    defaults = dict(
        science_gpa=3.5,
        total_years_experience=2,
        primary_icu_type="micu",
        hospital_state="TX",
    )
    defaults.update(overrides)
    return UserProfile(**defaults)


@pytest.fixture
def make_school():
    return _make_school


@pytest.fixture
def make_profile():
    return _make_profile
