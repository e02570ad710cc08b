from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_license_verifier, get_profanity_filter
from main import app
from services.license.mock_verifier import MockVerifier
from services.profanity_filter import ProfanityFilter, StaticWordSource

client = TestClient(app)

SCHOOL = {
    "id": 42,
    "name": "Baylor College of Medicine",
    "state": "TX",
    "minimumGpa": 3.0,
    "greRequired": False,
    "minimumExperience": 1,
    "ccrnRequired": False,
}
PROFILE = {
    "scienceGpa": 3.5,
    "totalYearsExperience": 2,
    "primaryIcuType": "micu",
    "hospitalState": "TX",
}


@pytest.fixture(autouse=True)
def _override_dependencies():
    fixed_now = datetime(2026, 3, 10, tzinfo=timezone.utc)
    app.dependency_overrides[get_license_verifier] = lambda: MockVerifier(clock=lambda: fixed_now)
    app.dependency_overrides[get_profanity_filter] = lambda: ProfanityFilter(
        StaticWordSource(["spam", "scam"])
    )
    yield
    app.dependency_overrides.clear()


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "license_mock_mode" in data


def test_fit_score():
    response = client.post("/fit-score", json={"school": SCHOOL, "profile": PROFILE})
    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 100
    assert data["color"] == "green"
    assert data["earnedPoints"] == 95
    assert data["totalPoints"] == 90
    assert [c["id"] for c in data["breakdown"]] == ["gpa", "gre", "experience", "years", "state"]
    assert data["breakdown"][0]["status"] == "pass"


def test_fit_score_accepts_empty_profile():
    response = client.post("/fit-score", json={"school": SCHOOL})
    assert response.status_code == 200
    assert response.json()["message"] == "May need significant preparation."


def test_fit_score_accepts_null_lists():
    profile = {**PROFILE, "additionalIcuTypes": None, "certifications": None}
    school = {**SCHOOL, "greRequired": None, "acceptsNicu": None}
    response = client.post("/fit-score", json={"school": school, "profile": profile})
    assert response.status_code == 200
    assert response.json()["score"] == 100


def test_shutdown_closes_cached_verifier(monkeypatch):
    closed = []
    verifier = MockVerifier()
    monkeypatch.setattr(verifier, "close", lambda: closed.append(True))
    get_license_verifier.cache_clear()
    monkeypatch.setattr("api.dependencies.build_license_verifier", lambda config: verifier)

    with TestClient(app):
        assert get_license_verifier() is verifier

    assert closed == [True]
    assert get_license_verifier.cache_info().currsize == 0


def test_fit_score_requires_school():
    response = client.post("/fit-score", json={"profile": PROFILE})
    assert response.status_code == 422


def test_rank_schools():
    demanding = {**SCHOOL, "id": 7, "name": "Alpha", "minimumGpa": 3.9, "greRequired": True, "ccrnRequired": True}
    response = client.post(
        "/fit-score/rank",
        json={"profile": PROFILE, "schools": [demanding, SCHOOL], "recommendedOnly": False},
    )
    assert response.status_code == 200
    data = response.json()
    assert [s["schoolId"] for s in data] == [42, 7]
    assert data[0]["fitScore"]["score"] >= data[1]["fitScore"]["score"]

    response = client.post(
        "/fit-score/rank",
        json={"profile": PROFILE, "schools": [demanding, SCHOOL], "recommendedOnly": True},
    )
    assert [s["schoolId"] for s in response.json()] == [42]


def test_search_schools():
    schools = [
        {"id": 1, "name": "Georgetown University", "city": "Washington", "state": "DC"},
        {"id": 2, "name": "Duke University", "city": "Durham", "state": "NC"},
    ]
    response = client.post("/schools/search", json={"query": "duke", "schools": schools})
    assert response.status_code == 200
    data = response.json()
    assert data[0]["name"] == "Duke University"


def test_verify_license():
    response = client.post("/licenses/verify", json={"licenseNumber": "ab-1234", "state": "CA"})
    assert response.status_code == 200
    data = response.json()
    assert data["verification"]["verified"] is True
    assert data["verification"]["status"] == "active"
    assert data["verification"]["expirationDate"] == "2027-03-10"
    assert data["eligibility"]["eligible"] is True
    assert data["formattedNumber"] == "AB 1234"


def test_verify_license_unknown_state():
    response = client.post("/licenses/verify", json={"licenseNumber": "RN123456", "state": "ZZ"})
    assert response.status_code == 200
    data = response.json()
    assert data["verification"]["status"] == "error"
    assert data["eligibility"]["eligible"] is False


def test_verify_license_rejects_bad_format():
    response = client.post("/licenses/verify", json={"licenseNumber": "RN#1", "state": "CA"})
    assert response.status_code == 400


def test_check_content():
    response = client.post("/content/check", json={"text": "Free SPAM here"})
    assert response.status_code == 200
    data = response.json()
    assert data["hasProfanity"] is True
    assert data["foundWords"] == ["spam"]
    assert data["censored"] == "Free **** here"


def test_validate_content():
    response = client.post("/content/validate", json={"texts": ["Interview tips", "Any advice?"]})
    assert response.status_code == 204

    response = client.post("/content/validate", json={"texts": ["Interview tips", "obvious scam"]})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please revise your message - inappropriate content detected"
