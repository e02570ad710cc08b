"""Tests for school ranking by fit score and fuzzy school search."""

from models.schemas.school import School
from models.schemas.user_profile import UserProfile
from services.school_ranking import RECOMMENDED_MIN_SCORE, rank_schools, search_schools

SCHOOLS = [
    School(id=1, name="Georgetown University", city="Washington", state="DC"),
    School(id=2, name="Baylor College of Medicine", city="Houston", state="TX"),
    School(id=3, name="Duke University", city="Durham", state="NC"),
    School(id=4, name="University of Pittsburgh", city="Pittsburgh", state="PA"),
    School(id=5, name="Texas Wesleyan University", city="Fort Worth", state="TX"),
    School(id=6, name="Columbia University", city="New York", state="NY"),
    School(id=7, name="Rush University", city="Chicago", state="IL"),
    School(id=8, name="Virginia Commonwealth University", city="Richmond", state="VA"),
    School(id=9, name="Mayo Clinic", city="Rochester", state="MN"),
    School(id=10, name="Samford University", city="Birmingham", state="AL"),
    School(id=11, name="Emory University", city="Atlanta", state="GA"),
    School(id=12, name="Kaiser Permanente", city="Pasadena", state="CA"),
]


class TestRankSchools:
    def setup_method(self):
        self.profile = UserProfile(
            science_gpa=3.2,
            primary_icu_type="micu",
            total_years_experience=2,
            hospital_state="TX",
        )
        self.schools = [
            School(id="a", name="Zeta Program", state="TX"),
            School(id="b", name="Alpha Program", state="CA", minimum_gpa=3.6, gre_required=True, ccrn_required=True),
            School(id="c", name="Beta Program", state="TX"),
            School(id="d", name="Gamma Program", state="NY", minimum_gpa=3.4),
        ]

    def test_sorted_by_score_then_name(self):
        ranked = rank_schools(self.schools, self.profile)
        scores = [f.fit_score.score for f in ranked]
        assert scores == sorted(scores, reverse=True)
        # Beta and Zeta tie at 100; name breaks the tie
        assert [f.school_id for f in ranked[:2]] == ["c", "a"]
        assert ranked[-1].school_id == "b"

    def test_color_matches_score(self):
        for fit in rank_schools(self.schools, self.profile):
            if fit.fit_score.score >= 80:
                assert fit.color == "green"
            elif fit.fit_score.score >= 60:
                assert fit.color == "yellow"
            else:
                assert fit.color == "red"

    def test_recommended_only(self):
        ranked = rank_schools(self.schools, self.profile, recommended_only=True)
        assert ranked
        assert all(f.fit_score.score >= RECOMMENDED_MIN_SCORE for f in ranked)
        assert "b" not in [f.school_id for f in ranked]

    def test_empty_list(self):
        assert rank_schools([], self.profile) == []


class TestSearchSchools:
    def test_blank_query_returns_first_ten(self):
        results = search_schools(SCHOOLS, "   ")
        assert [s.id for s in results] == list(range(1, 11))

    def test_single_character_query_returns_nothing(self):
        assert search_schools(SCHOOLS, "d") == []

    def test_typo_tolerant_name_match(self):
        results = search_schools(SCHOOLS, "georgetwn")
        assert results[0].name == "Georgetown University"

    def test_city_match(self):
        results = search_schools(SCHOOLS, "houston")
        assert results[0].name == "Baylor College of Medicine"

    def test_case_insensitive(self):
        results = search_schools(SCHOOLS, "MAYO")
        assert results[0].name == "Mayo Clinic"

    def test_limit(self):
        results = search_schools(SCHOOLS, "university", limit=2)
        assert len(results) == 2
        assert all("University" in s.name for s in results)

    def test_no_match(self):
        assert search_schools(SCHOOLS, "qqqqzzzz") == []
