"""
Tests for explanation.career_analysis — the deterministic profile analysis.
"""

import pytest

from explanation.career_analysis import (
    INCOMPLETE_MESSAGE,
    NO_CAREERS_MESSAGE,
    NO_DATA_MESSAGE,
    build_career_analysis,
    describe_personality,
)
from matching.engine import match_careers


@pytest.fixture
def completed_results(big_five_scores, holland_scores):
    return {
        "bigFive": {"result": big_five_scores, "completed": True},
        "holland": {"result": holland_scores, "completed": True},
    }


class TestBuildCareerAnalysis:
    def test_success(self, completed_results, sample_catalog):
        analysis = build_career_analysis(completed_results, catalog=sample_catalog)

        assert analysis["message"] == "Success"
        assert analysis["source"] == "demo-engine"
        assert [c["title"] for c in analysis["top3Careers"]] == [
            "Data Scientist",
            "Front-End Developer",
            "School Teacher",
        ]
        top = analysis["top3Careers"][0]
        assert top["fit"] == 77
        assert top["reason"] == "Synthetic career data-scientist"
        assert top["roadmap"] == [{"step": "Start", "description": "Begin here."}]
        assert top["salary"] == {"usa": "$1 - $2"}
        assert top["skills"] == ["Testing"]

    def test_top_n(self, completed_results, sample_catalog):
        analysis = build_career_analysis(completed_results, top_n=1, catalog=sample_catalog)
        assert len(analysis["top3Careers"]) == 1

    @pytest.mark.parametrize("document", [None, {}])
    def test_no_data(self, document, sample_catalog):
        analysis = build_career_analysis(document, catalog=sample_catalog)
        assert analysis == {
            "message": NO_DATA_MESSAGE,
            "personalityAnalysis": "Tests incomplete",
            "top3Careers": [],
        }

    def test_one_test_not_completed(self, completed_results, sample_catalog):
        completed_results["holland"]["completed"] = False
        analysis = build_career_analysis(completed_results, catalog=sample_catalog)
        assert analysis["message"] == INCOMPLETE_MESSAGE
        assert analysis["top3Careers"] == []

    def test_one_test_missing(self, completed_results, sample_catalog):
        del completed_results["bigFive"]
        analysis = build_career_analysis(completed_results, catalog=sample_catalog)
        assert analysis["message"] == INCOMPLETE_MESSAGE

    def test_bare_scores_are_not_completed_tests(self, big_five_scores, holland_scores, sample_catalog):
        analysis = build_career_analysis(
            {"bigFive": big_five_scores, "holland": holland_scores},
            catalog=sample_catalog,
        )
        assert analysis["message"] == INCOMPLETE_MESSAGE

    def test_unwrapped_scores_next_to_completed_flag(self, big_five_scores, holland_scores,
                                                     sample_catalog):
        analysis = build_career_analysis(
            {
                "bigFive": {**big_five_scores, "completed": True},
                "holland": {**holland_scores, "completed": True},
            },
            catalog=sample_catalog,
        )
        assert analysis["message"] == "Success"
        assert analysis["top3Careers"][0]["title"] == "Data Scientist"
        assert analysis["top3Careers"][0]["fit"] == 77

    def test_empty_result_is_still_a_result(self, sample_catalog):
        analysis = build_career_analysis(
            {
                "bigFive": {"result": {}, "completed": True},
                "holland": {"result": {}, "completed": True},
            },
            catalog=sample_catalog,
        )
        assert analysis["message"] == "Success"
        assert [c["fit"] for c in analysis["top3Careers"]] == [20, 20, 20]

    def test_empty_catalog(self, completed_results):
        analysis = build_career_analysis(completed_results, catalog=())
        assert analysis["message"] == NO_CAREERS_MESSAGE
        assert analysis["top3Careers"] == []


class TestDescribePersonality:
    def test_mentions_top_match_and_themes(self, sample_catalog, big_five_scores, holland_scores):
        matches = match_careers(big_five_scores, holland_scores, 3, sample_catalog)
        text = describe_personality(matches)

        assert "you exhibit a good match with roles like Data Scientist." in text
        assert "Data Scientist, Front-End, School Teacher domains" in text
