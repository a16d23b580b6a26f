"""
Deterministic ("demo-engine") career analysis.

Builds the analysis document shown on a user's profile straight from the
matching engine output, without calling an LLM. Pure: the caller persists
the result.
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional

from loguru import logger

from matching.engine import match_careers
from models.career import Career
from models.match_result import MatchResult

SOURCE = "demo-engine"

NO_DATA_MESSAGE = "Tests incomplete - No data found."
INCOMPLETE_MESSAGE = "Tests incomplete - Please complete both tests first."
NO_CAREERS_MESSAGE = "No careers available for matching."


def _incomplete(message: str) -> Dict[str, Any]:
    return {
        "message": message,
        "personalityAnalysis": "Tests incomplete",
        "top3Careers": [],
    }


def _completed_scores(test_results: Mapping, test_name: str) -> Optional[Mapping]:
    """
    Return the score mapping of a finished test, or None.

    Scores are read from section["result"] when present, otherwise from the
    section itself (minus its "completed" flag). An empty mapping still
    counts as a result.
    """
    section = test_results.get(test_name)
    if not isinstance(section, Mapping) or not section.get("completed"):
        return None

    scores = section.get("result")
    if scores is None:
        return {key: value for key, value in section.items() if key != "completed"}
    if not isinstance(scores, Mapping):
        return None
    return scores


def describe_personality(matches: List[MatchResult]) -> str:
    top = matches[0]
    themes = ", ".join(match.career.title.replace("Developer", "").strip() for match in matches)

    return (
        f"Based on your psychological profile, you exhibit a "
        f"{top.match_level.lower()} with roles like {top.career.title}. "
        f"Your results indicate a strong alignment with {themes} domains, "
        "rewarding your specific blend of analytical thinking and "
        "structured problem-solving. This analysis suggests you would thrive "
        "in environments that value technical precision and investigative logic."
    )


def _career_summary(match: MatchResult) -> Dict[str, Any]:
    career = match.career
    return {
        "title": career.title,
        "fit": match.score,
        "reason": career.description,
        "roadmap": [dict(step) for step in career.roadmap],
        "salary": dict(career.salary),
        "skills": list(career.skills),
    }


def build_career_analysis(
    test_results: Optional[Mapping],
    top_n: int = 3,
    catalog: Optional[Iterable[Career]] = None,
) -> Dict[str, Any]:
    """
    Turn a user's test-results document into the profile analysis.

    test_results looks like:
        {"bigFive": {"result": {...}, "completed": True},
         "holland": {"result": {...}, "completed": True}}
    """
    if not test_results:
        return _incomplete(NO_DATA_MESSAGE)

    big_five = _completed_scores(test_results, "bigFive")
    holland = _completed_scores(test_results, "holland")
    if big_five is None or holland is None:
        return _incomplete(INCOMPLETE_MESSAGE)

    matches = match_careers(big_five, holland, top_n=top_n, catalog=catalog)
    if not matches:
        logger.warning("[Analysis] Catalog is empty, no careers to suggest")
        return {"message": NO_CAREERS_MESSAGE, "personalityAnalysis": "", "top3Careers": []}

    logger.info(f"[Analysis] Generated {len(matches)} careers, top: {matches[0].career.id}")
    return {
        "message": "Success",
        "personalityAnalysis": describe_personality(matches),
        "top3Careers": [_career_summary(match) for match in matches],
        "source": SOURCE,
    }
