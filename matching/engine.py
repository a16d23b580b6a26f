"""
Matching orchestration layer.

This module coordinates the axis matchers and ranks the catalog.
It does not contain scoring rules itself.
"""
from typing import Iterable, List, Mapping, Optional

from loguru import logger

from ingestion.catalog import get_default_catalog
from ingestion.utils import coerce_score, round_half_up
from matching.aggregate import LOW_MATCH, aggregate_match, match_level
from matching.big_five import big_five_subscore
from matching.holland import holland_subscore
from models.career import Career
from models.match_result import MatchResult, ScoreBreakdown
from models.policy import DEFAULT_POLICY, ScoringPolicy


def normalize(value) -> float:
    """Map a 0-100 score onto 0-1. Non-numeric values map to 0."""
    score = coerce_score(value)
    if score is None:
        return 0.0
    return score / 100


def score_career(
    user_big_five: Mapping,
    user_holland: Mapping,
    career: Career,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> MatchResult:
    """
    Entry point for scoring a single career.
    Returns the rounded score, its level and the per-axis breakdown.
    """

    holland = holland_subscore(user_holland, career.holland_codes, policy)
    big_five = big_five_subscore(user_big_five, career.big_five_requirements, policy)
    score = aggregate_match(holland, big_five, policy)

    return MatchResult(
        career=career,
        score=score,
        match_level=match_level(score),
        breakdown=ScoreBreakdown(
            holland_score=round_half_up(holland),
            big_five_score=round_half_up(big_five),
        ),
    )


def _failed_result(career: Career) -> MatchResult:
    return MatchResult(
        career=career,
        score=0,
        match_level=LOW_MATCH,
        breakdown=ScoreBreakdown(holland_score=0, big_five_score=0),
    )


def match_careers(
    user_big_five: Mapping,
    user_holland: Mapping,
    top_n: int = 5,
    catalog: Optional[Iterable[Career]] = None,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> List[MatchResult]:
    """
    Score every career in the catalog and return the best top_n.

    Sorting is stable, so careers with equal scores keep catalog order.
    A career that fails to score is ranked with a zero result instead of
    aborting the batch.
    """

    if catalog is None:
        catalog = get_default_catalog()

    if user_big_five is None:
        user_big_five = {}
    if user_holland is None:
        user_holland = {}

    results = []
    for career in catalog:
        try:
            results.append(score_career(user_big_five, user_holland, career, policy))
        except Exception as e:
            logger.warning(f"[Matching] Scoring failed for {getattr(career, 'id', career)!r}: {e}")
            results.append(_failed_result(career))

    results.sort(key=lambda result: result.score, reverse=True)

    if top_n <= 0:
        return []

    logger.debug(f"[Matching] Ranked {len(results)} careers, returning top {top_n}")
    return results[:top_n]
