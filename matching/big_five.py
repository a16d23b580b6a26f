from collections.abc import Mapping

from ingestion.utils import coerce_score
from models.codes import RequirementLevel
from models.policy import DEFAULT_POLICY, ScoringPolicy


def big_five_subscore(
    user_big_five: Mapping,
    requirements: Mapping,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> float:
    """
    Personality fit (Big Five).

    Rule:
    - HIGH requirement: the user's value counts as-is
    - LOW requirement: the value is inverted (100 - value)
    - NEUTRAL requirement: adds nothing but still counts, which pulls the
      average down for that slot
    - A trait the user has no score for reads as policy.big_five_missing_value
    - No requirements at all -> policy.big_five_empty_score (50 by default)
    """

    if not isinstance(requirements, Mapping):
        requirements = {}

    total = 0.0
    count = 0

    for trait, raw_level in requirements.items():
        level = RequirementLevel.parse(raw_level)
        count += 1

        if trait in user_big_five:
            value = coerce_score(user_big_five[trait])
        else:
            value = policy.big_five_missing_value

        if value is None:
            continue

        if level is RequirementLevel.HIGH:
            total += value
        elif level is RequirementLevel.LOW:
            total += 100 - value

    if count == 0:
        return policy.big_five_empty_score
    return total / count
