from collections.abc import Sequence
from typing import Mapping

from ingestion.utils import coerce_score
from models.policy import DEFAULT_POLICY, ScoringPolicy


def holland_subscore(
    user_holland: Mapping[str, float],
    career_codes: Sequence,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> float:
    """
    Interest fit (RIASEC).

    Rule:
    - Average the user's scores over the career's Holland codes
    - Codes the user has no score for are skipped, not read as neutral
    - Nothing counted -> policy.holland_empty_score (0 by default)
    - A non-numeric user score counts but adds nothing
    """

    # A malformed entry (codes missing or not a list) contributes nothing
    if isinstance(career_codes, (str, bytes)) or not isinstance(career_codes, Sequence):
        career_codes = ()

    total = 0.0
    count = 0

    for code in career_codes:
        if code in user_holland:
            value = coerce_score(user_holland[code])
        elif policy.holland_missing_value is not None:
            value = policy.holland_missing_value
        else:
            continue

        total += value if value is not None else 0.0
        count += 1

    if count == 0:
        return policy.holland_empty_score
    return total / count
