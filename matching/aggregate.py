from ingestion.utils import clamp, round_half_up
from models.policy import DEFAULT_POLICY, ScoringPolicy

# Inclusive lower bounds, checked from the top
MATCH_LEVELS = (
    (80, "Excellent Match"),
    (65, "Good Match"),
    (50, "Fair Match"),
)
LOW_MATCH = "Low Match"


def aggregate_match(
    holland_score: float,
    big_five_score: float,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> int:
    """
    Blend the two axis sub-scores into a single 0-100 match score.

    Both inputs are already within 0-100, so with weights summing to 1 the
    blend is too. The clamp only matters for custom policies.
    """
    total = holland_score * policy.holland_weight + big_five_score * policy.big_five_weight
    return round_half_up(clamp(total))


def match_level(score: int) -> str:
    for threshold, label in MATCH_LEVELS:
        if score >= threshold:
            return label
    return LOW_MATCH
