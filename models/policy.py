from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ScoringPolicy:
    """
    Weights and missing-data defaults for the matching engine.

    The defaults reproduce the production behaviour, including the
    asymmetry between the two axes:
    - Holland: a code the user has no score for is skipped, and a career
      with nothing counted scores 0 on this axis.
    - Big Five: a trait the user has no score for is read as 50, and a
      career with no requirements scores 50 on this axis.

    Set holland_missing_value to a number to read absent Holland codes as
    that value instead of skipping them.
    """

    holland_weight: float = 0.6
    big_five_weight: float = 0.4

    holland_missing_value: Optional[float] = None
    holland_empty_score: float = 0.0

    big_five_missing_value: float = 50.0
    big_five_empty_score: float = 50.0


DEFAULT_POLICY = ScoringPolicy()
