from dataclasses import dataclass
from typing import Dict

from models.career import Career


@dataclass(frozen=True)
class ScoreBreakdown:
    holland_score: int
    big_five_score: int

    def to_dict(self) -> Dict[str, int]:
        return {"hollandScore": self.holland_score, "bigFiveScore": self.big_five_score}


@dataclass(frozen=True)
class MatchResult:
    """
    Output of scoring one career against one user profile.
    Ephemeral: the engine never stores these.
    """

    career: Career
    score: int
    match_level: str
    breakdown: ScoreBreakdown

    @property
    def career_id(self) -> str:
        return self.career.id

    def to_dict(self) -> Dict:
        data = self.career.to_dict()
        data["score"] = self.score
        data["matchLevel"] = self.match_level
        data["breakdown"] = self.breakdown.to_dict()
        return data
