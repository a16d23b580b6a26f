from enum import Enum


BIG_FIVE_CODES = ("O", "C", "E", "A", "N")
HOLLAND_CODES = ("R", "I", "A", "S", "E", "C")


class RequirementLevel(Enum):
    """
    Qualitative Big Five requirement attached to a career.

    NEUTRAL covers "mid" and any unrecognised marker. It carries no
    directional signal but still counts toward the Big Five average.
    """

    HIGH = "high"
    LOW = "low"
    NEUTRAL = "mid"

    @classmethod
    def parse(cls, raw) -> "RequirementLevel":
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            lowered = raw.strip().lower()
            if lowered == "high":
                return cls.HIGH
            if lowered == "low":
                return cls.LOW
        return cls.NEUTRAL
