from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from models.codes import RequirementLevel


def frozen_mapping(values=None) -> Mapping:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True)
class Career:
    """
    A single catalog entry.

    Only holland_codes and big_five_requirements are read by the matching
    engine. Everything else is display metadata passed through untouched.
    """

    id: str
    title: str
    category: str = ""
    education: str = ""
    description: str = ""

    holland_codes: Tuple[str, ...] = ()
    big_five_requirements: Mapping[str, RequirementLevel] = field(default_factory=frozen_mapping)

    salary: Mapping[str, str] = field(default_factory=frozen_mapping)
    skills: Tuple[str, ...] = ()
    roadmap: Tuple[Mapping[str, str], ...] = ()

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "education": self.education,
            "description": self.description,
            "hollandCodes": list(self.holland_codes),
            "bigFiveRequirements": {
                trait: level.value for trait, level in self.big_five_requirements.items()
            },
            "salary": dict(self.salary),
            "skills": list(self.skills),
            "roadmap": [dict(step) for step in self.roadmap],
        }
