"""
Shared fixtures for the career matching test suite.

Provides a factory for synthetic careers so the engine can be exercised
against small hand-built catalogs instead of the shipped dataset.
"""

import os

# === Set environment BEFORE any project imports ===
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import Optional

import pytest

from models.career import Career, frozen_mapping
from models.codes import RequirementLevel


@pytest.fixture
def make_career():
    """Factory that returns a callable to build Career dataclasses."""

    def _factory(
        career_id: str = "career",
        holland_codes=("I",),
        requirements: Optional[dict] = None,
        **overrides,
    ) -> Career:
        defaults = {
            "title": career_id.replace("-", " ").title(),
            "category": "Testing",
            "education": "Bachelor's Degree",
            "description": f"Synthetic career {career_id}",
            "salary": frozen_mapping({"usa": "$1 - $2"}),
            "skills": ("Testing",),
            "roadmap": (frozen_mapping({"step": "Start", "description": "Begin here."}),),
        }
        defaults.update(overrides)
        return Career(
            id=career_id,
            holland_codes=tuple(holland_codes),
            big_five_requirements=frozen_mapping(
                {trait: RequirementLevel.parse(level) for trait, level in (requirements or {}).items()}
            ),
            **defaults,
        )

    return _factory


@pytest.fixture
def sample_catalog(make_career):
    return (
        make_career("frontend-developer", ("A", "I", "R"), {"O": "high", "C": "high", "N": "low"},
                    title="Front-End Developer"),
        make_career("data-scientist", ("I", "C", "R"), {"O": "high", "C": "high"},
                    title="Data Scientist"),
        make_career("school-teacher", ("S", "A", "E"), {"E": "high", "A": "high", "N": "low"},
                    title="School Teacher"),
        make_career("sales-manager", ("E", "S"), {"E": "high", "N": "low", "A": "mid"},
                    title="Sales Manager"),
    )


@pytest.fixture
def big_five_scores():
    return {"O": 80, "C": 85, "E": 40, "A": 50, "N": 30}


@pytest.fixture
def holland_scores():
    return {"R": 70, "I": 90, "A": 40, "S": 20, "E": 30, "C": 60}
