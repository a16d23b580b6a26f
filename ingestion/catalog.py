import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from loguru import logger

import config
from models.career import Career, frozen_mapping
from models.codes import BIG_FIVE_CODES, HOLLAND_CODES, RequirementLevel


MAX_HOLLAND_CODES = 3


class CatalogError(ValueError):
    """The career dataset cannot be turned into a usable catalog."""


# -----------------------------
# Validation
# -----------------------------

def validate_career_entry(raw: Dict) -> List[str]:
    """
    One-time integrity check for a raw catalog entry.
    Returns a list of human-readable problems; empty means valid.
    """
    problems = []

    for key in ("id", "title"):
        value = raw.get(key)
        if not isinstance(value, str) or not value.strip():
            problems.append(f"{key} must be a non-empty string")

    codes = raw.get("hollandCodes")
    if not isinstance(codes, list):
        problems.append("hollandCodes must be a list")
    else:
        if not 1 <= len(codes) <= MAX_HOLLAND_CODES:
            problems.append(f"hollandCodes must hold 1-{MAX_HOLLAND_CODES} codes, got {len(codes)}")
        unknown = [code for code in codes if code not in HOLLAND_CODES]
        if unknown:
            problems.append(f"unknown Holland codes: {unknown}")
        if len(set(map(str, codes))) != len(codes):
            problems.append(f"duplicate Holland codes: {codes}")

    requirements = raw.get("bigFiveRequirements", {})
    if not isinstance(requirements, dict):
        problems.append("bigFiveRequirements must be an object")
    else:
        unknown = [trait for trait in requirements if trait not in BIG_FIVE_CODES]
        if unknown:
            problems.append(f"unknown Big Five traits: {unknown}")

    return problems


# -----------------------------
# Parsing
# -----------------------------

def _clean_holland_codes(career_id: str, codes) -> Tuple[str, ...]:
    if not isinstance(codes, list):
        logger.warning(f"[Catalog] {career_id}: hollandCodes is not a list, ignoring")
        return ()

    cleaned = []
    for code in codes:
        if code not in HOLLAND_CODES:
            logger.warning(f"[Catalog] {career_id}: dropping unknown Holland code {code!r}")
        elif code in cleaned:
            logger.warning(f"[Catalog] {career_id}: dropping duplicate Holland code {code!r}")
        else:
            cleaned.append(code)

    return tuple(cleaned[:MAX_HOLLAND_CODES])


def _clean_requirements(career_id: str, requirements) -> Dict[str, RequirementLevel]:
    if not isinstance(requirements, dict):
        logger.warning(f"[Catalog] {career_id}: bigFiveRequirements is not an object, ignoring")
        return {}

    cleaned = {}
    for trait, level in requirements.items():
        if trait not in BIG_FIVE_CODES:
            logger.warning(f"[Catalog] {career_id}: dropping unknown Big Five trait {trait!r}")
            continue
        cleaned[trait] = RequirementLevel.parse(level)
    return cleaned


def parse_career(raw: Dict) -> Career:
    career_id = raw.get("id")
    if not isinstance(career_id, str) or not career_id.strip():
        raise CatalogError(f"Career entry without an id: {raw!r}")

    return Career(
        id=career_id,
        title=str(raw.get("title", "")),
        category=str(raw.get("category", "")),
        education=str(raw.get("education", "")),
        description=str(raw.get("description", "")),
        holland_codes=_clean_holland_codes(career_id, raw.get("hollandCodes")),
        big_five_requirements=frozen_mapping(
            _clean_requirements(career_id, raw.get("bigFiveRequirements", {}))
        ),
        salary=frozen_mapping(raw.get("salary") or {}),
        skills=tuple(raw.get("skills") or ()),
        roadmap=tuple(frozen_mapping(step) for step in raw.get("roadmap") or ()),
    )


def build_catalog(entries: Iterable[Dict], strict: bool = False) -> Tuple[Career, ...]:
    """
    Turn raw entries into the immutable catalog.

    Repairable problems (unknown codes, duplicates) are logged and fixed.
    With strict=True they raise CatalogError instead.
    """
    careers = []
    seen_ids = set()

    for index, raw in enumerate(entries):
        if not isinstance(raw, dict):
            raise CatalogError(f"Catalog entry {index} is not an object")

        problems = validate_career_entry(raw)
        if problems and strict:
            raise CatalogError(f"Invalid catalog entry {raw.get('id', index)!r}: {'; '.join(problems)}")

        career = parse_career(raw)
        if career.id in seen_ids:
            raise CatalogError(f"Duplicate career id: {career.id}")
        seen_ids.add(career.id)
        careers.append(career)

    return tuple(careers)


# -----------------------------
# Loading
# -----------------------------

def load_catalog(path: Optional[Path] = None, strict: bool = False) -> Tuple[Career, ...]:
    path = Path(path or config.CAREERS_CATALOG_PATH)

    try:
        with path.open(encoding="utf-8") as f:
            entries = json.load(f)
    except OSError as e:
        raise CatalogError(f"Cannot read career catalog {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Career catalog {path} is not valid JSON: {e}") from e

    if not isinstance(entries, list):
        raise CatalogError(f"Career catalog {path} must contain a list of careers")

    catalog = build_catalog(entries, strict=strict)
    logger.info(f"[Catalog] Loaded {len(catalog)} careers from {path.name}")
    return catalog


@lru_cache(maxsize=1)
def get_default_catalog() -> Tuple[Career, ...]:
    """Process-wide catalog, loaded on first use."""
    return load_catalog()


def get_career(career_id: str, catalog: Optional[Iterable[Career]] = None) -> Optional[Career]:
    if catalog is None:
        catalog = get_default_catalog()
    for career in catalog:
        if career.id == career_id:
            return career
    return None
