"""Objective and SEAL catalog loader.

Catalogs are packaged as one YAML file per language under ``catalogs/``
and parsed into frozen pydantic models the first time a language is
requested.
"""

import math
from functools import lru_cache
from pathlib import Path
from typing import Optional, Sequence

import yaml

from .schema import (
    MAX_SEAL_LEVEL,
    OBJECTIVE_IDS,
    Language,
    Objective,
    SealDefinition,
    SovereigntyCatalog,
    UIStrings,
)


CATALOG_DIR = Path(__file__).parent / "catalogs"

# Tolerance used when checking that objective weights sum to 1.0
WEIGHT_SUM_TOLERANCE = 1e-9


@lru_cache(maxsize=None)
def load_catalog(lang: Language) -> SovereigntyCatalog:
    """Load and parse the packaged catalog for a language."""
    path = CATALOG_DIR / f"{lang.value}.yaml"
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    return SovereigntyCatalog.model_validate(data)


def catalog_for(lang: Optional[str]) -> tuple[tuple[Objective, ...], tuple[SealDefinition, ...]]:
    """Return the objectives and SEAL definitions for a language.

    Unsupported language values fall back to the default language.
    """
    catalog = load_catalog(Language.from_string(lang))
    return catalog.objectives, catalog.seal_levels


def ui_strings(lang: Optional[str]) -> UIStrings:
    """Return the localized UI strings for a language."""
    return load_catalog(Language.from_string(lang)).ui


def supported_languages() -> list[Language]:
    return list(Language)


def validate_catalog(
    objectives: Sequence[Objective],
    seal_definitions: Sequence[SealDefinition],
) -> list[str]:
    """Check a catalog's integrity.

    Returns:
        List of issue descriptions. Empty if the catalog is valid.
    """
    issues = []

    ids = [obj.id for obj in objectives]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        issues.append(f"Duplicate objective ids: {', '.join(duplicates)}")

    missing = [i for i in OBJECTIVE_IDS if i not in ids]
    if missing:
        issues.append(f"Missing objective ids: {', '.join(missing)}")

    unknown = [i for i in ids if i not in OBJECTIVE_IDS]
    if unknown:
        issues.append(f"Unknown objective ids: {', '.join(unknown)}")

    total_weight = math.fsum(obj.weight for obj in objectives)
    if abs(total_weight - 1.0) > WEIGHT_SUM_TOLERANCE:
        issues.append(f"Objective weights sum to {total_weight:.12f}, expected 1.0")

    levels = sorted(d.level for d in seal_definitions)
    if levels != list(range(MAX_SEAL_LEVEL + 1)):
        issues.append(
            f"SEAL levels must be exactly {list(range(MAX_SEAL_LEVEL + 1))}, got {levels}"
        )

    return issues


def compare_catalogs(
    reference: Sequence[Objective],
    other: Sequence[Objective],
) -> list[str]:
    """Check that two language catalogs describe the same objectives.

    Ids must appear in the same order with the same weights.
    """
    issues = []
    ref_ids = [obj.id for obj in reference]
    other_ids = [obj.id for obj in other]
    if ref_ids != other_ids:
        issues.append(f"Objective ids differ: {ref_ids} != {other_ids}")
        return issues

    for ref, obj in zip(reference, other):
        if ref.weight != obj.weight:
            issues.append(f"Weight of {ref.id} differs: {ref.weight} != {obj.weight}")
    return issues
