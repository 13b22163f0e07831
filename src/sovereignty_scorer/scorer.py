"""Scoring Engine.

Computes the weighted composite sovereignty score (0-100) from per-objective
SEAL levels and maps any score onto its SEAL definition.

Scoring principles:
- Each objective score is normalized by the maximum SEAL level (4)
- Normalized scores are weighted by the objective weight and summed
- Missing scores count as 0, never as an error
- No rounding happens here; display layers format the result
"""

import math
from typing import Mapping, Sequence

from .schema import MAX_SEAL_LEVEL, Objective, ObjectiveContribution, SealDefinition


def clamp_score(value: float) -> int:
    """Clamp a value to [0, 4] and round it to the nearest SEAL level.

    Halves round up (2.5 -> 3). Non-numeric and NaN values map to 0.
    """
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 0
    if math.isnan(value):
        return 0
    clamped = min(max(value, 0.0), float(MAX_SEAL_LEVEL))
    return int(math.floor(clamped + 0.5))


def composite_score(scores: Mapping[str, float], objectives: Sequence[Objective]) -> float:
    """Compute the weighted composite score as a percentage.

    Args:
        scores: SEAL level per objective id
        objectives: Catalog objectives carrying the weights

    Returns:
        Composite score in [0, 100] for scores within [0, 4]
    """
    total = 0.0
    for obj in objectives:
        normalized = scores.get(obj.id, 0) / MAX_SEAL_LEVEL
        total += normalized * obj.weight
    return total * 100


def seal_for(score: float, definitions: Sequence[SealDefinition]) -> SealDefinition:
    """Return the SEAL definition for a score.

    The score is clamped and rounded before lookup. If the catalog has no
    definition for that level, level 0 is returned (or the first definition
    when level 0 is missing as well).
    """
    level = clamp_score(score)
    by_level = {d.level: d for d in definitions}
    if level in by_level:
        return by_level[level]
    if 0 in by_level:
        return by_level[0]
    return definitions[0]


def average_maturity(scores: Mapping[str, float], objectives: Sequence[Objective]) -> float:
    """Unweighted mean SEAL level across the catalog objectives."""
    if not objectives:
        return 0.0
    return sum(scores.get(obj.id, 0) for obj in objectives) / len(objectives)


def score_breakdown(
    scores: Mapping[str, float],
    objectives: Sequence[Objective],
) -> list[ObjectiveContribution]:
    """Per-objective contribution to the composite score, in catalog order."""
    breakdown = []
    for obj in objectives:
        score = clamp_score(scores.get(obj.id, 0))
        breakdown.append(ObjectiveContribution(
            objective_id=obj.id,
            name=obj.name,
            score=score,
            weight=obj.weight,
            contribution=score / MAX_SEAL_LEVEL * obj.weight * 100,
        ))
    return breakdown
