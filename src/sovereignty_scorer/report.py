"""Plain-text report formatter.

Produces the exportable text version of an assessment. All strings are
expected to be localized by the caller; the output is deterministic so it
can be copied to the clipboard or compared byte-for-byte.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from .schema import Language, Objective, SealDefinition, UIStrings
from .scorer import clamp_score, composite_score, score_breakdown, seal_for


SEPARATOR = "=" * 60
DEFAULT_PLACEHOLDER = "---"


@dataclass(frozen=True)
class ReportLabels:
    """Captions used inside the report body."""
    composite_score: str = "Composite score"
    evidence: str = "Evidence"

    @classmethod
    def from_ui(cls, ui: UIStrings) -> "ReportLabels":
        return cls(composite_score=ui.composite_score, evidence=ui.report_evidence)


def format_report(
    title: str,
    subtitle: str,
    composite_score: float,
    objectives: Sequence[Objective],
    scores: Mapping[str, float],
    notes: Mapping[str, str],
    seal_definitions: Sequence[SealDefinition],
    *,
    labels: Optional[ReportLabels] = None,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> str:
    """Format an assessment as a plain-text report.

    Args:
        title: Report title
        subtitle: Report subtitle
        composite_score: Composite score percentage
        objectives: Objectives in catalog order
        scores: SEAL level per objective id
        notes: Evidence note per objective id
        seal_definitions: SEAL definitions for label lookup
        labels: Localized captions for the score and evidence lines
        placeholder: Text shown for empty evidence notes

    Returns:
        The report text, ending with a newline
    """
    labels = labels or ReportLabels()

    lines = [
        f"{title} - {subtitle}",
        SEPARATOR,
        f"{labels.composite_score}: {composite_score:.1f}%",
    ]

    for obj in objectives:
        level = clamp_score(scores.get(obj.id, 0))
        seal = seal_for(level, seal_definitions)
        note = (notes.get(obj.id) or "").strip()

        lines.append("")
        lines.append(f"[{obj.id}] {obj.name}")
        lines.append(f"SEAL-{level}: {seal.name}")
        lines.append(f"{labels.evidence}: {note or placeholder}")

    return "\n".join(lines) + "\n"


def report_data(
    language: Language,
    objectives: Sequence[Objective],
    scores: Mapping[str, float],
    notes: Mapping[str, str],
    seal_definitions: Sequence[SealDefinition],
) -> dict:
    """Build the JSON export of an assessment.

    Scores are clamped to SEAL levels; the composite score is not rounded.
    """
    clamped = {obj.id: clamp_score(scores.get(obj.id, 0)) for obj in objectives}
    return {
        "language": language.value,
        "composite_score": composite_score(clamped, objectives),
        "objectives": [
            {
                "id": item.objective_id,
                "name": item.name,
                "weight": item.weight,
                "score": item.score,
                "seal": seal_for(item.score, seal_definitions).name,
                "contribution": item.contribution,
                "evidence": (notes.get(item.objective_id) or "").strip(),
            }
            for item in score_breakdown(clamped, objectives)
        ],
    }
