"""Pydantic models for the Sovereignty Scoring Engine.

Catalog schemas (objectives, SEAL levels, UI strings), the assessment
snapshot used for exports, and the auto-assessment data contract returned
by the advisory gateway.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# Maximum SEAL level; scores are normalized by this value.
MAX_SEAL_LEVEL = 4

# The eight fixed objective identifiers, in catalog order.
OBJECTIVE_IDS = tuple(f"SOV-{i}" for i in range(1, 9))


# =============================================================================
# Language
# =============================================================================


class Language(str, Enum):
    """Supported catalog languages."""
    ES = "es"
    EN = "en"

    @classmethod
    def default(cls) -> "Language":
        return cls.ES

    @classmethod
    def from_string(cls, value: Optional[str]) -> "Language":
        """Parse a language code, falling back to the default language."""
        if isinstance(value, Language):
            return value
        if not value:
            return cls.default()
        mapping = {lang.value: lang for lang in cls}
        return mapping.get(str(value).strip().lower(), cls.default())


# =============================================================================
# Catalog Models
# =============================================================================


class Objective(BaseModel):
    """A sovereignty objective (SOV-1 .. SOV-8)."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable objective identifier, e.g. SOV-1")
    name: str
    weight: float = Field(..., gt=0, le=1, description="Contribution to the composite score")
    description: str = ""
    factors: tuple[str, ...] = Field(default_factory=tuple, description="Evaluation criteria (display only)")


class SealDefinition(BaseModel):
    """A SEAL maturity level definition."""
    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=0, le=MAX_SEAL_LEVEL)
    name: str
    description: str = ""


class UIStrings(BaseModel):
    """Localized labels for the presentation layer and exported reports."""
    model_config = ConfigDict(frozen=True)

    title: str
    subtitle: str
    global_score: str
    composite_score: str
    report_evidence: str
    language: str
    # Exports
    export: str
    export_text: str
    export_pdf: str
    export_json: str
    reset: str
    # Assessment cards
    step1: str
    factors: str
    seal_level: str
    evidence: str
    evidence_placeholder: str
    # Results panel
    balance: str
    avg_maturity: str
    seal_guide: str
    # Advisor
    ai_advisor: str
    objective: str
    ai_analyzing: str
    ai_initial: str
    ai_consulting: str
    ai_error: str
    ask_ai: str
    chat_title: str
    chat_placeholder: str
    auto_assess: str
    auto_assess_placeholder: str
    auto_assess_button: str
    auto_assess_done: str
    image_upload: str
    image_describe: str


class SovereigntyCatalog(BaseModel):
    """A complete catalog for one language as stored on disk."""
    model_config = ConfigDict(frozen=True)

    language: Language
    objectives: tuple[Objective, ...]
    seal_levels: tuple[SealDefinition, ...]
    ui: UIStrings


# =============================================================================
# Assessment Models
# =============================================================================


class AssessmentSnapshot(BaseModel):
    """Immutable copy of an assessment's scores and evidence notes."""
    model_config = ConfigDict(frozen=True)

    scores: dict[str, int] = Field(default_factory=dict)
    notes: dict[str, str] = Field(default_factory=dict)


class ObjectiveContribution(BaseModel):
    """Weighted contribution of a single objective to the composite score."""
    objective_id: str
    name: str
    score: int
    weight: float
    contribution: float = Field(..., description="Percentage points added to the composite score")


# =============================================================================
# Advisory Gateway Contract
# =============================================================================


class ObjectiveAssessment(BaseModel):
    """A proposed score for one objective.

    The score is kept as a raw number here; it is clamped to a valid SEAL
    level when ingested into the assessment state.
    """
    id: str = Field(..., description="Objective identifier, e.g. SOV-3")
    score: float = Field(..., description="Suggested SEAL level (0-4)")
    justification: str = Field("", description="Short justification for the suggested level")


class AutoAssessment(BaseModel):
    """Full assessment proposed from a free-text solution description."""
    assessments: list[ObjectiveAssessment] = Field(default_factory=list)
