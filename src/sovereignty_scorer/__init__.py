"""EU cloud sovereignty scoring: catalogs, composite score, reports and session state."""

from .catalog import catalog_for, compare_catalogs, ui_strings, validate_catalog
from .report import ReportLabels, format_report, report_data
from .schema import (
    AssessmentSnapshot,
    AutoAssessment,
    Language,
    Objective,
    ObjectiveAssessment,
    SealDefinition,
)
from .scorer import average_maturity, clamp_score, composite_score, score_breakdown, seal_for
from .state import AssessmentState

__version__ = "1.0.0"

__all__ = [
    "AssessmentSnapshot",
    "AssessmentState",
    "AutoAssessment",
    "Language",
    "Objective",
    "ObjectiveAssessment",
    "ReportLabels",
    "SealDefinition",
    "average_maturity",
    "catalog_for",
    "clamp_score",
    "compare_catalogs",
    "composite_score",
    "format_report",
    "report_data",
    "score_breakdown",
    "seal_for",
    "ui_strings",
    "validate_catalog",
]
