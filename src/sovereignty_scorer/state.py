"""Assessment state for a single session.

Holds one SEAL score and one evidence note per objective id. Every write is
a whole-entry replacement keyed by objective id, so concurrent updates to
different objectives never interfere and repeated writes to the same
objective resolve as last-write-wins.
"""

from typing import Iterable, Optional, Sequence

from .app_logging import get_logger
from .schema import AssessmentSnapshot, AutoAssessment, Objective
from .scorer import clamp_score, composite_score

logger = get_logger("state")


def normalize_id(objective_id) -> str:
    """Canonical form of an objective id from external input (" sov-1" -> "SOV-1")."""
    return str(objective_id).strip().upper()


class AssessmentState:
    """Mutable per-session record of scores and evidence notes."""

    def __init__(self, objectives: Sequence[Objective]):
        self._objectives = tuple(objectives)
        self._scores: dict[str, int] = {obj.id: 0 for obj in self._objectives}
        self._notes: dict[str, str] = {obj.id: "" for obj in self._objectives}

    @property
    def objectives(self) -> tuple[Objective, ...]:
        return self._objectives

    @property
    def objective_ids(self) -> list[str]:
        return [obj.id for obj in self._objectives]

    def score(self, objective_id: str) -> int:
        return self._scores.get(objective_id, 0)

    def note(self, objective_id: str) -> str:
        return self._notes.get(objective_id, "")

    def set_score(self, objective_id: str, value: float) -> bool:
        """Set the score for one objective.

        The value is clamped to [0, 4] and rounded. Unknown ids are ignored.

        Returns:
            True if the entry was written
        """
        if objective_id not in self._scores:
            logger.debug(f"Ignoring score for unknown objective {objective_id!r}")
            return False
        self._scores[objective_id] = clamp_score(value)
        return True

    def set_note(self, objective_id: str, text: Optional[str]) -> bool:
        """Replace the evidence note for one objective. Unknown ids are ignored."""
        if objective_id not in self._notes:
            logger.debug(f"Ignoring note for unknown objective {objective_id!r}")
            return False
        self._notes[objective_id] = text or ""
        return True

    def get_snapshot(self) -> AssessmentSnapshot:
        """Return an immutable copy of the current scores and notes."""
        return AssessmentSnapshot(scores=dict(self._scores), notes=dict(self._notes))

    def composite_score(self) -> float:
        return composite_score(self._scores, self._objectives)

    def rekey(self, objectives: Sequence[Objective]) -> None:
        """Switch to another catalog (e.g. after a language change).

        Values for ids present in both catalogs are preserved; new ids get
        defaults and ids absent from the new catalog are dropped.
        """
        self._objectives = tuple(objectives)
        self._scores = {obj.id: self._scores.get(obj.id, 0) for obj in self._objectives}
        self._notes = {obj.id: self._notes.get(obj.id, "") for obj in self._objectives}

    def load(self, scores: dict, notes: Optional[dict] = None) -> None:
        """Apply scores and notes from a mapping, e.g. an assessment file."""
        for objective_id, value in scores.items():
            self.set_score(normalize_id(objective_id), value)
        for objective_id, text in (notes or {}).items():
            self.set_note(normalize_id(objective_id), text)

    def apply_auto_assessment(self, result: AutoAssessment) -> list[str]:
        """Ingest an auto-assessment proposed by the advisory gateway.

        Items with unknown ids are ignored. Scores are clamped before they
        are written; a non-empty justification replaces the evidence note.
        All items are validated before any entry is written.

        Returns:
            Ids of the objectives that were updated
        """
        accepted = []
        for item in result.assessments:
            objective_id = normalize_id(item.id)
            if objective_id not in self._scores:
                logger.debug(f"Auto-assessment item for unknown objective {item.id!r} ignored")
                continue
            accepted.append((objective_id, clamp_score(item.score), item.justification.strip()))

        for objective_id, score, justification in accepted:
            self._scores[objective_id] = score
            if justification:
                self._notes[objective_id] = justification

        updated = list(dict.fromkeys(objective_id for objective_id, _, _ in accepted))
        logger.info(f"Auto-assessment applied to {len(updated)} objectives")
        return updated

    def reset(self, objectives: Optional[Iterable[Objective]] = None) -> None:
        """Reset every entry to its default value."""
        if objectives is not None:
            self._objectives = tuple(objectives)
        self._scores = {obj.id: 0 for obj in self._objectives}
        self._notes = {obj.id: "" for obj in self._objectives}
