"""Assessment files used by the CLI.

An assessment file is JSON or YAML with an optional language and the
scores and evidence notes per objective id:

    language: en
    scores:
      SOV-1: 4
      SOV-5: 2
    notes:
      SOV-1: Headquartered in the EU, no non-EU shareholders.
"""

import json
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .schema import AssessmentSnapshot, Language


class AssessmentFileError(Exception):
    """Raised when an assessment file cannot be read or parsed."""


class AssessmentFile(BaseModel):
    language: Optional[Language] = None
    scores: dict[str, float] = Field(default_factory=dict)
    notes: dict[str, str] = Field(default_factory=dict)

    @field_validator("language", mode="before")
    @classmethod
    def _parse_language(cls, value):
        # Unknown codes fall back to the default language instead of failing
        if value is None:
            return None
        return Language.from_string(str(value))


def load_assessment_file(path: Path) -> AssessmentFile:
    """Load an assessment file.

    Raises:
        AssessmentFileError: If the file is unreadable or malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except OSError as e:
        raise AssessmentFileError(f"Cannot read {path}: {e}") from e

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise AssessmentFileError(f"Invalid assessment file {path}: {e}") from e

    if not isinstance(data, dict):
        raise AssessmentFileError(f"Assessment file {path} must contain a mapping")

    try:
        return AssessmentFile.model_validate(data)
    except ValidationError as e:
        raise AssessmentFileError(f"Invalid assessment file {path}: {e}") from e


def save_assessment_file(path: Path, snapshot: AssessmentSnapshot, language: Language) -> None:
    """Write a snapshot as an assessment file (JSON or YAML by suffix)."""
    path = Path(path)
    data = {
        "language": language.value,
        "scores": dict(snapshot.scores),
        "notes": dict(snapshot.notes),
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        if path.suffix.lower() == ".json":
            json.dump(data, f, indent=2, ensure_ascii=False)
        else:
            yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
