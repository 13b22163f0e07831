"""Tests for the objective and SEAL catalogs."""

import math

import pytest

from sovereignty_scorer.catalog import (
    WEIGHT_SUM_TOLERANCE,
    catalog_for,
    compare_catalogs,
    supported_languages,
    ui_strings,
    validate_catalog,
)
from sovereignty_scorer.schema import MAX_SEAL_LEVEL, OBJECTIVE_IDS, Language, Objective, SealDefinition


EXPECTED_WEIGHTS = [0.15, 0.10, 0.10, 0.15, 0.20, 0.15, 0.10, 0.05]


@pytest.mark.parametrize("lang", list(Language))
class TestCatalogIntegrity:
    """Integrity checks that must hold for every packaged language."""

    def test_weights_sum_to_one(self, lang):
        objectives, _ = catalog_for(lang)
        total = math.fsum(obj.weight for obj in objectives)
        assert abs(total - 1.0) <= WEIGHT_SUM_TOLERANCE

    def test_seal_levels_are_contiguous(self, lang):
        _, seal_definitions = catalog_for(lang)
        levels = [d.level for d in seal_definitions]
        assert sorted(levels) == list(range(MAX_SEAL_LEVEL + 1))
        assert len(levels) == len(set(levels))

    def test_objective_ids_in_order(self, lang):
        objectives, _ = catalog_for(lang)
        assert tuple(obj.id for obj in objectives) == OBJECTIVE_IDS

    def test_weights_match_framework(self, lang):
        objectives, _ = catalog_for(lang)
        assert [obj.weight for obj in objectives] == EXPECTED_WEIGHTS

    def test_every_objective_has_factors(self, lang):
        objectives, _ = catalog_for(lang)
        for obj in objectives:
            assert obj.name
            assert obj.description
            assert len(obj.factors) > 0

    def test_validate_catalog_reports_no_issues(self, lang):
        assert validate_catalog(*catalog_for(lang)) == []

    def test_catalog_matches_default_language(self, lang):
        reference, _ = catalog_for(Language.default())
        objectives, _ = catalog_for(lang)
        assert compare_catalogs(reference, objectives) == []

    def test_ui_strings_are_present(self, lang):
        ui = ui_strings(lang)
        assert ui.title
        assert ui.ai_error
        assert "{count}" in ui.auto_assess_done


class TestCatalogFor:
    """Tests for language resolution."""

    def test_languages_are_localized(self):
        en_objectives, en_seals = catalog_for("en")
        es_objectives, es_seals = catalog_for("es")
        assert en_objectives[0].name == "Strategic Sovereignty"
        assert en_seals[0].name == "No Sovereignty"
        assert es_seals[0].name == "Sin Soberanía"
        assert en_objectives[0].id == es_objectives[0].id

    def test_reset_label_is_localized(self):
        assert ui_strings("en").reset == "Reset assessment"
        assert ui_strings("es").reset == "Reiniciar evaluación"

    def test_unknown_language_falls_back_to_default(self):
        assert catalog_for("fr") == catalog_for(Language.default())

    def test_missing_language_falls_back_to_default(self):
        assert catalog_for(None) == catalog_for(Language.ES)

    def test_language_code_is_case_insensitive(self):
        assert catalog_for(" EN ") == catalog_for(Language.EN)

    def test_catalog_models_are_frozen(self):
        objectives, _ = catalog_for("en")
        with pytest.raises(Exception):
            objectives[0].weight = 0.5

    def test_supported_languages(self):
        assert set(supported_languages()) == {Language.ES, Language.EN}


class TestValidateCatalog:
    """Tests for the catalog integrity checker on broken catalogs."""

    def _objective(self, objective_id: str, weight: float) -> Objective:
        return Objective(id=objective_id, name=objective_id, weight=weight)

    def _seals(self, levels) -> list[SealDefinition]:
        return [SealDefinition(level=level, name=f"L{level}") for level in levels]

    def test_weight_drift_is_reported(self, en_objectives, en_seals):
        objectives = list(en_objectives)
        objectives[0] = objectives[0].model_copy(update={"weight": 0.16})
        issues = validate_catalog(objectives, en_seals)
        assert any("weights sum" in issue for issue in issues)

    def test_missing_seal_level_is_reported(self, en_objectives):
        issues = validate_catalog(en_objectives, self._seals([0, 1, 2, 4]))
        assert any("SEAL levels" in issue for issue in issues)

    def test_duplicate_seal_level_is_reported(self, en_objectives):
        issues = validate_catalog(en_objectives, self._seals([0, 1, 2, 3, 4, 4]))
        assert any("SEAL levels" in issue for issue in issues)

    def test_duplicate_and_missing_ids_are_reported(self, en_seals):
        objectives = [self._objective("SOV-1", 0.5), self._objective("SOV-1", 0.5)]
        issues = validate_catalog(objectives, en_seals)
        assert any("Duplicate" in issue for issue in issues)
        assert any("Missing" in issue and "SOV-8" in issue for issue in issues)

    def test_unknown_id_is_reported(self, en_objectives, en_seals):
        objectives = list(en_objectives[:-1]) + [self._objective("SOV-9", 0.05)]
        issues = validate_catalog(objectives, en_seals)
        assert any("Unknown" in issue and "SOV-9" in issue for issue in issues)

    def test_compare_catalogs_detects_weight_mismatch(self, en_objectives):
        other = list(en_objectives)
        other[4] = other[4].model_copy(update={"weight": 0.25})
        issues = compare_catalogs(en_objectives, other)
        assert issues == ["Weight of SOV-5 differs: 0.2 != 0.25"]

    def test_compare_catalogs_detects_reordered_ids(self, en_objectives):
        other = list(reversed(en_objectives))
        issues = compare_catalogs(en_objectives, other)
        assert len(issues) == 1
        assert "ids differ" in issues[0]
