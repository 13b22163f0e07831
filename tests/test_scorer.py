"""Tests for the composite scoring engine."""

import math

import pytest

from sovereignty_scorer.scorer import (
    average_maturity,
    clamp_score,
    composite_score,
    score_breakdown,
    seal_for,
)
from sovereignty_scorer.schema import SealDefinition


def _scores(objectives, values):
    return {obj.id: value for obj, value in zip(objectives, values)}


class TestClampScore:
    """Tests for clamping and rounding of raw scores."""

    @pytest.mark.parametrize("value,expected", [
        (0, 0),
        (4, 4),
        (7, 4),
        (-1, 0),
        (-5.5, 0),
        (2.5, 3),
        (1.49, 1),
        (3.5, 4),
        (0.5, 1),
        (4.9, 4),
    ])
    def test_clamp_and_round(self, value, expected):
        assert clamp_score(value) == expected

    def test_nan_maps_to_zero(self):
        assert clamp_score(float("nan")) == 0

    def test_infinity_is_clamped(self):
        assert clamp_score(float("inf")) == 4
        assert clamp_score(float("-inf")) == 0

    def test_non_numeric_maps_to_zero(self):
        assert clamp_score("high") == 0
        assert clamp_score(None) == 0

    def test_numeric_string_is_accepted(self):
        assert clamp_score("3") == 3


class TestCompositeScore:
    """Tests for the weighted composite percentage."""

    def test_all_zero_is_zero(self, en_objectives):
        scores = _scores(en_objectives, [0] * 8)
        assert composite_score(scores, en_objectives) == 0.0

    def test_all_max_is_hundred(self, en_objectives):
        scores = _scores(en_objectives, [4] * 8)
        assert composite_score(scores, en_objectives) == pytest.approx(100.0)

    def test_strategic_and_operational_at_max(self, en_objectives):
        """SOV-1 and SOV-4 at level 4 contribute 15 points each."""
        scores = _scores(en_objectives, [4, 0, 0, 4, 0, 0, 0, 0])
        assert composite_score(scores, en_objectives) == pytest.approx(30.0)

    def test_supply_chain_weight(self, en_objectives):
        scores = _scores(en_objectives, [0, 0, 0, 0, 2, 0, 0, 0])
        assert composite_score(scores, en_objectives) == pytest.approx(10.0)

    def test_missing_scores_count_as_zero(self, en_objectives):
        assert composite_score({}, en_objectives) == 0.0
        assert composite_score({"SOV-1": 4}, en_objectives) == pytest.approx(15.0)

    def test_unknown_ids_are_ignored(self, en_objectives):
        assert composite_score({"SOV-9": 4}, en_objectives) == 0.0

    def test_result_is_not_rounded(self, en_objectives):
        scores = _scores(en_objectives, [1, 1, 1, 0, 0, 0, 0, 1])
        # (0.15 + 0.10 + 0.10 + 0.05) / 4 * 100
        assert composite_score(scores, en_objectives) == pytest.approx(10.0)
        scores = _scores(en_objectives, [0, 0, 0, 0, 0, 0, 0, 1])
        assert composite_score(scores, en_objectives) == pytest.approx(1.25)

    @pytest.mark.parametrize("index", range(8))
    def test_monotonic_in_each_objective(self, en_objectives, index):
        base = [2, 1, 3, 0, 2, 4, 1, 2]
        previous = -1.0
        for level in range(5):
            values = list(base)
            values[index] = level
            current = composite_score(_scores(en_objectives, values), en_objectives)
            assert current >= previous
            previous = current

    def test_same_result_in_every_language(self, en_objectives, es_catalog):
        es_objectives, _ = es_catalog
        scores = _scores(en_objectives, [3, 1, 4, 2, 0, 1, 2, 3])
        assert composite_score(scores, en_objectives) == composite_score(scores, es_objectives)


class TestSealFor:
    """Tests for mapping scores onto SEAL definitions."""

    def test_exact_level(self, en_seals):
        assert seal_for(2, en_seals).level == 2
        assert seal_for(2, en_seals).name == "Data Sovereignty"

    def test_negative_score_maps_to_level_zero(self, en_seals):
        assert seal_for(-5, en_seals).level == 0

    def test_above_range_maps_to_level_four(self, en_seals):
        assert seal_for(4.9, en_seals).level == 4
        assert seal_for(100, en_seals).level == 4

    def test_fractional_score_rounds(self, en_seals):
        assert seal_for(2.4, en_seals).level == 2
        assert seal_for(2.5, en_seals).level == 3

    def test_nan_maps_to_level_zero(self, en_seals):
        assert seal_for(math.nan, en_seals).level == 0

    def test_missing_definition_falls_back_to_level_zero(self):
        definitions = [
            SealDefinition(level=0, name="None"),
            SealDefinition(level=1, name="Low"),
        ]
        assert seal_for(3, definitions).name == "None"

    def test_missing_level_zero_falls_back_to_first(self):
        definitions = [
            SealDefinition(level=2, name="Mid"),
            SealDefinition(level=4, name="Full"),
        ]
        assert seal_for(1, definitions).name == "Mid"


class TestBreakdown:
    """Tests for maturity and per-objective contributions."""

    def test_average_maturity(self, en_objectives):
        scores = _scores(en_objectives, [4, 4, 0, 0, 2, 2, 1, 3])
        assert average_maturity(scores, en_objectives) == pytest.approx(2.0)

    def test_average_maturity_without_objectives(self):
        assert average_maturity({}, []) == 0.0

    def test_breakdown_sums_to_composite(self, en_objectives):
        scores = _scores(en_objectives, [3, 1, 4, 2, 0, 1, 2, 3])
        breakdown = score_breakdown(scores, en_objectives)
        assert [item.objective_id for item in breakdown] == [obj.id for obj in en_objectives]
        total = sum(item.contribution for item in breakdown)
        assert total == pytest.approx(composite_score(scores, en_objectives))

    def test_breakdown_clamps_scores(self, en_objectives):
        breakdown = score_breakdown({"SOV-5": 9}, en_objectives)
        sov5 = breakdown[4]
        assert sov5.score == 4
        assert sov5.contribution == pytest.approx(20.0)
