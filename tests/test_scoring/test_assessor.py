"""
Tests for consciousness_assessor/scoring/assessor.py.

What we test
------------
average_score():
  - Exact arithmetic mean; single value equals itself; empty mapping is 0.

Assessor.theory_scores():
  - Six scores in taxonomy order with the fixed weights.
  - Empty / missing theories score 0; absent indicators are excluded.
  - CROSS: none present = 0, one present = that value, two = their mean.

Assessor.assess():
  - Worked examples: 1.0 → 0.90 C-4, 0.0 → 0.0 C-0, 0.6 → 0.54 C-2,
    0.5 + cross 1.0 → 0.55 C-2.
  - Composite equals the weighted sum of theory scores.
  - Composite stays in [0, 1] for in-range inputs.
  - Classification uses the UNROUNDED composite.
  - Out-of-range values propagate unless strict mode is on.
  - Clock is read exactly once per call.

classify() / round_composite():
  - Boundary values belong to the higher band.
  - Half-up rounding at 4 places.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from consciousness_assessor.models.indicators import (
    AssessmentInput,
    GWTIndicators,
    PPIndicators,
)
from consciousness_assessor.scoring import assess
from consciousness_assessor.scoring.assessor import (
    Assessor,
    InvalidIndicatorRange,
    average_score,
    classify,
    round_composite,
)
from consciousness_assessor.taxonomy.theory_taxonomy import (
    THEORY_WEIGHTS,
    Classification,
    Theory,
)


# ── average_score ─────────────────────────────────────────────────────────────

class TestAverageScore:
    def test_mean_of_values(self):
        assert average_score({"a": 0.2, "b": 0.4, "c": 0.9}) == pytest.approx(0.5)

    def test_single_value_is_itself(self):
        assert average_score({"a": 0.37}) == 0.37

    def test_empty_is_zero(self):
        assert average_score({}) == 0.0


# ── theory_scores ─────────────────────────────────────────────────────────────

class TestTheoryScores:
    def test_six_theories_in_taxonomy_order(self, assessor, sample_input):
        scores = assessor.theory_scores(sample_input)
        assert [ts.theory for ts in scores] == list(Theory)

    def test_weights_attached(self, assessor, sample_input):
        for ts in assessor.theory_scores(sample_input):
            assert ts.weight == THEORY_WEIGHTS[ts.theory]

    def test_category_score_is_mean(self, assessor, sample_input):
        scores = {ts.theory: ts.score for ts in assessor.theory_scores(sample_input)}
        assert scores[Theory.GWT] == pytest.approx(0.6)
        assert scores[Theory.RPT] == pytest.approx(0.6)
        assert scores[Theory.HOT] == pytest.approx(0.6)
        assert scores[Theory.PP] == pytest.approx(0.4)
        assert scores[Theory.AST] == pytest.approx(0.5)
        assert scores[Theory.CROSS] == pytest.approx(0.5)

    def test_single_indicator_category(self, assessor):
        inp = AssessmentInput(name="x", gwt=GWTIndicators(information_broadcast=0.42))
        gwt = assessor.theory_scores(inp)[0]
        assert gwt.score == 0.42
        assert gwt.indicators == {"information_broadcast": 0.42}

    def test_missing_categories_score_zero(self, assessor):
        inp = AssessmentInput(name="empty")
        for ts in assessor.theory_scores(inp):
            assert ts.score == 0.0
            assert ts.indicators == {}

    def test_zero_valued_indicator_still_counts(self, assessor):
        inp = AssessmentInput(
            name="x",
            pp=PPIndicators(prediction_error_minimization=0.9, active_inference=0.0),
        )
        pp = assessor.theory_scores(inp)[3]
        assert pp.score == pytest.approx(0.45)
        assert pp.indicators == {
            "prediction_error_minimization": 0.9,
            "active_inference": 0.0,
        }


class TestCrossScore:
    def _cross(self, assessor, **kwargs):
        inp = AssessmentInput(name="x", **kwargs)
        return assessor.theory_scores(inp)[-1]

    def test_none_present_is_zero(self, assessor):
        cross = self._cross(assessor)
        assert cross.score == 0.0
        assert cross.indicators == {}

    def test_one_present_equals_value(self, assessor):
        assert self._cross(assessor, recursive_self_reference=0.3).score == 0.3
        assert self._cross(assessor, proof_chain_continuity=0.8).score == 0.8

    def test_two_present_is_mean(self, assessor):
        cross = self._cross(
            assessor, recursive_self_reference=0.2, proof_chain_continuity=0.6
        )
        assert cross.score == pytest.approx(0.4)

    def test_present_zero_distinct_from_absent(self, assessor):
        cross = self._cross(
            assessor, recursive_self_reference=0.0, proof_chain_continuity=1.0
        )
        assert cross.score == pytest.approx(0.5)
        assert "recursive_self_reference" in cross.indicators


# ── assess: worked examples ───────────────────────────────────────────────────

class TestWorkedExamples:
    def test_all_ones_no_cross(self, assessor, uniform_input):
        result = assessor.assess(uniform_input(1.0))
        for ts in result.theory_scores[:5]:
            assert ts.score == pytest.approx(1.0)
        assert result.score_for(Theory.CROSS).score == 0.0
        assert result.composite_score == 0.9
        assert result.classification == Classification.TRANSCENDENT
        assert result.classification.value == "C-4 Transcendent"
        assert result.classification_level == "C-4"

    def test_all_zeros(self, assessor, uniform_input):
        result = assessor.assess(
            uniform_input(0.0, recursive_self_reference=0.0, proof_chain_continuity=0.0)
        )
        assert result.composite_score == 0.0
        assert result.classification == Classification.REACTIVE
        assert result.classification_level == "C-0"

    def test_all_point_six(self, assessor, uniform_input):
        result = assessor.assess(uniform_input(0.6))
        assert result.composite_score == 0.54
        assert result.classification == Classification.EMERGING

    def test_half_with_full_cross(self, assessor, uniform_input):
        result = assessor.assess(
            uniform_input(0.5, recursive_self_reference=1.0, proof_chain_continuity=1.0)
        )
        assert result.score_for(Theory.CROSS).score == 1.0
        assert result.composite_score == 0.55
        assert result.classification == Classification.EMERGING
        assert result.classification_level == "C-2"


# ── assess: composite properties ──────────────────────────────────────────────

class TestComposite:
    def test_weights_sum_to_one(self):
        assert sum(THEORY_WEIGHTS.values()) == pytest.approx(1.0, abs=1e-12)

    def test_composite_is_weighted_sum(self, assessor, sample_input):
        result = assessor.assess(sample_input)
        expected = sum(ts.score * ts.weight for ts in result.theory_scores)
        assert result.composite_score == pytest.approx(expected, abs=5e-5)
        assert result.composite_score == 0.54

    @pytest.mark.parametrize("value", [0.0, 0.05, 0.2, 0.33, 0.5, 0.75, 0.99, 1.0])
    @pytest.mark.parametrize("cross", [None, 0.0, 0.5, 1.0])
    def test_composite_in_unit_interval(self, assessor, uniform_input, value, cross):
        result = assessor.assess(
            uniform_input(value, recursive_self_reference=cross, proof_chain_continuity=cross)
        )
        assert 0.0 <= result.composite_score <= 1.0

    def test_composite_rounded_to_four_places(self, assessor):
        inp = AssessmentInput(name="x", gwt=GWTIndicators(information_broadcast=0.123456))
        result = assessor.assess(inp)
        # 0.123456 * 0.25 = 0.030864
        assert result.composite_score == 0.0309

    def test_classifies_unrounded_composite(self, assessor, uniform_input):
        # 0.77773 * 0.90 = 0.699957: displayed as 0.7 but still below 0.70.
        result = assessor.assess(uniform_input(0.77773))
        assert result.composite_score == 0.7
        assert result.classification == Classification.EMERGING

    def test_empty_name_accepted(self, assessor, uniform_input):
        result = assessor.assess(uniform_input(0.5, name=""))
        assert result.subject == ""


# ── assess: out-of-range handling ─────────────────────────────────────────────

class TestOutOfRange:
    def test_non_strict_propagates(self, assessor, uniform_input):
        result = assessor.assess(uniform_input(2.0))
        assert result.composite_score == pytest.approx(1.8)
        assert result.classification == Classification.TRANSCENDENT

    def test_negative_values_propagate(self, assessor, uniform_input):
        result = assessor.assess(uniform_input(-1.0))
        assert result.composite_score == pytest.approx(-0.9)
        assert result.classification == Classification.REACTIVE

    def test_strict_rejects_out_of_range(self, uniform_input):
        strict = Assessor(strict=True)
        with pytest.raises(InvalidIndicatorRange, match="GWT.information_broadcast=1.2"):
            strict.assess(
                AssessmentInput(name="x", gwt=GWTIndicators(information_broadcast=1.2))
            )

    def test_strict_lists_every_violation(self):
        strict = Assessor(strict=True)
        with pytest.raises(InvalidIndicatorRange) as exc_info:
            strict.assess(
                AssessmentInput(
                    name="x",
                    gwt=GWTIndicators(information_broadcast=-0.1),
                    proof_chain_continuity=1.5,
                )
            )
        assert exc_info.value.violations == [
            ("GWT.information_broadcast", -0.1),
            ("CROSS.proof_chain_continuity", 1.5),
        ]

    def test_strict_rejection_is_a_value_error(self):
        with pytest.raises(ValueError):
            Assessor(strict=True).assess(AssessmentInput(name="x", recursive_self_reference=7.0))

    def test_strict_accepts_bounds(self, uniform_input):
        strict = Assessor(strict=True)
        assert strict.assess(uniform_input(0.0)).composite_score == 0.0
        assert strict.assess(uniform_input(1.0)).composite_score == 0.9


# ── assess: clock and timestamp ───────────────────────────────────────────────

class TestClock:
    def test_timestamp_from_clock(self, assessor, sample_input):
        assert assessor.assess(sample_input).timestamp == "2026-10-19T12:00:00.000Z"

    def test_clock_read_once_per_call(self, sample_input):
        calls: list[int] = []

        def clock() -> datetime:
            calls.append(1)
            return datetime(2026, 1, 1, tzinfo=timezone.utc)

        Assessor(clock=clock).assess(sample_input)
        assert len(calls) == 1

    def test_strict_failure_happens_before_clock(self):
        calls: list[int] = []

        def clock() -> datetime:
            calls.append(1)
            return datetime(2026, 1, 1, tzinfo=timezone.utc)

        with pytest.raises(InvalidIndicatorRange):
            Assessor(strict=True, clock=clock).assess(
                AssessmentInput(name="x", recursive_self_reference=2.0)
            )
        assert calls == []

    def test_default_clock_produces_utc_timestamp(self, sample_input):
        result = assess(sample_input)
        assert result.timestamp.endswith("Z")
        assert len(result.timestamp) == len("2026-10-19T12:00:00.000Z")


# ── classify ──────────────────────────────────────────────────────────────────

class TestClassify:
    @pytest.mark.parametrize(
        "score,expected",
        [
            (0.0, Classification.REACTIVE),
            (0.19999, Classification.REACTIVE),
            (0.20, Classification.FUNCTIONAL),
            (0.49999, Classification.FUNCTIONAL),
            (0.50, Classification.EMERGING),
            (0.69999, Classification.EMERGING),
            (0.70, Classification.AUTONOMOUS),
            (0.84999, Classification.AUTONOMOUS),
            (0.85, Classification.TRANSCENDENT),
            (1.0, Classification.TRANSCENDENT),
        ],
    )
    def test_band_boundaries(self, score, expected):
        assert classify(score) == expected

    def test_total_below_zero(self):
        assert classify(-5.0) == Classification.REACTIVE

    def test_total_above_one(self):
        assert classify(5.0) == Classification.TRANSCENDENT

    def test_monotonic(self):
        order = list(Classification)
        previous = -1
        for i in range(0, 101):
            rank = order.index(classify(i / 100))
            assert rank >= previous
            previous = rank


# ── round_composite ───────────────────────────────────────────────────────────

class TestRoundComposite:
    def test_half_rounds_up(self):
        assert round_composite(0.00025) == 0.0003
        assert round_composite(0.00015) == 0.0002
        assert round_composite(0.12345) == 0.1235

    def test_below_half_rounds_down(self):
        assert round_composite(0.123449) == 0.1234

    def test_float_noise_removed(self):
        assert round_composite(0.9000000000000001) == 0.9
        assert round_composite(0.6999999999999998) == 0.7

    def test_non_finite_passthrough(self):
        assert round_composite(float("inf")) == float("inf")
