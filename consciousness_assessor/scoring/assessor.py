"""
Consciousness indicator assessor: converts an ``AssessmentInput`` into a
scored, classified and fingerprinted ``AssessmentResult``.

Composite formula (weighted sum, range 0–1 for in-range inputs)
---------------------------------------------------------------
    composite = (
        gwt_score     * 0.25   # Global Workspace Theory
        + rpt_score   * 0.15   # Recurrent Processing Theory
        + hot_score   * 0.20   # Higher-Order Theories
        + pp_score    * 0.20   # Predictive Processing
        + ast_score   * 0.10   # Attention Schema Theory
        + cross_score * 0.10   # optional cross-theory signals
    )

Each theory score is the arithmetic mean of its *present* indicators, or 0
when none are present.

Ordering
--------
    1. Classify the UNROUNDED composite.
    2. Round the composite to 4 places (half-up) for the result.
    3. Hash the unrounded composite together with subject, timestamp and label.

A true composite of 0.69996 is therefore reported as 0.7 but classified
"C-2 Emerging".

Classification bands (lower bound inclusive, evaluated high to low)
-------------------------------------------------------------------
    C-4 Transcendent : s >= 0.85
    C-3 Autonomous   : 0.70 <= s < 0.85
    C-2 Emerging     : 0.50 <= s < 0.70
    C-1 Functional   : 0.20 <= s < 0.50
    C-0 Reactive     : s < 0.20

The proof hash is a plain SHA-256 digest for tamper-evidence of the recorded
tuple. It is not a signature and says nothing about the input indicators.
"""

from __future__ import annotations

import hashlib
import json
import logging
import math
from collections.abc import Callable, Mapping
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from consciousness_assessor.models.assessment import AssessmentResult, TheoryScore
from consciousness_assessor.models.indicators import AssessmentInput
from consciousness_assessor.taxonomy.theory_taxonomy import (
    CLASSIFICATION_BANDS,
    THEORY_WEIGHTS,
    Classification,
    Theory,
)
from consciousness_assessor.utils.time_utils import to_iso_timestamp, utc_now

logger = logging.getLogger(__name__)

_COMPOSITE_QUANTUM = Decimal("0.0001")


class InvalidIndicatorRange(ValueError):
    """Raised in strict mode when an indicator lies outside [0, 1]."""

    def __init__(self, violations: list[tuple[str, float]]) -> None:
        self.violations = violations
        detail = ", ".join(f"{name}={value}" for name, value in violations)
        super().__init__(f"Indicator values outside [0, 1]: {detail}")


# ── Pure helpers ──────────────────────────────────────────────────────────────


def average_score(indicators: Mapping[str, float]) -> float:
    """Arithmetic mean of the indicator values; 0.0 for an empty mapping."""
    values = list(indicators.values())
    if not values:
        return 0.0
    return sum(values) / len(values)


def classify(score: float) -> Classification:
    """Map an unrounded composite to its classification band."""
    for threshold, label in CLASSIFICATION_BANDS:
        if score >= threshold:
            return label
    return Classification.REACTIVE


def round_composite(score: float) -> float:
    """Round to 4 decimal places, ties away from zero.

    Works on the shortest decimal repr of ``score``, so ``0.00025`` becomes
    ``0.0003``.
    """
    if not math.isfinite(score):
        return score
    return float(Decimal(repr(score)).quantize(_COMPOSITE_QUANTUM, rounding=ROUND_HALF_UP))


def _json_number(value: float) -> float | int:
    # Integral floats serialise as "1", not "1.0".
    if math.isfinite(value) and float(value).is_integer():
        return int(value)
    return value


def compute_proof_hash(
    subject: str,
    timestamp: str,
    composite: float,
    classification: str,
) -> str:
    """SHA-256 fingerprint of the recorded assessment tuple.

    The canonical form is compact JSON with keys in the fixed order
    ``subject, timestamp, composite, classification`` and non-ASCII text
    left unescaped, encoded as UTF-8.

    Args:
        subject: Subject identifier.
        timestamp: ISO-8601 timestamp string exactly as stored on the result.
        composite: UNROUNDED composite score.
        classification: Full band label, e.g. ``"C-2 Emerging"``.

    Returns:
        Lowercase hex digest (64 chars).
    """
    payload = json.dumps(
        {
            "subject": subject,
            "timestamp": timestamp,
            "composite": _json_number(composite),
            "classification": str(classification),
        },
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


# ── Assessor ──────────────────────────────────────────────────────────────────


class Assessor:
    """Stateless assessor; one instance may be shared across threads.

    Args:
        strict: When ``True``, reject indicator values outside [0, 1] with
            ``InvalidIndicatorRange`` before any output is produced.
        clock: Callable returning the current time; read once per call.
    """

    def __init__(
        self,
        strict: bool = False,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.strict = strict
        self._clock = clock or utc_now

    def theory_scores(self, assessment_input: AssessmentInput) -> tuple[TheoryScore, ...]:
        """Compute the six per-theory scores in taxonomy order."""
        scores: list[TheoryScore] = []
        for indicator_set in assessment_input.indicator_sets():
            present = indicator_set.present()
            scores.append(
                TheoryScore(
                    theory=indicator_set.theory,
                    score=average_score(present),
                    indicators=present,
                    weight=THEORY_WEIGHTS[indicator_set.theory],
                )
            )
        cross = assessment_input.cross_indicators()
        scores.append(
            TheoryScore(
                theory=Theory.CROSS,
                score=average_score(cross),
                indicators=cross,
                weight=THEORY_WEIGHTS[Theory.CROSS],
            )
        )
        return tuple(scores)

    def assess(self, assessment_input: AssessmentInput) -> AssessmentResult:
        """Score, classify and fingerprint one subject.

        Raises:
            InvalidIndicatorRange: Only when ``strict`` is set and an
                indicator lies outside [0, 1].
        """
        theory_scores = self.theory_scores(assessment_input)
        if self.strict:
            _check_ranges(theory_scores)

        timestamp = to_iso_timestamp(self._clock())

        composite = 0.0
        for ts in theory_scores:
            composite += ts.score * ts.weight

        classification = classify(composite)
        proof_hash = compute_proof_hash(
            assessment_input.name, timestamp, composite, classification.value
        )

        logger.debug(
            "Assessed %r: composite=%.6f classification=%s",
            assessment_input.name,
            composite,
            classification.value,
        )

        return AssessmentResult(
            subject=assessment_input.name,
            timestamp=timestamp,
            theory_scores=theory_scores,
            composite_score=round_composite(composite),
            classification=classification,
            classification_level=classification.level,
            proof_hash=proof_hash,
        )


def _check_ranges(theory_scores: tuple[TheoryScore, ...]) -> None:
    violations = [
        (f"{ts.theory.value}.{name}", value)
        for ts in theory_scores
        for name, value in ts.indicators.items()
        if not 0.0 <= value <= 1.0
    ]
    if violations:
        raise InvalidIndicatorRange(violations)


_DEFAULT_ASSESSOR = Assessor()


def assess(assessment_input: AssessmentInput) -> AssessmentResult:
    """Assess with a default (non-strict) ``Assessor``."""
    return _DEFAULT_ASSESSOR.assess(assessment_input)

