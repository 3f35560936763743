"""
Assessment output models.

``TheoryScore`` is the per-theory breakdown: the average of the theory's
present indicators together with its fixed weight.

``AssessmentResult`` is the full output of one ``Assessor.assess()`` call.
It is returned to the caller, who owns any persistence; nothing here is
stored by the assessor itself.

``InterchangeRecord`` describes the language-neutral JSON shape produced by
``AssessmentResult.to_interchange()``. Its JSON Schema is published via
``interchange_schema()`` for non-Python consumers.

All models are frozen.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from consciousness_assessor.taxonomy.theory_taxonomy import (
    REQUIRED_THEORIES,
    Classification,
    Theory,
)


class TheoryScore(BaseModel):
    """Average indicator value for one theory.

    Attributes:
        theory: Theory tag.
        score: Arithmetic mean of the present indicators (0 when none present).
        indicators: Present indicator values, keyed by indicator name.
        weight: Fixed weight of this theory in the composite.
    """

    model_config = ConfigDict(frozen=True)

    theory: Theory
    score: float
    indicators: dict[str, float]
    weight: float

    @property
    def contribution(self) -> float:
        """Weighted contribution of this theory to the composite."""
        return self.score * self.weight


class AssessmentResult(BaseModel):
    """Composite assessment for one subject.

    Attributes:
        subject: Subject identifier copied from the input.
        timestamp: ISO-8601 UTC time of computation, e.g.
            ``"2026-10-19T12:00:00.000Z"``.
        theory_scores: Six ``TheoryScore`` entries in taxonomy order.
        composite_score: Weighted sum rounded to 4 decimal places (half-up).
        classification: Band label, classified on the unrounded composite.
        classification_level: Leading token of the label, e.g. ``"C-2"``.
        proof_hash: Lowercase hex SHA-256 over
            ``(subject, timestamp, unrounded composite, classification)``.
    """

    model_config = ConfigDict(frozen=True)

    subject: str
    timestamp: str
    theory_scores: tuple[TheoryScore, ...]
    composite_score: float
    classification: Classification
    classification_level: str
    proof_hash: str

    def score_for(self, theory: Theory) -> TheoryScore:
        """Return the ``TheoryScore`` for ``theory``.

        Raises:
            KeyError: If the result carries no score for ``theory``.
        """
        for ts in self.theory_scores:
            if ts.theory == theory:
                return ts
        raise KeyError(theory)

    def to_interchange(self) -> dict[str, Any]:
        """Return the language-neutral JSON representation of this result.

        Cross-theory indicators appear at the top level only when they were
        supplied on the input.
        """
        record: dict[str, Any] = {
            "subject": self.subject,
            "timestamp": self.timestamp,
        }
        for theory in REQUIRED_THEORIES:
            record[theory.value.lower()] = dict(self.score_for(theory).indicators)
        record.update(self.score_for(Theory.CROSS).indicators)
        record["composite_score"] = self.composite_score
        record["classification"] = self.classification.value
        record["classification_level"] = self.classification_level
        record["proof_hash"] = self.proof_hash
        return record


class InterchangeRecord(BaseModel):
    """Schema of the interchange JSON object emitted by ``to_interchange()``."""

    model_config = ConfigDict(frozen=True, title="ConsciousnessAssessment")

    subject: str
    timestamp: str
    gwt: dict[str, float]
    rpt: dict[str, float]
    hot: dict[str, float]
    pp: dict[str, float]
    ast: dict[str, float]
    recursive_self_reference: Optional[float] = None
    proof_chain_continuity: Optional[float] = None
    composite_score: float = Field(
        description="Weighted composite, 0-1 when every indicator is in 0-1."
    )
    classification: Classification
    classification_level: str
    proof_hash: str = Field(pattern=r"^[0-9a-f]{64}$")


def interchange_schema() -> dict[str, Any]:
    """JSON Schema for interchange records."""
    return InterchangeRecord.model_json_schema()
