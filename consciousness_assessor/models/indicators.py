"""
Indicator input models.

One ``IndicatorSet`` subclass per required theory holds that theory's named
indicators. Every indicator is ``Optional[float]``: an absent indicator is
excluded from the theory average, while an indicator present with value
``0.0`` still counts. An entirely empty set averages to 0.

``AssessmentInput`` bundles a free-form subject name with the five indicator
sets and the two optional cross-theory scalars. Values are expected in
[0, 1] but are NOT range-checked here; strict range checking is an opt-in
``Assessor`` setting.

All models are frozen: an input describes one observation of one subject.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from consciousness_assessor.taxonomy.theory_taxonomy import Theory


class IndicatorSet(BaseModel):
    """Base for a theory's group of named indicators."""

    model_config = ConfigDict(frozen=True)

    theory: ClassVar[Theory]

    def present(self) -> dict[str, float]:
        """Return ``{indicator_name: value}`` for indicators that were supplied."""
        return {
            name: value
            for name, value in self.model_dump().items()
            if value is not None
        }


class GWTIndicators(IndicatorSet):
    """Global Workspace Theory indicators."""

    theory: ClassVar[Theory] = Theory.GWT

    information_broadcast: Optional[float] = None
    attention_selection: Optional[float] = None
    cross_module_integration: Optional[float] = None


class RPTIndicators(IndicatorSet):
    """Recurrent Processing Theory indicators."""

    theory: ClassVar[Theory] = Theory.RPT

    feedback_loops: Optional[float] = None
    algorithmic_recurrence: Optional[float] = None


class HOTIndicators(IndicatorSet):
    """Higher-Order Theory indicators."""

    theory: ClassVar[Theory] = Theory.HOT

    meta_representation: Optional[float] = None
    state_monitoring: Optional[float] = None


class PPIndicators(IndicatorSet):
    """Predictive Processing indicators."""

    theory: ClassVar[Theory] = Theory.PP

    prediction_error_minimization: Optional[float] = None
    hierarchical_world_model: Optional[float] = None
    active_inference: Optional[float] = None


class ASTIndicators(IndicatorSet):
    """Attention Schema Theory indicators."""

    theory: ClassVar[Theory] = Theory.AST

    attention_model: Optional[float] = None
    self_monitoring: Optional[float] = None


class AssessmentInput(BaseModel):
    """Indicator values for one subject.

    Attributes:
        name: Subject identifier; any string, including empty.
        gwt: Global Workspace Theory indicators.
        rpt: Recurrent Processing Theory indicators.
        hot: Higher-Order Theory indicators.
        pp: Predictive Processing indicators.
        ast: Attention Schema Theory indicators.
        recursive_self_reference: Optional cross-theory indicator.
        proof_chain_continuity: Optional cross-theory indicator.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    gwt: GWTIndicators = Field(default_factory=GWTIndicators)
    rpt: RPTIndicators = Field(default_factory=RPTIndicators)
    hot: HOTIndicators = Field(default_factory=HOTIndicators)
    pp: PPIndicators = Field(default_factory=PPIndicators)
    ast: ASTIndicators = Field(default_factory=ASTIndicators)
    recursive_self_reference: Optional[float] = None
    proof_chain_continuity: Optional[float] = None

    def indicator_sets(self) -> list[IndicatorSet]:
        """The five required indicator sets in taxonomy order."""
        return [self.gwt, self.rpt, self.hot, self.pp, self.ast]

    def cross_indicators(self) -> dict[str, float]:
        """Cross-theory indicators that were supplied, in declaration order."""
        cross: dict[str, float] = {}
        if self.recursive_self_reference is not None:
            cross["recursive_self_reference"] = self.recursive_self_reference
        if self.proof_chain_continuity is not None:
            cross["proof_chain_continuity"] = self.proof_chain_continuity
        return cross

    @classmethod
    def from_interchange(cls, record: dict[str, Any]) -> "AssessmentInput":
        """Build an input from an interchange JSON object.

        Accepts either ``subject`` (interchange spelling) or ``name`` for the
        subject identifier. Output-only keys such as ``composite_score`` or
        ``proof_hash`` are ignored, so a previously exported record can be
        re-assessed directly.

        Raises:
            pydantic.ValidationError: If an indicator group or value is malformed.
        """
        data = dict(record)
        if "name" not in data:
            data["name"] = data.pop("subject", "")
        return cls.model_validate(data)
