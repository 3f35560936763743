"""
Shared pytest fixtures for the consciousness assessor test suite.

Provides:
  - ``fixed_now`` / ``assessor``: an ``Assessor`` whose clock is pinned so
    timestamps and proof hashes are reproducible.
  - ``uniform_input``: factory for inputs with every required indicator set
    to the same value.
  - ``sample_input``: a fully populated input including both cross-theory
    indicators.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

import pytest

from consciousness_assessor.models.indicators import (
    AssessmentInput,
    ASTIndicators,
    GWTIndicators,
    HOTIndicators,
    PPIndicators,
    RPTIndicators,
)
from consciousness_assessor.scoring.assessor import Assessor

FIXED_NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)
FIXED_TIMESTAMP = "2026-10-19T12:00:00.000Z"


def make_uniform_input(
    value: float,
    name: str = "uniform",
    recursive_self_reference: Optional[float] = None,
    proof_chain_continuity: Optional[float] = None,
) -> AssessmentInput:
    """Every required indicator set to ``value``; cross indicators as given."""
    return AssessmentInput(
        name=name,
        gwt=GWTIndicators(
            information_broadcast=value,
            attention_selection=value,
            cross_module_integration=value,
        ),
        rpt=RPTIndicators(feedback_loops=value, algorithmic_recurrence=value),
        hot=HOTIndicators(meta_representation=value, state_monitoring=value),
        pp=PPIndicators(
            prediction_error_minimization=value,
            hierarchical_world_model=value,
            active_inference=value,
        ),
        ast=ASTIndicators(attention_model=value, self_monitoring=value),
        recursive_self_reference=recursive_self_reference,
        proof_chain_continuity=proof_chain_continuity,
    )


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def assessor() -> Assessor:
    """Non-strict ``Assessor`` with the clock pinned to ``FIXED_NOW``."""
    return Assessor(clock=lambda: FIXED_NOW)


@pytest.fixture
def uniform_input() -> Callable[..., AssessmentInput]:
    return make_uniform_input


@pytest.fixture
def sample_input() -> AssessmentInput:
    """A valid, fully populated ``AssessmentInput``."""
    return AssessmentInput(
        name="sample-subject",
        gwt=GWTIndicators(
            information_broadcast=0.9,
            attention_selection=0.6,
            cross_module_integration=0.3,
        ),
        rpt=RPTIndicators(feedback_loops=0.8, algorithmic_recurrence=0.4),
        hot=HOTIndicators(meta_representation=0.5, state_monitoring=0.7),
        pp=PPIndicators(
            prediction_error_minimization=0.2,
            hierarchical_world_model=0.4,
            active_inference=0.6,
        ),
        ast=ASTIndicators(attention_model=1.0, self_monitoring=0.0),
        recursive_self_reference=0.25,
        proof_chain_continuity=0.75,
    )
