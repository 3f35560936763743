"""
Theory taxonomy for consciousness indicator assessment.

Two closed enumerations describe every assessment:
  - ``Theory``         — the *which*: which theory family does an indicator belong to?
  - ``Classification`` — the *how far*: which ordinal band does a composite land in?

Following Butlin, Long, Bengio et al., five theories contribute named
indicators; a sixth ``CROSS`` group collects optional cross-theory signals.

The ``THEORY_INDICATORS`` and ``THEORY_WEIGHTS`` dicts are the canonical
integrity contract:
  - Every ``Theory`` must have an entry in both.
  - Weights must sum to exactly 1.0.
  - Indicator names are unique across all theories.

Adding a theory is a schema change, not a runtime extension point.
Run ``tests/test_taxonomy/test_theory_taxonomy.py`` to verify this contract.

This module has NO imports from any other ``consciousness_assessor`` package.
"""

from enum import StrEnum


class Theory(StrEnum):
    """Theory family grouping a fixed set of indicators."""

    GWT = "GWT"
    """Global Workspace Theory: broadcast of selected content to many modules."""

    RPT = "RPT"
    """Recurrent Processing Theory: feedback loops and algorithmic recurrence."""

    HOT = "HOT"
    """Higher-Order Theories: representations of the system's own states."""

    PP = "PP"
    """Predictive Processing: error minimisation over a hierarchical world model."""

    AST = "AST"
    """Attention Schema Theory: a model of the system's own attention."""

    CROSS = "CROSS"
    """Cross-theory signals; every indicator in this group is optional."""


class Classification(StrEnum):
    """Ordinal classification band assigned to a composite score."""

    REACTIVE = "C-0 Reactive"
    FUNCTIONAL = "C-1 Functional"
    EMERGING = "C-2 Emerging"
    AUTONOMOUS = "C-3 Autonomous"
    TRANSCENDENT = "C-4 Transcendent"

    @property
    def level(self) -> str:
        """Leading token of the label, e.g. ``"C-2"``."""
        return self.value.split(" ")[0]


# ── Weights ───────────────────────────────────────────────────────────────────

THEORY_WEIGHTS: dict[Theory, float] = {
    Theory.GWT:   0.25,
    Theory.RPT:   0.15,
    Theory.HOT:   0.20,
    Theory.PP:    0.20,
    Theory.AST:   0.10,
    Theory.CROSS: 0.10,
}

# ── Indicator membership ──────────────────────────────────────────────────────

THEORY_INDICATORS: dict[Theory, tuple[str, ...]] = {
    Theory.GWT: (
        "information_broadcast",
        "attention_selection",
        "cross_module_integration",
    ),
    Theory.RPT: (
        "feedback_loops",
        "algorithmic_recurrence",
    ),
    Theory.HOT: (
        "meta_representation",
        "state_monitoring",
    ),
    Theory.PP: (
        "prediction_error_minimization",
        "hierarchical_world_model",
        "active_inference",
    ),
    Theory.AST: (
        "attention_model",
        "self_monitoring",
    ),
    Theory.CROSS: (
        "recursive_self_reference",
        "proof_chain_continuity",
    ),
}

# Theories whose indicator group is supplied as a nested object on the input.
REQUIRED_THEORIES: tuple[Theory, ...] = (
    Theory.GWT,
    Theory.RPT,
    Theory.HOT,
    Theory.PP,
    Theory.AST,
)

# ── Classification bands ──────────────────────────────────────────────────────
# Evaluated high to low; the lower bound is inclusive, so a boundary value
# belongs to the higher band. Anything below the last threshold is REACTIVE.

CLASSIFICATION_BANDS: tuple[tuple[float, Classification], ...] = (
    (0.85, Classification.TRANSCENDENT),
    (0.70, Classification.AUTONOMOUS),
    (0.50, Classification.EMERGING),
    (0.20, Classification.FUNCTIONAL),
)
