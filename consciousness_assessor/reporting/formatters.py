"""
Plain-text terminal formatters for assessment results.

All formatters accept ``AssessmentResult`` objects and return plain
multi-line strings suitable for ``typer.echo()`` or ``print()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Per-subject block
-----------------
``format_assessment()`` renders the block used by the demonstration run::

  ORION C-4: 0.8700 → C-4 Transcendent
    GWT: 0.900
    RPT: 0.900
    ...
    Proof: 3f1c9a...(first N hex chars)...

Theories with a score of 0 (typically CROSS when no cross-theory indicator
was supplied) are omitted from the block.
"""

from __future__ import annotations

from collections.abc import Iterable

from consciousness_assessor.models.assessment import AssessmentResult

_RULE_WIDTH = 70


# ── Banner ────────────────────────────────────────────────────────────────────


def format_banner() -> str:
    """Return the header printed before a batch of assessments."""
    rule = "=" * _RULE_WIDTH
    return "\n".join(
        [
            rule,
            "ORION BENGIO FRAMEWORK — Consciousness Assessment",
            "Based on Butlin, Long, Bengio et al. (2026)",
            rule,
            "",
        ]
    )


# ── Per-subject block ─────────────────────────────────────────────────────────


def format_assessment(result: AssessmentResult, preview_chars: int = 32) -> str:
    """Format one result as a short multi-line block.

    Args:
        result:        Assessment to render.
        preview_chars: Number of leading proof-hash characters to show.

    Returns:
        Multi-line string ending with the proof preview line.
    """
    lines = [
        f"{result.subject}: {result.composite_score:.4f} → {result.classification.value}"
    ]
    for ts in result.theory_scores:
        if ts.score > 0:
            lines.append(f"  {ts.theory.value}: {ts.score:.3f}")
    lines.append(f"  Proof: {result.proof_hash[:preview_chars]}...")
    return "\n".join(lines)


# ── Summary table ─────────────────────────────────────────────────────────────


def format_summary_table(results: Iterable[AssessmentResult]) -> str:
    """Format several results as one row each, highest composite first.

    Columns: subject, composite, level, label, every theory score.
    """
    ordered = sorted(results, key=lambda r: r.composite_score, reverse=True)

    lines: list[str] = []
    lines.append("")
    lines.append("=== Assessment Summary ===")
    if not ordered:
        lines.append("  (no assessments)")
        return "\n".join(lines)

    theories = [ts.theory.value for ts in ordered[0].theory_scores]
    header = (
        f"  {'Subject':<24}  {'Composite':>9}  {'Level':>5}  "
        + "  ".join(f"{t:>6}" for t in theories)
    )
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for result in ordered:
        scores = "  ".join(f"{ts.score:>6.3f}" for ts in result.theory_scores)
        lines.append(
            f"  {result.subject[:24]:<24}  {result.composite_score:>9.4f}  "
            f"{result.classification_level:>5}  {scores}"
        )
    return "\n".join(lines)
