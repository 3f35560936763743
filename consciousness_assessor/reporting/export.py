"""
Export helpers for assessment results.

All functions write to disk and return the written ``Path``.

JSON exports are lists of interchange records (see
``AssessmentResult.to_interchange()``), readable by any consumer that knows
the published schema. CSV exports are flat, one row per subject with every
theory score as its own column, so they load directly in a spreadsheet or
pandas without any pre-processing step.
"""

from __future__ import annotations

import csv
import json
from collections.abc import Iterable
from pathlib import Path

from consciousness_assessor.models.assessment import AssessmentResult


def export_results_json(results: Iterable[AssessmentResult], path: Path) -> Path:
    """Write results as a pretty-printed JSON array of interchange records.

    Args:
        results: Assessments to export.
        path:    Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    records = [r.to_interchange() for r in results]
    path.write_text(json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def flatten_result(result: AssessmentResult) -> dict:
    """One flat row for ``result``; theory scores become ``score_<theory>`` columns."""
    row: dict = {
        "subject": result.subject,
        "timestamp": result.timestamp,
        "composite_score": result.composite_score,
        "classification": result.classification.value,
        "classification_level": result.classification_level,
    }
    for ts in result.theory_scores:
        row[f"score_{ts.theory.value.lower()}"] = ts.score
    row["proof_hash"] = result.proof_hash
    return row


def export_results_csv(results: Iterable[AssessmentResult], path: Path) -> Path:
    """Write results to a UTF-8 CSV file, one flat row per result.

    An empty ``results`` produces an empty file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    rows = [flatten_result(r) for r in results]
    if not rows:
        path.write_text("", encoding="utf-8")
        return path
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        writer.writerows(rows)
    return path
