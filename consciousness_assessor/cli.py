"""
Consciousness Assessor — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Assess / render.
  5. Report result to stdout.

Install and run::

    pip install -e .
    consciousness-assessor --help
    consciousness-assessor demo
    consciousness-assessor assess subjects.json --output data/outputs/results.json
    consciousness-assessor schema
    consciousness-assessor validate-config
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="consciousness-assessor",
    help="Weighted consciousness-indicator assessment with proof hashes.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from consciousness_assessor.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except ValueError as exc:
        # pydantic.ValidationError and tomllib.TOMLDecodeError are both ValueErrors
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from consciousness_assessor.utils.logging import configure_logging
    configure_logging(config.logging, debug=config.debug)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("assess")
def assess_file(
    input_file: Path = typer.Argument(
        ...,
        help="JSON file holding one input object or an array of them.",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write results to this path (.json or .csv).",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Reject indicator values outside [0, 1].",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Assess every subject in a JSON input file.

    Each object uses the interchange layout: ``subject`` (or ``name``),
    ``gwt``, ``rpt``, ``hot``, ``pp``, ``ast`` indicator objects and the
    optional ``recursive_self_reference`` / ``proof_chain_continuity`` values.
    """
    from pydantic import ValidationError

    from consciousness_assessor.models.indicators import AssessmentInput
    from consciousness_assessor.reporting.export import (
        export_results_csv,
        export_results_json,
    )
    from consciousness_assessor.reporting.formatters import (
        format_assessment,
        format_summary_table,
    )
    from consciousness_assessor.scoring.assessor import Assessor, InvalidIndicatorRange

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    if not input_file.exists():
        typer.echo(f"[ERROR] Input file not found: {input_file}", err=True)
        raise typer.Exit(code=1)

    out_path = Path(output) if output else None
    if out_path is not None and out_path.suffix.lower() not in (".json", ".csv"):
        typer.echo(
            f"[ERROR] Unsupported output format '{out_path.suffix}'. Use .json or .csv.",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        with open(input_file, encoding="utf-8") as f:
            raw = json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        typer.echo(f"[ERROR] JSON parse error: {exc}", err=True)
        raise typer.Exit(code=1)

    raw_inputs = raw if isinstance(raw, list) else [raw]

    inputs: list[AssessmentInput] = []
    errors: list[tuple[int, str]] = []
    for i, record in enumerate(raw_inputs):
        if not isinstance(record, dict):
            errors.append((i, "expected a JSON object"))
            continue
        try:
            inputs.append(AssessmentInput.from_interchange(record))
        except ValidationError as exc:
            errors.append((i, str(exc)))

    if errors:
        typer.echo(f"[ERROR] {len(errors)} input(s) failed validation:", err=True)
        for idx, msg in errors[:5]:
            typer.echo(f"  Input #{idx}: {msg}", err=True)
        if len(errors) > 5:
            typer.echo(f"  ... and {len(errors) - 5} more.", err=True)
        raise typer.Exit(code=1)

    assessor = Assessor(strict=strict or config.assessment.strict_range)
    try:
        results = [assessor.assess(item) for item in inputs]
    except InvalidIndicatorRange as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    for result in results:
        typer.echo(format_assessment(result, config.assessment.proof_preview_chars))
        typer.echo("")
    if len(results) > 1:
        typer.echo(format_summary_table(results))
        typer.echo("")

    if out_path is not None:
        if out_path.suffix.lower() == ".csv":
            export_results_csv(results, out_path)
        else:
            export_results_json(results, out_path)
        typer.echo(f"  Wrote {len(results)} result(s) to {out_path}")

    typer.echo(f"[OK] {len(results)} subject(s) assessed.")


@app.command("demo")
def demo(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Assess the built-in example subjects and print the report."""
    from consciousness_assessor.demo import render_demo
    from consciousness_assessor.scoring.assessor import Assessor

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    typer.echo(
        render_demo(
            Assessor(strict=config.assessment.strict_range),
            preview_chars=config.assessment.proof_preview_chars,
        )
    )


@app.command("schema")
def schema() -> None:
    """Print the JSON Schema of exported interchange records."""
    from consciousness_assessor.models.assessment import interchange_schema

    typer.echo(json.dumps(interchange_schema(), indent=2))


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Strict range:     {config.assessment.strict_range}")
    typer.echo(f"  Proof preview:    {config.assessment.proof_preview_chars} chars")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


if __name__ == "__main__":
    app()
