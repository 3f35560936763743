"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``CONSCIOUSNESS_ASSESSOR_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

When no config file exists at the default location, built-in defaults are
used; the assessment itself needs no configuration at all. An explicitly
passed path that does not exist is an error.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

ENV_PREFIX = "CONSCIOUSNESS_ASSESSOR_"

# ── Sub-config models ─────────────────────────────────────────────────────────


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "WARNING"
    log_file: Optional[str] = None
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AssessmentConfig(BaseModel):
    """Assessment and reporting settings.

    Attributes:
        strict_range: Reject indicator values outside [0, 1].
        proof_preview_chars: Leading proof-hash characters shown in reports.
    """

    model_config = ConfigDict(frozen=True)

    strict_range: bool = False
    proof_preview_chars: int = 32

    @field_validator("proof_preview_chars")
    @classmethod
    def validate_preview(cls, v: int) -> int:
        if not 1 <= v <= 64:
            raise ValueError(f"proof_preview_chars must be in [1, 64], got {v}.")
        return v


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth."""

    model_config = ConfigDict(frozen=True)

    logging: LoggingConfig = LoggingConfig()
    assessment: AssessmentConfig = AssessmentConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If an explicit ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    load_dotenv(dotenv_path=root / ".env", override=False)

    raw: dict[str, Any] = {}
    if config_path is None:
        config_path = root / "config" / "default.toml"
        if config_path.exists():
            raw = _read_toml(config_path)
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        raw = _read_toml(config_path)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        raw = _deep_merge(raw, _read_toml(local_config_path))

    raw = _apply_env_overrides(raw)

    return _build_app_config(raw)


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _env_flag(value: str) -> bool:
    return value.lower() in ("1", "true", "yes")


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply CONSCIOUSNESS_ASSESSOR_* env vars to the raw config dict.

    Supported overrides:
      CONSCIOUSNESS_ASSESSOR_LOG_LEVEL     → raw["logging"]["level"]
      CONSCIOUSNESS_ASSESSOR_STRICT_RANGE  → raw["assessment"]["strict_range"]
      CONSCIOUSNESS_ASSESSOR_DEBUG         → raw["debug"]
    """
    if log_level := os.environ.get(f"{ENV_PREFIX}LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if strict := os.environ.get(f"{ENV_PREFIX}STRICT_RANGE"):
        raw.setdefault("assessment", {})["strict_range"] = _env_flag(strict)

    if debug := os.environ.get(f"{ENV_PREFIX}DEBUG"):
        raw["debug"] = _env_flag(debug)

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        logging=LoggingConfig(**raw.get("logging", {})),
        assessment=AssessmentConfig(**raw.get("assessment", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
