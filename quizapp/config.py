from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "default.yaml"
CONFIG_PATH_ENV = "QUIZ_APP_CONFIG"
OVERRIDES_ENV = "QUIZ_APP_CONFIG_OVERRIDES"


class LoggingConfig(BaseModel):
    """Log level and output format."""

    level: str = Field("INFO")
    json_output: bool = False


class Settings(BaseModel):
    """Top-level app configuration."""

    title: str = Field("Quiz App")
    welcome_text: str = Field("Hello and welcome to the Quiz App!")
    seed: Optional[int] = Field(
        None, description="Seed for question picking; unset means system entropy."
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def read_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML mapping, treating a blank file as empty."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data


def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    result: Dict[str, Any] = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            result[key] = merge_dicts(base[key], value)
        else:
            result[key] = value
    return result


def load_settings(config_path: str | Path | None = None) -> Settings:
    """
    Read the YAML config, apply env overrides and validate.

    The file is ``config_path``, else ``$QUIZ_APP_CONFIG``, else the bundled
    ``default.yaml``. A JSON object in ``$QUIZ_APP_CONFIG_OVERRIDES``
    is merged on top before validation.
    """
    if config_path is None:
        config_path = os.getenv(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH
    data = read_yaml(Path(config_path))

    overrides_env = os.getenv(OVERRIDES_ENV)
    if overrides_env:
        try:
            overrides = json.loads(overrides_env)
        except json.JSONDecodeError as err:
            raise ValueError(f"Failed to parse {OVERRIDES_ENV} env var as JSON.") from err
        if not isinstance(overrides, dict):
            raise ValueError(f"{OVERRIDES_ENV} must be a JSON object.")
        data = merge_dicts(data, overrides)

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
