"""Configuration loading for Misère Nim.

Settings live in a YAML file with three sections::

    board:
      row_lengths: [1, 3, 5, 7, 9]
    heuristic:
      bit_width: 4
    competition:
      rounds: 1

Resolution order for the file: explicit path, then the
``MISERE_NIM_CONFIG`` environment variable, then
``config/misere_nim.yaml`` under the project root. When none exists the
built-in defaults are used.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError
from .models import AIConfig, BoardConfig, CompetitionConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MISERE_NIM_CONFIG"
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "misere_nim.yaml"

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "NimConfig",
    "load_config",
    "resolve_config_path",
]


class NimConfig(BaseModel):
    """Top-level configuration"""
    model_config = ConfigDict(extra="forbid")

    board: BoardConfig = Field(default_factory=BoardConfig)
    heuristic: AIConfig = Field(default_factory=AIConfig)
    competition: CompetitionConfig = Field(default_factory=CompetitionConfig)

    @classmethod
    def from_mapping(cls, data: dict[str, Any] | None) -> "NimConfig":
        try:
            return cls.model_validate(data or {})
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid Misère Nim configuration",
                context={"errors": e.error_count(), "detail": str(e)},
            ) from e


def resolve_config_path(path: str | os.PathLike[str] | None = None) -> Path | None:
    """Return the config file to read, or None for built-in defaults."""
    if path is not None:
        return Path(path)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    if DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH
    return None


def load_config(path: str | os.PathLike[str] | None = None) -> NimConfig:
    """Load and validate configuration.

    Raises:
        ConfigurationError: if an explicitly named file is missing, is not
            valid YAML, or fails validation.
    """
    config_path = resolve_config_path(path)
    if config_path is None:
        return NimConfig()

    if not config_path.exists():
        raise ConfigurationError(
            f"Config file not found: {config_path}",
            context={"path": str(config_path)},
        )

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Could not parse config file: {config_path}",
            context={"path": str(config_path)},
        ) from e

    if data is not None and not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file must contain a mapping: {config_path}",
            context={"path": str(config_path)},
        )

    logger.debug(f"Loaded configuration from {config_path}")
    return NimConfig.from_mapping(data)
