"""Assembler settings.

Resolved once per process from environment variables, an optional YAML
file and built-in defaults (highest precedence first):

    ASSEMBLY_DEFAULT_MODE     isolated | mutating
    ASSEMBLY_ENGINE_FACTORY   "package.module:attribute"
    ASSEMBLY_LOG_LEVEL        standard logging level name
    ASSEMBLY_SETTINGS_FILE    path to a YAML file with the same keys
                              (default_mode, engine_factory, log_level)
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .orchestrator.schemas import CompositionMode

logger = logging.getLogger(__name__)

ENV_PREFIX = "ASSEMBLY_"
SETTINGS_FILE_ENV = "ASSEMBLY_SETTINGS_FILE"


class AssemblySettings(BaseModel):
    """Process-wide defaults for mapping assembly."""

    default_mode: CompositionMode = Field(
        default=CompositionMode.ISOLATED,
        description="Composition policy used when neither the caller nor the request picks one",
    )
    engine_factory: Optional[str] = Field(
        default=None,
        description="Dotted path 'package.module:attribute' of the mapping engine factory",
        examples=["my_r2rml.engine:R2RMLProcessor"],
    )
    log_level: str = Field(
        default="INFO",
        description="Level applied to the mapping_assembler logger",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: '{value}'")
        return level


def _load_settings_file(path: Path) -> dict[str, Any]:
    """Read settings overrides from a YAML file."""
    if not path.exists():
        logger.warning(f"Settings file not found: {path}")
        return {}

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_settings(environ: Optional[dict[str, str]] = None) -> AssemblySettings:
    """Build settings from the environment and the optional settings file."""
    if environ is None:
        environ = dict(os.environ)

    values: dict[str, Any] = {}

    settings_file = environ.get(SETTINGS_FILE_ENV)
    if settings_file:
        values.update(_load_settings_file(Path(settings_file)))

    for field_name in AssemblySettings.model_fields:
        env_value = environ.get(f"{ENV_PREFIX}{field_name.upper()}")
        if env_value:
            values[field_name] = env_value

    settings = AssemblySettings.model_validate(values)
    logging.getLogger("mapping_assembler").setLevel(settings.log_level.upper())
    return settings


# Global singleton instance
_settings: Optional[AssemblySettings] = None


def get_settings() -> AssemblySettings:
    """Get the global AssemblySettings singleton."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reload_settings() -> AssemblySettings:
    """Drop the cached settings and resolve them again."""
    global _settings
    _settings = None
    return get_settings()
