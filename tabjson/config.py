"""
Runtime settings

Settings can be built directly or from TABJSON_* environment variables,
optionally seeded from a .env file:

    TABJSON_BORDER_DETECTION=legacy
    TABJSON_INDENT=4
    TABJSON_HISTORY_ENABLED=false
    TABJSON_HISTORY_MAX_ITEMS=8
    TABJSON_HISTORY_DIR=~/.cache/tabjson
    TABJSON_LOG_LEVEL=DEBUG
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigurationError
from .schemas.types import BorderDetection

ENV_PREFIX = "TABJSON_"


class Settings(BaseModel):
    """
    Settings shared by the converter, history and CLI

    Attributes:
        border_detection: Bordered-table heuristic ("structural" or "legacy")
        indent: JSON indentation for converted output
        history_enabled: Whether successful conversions are remembered
        history_max_items: Number of history entries kept (newest first)
        history_dir: Directory of the on-disk history; None keeps it in memory
        log_level: Level for the tabjson logger
    """

    border_detection: BorderDetection = BorderDetection.STRUCTURAL
    indent: int = Field(default=2, ge=0)
    history_enabled: bool = True
    history_max_items: int = Field(default=8, ge=1)
    history_dir: Optional[Path] = None
    log_level: str = "INFO"

    @field_validator("border_detection", mode="before")
    @classmethod
    def _normalize_border_detection(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("history_dir", mode="before")
    @classmethod
    def _expand_history_dir(cls, value):
        if value in (None, ""):
            return None
        return Path(value).expanduser()

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, env_file: str | Path | None = None, **overrides) -> "Settings":
        """
        Build settings from the environment

        Values from the process environment win over the .env file, and
        explicit keyword overrides win over both.

        Args:
            env_file: Path to a .env file; when omitted a .env in the current
                directory (or its parents) is used if present
            **overrides: Field values that bypass the environment

        Returns:
            Validated Settings

        Raises:
            ConfigurationError: If a value is missing its file or fails validation
        """
        if env_file is not None:
            env_path = Path(env_file)
            if not env_path.is_file():
                raise ConfigurationError(f"Env file not found: {env_path}")
        else:
            env_path = find_dotenv(usecwd=True) or None

        values: dict[str, str] = {}
        if env_path:
            values.update({k: v for k, v in dotenv_values(env_path).items() if v is not None})
        values.update(os.environ)

        fields = {}
        for name in cls.model_fields:
            key = f"{ENV_PREFIX}{name.upper()}"
            if key in values:
                fields[name] = values[key]
        fields.update(overrides)

        try:
            return cls(**fields)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid tabjson settings: {e}") from e
