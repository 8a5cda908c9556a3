"""Engine settings read from environment variables.

Mapping coefficients are fixed constants and deliberately absent here; only
presentation thresholds and the growth simulation rate are tunable.
"""

from __future__ import annotations

from functools import lru_cache
import logging
import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class EngineSettings(BaseModel):
    """Validated runtime settings."""

    model_config = ConfigDict(frozen=True)

    log_level: str = "WARNING"
    similarity_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    growth_rate: float = Field(default=0.05, ge=0.0, le=1.0)
    outlier_warnings: bool = True

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and check the logging level name."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def load_settings() -> EngineSettings:
    """Build settings from PERSONA_LAB_* environment variables.

    Raises:
        ValueError: If a variable is present but cannot be parsed or is out of range.
    """
    try:
        settings = EngineSettings(
            log_level=os.getenv("PERSONA_LAB_LOG_LEVEL", "") or "WARNING",
            similarity_threshold=_env_float("PERSONA_LAB_SIMILARITY_THRESHOLD", 0.7),
            growth_rate=_env_float("PERSONA_LAB_GROWTH_RATE", 0.05),
            outlier_warnings=_env_bool("PERSONA_LAB_OUTLIER_WARNINGS", True),
        )
    except ValidationError as e:
        raise ValueError(f"Invalid persona_lab settings: {e}") from e

    logger.info(
        "Settings: log_level=%s similarity_threshold=%s growth_rate=%s outlier_warnings=%s",
        settings.log_level,
        settings.similarity_threshold,
        settings.growth_rate,
        settings.outlier_warnings,
    )
    return settings


@lru_cache(maxsize=1)
def get_settings() -> EngineSettings:
    """Process-wide settings, loaded once."""
    return load_settings()


def configure_logging(level: str | None = None) -> None:
    """Install a basic stderr handler for scripts and demos."""
    name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
