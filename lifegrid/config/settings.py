import re

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

DEFAULT_LIVED_COLOR = "#3B82F6"
DEFAULT_UNLIVED_COLOR = "#E5E7EB"


class LifeGridSettings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="LIFEGRID_LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="LIFEGRID_LOG_FILE",
        description="Optional rotating log file; console only when unset",
    )
    default_lifespan_years: int = Field(default=80, ge=1, validation_alias="LIFEGRID_DEFAULT_LIFESPAN_YEARS")
    max_lifespan_years: int = Field(
        default=130,
        ge=1,
        le=130,
        validation_alias="LIFEGRID_MAX_LIFESPAN_YEARS",
        description="Upper bound accepted for lifespan_years at the input boundary",
    )
    default_granularity: str = Field(default="years", validation_alias="LIFEGRID_DEFAULT_GRANULARITY")
    default_viewport_width: float = Field(default=1200.0, validation_alias="LIFEGRID_DEFAULT_VIEWPORT_WIDTH")
    lived_color: str = Field(
        default=DEFAULT_LIVED_COLOR,
        validation_alias="LIFEGRID_LIVED_COLOR",
        description="Baseline color of lived cells not covered by an activity",
    )
    unlived_color: str = Field(
        default=DEFAULT_UNLIVED_COLOR,
        validation_alias="LIFEGRID_UNLIVED_COLOR",
        description="Baseline color of future cells not covered by an activity",
    )
    grid_cache_enabled: bool = Field(default=True, validation_alias="LIFEGRID_GRID_CACHE_ENABLED")
    grid_cache_max_entries: int = Field(default=32, ge=1, validation_alias="LIFEGRID_GRID_CACHE_MAX_ENTRIES")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LIFEGRID_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("default_granularity")
    @classmethod
    def validate_default_granularity(cls, value: str) -> str:
        """Fall back to the decade view for unknown granularities."""
        valid = {"hours", "days", "weeks", "months", "years"}
        lower_value = value.lower()
        if lower_value not in valid:
            logger.warning(f"Invalid LIFEGRID_DEFAULT_GRANULARITY '{value}'. Defaulting to years.")
            return "years"
        return lower_value

    @field_validator("lived_color", "unlived_color")
    @classmethod
    def validate_color(cls, value: str) -> str:
        """Baseline colors must be hex strings (#RGB, #RRGGBB or #RRGGBBAA)."""
        if not _HEX_COLOR_RE.match(value):
            raise ValueError(f"Invalid hex color: {value!r}")
        return value.upper()


settings = LifeGridSettings()
