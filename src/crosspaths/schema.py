"""Configuration schema for crosspaths."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoggingConfig(BaseModel):
    """Logging section."""

    model_config = ConfigDict(extra='forbid')

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level"
    )
    format: Literal["simple", "detailed", "json"] = Field(
        default="simple",
        description="Console log format"
    )
    file: str | None = Field(default=None, description="Optional JSON log file path")

    @field_validator('level', mode='before')
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator('format', mode='before')
    @classmethod
    def normalize_format(cls, v: str) -> str:
        if isinstance(v, str):
            return v.lower()
        return v


class PathsConfig(BaseModel):
    """Which path syntax to use when none is given explicitly."""

    model_config = ConfigDict(extra='forbid')

    variant: Literal["target", "posix", "windows", "slash"] = Field(
        default="target",
        description="Path syntax; 'target' follows the running platform"
    )

    @field_validator('variant', mode='before')
    @classmethod
    def normalize_variant(cls, v: str) -> str:
        if isinstance(v, str):
            return v.lower()
        return v


class CrossPathsConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra='forbid')

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
