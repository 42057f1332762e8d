"""Pydantic models describing ReactPush configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LocatorConfig(BaseModel):
    """Where the bundle fetcher keeps its marker file and which bundle ships built in."""

    model_config = ConfigDict(extra="allow")

    storage_root: Path = Path("./data")
    default_bundle: str = Field(default="index.android.bundle", min_length=1)

    @field_validator("default_bundle")
    @classmethod
    def _reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("default_bundle must not be blank.")
        return value


class HostConfig(BaseModel):
    """Host application bundle selection settings."""

    model_config = ConfigDict(extra="allow")

    developer_mode: bool = False
    dev_bundle: Optional[str] = None


class LoggingConfig(BaseModel):
    """Logging level and optional log file."""

    model_config = ConfigDict(extra="allow")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_path: Optional[Path] = None

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class ReactPushConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(extra="allow")

    locator: LocatorConfig = Field(default_factory=LocatorConfig)
    host: HostConfig = Field(default_factory=HostConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = [
    "HostConfig",
    "LocatorConfig",
    "LoggingConfig",
    "ReactPushConfig",
]
