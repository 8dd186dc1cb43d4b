"""Configuration loading utilities for opstring."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import structlog
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .paths import project_config_path, runtime_config_dir
from .view import SEARCH_STRATEGIES

logger = structlog.get_logger(__name__)

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")
    renderer: str = Field(default="json", description="Log line format: json|console")

    def normalized_level(self) -> str:
        return self.level.upper()

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        if value.upper() not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return value

    @field_validator("renderer")
    @classmethod
    def _validate_renderer(cls, value: str) -> str:
        normalised = value.lower()
        if normalised not in {"json", "console"}:
            raise ValueError(f"Unknown log renderer: {value}")
        return normalised


class TranslationConfig(BaseModel):
    search: str = Field(default="bisect", description="Byte to cluster lookup: bisect|linear")

    @field_validator("search")
    @classmethod
    def _validate_search(cls, value: str) -> str:
        normalised = value.lower()
        if normalised not in SEARCH_STRATEGIES:
            raise ValueError(f"Unknown search strategy: {value}")
        return normalised


class SegmentationConfig(BaseModel):
    validate_partition: bool = Field(
        default=True,
        description="Check that segmenter output reconstructs the source text",
    )


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    translation: TranslationConfig = Field(default_factory=TranslationConfig)
    segmentation: SegmentationConfig = Field(default_factory=SegmentationConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield project_config_path()
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            try:
                config = AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
            logger.debug("config.loaded", path=str(candidate))
            return config
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)


__all__ = [
    "AppConfig",
    "LoggingConfig",
    "TranslationConfig",
    "SegmentationConfig",
    "DEFAULT_CONFIG",
    "config_search_paths",
    "load_config",
    "dump_default_config",
]
