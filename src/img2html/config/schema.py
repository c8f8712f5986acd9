"""Pydantic model for converter configuration."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PositiveInt, ValidationError

from img2html.config.defaults import DEFAULT_CACHE_LIFETIME
from img2html.errors.exceptions import ConfigurationError


class ConverterConfig(BaseModel):
    """Construction options for ImageToHtml.

    Accepts both snake_case keys and the camelCase names used by host
    applications (``maxWidth``, ``cacheDirectory``, ``cacheLifetimeSeconds``...).
    """

    model_config = ConfigDict(extra="ignore")

    max_width: PositiveInt | None = Field(
        default=None, validation_alias=AliasChoices("max_width", "maxWidth")
    )
    max_height: PositiveInt | None = Field(
        default=None, validation_alias=AliasChoices("max_height", "maxHeight")
    )
    cache_dir: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("cache_dir", "cacheDir", "cacheDirectory"),
    )
    cache_lifetime: PositiveInt = Field(
        default=DEFAULT_CACHE_LIFETIME,
        validation_alias=AliasChoices("cache_lifetime", "cacheLifetime", "cacheLifetimeSeconds"),
    )
    base_dir: Path | None = Field(
        default=None, validation_alias=AliasChoices("base_dir", "baseDir")
    )

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> ConverterConfig:
        """Validate a raw mapping, raising ConfigurationError on bad values."""
        data = {k: v for k, v in (raw or {}).items() if v is not None}
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid converter configuration: {exc}") from exc
