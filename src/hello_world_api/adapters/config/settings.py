"""Pydantic models for the sections a :class:`GreetingStore` is built from.

Parsed once at the boundary; the rest of the application only sees the
resulting frozen models and domain values.

Sections:
    * ``[console]`` - :class:`ConsoleSettings`
    * ``[greeting]`` - :class:`GreetingSettings`
    * ``[storage]`` - :class:`StorageSettings`
    * ``[container]`` - :class:`ContainerSettings`
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from hello_world_api.domain.behaviors import DEFAULT_GREETING_KEY_SIZE
from hello_world_api.domain.enums import EncodingStyle
from hello_world_api.domain.errors import ConfigurationError
from hello_world_api.domain.storage import (
    DEFAULT_CONTAINER_PASSWORD,
    DEFAULT_CONTAINER_SALT,
    DEFAULT_KDF_ITERATIONS,
    ContainerSecret,
)

from ..console.styled_writer import DEFAULT_TIMESTAMP_FORMAT

_MIN_RSA_KEY_SIZE = 1024


class ConsoleSettings(BaseModel):
    """``[console]`` section."""

    model_config = ConfigDict(frozen=True)

    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    force_color: bool = False
    no_color: bool = False


class GreetingSettings(BaseModel):
    """``[greeting]`` section.

    Example:
        >>> GreetingSettings(encoding="UTF8").encoding
        <EncodingStyle.UTF8: 'utf8'>
    """

    model_config = ConfigDict(frozen=True)

    key_size: int = DEFAULT_GREETING_KEY_SIZE
    encoding: EncodingStyle = EncodingStyle.ASCII

    @field_validator("key_size")
    @classmethod
    def _check_key_size(cls, v: int) -> int:
        if v < _MIN_RSA_KEY_SIZE or v % 8:
            raise ValueError(f"key_size must be a multiple of 8 and at least {_MIN_RSA_KEY_SIZE}")
        return v

    @field_validator("encoding", mode="before")
    @classmethod
    def _normalize_encoding(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v


class StorageSettings(BaseModel):
    """``[storage]`` section. An empty directory means "use the default"."""

    model_config = ConfigDict(frozen=True)

    directory: Path | None = None

    @field_validator("directory", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ContainerSettings(BaseModel):
    """``[container]`` section.

    The defaults are the fixed, publicly known password and salt. They exist
    so output is reproducible, not to protect anything.
    """

    model_config = ConfigDict(frozen=True)

    password: str = DEFAULT_CONTAINER_PASSWORD
    salt: str = Field(default=DEFAULT_CONTAINER_SALT, min_length=8)
    iterations: int = Field(default=DEFAULT_KDF_ITERATIONS, ge=1)

    def to_secret(self) -> ContainerSecret:
        return ContainerSecret(password=self.password, salt=self.salt, iterations=self.iterations)


class StoreSettings(BaseModel):
    """Everything needed to build a :class:`GreetingStore` from configuration."""

    model_config = ConfigDict(frozen=True)

    console: ConsoleSettings = Field(default_factory=ConsoleSettings)
    greeting: GreetingSettings = Field(default_factory=GreetingSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    container: ContainerSettings = Field(default_factory=ContainerSettings)


def load_store_settings_from_dict(config_dict: Mapping[str, Any]) -> StoreSettings:
    """Parse the relevant sections of ``config_dict``; unknown sections are ignored.

    Raises:
        ConfigurationError: A section fails validation.

    Example:
        >>> load_store_settings_from_dict({"greeting": {"key_size": 2048}}).greeting.key_size
        2048
        >>> load_store_settings_from_dict({}).storage.directory is None
        True
    """
    sections = {
        name: cast(Mapping[str, Any], config_dict.get(name) or {})
        for name in ("console", "greeting", "storage", "container")
    }
    try:
        return StoreSettings.model_validate(sections)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


def load_store_settings(config: Config) -> StoreSettings:
    """Parse a layered :class:`Config` into :class:`StoreSettings`."""
    return load_store_settings_from_dict(config.as_dict())


__all__ = [
    "ConsoleSettings",
    "ContainerSettings",
    "GreetingSettings",
    "StorageSettings",
    "StoreSettings",
    "load_store_settings",
    "load_store_settings_from_dict",
]
