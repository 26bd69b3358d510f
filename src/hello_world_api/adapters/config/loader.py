"""Layered configuration loading with caching and profile support."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from hello_world_api import __init__conf__


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject unsafe profile names via ``lib_layered_config.validate_profile_name``.

    Raises:
        ValueError: Empty, too long, path traversal, reserved names, bad characters.

    Examples:
        >>> validate_profile("staging-v2")

        >>> validate_profile("../etc/passwd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc/passwd
    """
    validate_profile_name(profile, max_length=max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml`` shipped next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# One load per (profile, start_dir) for the lifetime of the short-lived CLI process.
@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load configuration with precedence defaults → app → host → user → dotenv → env.

    Invalid profile names raise before anything is read, so they are never
    cached. ``get_config.cache_clear()`` forces the next call to read from disk.

    Args:
        profile: Optional profile name; inserts ``profile/<name>/`` into every
            configuration path (e.g. ``~/.config/hello-world-api/profile/test/config.toml``).
        start_dir: Directory that seeds ``.env`` discovery; defaults to the cwd.

    Example:
        >>> config = get_config()  # doctest: +SKIP
        >>> config.get("greeting", default={})["key_size"]  # doctest: +SKIP
        1024
    """
    if profile is not None:
        validate_profile(profile)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
