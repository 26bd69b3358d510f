"""Configuration adapter - loading, display, overrides, and settings models.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.settings` - Pydantic models for store-related sections
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import StoreSettings, load_store_settings

__all__ = [
    "StoreSettings",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_store_settings",
]
