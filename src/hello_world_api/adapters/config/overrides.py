"""Parse and apply ``--set SECTION.KEY=VALUE`` CLI overrides to Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

OverrideValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` assignment split into section, key path, and value."""

    section: str
    key_path: tuple[str, ...]
    value: OverrideValue


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a :class:`ConfigOverride`.

    Only the first ``=`` separates path from value, so values may contain ``=``.

    Raises:
        ValueError: No ``=``, no dot in the path, or an empty path component.

    Examples:
        >>> parse_override("greeting.key_size=2048")
        ConfigOverride(section='greeting', key_path=('key_size',), value=2048)
        >>> parse_override("container.password=a=b").value
        'a=b'
        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path
        ('payload_limits', 'max_chars')
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    section, dot, rest = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")

    key_path = tuple(rest.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def coerce_value(raw: str) -> OverrideValue:
    """Interpret ``raw`` as JSON when possible, otherwise keep the string.

    Examples:
        >>> coerce_value("true"), coerce_value("1024"), coerce_value("ascii")
        (True, 1024, 'ascii')
        >>> coerce_value("null")
        >>> coerce_value("")
        ''
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def _merge_into(tree: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    node: dict[str, object] = tree.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise ValueError(f"Cannot override below {part!r}: it holds a {type(child).__name__}, not a table")
        node = cast("dict[str, object]", child)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` override deep-merged on top.

    Touched sections are rebuilt from their current contents, so sibling keys
    survive ``Config.with_overrides`` replacing whole top-level entries.
    Returns the same instance when there is nothing to apply.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> cfg = Config({"greeting": {"key_size": 1024}}, {})
        >>> apply_overrides(cfg, ("greeting.key_size=2048",))["greeting"]["key_size"]
        2048
        >>> apply_overrides(cfg, ()) is cfg
        True
        >>> cfg = Config({"greeting": {"key_size": 1024, "encoding": "ascii"}}, {})
        >>> apply_overrides(cfg, ("greeting.key_size=2048",))["greeting"]["encoding"]
        'ascii'
    """
    if not raw_overrides:
        return config

    current = config.as_dict()
    tree: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        override = parse_override(raw)
        if override.section not in tree:
            existing = current.get(override.section)
            tree[override.section] = cast("dict[str, object]", existing) if isinstance(existing, dict) else {}
        _merge_into(tree, override)
    return config.with_overrides(tree)


__all__ = [
    "ConfigOverride",
    "OverrideValue",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
