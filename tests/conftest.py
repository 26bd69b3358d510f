"""Shared pytest fixtures for store, CLI and module-entry tests.

All shared fixtures live here; tests receive them through pytest's conftest
discovery. Fixture names read as plain English.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from datetime import datetime
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from rich.console import Console

if TYPE_CHECKING:
    from hello_world_api.adapters.console import StyledWriter
    from hello_world_api.adapters.memory import FileSpy, RecordingWriter
    from hello_world_api.application import GreetingStore
    from hello_world_api.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))
FIXED_NOW = datetime(2024, 5, 17, 9, 30, 15)


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for clean output; log lines go to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for ``cli_runner.invoke(obj=...)``."""
    from hello_world_api.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test (not after; it may be monkeypatched)."""
    from hello_world_api.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory producing production services whose ``get_config`` returns a fixed Config.

    Only the configuration I/O boundary is replaced; console, ciphers and the
    filesystem stay real.
    """
    from hello_world_api.composition import AppServices, build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = replace(build_production(), get_config=_fake_get_config)
        return lambda: test_services

    return _inject


@pytest.fixture
def storage_config(config_factory: Callable[[dict[str, Any]], Config], tmp_path: Path) -> Config:
    """Config pointing ``[storage] directory`` at the test's tmp_path."""
    return config_factory({"storage": {"directory": str(tmp_path)}})


@pytest.fixture
def console_buffer() -> StringIO:
    """Text buffer that a :class:`StyledWriter` under test prints into."""
    return StringIO()


@pytest.fixture
def styled_writer(console_buffer: StringIO) -> StyledWriter:
    """A plain (no colour) writer with a frozen clock printing into ``console_buffer``."""
    from hello_world_api.adapters.console import StyledWriter

    console = Console(file=console_buffer, no_color=True, width=200)
    return StyledWriter(console, clock=lambda: FIXED_NOW)


@pytest.fixture
def color_writer(console_buffer: StringIO) -> StyledWriter:
    """A colour-forcing writer with a frozen clock printing into ``console_buffer``."""
    from hello_world_api.adapters.console import StyledWriter

    console = Console(file=console_buffer, force_terminal=True, color_system="standard", width=200)
    return StyledWriter(console, clock=lambda: FIXED_NOW)


@pytest.fixture
def recording_writer() -> RecordingWriter:
    from hello_world_api.adapters.memory import RecordingWriter

    return RecordingWriter()


@pytest.fixture
def file_spy(tmp_path: Path) -> FileSpy:
    from hello_world_api.adapters.memory import FileSpy

    return FileSpy(directory=tmp_path / "spy")


@pytest.fixture
def testing_services(recording_writer: RecordingWriter, file_spy: FileSpy) -> AppServices:
    """In-memory services sharing ``recording_writer`` and ``file_spy``."""
    from hello_world_api.composition import build_testing

    return build_testing(writer=recording_writer, files=file_spy)


@pytest.fixture
def store_in(recording_writer: RecordingWriter) -> Callable[[Path | None], GreetingStore]:
    """Return a factory for production-wired stores that report into ``recording_writer``.

    Real ciphers and real file writes; only the console is recorded.
    """
    from hello_world_api.composition import create_greeting_store

    def _factory(directory: Path | None) -> GreetingStore:
        return create_greeting_store(directory, writer=recording_writer)

    return _factory
