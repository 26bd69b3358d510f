"""The ``hello``, ``store`` and ``demo`` commands end to end.

Configuration is injected; console output, ciphers and file writes are real.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import rtoml
from click.testing import CliRunner, Result
from lib_layered_config import Config

from hello_world_api.adapters import cli as cli_mod
from hello_world_api.adapters.cli import ExitCode
from hello_world_api.composition import AppServices

InjectConfig = Callable[[Config], Callable[[], AppServices]]


def _invoke(cli_runner: CliRunner, factory: Callable[[], AppServices], *args: str) -> Result:
    return cli_runner.invoke(cli_mod.cli, list(args), obj=factory)


# ======================== hello ========================


@pytest.mark.os_agnostic
def test_hello_prints_the_canonical_greeting(
    cli_runner: CliRunner, inject_config: InjectConfig, storage_config: Config
) -> None:
    result = _invoke(cli_runner, inject_config(storage_config), "hello")

    assert result.exit_code == 0
    assert "[+]: Hello World!" in result.stdout


@pytest.mark.os_agnostic
def test_hello_line_starts_with_a_timestamp(
    cli_runner: CliRunner, inject_config: InjectConfig, config_factory: Callable[[dict[str, Any]], Config]
) -> None:
    config = config_factory({"console": {"timestamp_format": "[stamp]"}})

    result = _invoke(cli_runner, inject_config(config), "hello", "-m", "Hola!")

    assert result.stdout.strip() == "[stamp] [+]: Hola!"


@pytest.mark.os_agnostic
def test_hello_prints_markup_literally(
    cli_runner: CliRunner, inject_config: InjectConfig, storage_config: Config
) -> None:
    result = _invoke(cli_runner, inject_config(storage_config), "hello", "--message", "[bold]not bold[/bold]")

    assert result.exit_code == 0
    assert "[bold]not bold[/bold]" in result.stdout


@pytest.mark.os_agnostic
def test_hello_encrypt_prints_base64_instead_of_the_message(
    cli_runner: CliRunner, inject_config: InjectConfig, storage_config: Config
) -> None:
    result = _invoke(cli_runner, inject_config(storage_config), "hello", "--encrypt", "-m", "Este es muy importante!")

    assert result.exit_code == 0
    assert "Este es muy importante!" not in result.stdout
    encoded = result.stdout.strip().rsplit("[+]: ", 1)[1]
    assert len(encoded) == 172


@pytest.mark.os_agnostic
def test_hello_encrypt_too_long_exits_with_invalid_argument(
    cli_runner: CliRunner, inject_config: InjectConfig, storage_config: Config
) -> None:
    result = _invoke(cli_runner, inject_config(storage_config), "hello", "--encrypt", "-m", "x" * 118)

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "[x]: Your message was unable to be encrypted." in result.stdout


@pytest.mark.os_agnostic
def test_hello_with_larger_key_accepts_longer_messages(
    cli_runner: CliRunner, inject_config: InjectConfig, storage_config: Config
) -> None:
    result = _invoke(
        cli_runner,
        inject_config(storage_config),
        "--set",
        "greeting.key_size=2048",
        "hello",
        "--encrypt",
        "-m",
        "x" * 200,
    )

    assert result.exit_code == 0


@pytest.mark.os_agnostic
def test_invalid_key_size_exits_with_config_error(
    cli_runner: CliRunner, inject_config: InjectConfig, storage_config: Config
) -> None:
    result = _invoke(cli_runner, inject_config(storage_config), "--set", "greeting.key_size=1000", "hello")

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "key_size" in result.stderr


# ======================== store ========================


@pytest.mark.os_agnostic
def test_store_file_writes_plaintext_toml(
    cli_runner: CliRunner, inject_config: InjectConfig, storage_config: Config, tmp_path: Path
) -> None:
    result = _invoke(cli_runner, inject_config(storage_config), "store", "-d", "Test data to store...")

    assert result.exit_code == 0
    assert "[+]: Stored data into a file!" in result.stdout
    document = rtoml.load(tmp_path / "config.toml")
    assert document["hello_world_api"]["configuration"]["data"] == "Test data to store..."


@pytest.mark.os_agnostic
def test_store_container_writes_ciphertext(
    cli_runner: CliRunner, inject_config: InjectConfig, storage_config: Config, tmp_path: Path
) -> None:
    result = _invoke(
        cli_runner, inject_config(storage_config), "store", "--target", "container", "-d", "Some more test data..."
    )

    assert result.exit_code == 0
    assert "Stored data into an encrypted container!" in result.stdout
    payload = (tmp_path / "config.enc").read_bytes()
    assert b"Some more test data" not in payload
    assert not (tmp_path / "config.toml").exists()


@pytest.mark.os_agnostic
def test_store_database_warns_and_succeeds(
    cli_runner: CliRunner, inject_config: InjectConfig, storage_config: Config, tmp_path: Path
) -> None:
    result = _invoke(cli_runner, inject_config(storage_config), "store", "--target", "DATABASE", "-d", "anything")

    assert result.exit_code == 0
    assert "[!]: No database could be found to store data!" in result.stdout
    assert list(tmp_path.iterdir()) == []


@pytest.mark.os_agnostic
def test_store_directory_option_beats_configuration(
    cli_runner: CliRunner, inject_config: InjectConfig, storage_config: Config, tmp_path: Path
) -> None:
    explicit = tmp_path / "explicit"
    explicit.mkdir()

    result = _invoke(cli_runner, inject_config(storage_config), "store", "-d", "x", "--directory", str(explicit))

    assert result.exit_code == 0
    assert (explicit / "config.toml").is_file()
    assert not (tmp_path / "config.toml").exists()


@pytest.mark.os_agnostic
def test_store_into_missing_directory_exits_with_file_not_found(
    cli_runner: CliRunner, inject_config: InjectConfig, storage_config: Config, tmp_path: Path
) -> None:
    missing = tmp_path / "missing"

    result = _invoke(cli_runner, inject_config(storage_config), "store", "-d", "x", "--directory", str(missing))

    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "[x]: The provided data could not be stored into a file." in result.stdout
    assert not missing.exists()


@pytest.mark.os_agnostic
def test_store_requires_data(cli_runner: CliRunner, inject_config: InjectConfig, storage_config: Config) -> None:
    result = _invoke(cli_runner, inject_config(storage_config), "store")

    assert result.exit_code == 2
    assert "--data" in result.output


@pytest.mark.os_agnostic
def test_store_rejects_unknown_target(
    cli_runner: CliRunner, inject_config: InjectConfig, storage_config: Config
) -> None:
    result = _invoke(cli_runner, inject_config(storage_config), "store", "-d", "x", "--target", "cloud")

    assert result.exit_code == 2


# ======================== demo ========================


@pytest.mark.os_agnostic
def test_demo_runs_every_feature(
    cli_runner: CliRunner, inject_config: InjectConfig, storage_config: Config, tmp_path: Path
) -> None:
    result = _invoke(cli_runner, inject_config(storage_config), "demo")

    assert result.exit_code == 0
    output = result.stdout
    assert "Welcome to HelloWorldAPI v0.0.1!" in output
    assert "Written By: Jason Tanner" in output
    assert "[+]: Hello World!" in output
    assert "[+]: Hola! Mi nombre es Jason." in output
    assert "Este es muy importante!" not in output
    assert "No database could be found to store data!" in output
    assert (tmp_path / "config.toml").is_file()
    assert (tmp_path / "config.enc").is_file()


@pytest.mark.os_agnostic
def test_demo_in_missing_directory_finishes_and_reports_the_failure(
    cli_runner: CliRunner, inject_config: InjectConfig, storage_config: Config, tmp_path: Path
) -> None:
    result = _invoke(cli_runner, inject_config(storage_config), "demo", "--directory", str(tmp_path / "missing"))

    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "The provided data could not be stored into a file." in result.stdout
    assert "The provided data could not be stored into a container." in result.stdout
    assert "No database could be found to store data!" in result.stdout
