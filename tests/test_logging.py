"""Tests for the ``[lib_log_rich]`` configuration model.

``init_logging`` itself runs through the CLI integration tests in
test_cli_core.py.
"""

from __future__ import annotations

import pytest
from lib_layered_config import Config

from hello_world_api import __init__conf__
from hello_world_api.adapters.logging.setup import LoggingConfigModel, _build_runtime_config


@pytest.mark.os_agnostic
def test_logging_config_model_passes_unknown_keys_through() -> None:
    parsed = LoggingConfigModel.model_validate({"service": "greeter", "environment": "dev", "console_level": "DEBUG"})

    assert parsed.service == "greeter"
    assert parsed.environment == "dev"
    assert parsed.model_dump(exclude={"service", "environment"}, exclude_none=True) == {"console_level": "DEBUG"}


@pytest.mark.os_agnostic
def test_logging_config_model_defaults() -> None:
    parsed = LoggingConfigModel.model_validate({})

    assert parsed.service is None
    assert parsed.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_falls_back_to_package_name() -> None:
    runtime_config = _build_runtime_config(Config({}, {}))

    assert runtime_config.service == __init__conf__.name
    assert runtime_config.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_uses_configured_service() -> None:
    config = Config({"lib_log_rich": {"service": "greeter", "environment": "staging"}}, {})

    runtime_config = _build_runtime_config(config)

    assert runtime_config.service == "greeter"
    assert runtime_config.environment == "staging"
