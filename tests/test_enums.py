"""Domain enum tests: member values, string equality, codecs and exhaustive member counts."""

from __future__ import annotations

import pytest

from hello_world_api.domain.enums import (
    EncodingStyle,
    ErrorKind,
    MessageStyle,
    OperationStatus,
    OutputFormat,
    StorageTarget,
)

# ======================== MessageStyle ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (MessageStyle.GENERAL, "general"),
        (MessageStyle.NOTICE, "notice"),
        (MessageStyle.SUCCESS, "success"),
        (MessageStyle.WARNING, "warning"),
        (MessageStyle.ERROR, "error"),
        (MessageStyle.NONE, "none"),
    ],
)
def test_message_style_member_values(member: MessageStyle, expected_value: str) -> None:
    """Each MessageStyle member has its lowercase string value and compares equal to it."""
    assert member.value == expected_value
    assert member == expected_value


@pytest.mark.os_agnostic
def test_message_style_member_count() -> None:
    assert len(MessageStyle) == 6


# ======================== EncodingStyle ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "codec"),
    [
        (EncodingStyle.DEFAULT, "utf-8"),
        (EncodingStyle.ASCII, "ascii"),
        (EncodingStyle.UTF7, "utf-7"),
        (EncodingStyle.UTF8, "utf-8"),
        (EncodingStyle.UTF32, "utf-32-le"),
        (EncodingStyle.UNICODE, "utf-16-le"),
        (EncodingStyle.BIG_ENDIAN_UNICODE, "utf-16-be"),
    ],
)
def test_encoding_style_maps_to_python_codec(member: EncodingStyle, codec: str) -> None:
    """Every encoding style is backed by a real, BOM-free Python codec."""
    assert member.codec == codec
    "A".encode(member.codec)


@pytest.mark.os_agnostic
def test_encoding_style_member_count() -> None:
    assert len(EncodingStyle) == 7


# ======================== StorageTarget ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (StorageTarget.FILE, "file"),
        (StorageTarget.CONTAINER, "container"),
        (StorageTarget.DATABASE, "database"),
    ],
)
def test_storage_target_member_values(member: StorageTarget, expected_value: str) -> None:
    assert member.value == expected_value


@pytest.mark.os_agnostic
def test_storage_target_parses_from_cli_string() -> None:
    assert StorageTarget("container") is StorageTarget.CONTAINER


# ======================== ErrorKind / OperationStatus / OutputFormat ========================


@pytest.mark.os_agnostic
def test_error_kind_covers_the_failure_taxonomy() -> None:
    """ErrorKind has exactly the six failure categories."""
    assert {kind.value for kind in ErrorKind} == {
        "output_failure",
        "encryption_failure",
        "path_too_long",
        "directory_not_found",
        "access_denied",
        "unknown",
    }


@pytest.mark.os_agnostic
def test_operation_status_member_count() -> None:
    assert len(OperationStatus) == 3


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_str"),
    [
        (OutputFormat.HUMAN, "human"),
        (OutputFormat.JSON, "json"),
    ],
)
def test_output_format_string_equality(member: OutputFormat, expected_str: str) -> None:
    """OutputFormat members compare equal to their plain string equivalents."""
    assert member == expected_str
