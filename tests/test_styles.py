"""Style table tests: glyphs, colours, and the undecorated NONE style."""

from __future__ import annotations

import pytest

from hello_world_api.domain.enums import MessageStyle
from hello_world_api.domain.styles import STYLE_TABLE, StyleSpec, resolve_style


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("style", "glyph", "color"),
    [
        (MessageStyle.GENERAL, "-", "grey70"),
        (MessageStyle.NOTICE, "*", "cyan"),
        (MessageStyle.SUCCESS, "+", "green"),
        (MessageStyle.WARNING, "!", "yellow"),
        (MessageStyle.ERROR, "x", "red"),
    ],
)
def test_decorated_styles_have_fixed_glyph_and_color(style: MessageStyle, glyph: str, color: str) -> None:
    spec = resolve_style(style)

    assert spec == StyleSpec(glyph, color)
    assert spec.decorated is True


@pytest.mark.os_agnostic
def test_none_style_has_no_glyph_and_no_color() -> None:
    spec = resolve_style(MessageStyle.NONE)

    assert spec.glyph is None
    assert spec.color is None
    assert spec.decorated is False


@pytest.mark.os_agnostic
def test_style_table_covers_every_message_style() -> None:
    assert set(STYLE_TABLE) == set(MessageStyle)


@pytest.mark.os_agnostic
def test_resolve_style_accepts_plain_strings() -> None:
    assert resolve_style("warning") is STYLE_TABLE[MessageStyle.WARNING]


@pytest.mark.os_agnostic
def test_resolve_style_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        resolve_style("loud")
