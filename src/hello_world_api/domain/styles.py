"""Fixed glyph and colour table for :class:`MessageStyle`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .enums import MessageStyle


@dataclass(frozen=True, slots=True)
class StyleSpec:
    """Glyph shown inside the ``[ ]`` accent and the Rich colour it is drawn in.

    ``None`` for both means "no accent, default foreground".
    """

    glyph: str | None
    color: str | None

    @property
    def decorated(self) -> bool:
        return self.glyph is not None


STYLE_TABLE: Final[dict[MessageStyle, StyleSpec]] = {
    MessageStyle.GENERAL: StyleSpec("-", "grey70"),
    MessageStyle.NOTICE: StyleSpec("*", "cyan"),
    MessageStyle.SUCCESS: StyleSpec("+", "green"),
    MessageStyle.WARNING: StyleSpec("!", "yellow"),
    MessageStyle.ERROR: StyleSpec("x", "red"),
    MessageStyle.NONE: StyleSpec(None, None),
}


def resolve_style(style: MessageStyle | str) -> StyleSpec:
    """Return the :class:`StyleSpec` for ``style``.

    Example:
        >>> resolve_style(MessageStyle.ERROR)
        StyleSpec(glyph='x', color='red')
        >>> resolve_style("none").decorated
        False
    """
    return STYLE_TABLE[MessageStyle(style)]


__all__ = ["STYLE_TABLE", "StyleSpec", "resolve_style"]
