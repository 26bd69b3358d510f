"""Rich-powered console writer implementing :class:`StyledOutput`.

Purpose
-------
Render a message with an optional timestamp and an optional ``[glyph]:``
accent, coloured per :class:`MessageStyle`.

Contents
--------
* :data:`DEFAULT_TIMESTAMP_FORMAT` - ``strftime`` pattern for the timestamp prefix.
* :class:`StyledWriter` - the writer.
* :func:`create_writer` - factory used by the composition root.

System Role
-----------
Each piece of the line is a styled Rich :class:`~rich.segment.Segment`. Rich
closes every styled segment with a reset sequence while rendering, so no
foreground colour survives a call, including calls whose stream write fails.
Segments bypass :class:`~rich.text.Text` sanitising: tabs, carriage returns and
other control characters in the message reach the stream unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Final

from rich.console import Console
from rich.segment import Segment, Segments
from rich.style import Style

from hello_world_api.domain.enums import MessageStyle
from hello_world_api.domain.styles import resolve_style

DEFAULT_TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


class StyledWriter:
    """Print decorated lines to a Rich console.

    Examples
    --------
    >>> from io import StringIO
    >>> buffer = StringIO()
    >>> writer = StyledWriter(Console(file=buffer))
    >>> writer.print("Hello", style=MessageStyle.SUCCESS)
    '[+]: Hello'
    >>> buffer.getvalue()
    '[+]: Hello\\n'
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        force_color: bool = False,
        no_color: bool = False,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=True if force_color else None, no_color=no_color)
        self._timestamp_format = timestamp_format
        self._clock = clock if clock is not None else datetime.now

    @property
    def console(self) -> Console:
        return self._console

    def print(
        self,
        message: str,
        accents: bool = True,
        timestamp: bool = False,
        whole_line: bool = False,
        style: MessageStyle = MessageStyle.NONE,
    ) -> str:
        """Write one line and return its plain text.

        ``whole_line`` colours the timestamp, accent and message; otherwise only
        the glyph between the brackets is coloured. Errors raised by the
        underlying stream propagate unchanged.
        """
        pieces = self.segments(message, accents=accents, timestamp=timestamp, whole_line=whole_line, style=style)
        # Segments carry no line end of their own
        self._console.print(Segments([*pieces, Segment.line()]), soft_wrap=True, highlight=False)
        return "".join(piece.text for piece in pieces)

    def segments(
        self,
        message: str,
        *,
        accents: bool = True,
        timestamp: bool = False,
        whole_line: bool = False,
        style: MessageStyle = MessageStyle.NONE,
    ) -> list[Segment]:
        """Build the styled segments of one line without printing it.

        Examples
        --------
        >>> writer = StyledWriter(Console())
        >>> [(s.text, str(s.style)) for s in writer.segments("oops", style=MessageStyle.ERROR)]
        [('[', 'None'), ('x', 'red'), (']: oops', 'None')]
        >>> [(s.text, str(s.style)) for s in writer.segments("oops", whole_line=True, style=MessageStyle.ERROR)]
        [('[x]: oops', 'red')]
        """
        spec = resolve_style(style)
        color = Style.parse(spec.color) if spec.color else None
        line_style = color if whole_line else None
        pieces: list[Segment] = []
        if timestamp:
            pieces.append(Segment(f"{self._clock().strftime(self._timestamp_format)} ", line_style))
        if accents and spec.glyph is not None:
            if whole_line:
                pieces.append(Segment(f"[{spec.glyph}]: ", line_style))
            else:
                pieces.extend([Segment("["), Segment(spec.glyph, color), Segment("]: ")])
        pieces.append(Segment(message, line_style))
        return list(Segment.simplify(pieces))


def create_writer(
    *,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    force_color: bool = False,
    no_color: bool = False,
) -> StyledWriter:
    """Build a :class:`StyledWriter` bound to standard output."""
    return StyledWriter(timestamp_format=timestamp_format, force_color=force_color, no_color=no_color)


__all__ = ["DEFAULT_TIMESTAMP_FORMAT", "StyledWriter", "create_writer"]
