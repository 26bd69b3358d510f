"""In-memory console writer for testing.

:class:`RecordingWriter` satisfies :class:`StyledOutput` and keeps every call
instead of writing to a stream.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...domain.enums import MessageStyle
from ...domain.styles import resolve_style


@dataclass(frozen=True, slots=True)
class PrintedLine:
    """One captured ``print`` call and the plain text it would have produced."""

    message: str
    accents: bool
    timestamp: bool
    whole_line: bool
    style: MessageStyle
    text: str


def _empty_lines() -> list[PrintedLine]:
    return []


@dataclass
class RecordingWriter:
    """Capture writer calls for assertions; optionally fail like a broken stream.

    Timestamps are rendered as the fixed ``timestamp_text`` so captured lines
    are deterministic.

    Example:
        >>> writer = RecordingWriter()
        >>> writer.print("Hi", True, False, False, MessageStyle.SUCCESS)
        '[+]: Hi'
        >>> writer.messages
        ['Hi']
    """

    lines: list[PrintedLine] = field(default_factory=_empty_lines)
    raise_exception: BaseException | None = None
    timestamp_text: str = "2000-01-01 00:00:00"

    def print(
        self,
        message: str,
        accents: bool = True,
        timestamp: bool = False,
        whole_line: bool = False,
        style: MessageStyle = MessageStyle.NONE,
    ) -> str:
        if self.raise_exception is not None:
            raise self.raise_exception
        spec = resolve_style(style)
        prefix = f"{self.timestamp_text} " if timestamp else ""
        accent = f"[{spec.glyph}]: " if accents and spec.decorated else ""
        text = f"{prefix}{accent}{message}"
        self.lines.append(PrintedLine(message, accents, timestamp, whole_line, style, text))
        return text

    @property
    def messages(self) -> list[str]:
        return [line.message for line in self.lines]

    @property
    def styles(self) -> list[MessageStyle]:
        return [line.style for line in self.lines]

    def clear(self) -> None:
        """Reset captured lines and any configured failure."""
        self.lines.clear()
        self.raise_exception = None


__all__ = ["PrintedLine", "RecordingWriter"]
