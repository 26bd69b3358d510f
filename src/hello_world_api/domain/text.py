"""Conversions between text, raw bytes, and base64 for a chosen encoding.

Characters the selected encoding cannot represent are replaced with ``?``
rather than raising, so an ASCII conversion of accented text always succeeds.
"""

from __future__ import annotations

import base64

from .enums import EncodingStyle


def get_bytes(text: str, style: EncodingStyle = EncodingStyle.DEFAULT) -> bytes:
    """Encode ``text`` with the codec behind ``style``.

    Example:
        >>> get_bytes("Hi", EncodingStyle.UNICODE)
        b'H\\x00i\\x00'
        >>> get_bytes("Olé", EncodingStyle.ASCII)
        b'Ol?'
    """
    return text.encode(style.codec, errors="replace")


def get_string(data: bytes, style: EncodingStyle = EncodingStyle.DEFAULT) -> str:
    """Decode ``data`` with the codec behind ``style``.

    Example:
        >>> get_string(b"\\x00H\\x00i", EncodingStyle.BIG_ENDIAN_UNICODE)
        'Hi'
    """
    return data.decode(style.codec, errors="replace")


def to_base64(value: str | bytes, style: EncodingStyle = EncodingStyle.DEFAULT) -> str:
    """Return the base64 text of ``value``; strings are encoded first.

    Example:
        >>> to_base64("Hello World!")
        'SGVsbG8gV29ybGQh'
    """
    raw = value if isinstance(value, bytes) else get_bytes(value, style)
    return base64.b64encode(raw).decode("ascii")


def from_base64(value: str, style: EncodingStyle = EncodingStyle.DEFAULT) -> str:
    """Decode base64 ``value`` back into text.

    Example:
        >>> from_base64("SGVsbG8gV29ybGQh")
        'Hello World!'
    """
    return get_string(base64.b64decode(value), style)


__all__ = ["from_base64", "get_bytes", "get_string", "to_base64"]
