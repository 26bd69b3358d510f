"""TOML serialization of the configuration document."""

from __future__ import annotations

import rtoml

from hello_world_api.domain.document import ConfigurationDocument


def render_document(document: ConfigurationDocument) -> bytes:
    """Return the UTF-8 TOML text of ``document`` with its title as a header comment.

    Example:
        >>> text = render_document(ConfigurationDocument("abc")).decode("utf-8")
        >>> text.splitlines()[0]
        '# HelloWorldAPI Configuration File'
        >>> 'data = "abc"' in text
        True
    """
    body = rtoml.dumps(document.to_mapping())
    return f"# {document.title}\n{body}".encode()


__all__ = ["render_document"]
