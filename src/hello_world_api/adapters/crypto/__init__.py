"""Crypto adapter - ciphers backed by the ``cryptography`` package.

Contents:
    * :mod:`.message_cipher` - RSA greeting encryption
    * :mod:`.container_cipher` - AES-256-CBC container encryption
"""

from __future__ import annotations

from .container_cipher import derive_key_material, encrypt_container
from .message_cipher import encrypt_message

__all__ = ["derive_key_material", "encrypt_container", "encrypt_message"]
