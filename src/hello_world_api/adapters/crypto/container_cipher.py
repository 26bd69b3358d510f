"""AES-256-CBC encryption of serialized documents.

Key and IV come from one PBKDF2-HMAC-SHA1 stream over the configured password
and salt: the first ``key_bytes`` bytes are the key, the next ``iv_bytes``
bytes are the IV. Plaintext is PKCS#7 padded to the 128-bit block size.
"""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import padding as sym_padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from hello_world_api.domain.enums import EncodingStyle
from hello_world_api.domain.storage import ContainerSecret
from hello_world_api.domain.text import get_bytes

_MIN_SALT_BYTES = 8


def derive_key_material(secret: ContainerSecret) -> tuple[bytes, bytes]:
    """Return ``(key, iv)`` derived from ``secret``.

    Raises:
        ValueError: The encoded salt is shorter than 8 bytes.

    Example:
        >>> key, iv = derive_key_material(ContainerSecret())
        >>> len(key), len(iv)
        (32, 16)
    """
    salt = get_bytes(secret.salt, EncodingStyle.UTF8)
    if len(salt) < _MIN_SALT_BYTES:
        raise ValueError(f"salt must be at least {_MIN_SALT_BYTES} bytes, got {len(salt)}")
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA1(),  # noqa: S303 - matches the established container format
        length=secret.key_bytes + secret.iv_bytes,
        salt=salt,
        iterations=secret.iterations,
    )
    material = kdf.derive(get_bytes(secret.password, EncodingStyle.UTF8))
    return material[: secret.key_bytes], material[secret.key_bytes :]


def encrypt_container(plain: bytes, *, secret: ContainerSecret) -> bytes:
    """Encrypt ``plain`` into an opaque container blob.

    The result length is always the next multiple of 16 above ``len(plain)``.

    Example:
        >>> len(encrypt_container(b"x" * 16, secret=ContainerSecret()))
        32
    """
    key, iv = derive_key_material(secret)
    padder = sym_padding.PKCS7(secret.block_bits).padder()
    padded = padder.update(plain) + padder.finalize()
    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


__all__ = ["derive_key_material", "encrypt_container"]
