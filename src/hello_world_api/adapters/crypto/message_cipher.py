"""RSA encryption of display strings.

A fresh key pair is generated per call and the private key is discarded, so
the base64 result is an irreversible, illustrative transform.
"""

from __future__ import annotations

from cryptography.hazmat.primitives.asymmetric import padding, rsa

from hello_world_api.domain.behaviors import DEFAULT_GREETING_KEY_SIZE, rsa_capacity
from hello_world_api.domain.enums import EncodingStyle
from hello_world_api.domain.errors import EncryptionError, MessageTooLargeError
from hello_world_api.domain.text import get_bytes, to_base64

_PUBLIC_EXPONENT = 65537


def encrypt_message(
    message: str,
    *,
    key_size: int = DEFAULT_GREETING_KEY_SIZE,
    encoding: EncodingStyle = EncodingStyle.ASCII,
) -> str:
    """Encrypt ``message`` with a throw-away RSA key and return base64 text.

    Uses PKCS#1 v1.5 padding, which limits the plaintext to
    ``key_size // 8 - 11`` bytes.

    Args:
        message: Text to encrypt.
        key_size: RSA modulus length in bits.
        encoding: Encoding applied to ``message`` before encryption.

    Returns:
        Base64 ciphertext, ``key_size // 8`` bytes before encoding.

    Raises:
        MessageTooLargeError: The encoded message does not fit one RSA block.
        EncryptionError: The cipher rejected the input for another reason.

    Example:
        >>> import base64
        >>> len(base64.b64decode(encrypt_message("Este es muy importante!")))
        128
    """
    data = get_bytes(message, encoding)
    capacity = rsa_capacity(key_size)
    if len(data) > capacity:
        raise MessageTooLargeError(size=len(data), capacity=capacity)

    private_key = rsa.generate_private_key(public_exponent=_PUBLIC_EXPONENT, key_size=key_size)
    try:
        ciphertext = private_key.public_key().encrypt(data, padding.PKCS1v15())
    except ValueError as exc:
        raise EncryptionError(str(exc)) from exc
    return to_base64(ciphertext)


__all__ = ["encrypt_message"]
