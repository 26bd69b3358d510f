"""Pure domain functions and user-facing report texts."""

from __future__ import annotations

from typing import Final

from .enums import StorageTarget

CANONICAL_GREETING = "Hello World!"

#: Asymmetric key length used for greeting encryption unless configured otherwise.
DEFAULT_GREETING_KEY_SIZE: Final[int] = 1024

#: Bytes of PKCS#1 v1.5 padding overhead per RSA block.
PKCS1V15_OVERHEAD: Final[int] = 11

MSG_OUTPUT_FAILURE: Final[str] = "The console is unable to print your message."
MSG_ENCRYPTION_FAILURE: Final[str] = "Your message was unable to be encrypted."
MSG_GREETING_FAILURE: Final[str] = "There was an error printing your message."
MSG_NO_DATABASE: Final[str] = "No database could be found to store data!"

_STORED_MESSAGES: Final[dict[StorageTarget, str]] = {
    StorageTarget.FILE: "Stored data into a file!",
    StorageTarget.CONTAINER: "Stored data into an encrypted container!",
}


def build_greeting(message: str | None = None) -> str:
    r"""Return ``message`` or the canonical greeting when none is given.

    Example:
        >>> build_greeting()
        'Hello World!'
        >>> build_greeting("Hola!")
        'Hola!'
    """
    return CANONICAL_GREETING if message is None else message


def rsa_capacity(key_size: int) -> int:
    """Return how many plaintext bytes one PKCS#1 v1.5 RSA block can carry.

    Example:
        >>> rsa_capacity(1024)
        117
    """
    return key_size // 8 - PKCS1V15_OVERHEAD


def stored_message(target: StorageTarget) -> str:
    """Return the success line for ``target``.

    Example:
        >>> stored_message(StorageTarget.FILE)
        'Stored data into a file!'
    """
    return _STORED_MESSAGES[target]


def storage_failure_message(target: StorageTarget) -> str:
    """Return the generic failure line naming ``target``.

    Example:
        >>> storage_failure_message(StorageTarget.CONTAINER)
        'The provided data could not be stored into a container.'
    """
    return f"The provided data could not be stored into a {target.value}."


__all__ = [
    "CANONICAL_GREETING",
    "DEFAULT_GREETING_KEY_SIZE",
    "MSG_ENCRYPTION_FAILURE",
    "MSG_GREETING_FAILURE",
    "MSG_NO_DATABASE",
    "MSG_OUTPUT_FAILURE",
    "PKCS1V15_OVERHEAD",
    "build_greeting",
    "rsa_capacity",
    "storage_failure_message",
    "stored_message",
]
