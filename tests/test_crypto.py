"""Cipher stories: RSA greeting capacity, PBKDF2 key material and the AES container."""

from __future__ import annotations

import base64
import hashlib

import pytest
from cryptography.hazmat.primitives import padding as sym_padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from hello_world_api.adapters.crypto import derive_key_material, encrypt_container, encrypt_message
from hello_world_api.adapters.storage import render_document
from hello_world_api.domain.document import build_configuration_document
from hello_world_api.domain.enums import EncodingStyle
from hello_world_api.domain.errors import EncryptionError, MessageTooLargeError
from hello_world_api.domain.storage import ContainerSecret


def _decrypt(blob: bytes, secret: ContainerSecret) -> bytes:
    key, iv = derive_key_material(secret)
    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    padded = decryptor.update(blob) + decryptor.finalize()
    unpadder = sym_padding.PKCS7(128).unpadder()
    return unpadder.update(padded) + unpadder.finalize()


# ======================== encrypt_message ========================


@pytest.mark.os_agnostic
def test_encrypted_greeting_is_one_base64_rsa_block() -> None:
    encoded = encrypt_message("Este es muy importante!")

    assert len(base64.b64decode(encoded, validate=True)) == 128


@pytest.mark.os_agnostic
def test_each_encryption_uses_a_fresh_key() -> None:
    assert encrypt_message("Hello World!") != encrypt_message("Hello World!")


@pytest.mark.os_agnostic
def test_message_at_capacity_is_accepted() -> None:
    assert encrypt_message("a" * 117)


@pytest.mark.os_agnostic
def test_message_over_capacity_raises_before_key_generation() -> None:
    with pytest.raises(MessageTooLargeError) as exc_info:
        encrypt_message("a" * 118)

    assert exc_info.value.capacity == 117
    assert exc_info.value.size == 118


@pytest.mark.os_agnostic
def test_capacity_is_measured_in_encoded_bytes() -> None:
    """59 characters fit as ASCII but take 118 bytes as UTF-16."""
    message = "b" * 59

    assert encrypt_message(message, encoding=EncodingStyle.ASCII)
    with pytest.raises(EncryptionError):
        encrypt_message(message, encoding=EncodingStyle.UNICODE)


@pytest.mark.os_agnostic
def test_larger_keys_produce_larger_blocks() -> None:
    encoded = encrypt_message("a" * 200, key_size=2048)

    assert len(base64.b64decode(encoded)) == 256


# ======================== derive_key_material ========================


@pytest.mark.os_agnostic
def test_key_material_matches_pbkdf2_hmac_sha1_reference() -> None:
    secret = ContainerSecret()
    reference = hashlib.pbkdf2_hmac(
        "sha1",
        b"ThisIsOurSuperSecretPassword",
        b"This is my super secret salt!",
        1024,
        dklen=48,
    )

    key, iv = derive_key_material(secret)

    assert key == reference[:32]
    assert iv == reference[32:]


@pytest.mark.os_agnostic
def test_key_material_depends_on_the_password() -> None:
    default_key, _ = derive_key_material(ContainerSecret())
    other_key, _ = derive_key_material(ContainerSecret(password="another password"))

    assert default_key != other_key


@pytest.mark.os_agnostic
def test_short_salt_is_rejected() -> None:
    with pytest.raises(ValueError, match="at least 8 bytes"):
        derive_key_material(ContainerSecret(salt="short"))


# ======================== encrypt_container ========================


@pytest.mark.os_agnostic
def test_container_is_padded_to_the_block_size_and_opaque() -> None:
    plain = render_document(build_configuration_document("Some more test data..."))

    blob = encrypt_container(plain, secret=ContainerSecret())

    assert len(blob) % 16 == 0
    assert len(blob) > len(plain)
    assert b"Some more test data..." not in blob
    assert b"HelloWorldAPI" not in blob


@pytest.mark.os_agnostic
def test_container_decrypts_with_the_same_secret() -> None:
    secret = ContainerSecret()
    plain = render_document(build_configuration_document("Some more test data..."))

    assert _decrypt(encrypt_container(plain, secret=secret), secret) == plain


@pytest.mark.os_agnostic
def test_container_encryption_is_deterministic_for_a_fixed_secret() -> None:
    """Fixed salt and derived IV: the same input yields the same blob."""
    secret = ContainerSecret()

    assert encrypt_container(b"same", secret=secret) == encrypt_container(b"same", secret=secret)
