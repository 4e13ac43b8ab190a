"""AES-GCM cookie sealing for cookieseal."""

from __future__ import annotations

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..errors import InvalidKeyError, InvalidValueError
from .constants import AES_GCM_NONCE_SIZE, AES_KEY_SIZES, NAME_VALUE_SEPARATOR


def validate_key(key: bytes) -> None:
    """Check that ``key`` is usable for AES-GCM without building a cipher.

    Raises:
        InvalidKeyError: If the key length is not a valid AES key size.
    """
    if len(key) not in AES_KEY_SIZES:
        raise InvalidKeyError(
            len(key),
            f"Invalid AES key length: {len(key)} bytes, expected one of {AES_KEY_SIZES}",
        )


def new_cipher(key: bytes) -> AESGCM:
    """Create an AES-GCM cipher for the given key.

    Args:
        key: A 16, 24 or 32 byte AES key.

    Returns:
        The AESGCM instance.

    Raises:
        InvalidKeyError: If the key length is not a valid AES key size.
    """
    validate_key(key)
    return AESGCM(key)


def seal(key: bytes, name: str, value: bytes) -> bytes:
    """Encrypt and authenticate a cookie value.

    The plaintext is ``name || ':' || value`` so the envelope is bound to the
    cookie name. A fresh random nonce is drawn for every call.

    Args:
        key: The AES key.
        name: The cookie name.
        value: The raw cookie value.

    Returns:
        The envelope ``nonce || ciphertext || tag``.

    Raises:
        InvalidKeyError: If the key length is invalid.
    """
    aesgcm = new_cipher(key)
    nonce = os.urandom(AES_GCM_NONCE_SIZE)
    plaintext = name.encode("utf-8") + NAME_VALUE_SEPARATOR + value
    return nonce + aesgcm.encrypt(nonce, plaintext, None)


def unseal(key: bytes, name: str, envelope: bytes) -> bytes:
    """Decrypt a sealed envelope and check it belongs to ``name``.

    Args:
        key: The AES key.
        name: The expected cookie name.
        envelope: The decoded ``nonce || ciphertext || tag`` bytes.

    Returns:
        The original cookie value.

    Raises:
        InvalidKeyError: If the key length is invalid.
        InvalidValueError: If the envelope is malformed, fails authentication,
            or was sealed for a different name.
    """
    aesgcm = new_cipher(key)

    if len(envelope) < AES_GCM_NONCE_SIZE:
        raise InvalidValueError()

    nonce = envelope[:AES_GCM_NONCE_SIZE]
    ciphertext = envelope[AES_GCM_NONCE_SIZE:]

    try:
        plaintext = aesgcm.decrypt(nonce, ciphertext, None)
    except InvalidTag:
        raise InvalidValueError() from None

    # Split on the first separator only; the value itself may contain ':'
    sealed_name, separator, value = plaintext.partition(NAME_VALUE_SEPARATOR)
    if not separator:
        raise InvalidValueError()

    if sealed_name != name.encode("utf-8"):
        raise InvalidValueError()

    return value
