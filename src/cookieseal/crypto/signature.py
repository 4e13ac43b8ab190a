"""HMAC-SHA256 cookie signing for cookieseal."""

from __future__ import annotations

import hashlib
import hmac

from ..errors import InvalidKeyError, InvalidValueError
from .constants import HMAC_TAG_SIZE


def compute_tag(key: bytes, name: str, value: bytes) -> bytes:
    """Compute the HMAC-SHA256 tag over ``name || value``.

    The name is part of the MAC input so a signed value cannot be replayed
    under a different cookie name.

    Args:
        key: The signing key (any non-empty length).
        name: The cookie name.
        value: The raw, unencoded cookie value.

    Returns:
        The 32-byte tag.

    Raises:
        InvalidKeyError: If the key is empty.
    """
    if not key:
        raise InvalidKeyError(0, "Signing key must not be empty")
    mac = hmac.new(key, digestmod=hashlib.sha256)
    mac.update(name.encode("utf-8"))
    mac.update(value)
    return mac.digest()


def sign(key: bytes, name: str, value: bytes) -> bytes:
    """Build a signed envelope ``tag || value``.

    Args:
        key: The signing key.
        name: The cookie name.
        value: The raw cookie value.

    Returns:
        The signed envelope bytes.
    """
    return compute_tag(key, name, value) + value


def verify(key: bytes, name: str, envelope: bytes) -> bytes:
    """Verify a signed envelope and return the original value.

    Args:
        key: The signing key.
        name: The cookie name the envelope is expected to belong to.
        envelope: The decoded ``tag || value`` bytes.

    Returns:
        The original cookie value.

    Raises:
        InvalidValueError: If the envelope is too short or the tag does not match.
        InvalidKeyError: If the key is empty.
    """
    if len(envelope) < HMAC_TAG_SIZE:
        raise InvalidValueError()

    tag = envelope[:HMAC_TAG_SIZE]
    value = envelope[HMAC_TAG_SIZE:]

    expected = compute_tag(key, name, value)

    # Constant-time comparison to prevent timing attacks
    if not hmac.compare_digest(tag, expected):
        raise InvalidValueError()

    return value
