"""Plain, signed and encrypted cookie operations.

Each write/read pair is stateless. Writes fail before anything reaches the
transport; reads raise ``CookieNotFoundError`` for an absent cookie and
``InvalidValueError`` for every other rejection.
"""

from __future__ import annotations

import dataclasses
import logging

from .constants import MAX_COOKIE_SIZE
from .crypto import aead, signature
from .crypto.aead import validate_key
from .crypto.utils import Base64URLDecodeError, from_base64url, to_base64url
from .errors import CookieNotFoundError, InvalidValueError, ValueTooLongError
from .http.base import CookieTransport, serialize_set_cookie
from .types import Cookie
from .utils.validation import validate_cookie_name

logger = logging.getLogger("cookieseal")


def encode_value(value: bytes) -> str:
    """Encode raw bytes into the cookie value grammar."""
    return to_base64url(value)


def decode_value(text: str) -> bytes:
    """Decode a wire value produced by ``encode_value``.

    Raises:
        InvalidValueError: If the text is not valid base64url.
    """
    try:
        return from_base64url(text)
    except Base64URLDecodeError:
        raise InvalidValueError() from None


def write(transport: CookieTransport, cookie: Cookie) -> None:
    """Encode a cookie value and write it to the transport.

    Args:
        transport: Where to place the cookie.
        cookie: The cookie with its raw value.

    Raises:
        ValueError: If the cookie name is not a valid token.
        ValueTooLongError: If the serialized cookie exceeds MAX_COOKIE_SIZE.
            Nothing is written in that case.
    """
    validate_cookie_name(cookie.name)

    value_text = encode_value(cookie.value)
    size = len(serialize_set_cookie(cookie, value_text).encode("utf-8"))
    if size > MAX_COOKIE_SIZE:
        logger.debug("Refusing to write cookie %s: %d bytes", cookie.name, size)
        raise ValueTooLongError(size, MAX_COOKIE_SIZE)

    transport.set_cookie(cookie, value_text)


def read(transport: CookieTransport, name: str) -> bytes:
    """Read and decode a cookie value from the transport.

    Args:
        transport: Where to read the cookie from.
        name: The cookie name.

    Returns:
        The raw cookie value.

    Raises:
        CookieNotFoundError: If the cookie is absent.
        InvalidValueError: If the value is not validly encoded.
    """
    value_text = transport.get_cookie(name)
    if value_text is None:
        raise CookieNotFoundError(name)
    return decode_value(value_text)


def write_signed(transport: CookieTransport, cookie: Cookie, key: bytes) -> None:
    """Write a cookie whose value carries an HMAC-SHA256 tag.

    Raises:
        InvalidKeyError: If the key is empty.
        ValueTooLongError: If the signed cookie is too large.
    """
    envelope = signature.sign(key, cookie.name, cookie.value)
    write(transport, dataclasses.replace(cookie, value=envelope))


def read_signed(transport: CookieTransport, name: str, key: bytes) -> bytes:
    """Read a signed cookie and return its value once the tag checks out.

    Raises:
        CookieNotFoundError: If the cookie is absent.
        InvalidValueError: If the value is malformed or its tag does not match.
        InvalidKeyError: If the key is empty.
    """
    envelope = read(transport, name)
    try:
        return signature.verify(key, name, envelope)
    except InvalidValueError:
        logger.debug("Rejected signed cookie %s", name)
        raise


def write_encrypted(transport: CookieTransport, cookie: Cookie, key: bytes) -> None:
    """Write a cookie whose value is sealed with AES-GCM.

    Raises:
        InvalidKeyError: If the key is not 16, 24 or 32 bytes.
        ValueTooLongError: If the sealed cookie is too large.
    """
    envelope = aead.seal(key, cookie.name, cookie.value)
    write(transport, dataclasses.replace(cookie, value=envelope))


def read_encrypted(transport: CookieTransport, name: str, key: bytes) -> bytes:
    """Read an encrypted cookie and return its decrypted value.

    The key is checked before the transport is consulted, so a misconfigured
    key is reported even when the cookie is absent.

    Raises:
        InvalidKeyError: If the key is not 16, 24 or 32 bytes.
        CookieNotFoundError: If the cookie is absent.
        InvalidValueError: If the value is malformed, fails authentication or
            was sealed under another name.
    """
    validate_key(key)
    envelope = read(transport, name)
    try:
        return aead.unseal(key, name, envelope)
    except InvalidValueError:
        logger.debug("Rejected encrypted cookie %s", name)
        raise
