"""Base64 encoding/decoding utilities for cookieseal."""

from __future__ import annotations

import base64
import binascii
import re

# URL-safe alphabet, '=' padding only at the end and at most two characters
_BASE64URL_PATTERN = re.compile(r"[A-Za-z0-9_-]*={0,2}")


class Base64URLDecodeError(ValueError):
    """Raised when a string is not valid padded URL-safe base64."""

    pass


def to_base64url(data: bytes) -> str:
    """Encode bytes to URL-safe base64 with padding.

    Args:
        data: The bytes to encode.

    Returns:
        URL-safe base64 string, padded to a multiple of 4 characters.
    """
    return base64.urlsafe_b64encode(data).decode("ascii")


def from_base64url(s: str) -> bytes:
    """Decode a padded URL-safe base64 string to bytes.

    Unlike ``base64.urlsafe_b64decode`` this never discards unexpected
    characters.

    Args:
        s: The base64url string to decode.

    Returns:
        The decoded bytes.

    Raises:
        Base64URLDecodeError: If the string is not valid padded base64url.
    """
    if len(s) % 4 != 0:
        raise Base64URLDecodeError(f"Invalid base64url length: {len(s)}")
    if not _BASE64URL_PATTERN.fullmatch(s):
        raise Base64URLDecodeError("Base64URL string contains non-Base64URL characters")
    try:
        return base64.urlsafe_b64decode(s.encode("ascii"))
    except binascii.Error as e:
        raise Base64URLDecodeError(f"Invalid base64url data: {e}") from e
