"""Type definitions for cookieseal."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class SameSite(str, Enum):
    """SameSite cookie attribute values."""

    LAX = "Lax"
    STRICT = "Strict"
    NONE = "None"


class Level(str, Enum):
    """Trust levels for storing a value in a cookie."""

    PLAIN = "plain"
    SIGNED = "signed"
    ENCRYPTED = "encrypted"


@dataclass
class Cookie:
    """A cookie to be written to the transport.

    The attributes are passed through to the transport untouched.

    Attributes:
        name: Cookie name. Must be a valid RFC 6265 token.
        value: Raw cookie value, before any encoding.
        path: Path attribute.
        domain: Domain attribute.
        max_age: Max-Age in seconds. Zero or negative asks the client to delete it.
        expires: Expires attribute.
        secure: Only send over HTTPS.
        http_only: Hide the cookie from client-side scripts.
        same_site: SameSite policy, or None to omit the attribute.
    """

    name: str
    value: bytes = b""
    path: str | None = None
    domain: str | None = None
    max_age: int | None = None
    expires: datetime | None = None
    secure: bool = False
    http_only: bool = False
    same_site: SameSite | None = None
