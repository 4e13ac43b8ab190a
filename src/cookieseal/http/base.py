"""Transport boundary for placing cookies on the wire."""

from __future__ import annotations

from datetime import timezone
from typing import Protocol

from ..types import Cookie


class CookieTransport(Protocol):
    """Places and retrieves raw cookie text on an HTTP exchange.

    ``value_text`` is always restricted to the cookie value grammar.
    """

    def set_cookie(self, cookie: Cookie, value_text: str) -> None:
        """Emit ``cookie`` with ``value_text`` as its wire value."""
        ...

    def get_cookie(self, name: str) -> str | None:
        """Return the raw wire value of ``name``, or None if absent."""
        ...


def serialize_set_cookie(cookie: Cookie, value_text: str) -> str:
    """Serialize a cookie to a ``Set-Cookie`` header value.

    Args:
        cookie: The cookie carrying name and attributes.
        value_text: The already encoded wire value.

    Returns:
        The header value string.
    """
    parts = [f"{cookie.name}={value_text}"]
    if cookie.path:
        parts.append(f"Path={cookie.path}")
    if cookie.domain:
        parts.append(f"Domain={cookie.domain.lstrip('.')}")
    if cookie.expires is not None:
        expires = cookie.expires.astimezone(timezone.utc)
        parts.append(f"Expires={expires.strftime('%a, %d %b %Y %H:%M:%S GMT')}")
    if cookie.max_age is not None:
        parts.append(f"Max-Age={max(cookie.max_age, 0)}")
    if cookie.http_only:
        parts.append("HttpOnly")
    if cookie.secure:
        parts.append("Secure")
    if cookie.same_site is not None:
        parts.append(f"SameSite={cookie.same_site.value}")
    return "; ".join(parts)


def parse_cookie_header(header: str) -> dict[str, str]:
    """Parse a ``Cookie`` request header into a name-value dict.

    Malformed parts are ignored. When a name repeats, the first occurrence wins.

    Args:
        header: The raw header value.

    Returns:
        The parsed cookies.
    """
    cookies: dict[str, str] = {}
    if not header:
        return cookies

    for part_raw in header.split(";"):
        part = part_raw.strip()
        name, sep, value = part.partition("=")
        if not sep or not name:
            continue
        value = value.strip()
        # Browsers may send quoted values
        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = value[1:-1]
        cookies.setdefault(name.strip(), value)
    return cookies
