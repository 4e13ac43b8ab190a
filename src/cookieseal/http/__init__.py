"""Cookie transports for cookieseal."""

from .asgi import AsgiCookieTransport
from .base import CookieTransport, parse_cookie_header, serialize_set_cookie
from .jar import HttpxCookieTransport
from .memory import MemoryTransport

__all__ = [
    "AsgiCookieTransport",
    "CookieTransport",
    "HttpxCookieTransport",
    "MemoryTransport",
    "parse_cookie_header",
    "serialize_set_cookie",
]
