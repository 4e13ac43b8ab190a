"""ASGI request/response cookie transport."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..types import Cookie
from .base import parse_cookie_header, serialize_set_cookie


class AsgiCookieTransport:
    """Cookie transport over an ASGI HTTP scope.

    Cookies are read from the request's ``Cookie`` headers. Written cookies
    are collected in ``response_headers`` as raw ASGI header pairs, ready to
    be added to the ``http.response.start`` message.

    Attributes:
        response_headers: Pending ``set-cookie`` header pairs.
    """

    def __init__(self, scope: dict[str, Any]) -> None:
        self._cookies = parse_cookie_header(_join_cookie_headers(scope.get("headers", ())))
        self.response_headers: list[tuple[bytes, bytes]] = []

    def set_cookie(self, cookie: Cookie, value_text: str) -> None:
        header = serialize_set_cookie(cookie, value_text)
        self.response_headers.append((b"set-cookie", header.encode("latin-1")))

    def get_cookie(self, name: str) -> str | None:
        return self._cookies.get(name)


def _join_cookie_headers(headers: Iterable[tuple[bytes, bytes]]) -> str:
    """Combine every ``cookie`` header of a request into one string."""
    values = [value.decode("latin-1") for key, value in headers if key.lower() == b"cookie"]
    return "; ".join(values)
