"""In-memory cookie transport."""

from __future__ import annotations

from ..types import Cookie
from .base import serialize_set_cookie


class MemoryTransport:
    """Dict-backed transport that behaves like a cooperative client.

    Written cookies are stored and returned by later reads, and every
    emitted ``Set-Cookie`` header is recorded in ``headers``.
    """

    def __init__(self, cookies: dict[str, str] | None = None) -> None:
        self.cookies: dict[str, str] = dict(cookies or {})
        self.headers: list[str] = []

    def set_cookie(self, cookie: Cookie, value_text: str) -> None:
        self.headers.append(serialize_set_cookie(cookie, value_text))
        if cookie.max_age is not None and cookie.max_age <= 0:
            self.cookies.pop(cookie.name, None)
        else:
            self.cookies[cookie.name] = value_text

    def get_cookie(self, name: str) -> str | None:
        return self.cookies.get(name)
