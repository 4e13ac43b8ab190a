"""Client-side cookie transport backed by an httpx cookie jar."""

from __future__ import annotations

import httpx

from ..types import Cookie


class HttpxCookieTransport:
    """Cookie transport storing cookies in an ``httpx.Cookies`` jar.

    Useful for HTTP clients that keep state in signed or encrypted cookies
    between requests, and for driving servers in tests.

    Args:
        cookies: The jar to read from and write to, typically ``client.cookies``.
        domain: Domain to use when the cookie does not set one.
    """

    def __init__(self, cookies: httpx.Cookies, domain: str = "") -> None:
        self.cookies = cookies
        self._domain = domain

    def set_cookie(self, cookie: Cookie, value_text: str) -> None:
        domain = cookie.domain or self._domain
        path = cookie.path or "/"
        if cookie.max_age is not None and cookie.max_age <= 0:
            self.cookies.delete(cookie.name, domain=domain or None)
            return
        self.cookies.set(cookie.name, value_text, domain=domain, path=path)

    def get_cookie(self, name: str) -> str | None:
        # First match wins, as for a Cookie request header
        for stored in self.cookies.jar:
            if stored.name != name:
                continue
            if self._domain and stored.domain != self._domain:
                continue
            return stored.value
        return None
