"""SecureCookies facade binding a configuration to the cookie operations."""

from __future__ import annotations

from typing import Any

from . import cookies
from .config import CookieConfig
from .http.base import CookieTransport
from .types import Cookie, Level


class SecureCookies:
    """Reads and writes cookies at a chosen trust level with one configuration.

    The instance holds no per-request state and can be shared between
    concurrent request handlers.

    Example:
        ```python
        from cookieseal import CookieConfig, SecureCookies
        from cookieseal.http import AsgiCookieTransport

        secure_cookies = SecureCookies(CookieConfig.from_env())

        async def app(scope, receive, send):
            transport = AsgiCookieTransport(scope)
            cookie = secure_cookies.config.cookie("session", b"user-42")
            secure_cookies.write_encrypted(transport, cookie)
            ...
        ```
    """

    def __init__(self, config: CookieConfig) -> None:
        self._config = config

    @property
    def config(self) -> CookieConfig:
        """The configuration in use."""
        return self._config

    def write(self, transport: CookieTransport, cookie: Cookie) -> None:
        """Write a plain, encoded cookie."""
        cookies.write(transport, cookie)

    def read(self, transport: CookieTransport, name: str) -> bytes:
        """Read a plain, encoded cookie."""
        return cookies.read(transport, name)

    def write_signed(self, transport: CookieTransport, cookie: Cookie) -> None:
        """Write a cookie signed with the configured key."""
        cookies.write_signed(transport, cookie, self._config.secret_key)

    def read_signed(self, transport: CookieTransport, name: str) -> bytes:
        """Read a cookie signed with the configured key."""
        return cookies.read_signed(transport, name, self._config.secret_key)

    def write_encrypted(self, transport: CookieTransport, cookie: Cookie) -> None:
        """Write a cookie encrypted with the configured key."""
        cookies.write_encrypted(transport, cookie, self._config.secret_key)

    def read_encrypted(self, transport: CookieTransport, name: str) -> bytes:
        """Read a cookie encrypted with the configured key."""
        return cookies.read_encrypted(transport, name, self._config.secret_key)

    def set(
        self,
        transport: CookieTransport,
        name: str,
        value: bytes,
        level: Level = Level.SIGNED,
        **attributes: Any,
    ) -> None:
        """Write ``value`` under ``name`` at the given trust level.

        Args:
            transport: Where to place the cookie.
            name: The cookie name.
            value: The raw value.
            level: Trust level to write at.
            **attributes: Cookie attributes overriding the configured defaults.
        """
        cookie = self._config.cookie(name, value, **attributes)
        if level == Level.PLAIN:
            self.write(transport, cookie)
        elif level == Level.SIGNED:
            self.write_signed(transport, cookie)
        elif level == Level.ENCRYPTED:
            self.write_encrypted(transport, cookie)
        else:
            raise ValueError(f"Unknown level: {level!r}")

    def get(self, transport: CookieTransport, name: str, level: Level = Level.SIGNED) -> bytes:
        """Read the value stored under ``name`` at the given trust level."""
        if level == Level.PLAIN:
            return self.read(transport, name)
        if level == Level.SIGNED:
            return self.read_signed(transport, name)
        if level == Level.ENCRYPTED:
            return self.read_encrypted(transport, name)
        raise ValueError(f"Unknown level: {level!r}")

    def delete(self, transport: CookieTransport, name: str, **attributes: Any) -> None:
        """Ask the client to drop ``name`` by writing an expired, empty cookie."""
        attributes["max_age"] = -1
        self.write(transport, self._config.cookie(name, b"", **attributes))

    def __repr__(self) -> str:
        return f"SecureCookies(path={self._config.path!r}, domain={self._config.domain!r})"
