"""Configuration for cookieseal."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv

from .constants import (
    DEFAULT_COOKIE_PATH,
    ENV_COOKIE_MAX_AGE,
    ENV_COOKIE_PATH,
    ENV_COOKIE_SECURE,
    ENV_PREFIX,
    ENV_SECRET_KEY,
)
from .crypto.aead import validate_key
from .errors import ConfigurationError
from .types import Cookie, SameSite

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class CookieConfig:
    """Secret key and default cookie attributes.

    Passed explicitly to every operation instead of living in global state.

    Attributes:
        secret_key: Raw key bytes. Any non-empty length signs; encryption
            needs 16, 24 or 32 bytes.
        path: Default Path attribute.
        domain: Default Domain attribute.
        max_age: Default Max-Age in seconds.
        secure: Default Secure flag.
        http_only: Default HttpOnly flag.
        same_site: Default SameSite policy.
    """

    secret_key: bytes = field(repr=False)
    path: str | None = DEFAULT_COOKIE_PATH
    domain: str | None = None
    max_age: int | None = None
    secure: bool = True
    http_only: bool = True
    same_site: SameSite | None = SameSite.LAX

    def __post_init__(self) -> None:
        if not isinstance(self.secret_key, bytes):
            # Freeze bytearray and memoryview keys so callers cannot mutate them in place
            object.__setattr__(self, "secret_key", bytes(self.secret_key))
        if not self.secret_key:
            raise ConfigurationError("Secret key must not be empty")

    @classmethod
    def from_hex(cls, hex_key: str, **attributes: Any) -> CookieConfig:
        """Build a config from a hex-encoded secret key.

        Args:
            hex_key: The key as a hex string, e.g. 64 characters for 32 bytes.
            **attributes: Default cookie attributes.

        Raises:
            ConfigurationError: If the key is not valid hex.
        """
        try:
            secret_key = bytes.fromhex(hex_key.strip())
        except ValueError as e:
            raise ConfigurationError(f"Secret key is not valid hex: {e}") from e
        return cls(secret_key=secret_key, **attributes)

    @classmethod
    def from_env(
        cls,
        *,
        prefix: str = ENV_PREFIX,
        env_file: str | Path | None = None,
        require_aes_key: bool = True,
    ) -> CookieConfig:
        """Load configuration from environment variables.

        Variables from ``env_file`` (or a ``.env`` file found from the current
        directory) are loaded first without overriding the environment.

        Args:
            prefix: Prefix of the variable names.
            env_file: Optional path to a dotenv file.
            require_aes_key: Check at load time that the key can encrypt.

        Raises:
            ConfigurationError: If the key is missing or malformed.
            InvalidKeyError: If ``require_aes_key`` and the key length is not
                a valid AES key size.
        """
        load_dotenv(env_file or find_dotenv(usecwd=True))

        hex_key = os.getenv(prefix + ENV_SECRET_KEY)
        if not hex_key:
            raise ConfigurationError(f"{prefix + ENV_SECRET_KEY} environment variable not set")

        attributes: dict[str, Any] = {}
        path = os.getenv(prefix + ENV_COOKIE_PATH)
        if path:
            attributes["path"] = path
        max_age = os.getenv(prefix + ENV_COOKIE_MAX_AGE)
        if max_age:
            try:
                attributes["max_age"] = int(max_age)
            except ValueError:
                raise ConfigurationError(
                    f"Invalid {prefix + ENV_COOKIE_MAX_AGE}: {max_age!r}"
                ) from None
        secure = os.getenv(prefix + ENV_COOKIE_SECURE)
        if secure:
            attributes["secure"] = _parse_bool(prefix + ENV_COOKIE_SECURE, secure)

        config = cls.from_hex(hex_key, **attributes)
        if require_aes_key:
            validate_key(config.secret_key)
        return config

    def cookie(self, name: str, value: bytes = b"", **overrides: Any) -> Cookie:
        """Build a cookie carrying the configured default attributes.

        Args:
            name: The cookie name.
            value: The raw cookie value.
            **overrides: Attributes that replace the defaults.
        """
        cookie = Cookie(
            name=name,
            value=value,
            path=self.path,
            domain=self.domain,
            max_age=self.max_age,
            secure=self.secure,
            http_only=self.http_only,
            same_site=self.same_site,
        )
        return dataclasses.replace(cookie, **overrides) if overrides else cookie


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid {name}: {raw!r}")
