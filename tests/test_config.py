"""Tests for CookieConfig."""

from __future__ import annotations

from pathlib import Path

import pytest

from cookieseal.config import CookieConfig
from cookieseal.errors import ConfigurationError, InvalidKeyError
from cookieseal.types import Cookie, SameSite

HEX_KEY = "13d6b4dff8f84a10851021ec8608f814570d562c92fe6b5ec4c9f595bcb3234b"

ENV_VARS = (
    "COOKIESEAL_SECRET_KEY",
    "COOKIESEAL_COOKIE_PATH",
    "COOKIESEAL_COOKIE_MAX_AGE",
    "COOKIESEAL_COOKIE_SECURE",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    """Remove cookieseal variables and run from an empty directory."""
    for name in ENV_VARS:
        # setenv first so the variable is removed again when the test ends
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestCookieConfig:
    """Tests for constructing CookieConfig."""

    def test_defaults(self) -> None:
        """Test the default cookie attributes."""
        config = CookieConfig(secret_key=b"k" * 32)
        assert config.path == "/"
        assert config.secure is True
        assert config.http_only is True
        assert config.same_site == SameSite.LAX
        assert config.max_age is None

    def test_empty_key_rejected(self) -> None:
        """Test that an empty key is a configuration error."""
        with pytest.raises(ConfigurationError):
            CookieConfig(secret_key=b"")

    def test_bytearray_key_frozen(self) -> None:
        """Test that mutable key buffers are copied to bytes."""
        buffer = bytearray(b"k" * 32)
        config = CookieConfig(secret_key=buffer)  # type: ignore[arg-type]
        buffer[0] = 0
        assert config.secret_key == b"k" * 32

    def test_key_not_in_repr(self) -> None:
        """Test that the key is hidden from repr."""
        config = CookieConfig(secret_key=b"supersecret-key!")
        assert "supersecret" not in repr(config)

    def test_frozen(self) -> None:
        """Test that the config cannot be modified."""
        config = CookieConfig(secret_key=b"k" * 32)
        with pytest.raises(AttributeError):
            config.secret_key = b"x" * 32  # type: ignore[misc]

    def test_from_hex(self) -> None:
        """Test decoding a hex key."""
        config = CookieConfig.from_hex(HEX_KEY, max_age=60)
        assert config.secret_key == bytes.fromhex(HEX_KEY)
        assert len(config.secret_key) == 32
        assert config.max_age == 60

    def test_from_hex_invalid(self) -> None:
        """Test that non-hex input is a configuration error."""
        with pytest.raises(ConfigurationError, match="not valid hex"):
            CookieConfig.from_hex("not-hex")

    def test_cookie_uses_defaults(self) -> None:
        """Test that cookie() carries the configured attributes."""
        config = CookieConfig(secret_key=b"k" * 32, domain="example.com", max_age=3600)
        assert config.cookie("session", b"v") == Cookie(
            name="session",
            value=b"v",
            path="/",
            domain="example.com",
            max_age=3600,
            secure=True,
            http_only=True,
            same_site=SameSite.LAX,
        )

    def test_cookie_overrides(self) -> None:
        """Test that cookie() accepts attribute overrides."""
        config = CookieConfig(secret_key=b"k" * 32)
        cookie = config.cookie("session", b"v", path="/app", same_site=None)
        assert cookie.path == "/app"
        assert cookie.same_site is None
        assert cookie.secure is True


class TestFromEnv:
    """Tests for CookieConfig.from_env."""

    def test_reads_environment(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test loading the key and attributes from the environment."""
        clean_env.setenv("COOKIESEAL_SECRET_KEY", HEX_KEY)
        clean_env.setenv("COOKIESEAL_COOKIE_PATH", "/app")
        clean_env.setenv("COOKIESEAL_COOKIE_MAX_AGE", "3600")
        clean_env.setenv("COOKIESEAL_COOKIE_SECURE", "false")

        config = CookieConfig.from_env()
        assert config.secret_key == bytes.fromhex(HEX_KEY)
        assert config.path == "/app"
        assert config.max_age == 3600
        assert config.secure is False

    def test_reads_dotenv_file(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Test loading the key from a dotenv file."""
        env_file = tmp_path / "cookies.env"
        env_file.write_text(f"COOKIESEAL_SECRET_KEY={HEX_KEY}\n")

        config = CookieConfig.from_env(env_file=env_file)
        assert config.secret_key == bytes.fromhex(HEX_KEY)

    def test_custom_prefix(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test a custom variable prefix."""
        clean_env.setenv("MYAPP_SECRET_KEY", HEX_KEY)
        config = CookieConfig.from_env(prefix="MYAPP_")
        assert config.secret_key == bytes.fromhex(HEX_KEY)

    def test_missing_key(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test that a missing key is a configuration error."""
        with pytest.raises(ConfigurationError, match="COOKIESEAL_SECRET_KEY"):
            CookieConfig.from_env()

    def test_aes_key_length_checked(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test that a 10-byte key is fatal when encryption is required."""
        clean_env.setenv("COOKIESEAL_SECRET_KEY", "00" * 10)
        with pytest.raises(InvalidKeyError):
            CookieConfig.from_env()

    def test_signing_only_key(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test that any key length is accepted when encryption is not required."""
        clean_env.setenv("COOKIESEAL_SECRET_KEY", "00" * 10)
        config = CookieConfig.from_env(require_aes_key=False)
        assert len(config.secret_key) == 10

    def test_invalid_max_age(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test that a non-integer Max-Age is rejected."""
        clean_env.setenv("COOKIESEAL_SECRET_KEY", HEX_KEY)
        clean_env.setenv("COOKIESEAL_COOKIE_MAX_AGE", "soon")
        with pytest.raises(ConfigurationError, match="COOKIE_MAX_AGE"):
            CookieConfig.from_env()

    def test_invalid_secure(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test that an unrecognised boolean is rejected."""
        clean_env.setenv("COOKIESEAL_SECRET_KEY", HEX_KEY)
        clean_env.setenv("COOKIESEAL_COOKIE_SECURE", "maybe")
        with pytest.raises(ConfigurationError, match="COOKIE_SECURE"):
            CookieConfig.from_env()
