"""cookieseal.

Tamper-evident and confidential values in HTTP cookies, at three trust
levels: plain (encoded), signed (HMAC-SHA256) and encrypted (AES-GCM).

Example:
    ```python
    from cookieseal import CookieConfig, SecureCookies
    from cookieseal.http import MemoryTransport

    config = CookieConfig(secret_key=bytes(32))
    secure_cookies = SecureCookies(config)
    transport = MemoryTransport()

    secure_cookies.write_signed(transport, config.cookie("session", b"hello"))
    assert secure_cookies.read_signed(transport, "session") == b"hello"
    ```
"""

from .client import SecureCookies
from .config import CookieConfig
from .constants import MAX_COOKIE_SIZE
from .cookies import (
    decode_value,
    encode_value,
    read,
    read_encrypted,
    read_signed,
    write,
    write_encrypted,
    write_signed,
)
from .errors import (
    ConfigurationError,
    CookieNotFoundError,
    CookieSealError,
    InvalidKeyError,
    InvalidValueError,
    ValueTooLongError,
)
from .http import (
    AsgiCookieTransport,
    CookieTransport,
    HttpxCookieTransport,
    MemoryTransport,
)
from .types import Cookie, Level, SameSite

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "SecureCookies",
    "CookieConfig",
    # Operations
    "encode_value",
    "decode_value",
    "write",
    "read",
    "write_signed",
    "read_signed",
    "write_encrypted",
    "read_encrypted",
    # Transports
    "CookieTransport",
    "MemoryTransport",
    "AsgiCookieTransport",
    "HttpxCookieTransport",
    # Data types
    "Cookie",
    "Level",
    "SameSite",
    # Constants
    "MAX_COOKIE_SIZE",
    # Errors
    "CookieSealError",
    "CookieNotFoundError",
    "ValueTooLongError",
    "InvalidValueError",
    "InvalidKeyError",
    "ConfigurationError",
    # Version
    "__version__",
]
