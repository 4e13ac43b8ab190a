"""Error hierarchy for cookieseal."""

from __future__ import annotations


class CookieSealError(Exception):
    """Base exception for all cookieseal errors."""

    pass


class CookieNotFoundError(CookieSealError):
    """Requested cookie is absent from the request.

    Attributes:
        name: The cookie name that was looked up.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Cookie not found: {name!r}")

    def __reduce__(self) -> tuple[type, tuple[str]]:
        return (self.__class__, (self.name,))


class ValueTooLongError(CookieSealError):
    """Serialized cookie exceeds the size limit.

    Attributes:
        size: Size of the serialized cookie in bytes.
        limit: The maximum allowed size in bytes.
    """

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"Cookie value too long: {size} bytes, limit is {limit}")

    def __reduce__(self) -> tuple[type, tuple[int, int]]:
        return (self.__class__, (self.size, self.limit))


class InvalidValueError(CookieSealError):
    """Cookie value is malformed, tampered with, or bound to another name.

    Every integrity failure raises this error with the same message, so the
    caller cannot tell which check rejected the value.
    """

    def __init__(self) -> None:
        super().__init__("invalid cookie value")

    def __reduce__(self) -> tuple[type, tuple[()]]:
        return (self.__class__, ())


class InvalidKeyError(CookieSealError):
    """Secret key has a length the algorithm does not support.

    This is a configuration defect and should be treated as fatal at startup.

    Attributes:
        length: Length of the rejected key in bytes.
    """

    def __init__(self, length: int, message: str | None = None) -> None:
        self.length = length
        super().__init__(message or f"Invalid secret key length: {length} bytes")

    def __reduce__(self) -> tuple[type, tuple[int, str]]:
        return (self.__class__, (self.length, str(self)))


class ConfigurationError(CookieSealError):
    """Invalid or missing configuration value."""

    pass
