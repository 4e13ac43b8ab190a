"""Validation utilities for cookieseal."""

from __future__ import annotations

import re

# RFC 6265 cookie-name: an RFC 2616 token (no separators, no CTLs, no whitespace)
COOKIE_NAME_PATTERN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


def validate_cookie_name(name: str) -> None:
    """Validate cookie name format.

    Args:
        name: The cookie name to validate.

    Raises:
        ValueError: If the cookie name format is invalid.
    """
    if not name:
        raise ValueError("Cookie name cannot be empty")
    if not COOKIE_NAME_PATTERN.fullmatch(name):
        raise ValueError(
            f"Invalid cookie name: {name!r}. "
            "Cookie names must be tokens and cannot contain separators such as ':' or ';'."
        )
