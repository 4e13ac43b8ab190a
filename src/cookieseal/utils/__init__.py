"""Utility modules for cookieseal."""

from .validation import validate_cookie_name

__all__ = ["validate_cookie_name"]
