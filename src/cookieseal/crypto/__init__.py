"""Cryptographic operations for cookieseal."""

from .aead import new_cipher, seal, unseal, validate_key
from .constants import (
    AES_GCM_NONCE_SIZE,
    AES_GCM_TAG_SIZE,
    AES_KEY_SIZES,
    HMAC_TAG_SIZE,
    NAME_VALUE_SEPARATOR,
)
from .signature import compute_tag, sign, verify
from .utils import Base64URLDecodeError, from_base64url, to_base64url

__all__ = [
    "AES_GCM_NONCE_SIZE",
    "AES_GCM_TAG_SIZE",
    "AES_KEY_SIZES",
    "HMAC_TAG_SIZE",
    "NAME_VALUE_SEPARATOR",
    "Base64URLDecodeError",
    "compute_tag",
    "from_base64url",
    "new_cipher",
    "seal",
    "sign",
    "to_base64url",
    "unseal",
    "validate_key",
    "verify",
]
