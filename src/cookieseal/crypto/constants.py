"""Cryptographic constants for cookieseal."""

# HMAC-SHA256 tag size in bytes
HMAC_TAG_SIZE = 32

# AES-GCM constants
AES_KEY_SIZES = (16, 24, 32)
AES_GCM_NONCE_SIZE = 12
AES_GCM_TAG_SIZE = 16

# Separates the cookie name from its value inside sealed plaintext.
# ':' is not a valid cookie name character, so the first occurrence is the boundary.
NAME_VALUE_SEPARATOR = b":"
