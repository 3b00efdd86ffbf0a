"""Authentication module for AR Product Preview.

Provides JWT bearer tokens and bcrypt password hashing.
"""

from arpreview.auth.jwt import (
    create_access_token,
    decode_token,
    TokenPayload,
)
from arpreview.auth.password import (
    hash_password,
    verify_password,
)

__all__ = [
    # JWT
    "create_access_token",
    "decode_token",
    "TokenPayload",
    # Password
    "hash_password",
    "verify_password",
]
