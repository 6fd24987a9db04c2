"""
Authentication module.

Handles JWT validation and identity provider operations.

Public API:
- IAuthService: Interface for auth operations
- JWTPayload: Decoded Supabase token claims
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import JWTPayload
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    IdentityDeletionError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "JWTPayload",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "IdentityDeletionError",
]
