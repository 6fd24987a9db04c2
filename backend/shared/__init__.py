"""
Shared infrastructure for the Spark backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- access: Restricted and elevated store access capabilities
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, get_supabase_user_client, reset_client_cache
from .access import AccessFactory, ElevatedAccess, RestrictedAccess
from .exceptions import (
    SparkError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "get_supabase_user_client",
    "reset_client_cache",
    "AccessFactory",
    "ElevatedAccess",
    "RestrictedAccess",
    "SparkError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "AuthenticatedUser",
]
