"""
Authentication service implementation.

Validates Supabase JWT tokens and talks to the Supabase Auth admin API.
"""

import logging
from datetime import datetime, timezone
from typing import Optional
import jwt
from pydantic import ValidationError as PydanticValidationError
from supabase import AuthError

from shared.access import ElevatedAccess
from shared.config import get_settings
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import JWTPayload
from .exceptions import (
    IdentityDeletionError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Access tokens are verified locally with the project's JWT secret.
    Identity deletion goes through the Supabase Auth admin API and
    therefore needs elevated access.
    """

    def __init__(self):
        self._settings = get_settings()

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        This implementation validates Supabase JWTs using the JWT secret.
        """
        if not token:
            raise MissingTokenError()

        if not self._settings.supabase_jwt_secret:
            raise InvalidTokenError("Server authentication not configured")

        try:
            payload = jwt.decode(
                token,
                self._settings.supabase_jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )
            jwt_payload = JWTPayload(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")
        except PydanticValidationError:
            raise InvalidTokenError("Invalid token claims")

        return AuthenticatedUser(
            id=jwt_payload.sub,
            email=jwt_payload.email or "",
            email_verified=jwt_payload.email_confirmed_at is not None,
            last_sign_in=datetime.fromtimestamp(jwt_payload.iat, tz=timezone.utc),
            access_token=token,
        )

    async def delete_identity(self, access: ElevatedAccess, user_id: str) -> None:
        """Delete the auth.users record for user_id."""
        try:
            access.client.auth.admin.delete_user(user_id)
        except AuthError as e:
            logger.warning(f"Identity deletion failed for {user_id}: {e.message}")
            raise IdentityDeletionError(user_id, e.message) from e
        logger.info(f"Deleted identity {user_id}")


# Module-level instance getter
_service_instance: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get the auth service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AuthService()
    return _service_instance


def reset_auth_service() -> None:
    """Reset the auth service singleton (for testing)."""
    global _service_instance
    _service_instance = None
