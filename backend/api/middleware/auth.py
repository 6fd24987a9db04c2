"""
JWT Authentication dependencies.

Extracts the caller's Supabase access token from the request and
validates it through the auth service.
"""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import MissingTokenError
from modules.auth.interfaces import IAuthService
from shared.access import AccessFactory, RestrictedAccess
from shared.config import get_settings
from shared.models import AuthenticatedUser

from ..dependencies import get_access_factory, get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def get_request_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """
    Dependency returning the caller's raw access token.

    The Authorization header wins; the session cookie is the fallback
    used by browser clients.
    """
    if credentials is not None:
        return credentials.credentials
    return request.cookies.get(get_settings().session_cookie_name) or None


async def get_current_user(
    token: Optional[str] = Depends(get_request_token),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if not token:
        raise MissingTokenError()
    return await auth.validate_token(token)


def get_restricted_access(
    user: AuthenticatedUser = Depends(get_current_user),
    factory: AccessFactory = Depends(get_access_factory),
) -> RestrictedAccess:
    """Dependency giving caller-scoped store access, built fresh per request."""
    return factory.restricted(user)
