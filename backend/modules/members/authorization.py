"""
Admin authorization check.

Decides on every admin request whether the caller's stored role is Admin.
The result is never cached across requests.
"""

import logging
from typing import Optional

from fastapi import Depends
from pydantic import BaseModel

from api.dependencies import get_access_factory, get_auth_service
from api.middleware.auth import get_request_token
from modules.auth.exceptions import MissingTokenError
from modules.auth.interfaces import IAuthService
from shared.access import AccessFactory, ElevatedAccess
from shared.models import AuthenticatedUser

from .exceptions import AdminRequiredError
from .models import Role
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


class AdminContext(BaseModel):
    """Proof that the current request passed the admin check."""

    user: AuthenticatedUser

    model_config = {"frozen": True}


async def check_admin(
    token: Optional[str],
    auth: IAuthService,
    access: AccessFactory,
) -> AdminContext:
    """
    Confirm the token belongs to a user whose stored role is Admin.

    The caller's own row is read with restricted (caller-scoped) access.

    Raises:
        AdminRequiredError: For every failure: missing or bad token,
            store or transport error, missing configuration, missing
            profile, or a non-Admin role.
    """
    try:
        if not token:
            raise MissingTokenError()
        user = await auth.validate_token(token)
        role = ProfileRepository(access.restricted(user).client).get_role(user.id)
    except Exception as e:
        logger.debug(f"Admin check rejected: {e}")
        raise AdminRequiredError() from e

    if role != Role.ADMIN.value:
        logger.debug(f"Admin check rejected: {user.id} has role {role!r}")
        raise AdminRequiredError()

    return AdminContext(user=user)


async def require_admin(
    token: Optional[str] = Depends(get_request_token),
    auth: IAuthService = Depends(get_auth_service),
    access: AccessFactory = Depends(get_access_factory),
) -> AdminContext:
    """Dependency that rejects any caller who is not an Admin with 401."""
    return await check_admin(token, auth, access)


def get_elevated_access(
    admin: AdminContext = Depends(require_admin),
    access: AccessFactory = Depends(get_access_factory),
) -> ElevatedAccess:
    """
    Dependency giving service-role store access.

    Depends on require_admin, so elevated access cannot be obtained by a
    request that has not passed the admin check.
    """
    return access.elevated()
