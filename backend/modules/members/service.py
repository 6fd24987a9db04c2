"""
Role transition service.

Reads and writes profiles with elevated access on behalf of an Admin
who has already passed the authorization check.
"""

import logging

from shared.access import ElevatedAccess
from shared.repository import StoreError
from modules.auth.interfaces import IAuthService

from .exceptions import NoRequestedRoleError
from .interfaces import IMemberAdminService
from .models import (
    ActionResult,
    ApproveAction,
    Role,
    RoleAction,
    SetRoleAction,
    UserProfile,
)
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


class MemberAdminService(IMemberAdminService):
    """
    Admin operations on member profiles.

    Args:
        access: Elevated store access
        identity: Identity provider used for account deletion
        approve_clears_request: When True, approving a request also clears
            requested_role. When False the request is kept as a record of
            what was asked for.
    """

    def __init__(
        self,
        access: ElevatedAccess,
        identity: IAuthService,
        approve_clears_request: bool = False,
    ):
        self._access = access
        self._identity = identity
        self._repository = ProfileRepository(access.client)
        self._approve_clears_request = approve_clears_request

    async def list_users(self) -> list[UserProfile]:
        profiles = self._repository.list_profiles()
        # The store orders the query too; sort again so the contract does
        # not depend on it.
        return sorted(profiles, key=lambda p: p.created_at, reverse=True)

    async def approve(self, user_id: str) -> None:
        requested = self._repository.get_requested_role(user_id)
        if not requested:
            raise NoRequestedRoleError(user_id)

        self._repository.update_role(
            user_id,
            requested,
            clear_request=self._approve_clears_request,
        )
        logger.info(f"Approved role {requested} for {user_id}")

    async def set_role(self, user_id: str, role: Role) -> None:
        self._repository.update_role(user_id, role.value)
        logger.info(f"Set role {role.value} for {user_id}")

    async def delete_user(self, user_id: str) -> ActionResult:
        await self._identity.delete_identity(self._access, user_id)

        try:
            self._repository.delete_profile(user_id)
        except StoreError as e:
            # Row may already be gone through a cascade
            logger.warning(f"Identity {user_id} deleted but profile row remains: {e.message}")
            return ActionResult(ok=True, warning=e.message)

        logger.info(f"Deleted profile {user_id}")
        return ActionResult(ok=True)

    async def apply_action(self, user_id: str, action: RoleAction) -> None:
        if isinstance(action, ApproveAction):
            await self.approve(user_id)
        elif isinstance(action, SetRoleAction):
            await self.set_role(user_id, action.role)
        else:
            raise TypeError(f"Unsupported role action: {action!r}")
