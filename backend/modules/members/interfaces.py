"""
Members module interface.

The admin routes depend on IMemberAdminService for every role transition.
"""

from typing import Protocol, runtime_checkable

from .models import ActionResult, Role, RoleAction, UserProfile


@runtime_checkable
class IMemberAdminService(Protocol):
    """
    Interface for administrative member operations.

    Implementations assume the caller has already passed the admin check.
    """

    async def list_users(self) -> list[UserProfile]:
        """
        List every profile.

        Returns:
            Profiles sorted by created_at, newest first
        """
        ...

    async def approve(self, user_id: str) -> None:
        """
        Grant a member's requested role.

        Raises:
            NoRequestedRoleError: If the member has no pending request
            ExternalServiceError: If the store fails
        """
        ...

    async def set_role(self, user_id: str, role: Role) -> None:
        """
        Overwrite a member's effective role.

        Raises:
            ExternalServiceError: If the store fails
        """
        ...

    async def delete_user(self, user_id: str) -> ActionResult:
        """
        Remove a member's identity and profile.

        The identity is deleted first. If that fails nothing else is
        touched. A failure removing the profile row afterwards is reported
        as a warning on an otherwise successful result.

        Raises:
            IdentityDeletionError: If the identity provider refuses
        """
        ...

    async def apply_action(self, user_id: str, action: RoleAction) -> None:
        """Dispatch a decoded PATCH action to approve() or set_role()."""
        ...
