"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from shared.access import ElevatedAccess
from shared.models import AuthenticatedUser


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for identity provider operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        Args:
            token: JWT access token from Supabase Auth

        Returns:
            AuthenticatedUser with user ID and basic info

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...

    async def delete_identity(self, access: ElevatedAccess, user_id: str) -> None:
        """
        Delete an identity record from the identity provider.

        Args:
            access: Service-role access, required by the provider's admin API
            user_id: Supabase user ID (UUID)

        Raises:
            IdentityDeletionError: If the provider rejects the deletion
        """
        ...
