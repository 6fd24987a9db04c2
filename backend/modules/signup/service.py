"""
Self-service sign-up.

Writes a caller's own profile fields through caller-scoped access. The
effective role is never part of the write.
"""

import logging

from shared.access import RestrictedAccess
from modules.members.models import REQUESTABLE_ROLES, SCHOOL_LABELS, UserProfile
from modules.members.repository import ProfileRepository

from .models import DropdownItem, SignupOptions, SignupRequest

logger = logging.getLogger(__name__)


class SignupService:
    """Completes sign-up for the user the access object is scoped to."""

    def __init__(self, access: RestrictedAccess):
        self._access = access
        self._repository = ProfileRepository(access.client)

    async def complete_signup(self, request: SignupRequest) -> UserProfile:
        """
        Store the caller's names, student ID, school and role request.

        Raises:
            ProfileNotFoundError: If the caller has no visible profile row
            ExternalServiceError: If the store fails
        """
        fields = request.model_dump(mode="json")
        profile = self._repository.update_own_profile(self._access.user_id, fields)
        logger.info(
            f"Sign-up completed for {self._access.user_id}, "
            f"requested role {request.requested_role.value}"
        )
        return profile


def get_signup_options() -> SignupOptions:
    """Return the schools and requestable roles offered on the form."""
    return SignupOptions(
        schools=[
            DropdownItem(value=school.value, label=label)
            for school, label in SCHOOL_LABELS.items()
        ],
        roles=[DropdownItem(value=role.value, label=role.value) for role in REQUESTABLE_ROLES],
    )
