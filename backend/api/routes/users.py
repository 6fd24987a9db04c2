"""
User-related endpoints.

Provides the caller's own identity and profile.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from modules.members.models import Role
from modules.members.repository import ProfileRepository
from shared.access import RestrictedAccess
from shared.models import AuthenticatedUser
from ..middleware.auth import get_current_user, get_restricted_access

router = APIRouter()


class CurrentUserResponse(BaseModel):
    """The caller's token identity merged with their stored profile."""

    id: str
    email: str
    email_verified: bool
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    student_id: Optional[int] = None
    school: Optional[str] = None
    requested_role: Optional[str] = None
    role: str
    created_at: Optional[datetime] = None
    signup_complete: bool


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    access: RestrictedAccess = Depends(get_restricted_access),
) -> CurrentUserResponse:
    """
    Get the current user's profile.

    Requires authentication. A caller with no profile row yet is reported
    as Pending with sign-up incomplete.
    """
    profile = ProfileRepository(access.client).get_profile(user.id)
    if profile is None:
        return CurrentUserResponse(
            id=user.id,
            email=user.email,
            email_verified=user.email_verified,
            role=Role.PENDING.value,
            signup_complete=False,
        )

    return CurrentUserResponse(
        id=user.id,
        email=profile.email or user.email,
        email_verified=user.email_verified,
        first_name=profile.first_name,
        last_name=profile.last_name,
        student_id=profile.student_id,
        school=profile.school,
        requested_role=profile.requested_role,
        role=profile.display_role,
        created_at=profile.created_at,
        signup_complete=all(
            value is not None
            for value in (
                profile.first_name,
                profile.last_name,
                profile.student_id,
                profile.school,
                profile.requested_role,
            )
        ),
    )
