"""
Sign-up endpoints.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_restricted_access
from api.models.errors import ErrorResponse
from modules.members.models import UserProfile
from shared.access import RestrictedAccess

from .models import SignupOptions, SignupRequest
from .service import SignupService, get_signup_options

router = APIRouter()


def get_signup_service(
    access: RestrictedAccess = Depends(get_restricted_access),
) -> SignupService:
    """FastAPI dependency for the sign-up service."""
    return SignupService(access)


@router.post(
    "",
    response_model=UserProfile,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid sign-up fields"},
        401: {"model": ErrorResponse, "description": "Not signed in"},
        404: {"model": ErrorResponse, "description": "No profile row for caller"},
    },
)
async def complete_signup(
    request: SignupRequest,
    service: SignupService = Depends(get_signup_service),
) -> UserProfile:
    """
    Complete the caller's sign-up.

    Sets name, student ID, school and requested role on the caller's own
    profile. The requested role is only a request; an Admin grants it.
    """
    return await service.complete_signup(request)


@router.get("/options", response_model=SignupOptions)
async def signup_options() -> SignupOptions:
    """List the schools and roles accepted by the sign-up form."""
    return get_signup_options()
