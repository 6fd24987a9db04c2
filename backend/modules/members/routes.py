"""
Admin user-management endpoints.

List members, approve or set roles, and delete accounts. Every endpoint
requires an Admin caller; any other caller gets a uniform 401.
"""

import json
from typing import Any

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_auth_service
from api.models.errors import ErrorResponse
from modules.auth.interfaces import IAuthService
from shared.access import ElevatedAccess
from shared.config import get_settings

from .authorization import AdminContext, get_elevated_access, require_admin
from .interfaces import IMemberAdminService
from .models import ActionResult, UserListResponse, parse_role_action
from .service import MemberAdminService

router = APIRouter(
    responses={
        401: {"model": ErrorResponse, "description": "Caller is not an Admin"},
        500: {"model": ErrorResponse, "description": "Store failure"},
    },
)


def get_member_admin_service(
    access: ElevatedAccess = Depends(get_elevated_access),
    auth: IAuthService = Depends(get_auth_service),
) -> IMemberAdminService:
    """FastAPI dependency for the member admin service."""
    return MemberAdminService(
        access=access,
        identity=auth,
        approve_clears_request=get_settings().approve_clears_request,
    )


async def read_json_body(request: Request) -> Any:
    """Decode the request body, treating an empty or malformed body as {}."""
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}


@router.get("", response_model=UserListResponse)
async def list_users(
    admin: AdminContext = Depends(require_admin),
    service: IMemberAdminService = Depends(get_member_admin_service),
) -> UserListResponse:
    """
    List every member profile, newest first.

    Filtering and search are left to the client.
    """
    return UserListResponse(users=await service.list_users())


@router.patch(
    "/{user_id}",
    response_model=ActionResult,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse, "description": "Invalid action"}},
)
async def update_user_role(
    user_id: str,
    request: Request,
    admin: AdminContext = Depends(require_admin),
    service: IMemberAdminService = Depends(get_member_admin_service),
) -> ActionResult:
    """
    Change a member's role.

    Body is one of:
    - {"mode": "approve"}: grant the member's requested role
    - {"mode": "set", "role": "<Role>"}: overwrite the effective role

    The body is decoded only after the admin check has passed.
    """
    action = parse_role_action(await read_json_body(request))
    await service.apply_action(user_id, action)
    return ActionResult(ok=True)


@router.delete(
    "/{user_id}",
    response_model=ActionResult,
    response_model_exclude_none=True,
)
async def delete_user(
    user_id: str,
    admin: AdminContext = Depends(require_admin),
    service: IMemberAdminService = Depends(get_member_admin_service),
) -> ActionResult:
    """
    Delete a member's account and profile.

    Returns {"ok": true, "warning": ...} when the account was removed but
    the profile row could not be.
    """
    return await service.delete_user(user_id)
