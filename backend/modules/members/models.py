"""
Members module data models.

Profiles, roles, and the tagged admin actions that change a member's role.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import InvalidRoleActionError, InvalidRoleError, MissingRoleError


class Role(str, Enum):
    """Chapter roles. PENDING stands in for a member with no granted role."""

    PENDING = "Pending"
    MEMBER = "Member"
    OFFICER = "Officer"
    PRESIDENT = "President"
    ADVISOR = "Advisor"
    ADMIN = "Admin"


# Roles a member may ask for during sign-up
REQUESTABLE_ROLES: tuple[Role, ...] = (
    Role.MEMBER,
    Role.OFFICER,
    Role.PRESIDENT,
    Role.ADVISOR,
    Role.ADMIN,
)


class School(str, Enum):
    """Schools accepted by the profiles table check constraint."""

    DENMARK = "Denmark"
    OTHER = "Other"


SCHOOL_LABELS: dict[School, str] = {
    School.DENMARK: "Denmark High School",
    School.OTHER: "Other",
}


class UserProfile(BaseModel):
    """One row of the users table."""

    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    student_id: Optional[int] = None
    school: Optional[str] = None
    requested_role: Optional[str] = None
    role: Optional[str] = None
    created_at: datetime
    last_sign_in_at: Optional[datetime] = None

    @property
    def display_role(self) -> str:
        """Effective role, or Pending when none has been granted."""
        return self.role or Role.PENDING.value

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


class UserListResponse(BaseModel):
    """All profiles, newest first."""

    users: list[UserProfile]


class ActionResult(BaseModel):
    """Outcome of an admin mutation."""

    ok: bool = True
    warning: Optional[str] = Field(
        None,
        description="Set when the account was removed but the profile row was not",
    )


# -----------------------------------------------------------------------------
# Admin role actions
# -----------------------------------------------------------------------------


class ApproveAction(BaseModel):
    """Grant the member's requested role."""

    mode: Literal["approve"] = "approve"


class SetRoleAction(BaseModel):
    """Overwrite the member's effective role."""

    mode: Literal["set"] = "set"
    role: Role


RoleAction = Annotated[Union[ApproveAction, SetRoleAction], Field(discriminator="mode")]


def parse_role_action(payload: Any) -> RoleAction:
    """
    Decode a PATCH body into a role action.

    Args:
        payload: Decoded JSON body (anything json.loads can return)

    Returns:
        ApproveAction or SetRoleAction

    Raises:
        InvalidRoleActionError: Body is not an object or mode is unknown
        MissingRoleError: mode is "set" without a role
        InvalidRoleError: role is not one of the chapter roles
    """
    if not isinstance(payload, dict):
        raise InvalidRoleActionError()

    mode = payload.get("mode")
    if mode == "approve":
        return ApproveAction()

    if mode == "set":
        role = payload.get("role")
        if not role:
            raise MissingRoleError()
        try:
            return SetRoleAction(role=role)
        except PydanticValidationError:
            raise InvalidRoleError(str(role))

    raise InvalidRoleActionError()
