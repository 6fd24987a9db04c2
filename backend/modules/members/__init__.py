"""
Members module.

Handles member profiles, the admin authorization check, and role
transitions (approve, set, delete).

Public API:
- IMemberAdminService: Interface for admin member operations
- UserProfile, Role, School: Profile data
- ApproveAction, SetRoleAction, parse_role_action: Tagged admin actions
- ProfileRepository: Data access for the users table
"""

from .interfaces import IMemberAdminService
from .models import (
    ActionResult,
    ApproveAction,
    REQUESTABLE_ROLES,
    Role,
    RoleAction,
    School,
    SCHOOL_LABELS,
    SetRoleAction,
    UserListResponse,
    UserProfile,
    parse_role_action,
)
from .repository import ProfileRepository, SELF_SERVICE_COLUMNS
from .exceptions import (
    AdminRequiredError,
    InvalidRoleActionError,
    InvalidRoleError,
    MissingRoleError,
    NoRequestedRoleError,
    ProfileNotFoundError,
    ProtectedColumnError,
)

__all__ = [
    # Interface
    "IMemberAdminService",
    # Models
    "ActionResult",
    "ApproveAction",
    "REQUESTABLE_ROLES",
    "Role",
    "RoleAction",
    "School",
    "SCHOOL_LABELS",
    "SetRoleAction",
    "UserListResponse",
    "UserProfile",
    "parse_role_action",
    # Data access
    "ProfileRepository",
    "SELF_SERVICE_COLUMNS",
    # Exceptions
    "AdminRequiredError",
    "InvalidRoleActionError",
    "InvalidRoleError",
    "MissingRoleError",
    "NoRequestedRoleError",
    "ProfileNotFoundError",
    "ProtectedColumnError",
]
