"""
Members module exceptions.
"""

from shared.exceptions import (
    AuthorizationError,
    NotFoundError,
    ValidationError,
)


class AdminRequiredError(AuthorizationError):
    """
    Raised when the caller is not a signed-in Admin.

    Every failure of the admin check maps to this single error so the
    response never reveals which step failed.
    """

    def __init__(self):
        super().__init__("Unauthorized", code="UNAUTHORIZED")


class ProfileNotFoundError(NotFoundError):
    """Raised when a user's profile row does not exist or is not visible."""

    def __init__(self, user_id: str):
        super().__init__(
            f"Profile not found: {user_id}",
            code="PROFILE_NOT_FOUND",
            details={"user_id": user_id},
        )


class NoRequestedRoleError(ValidationError):
    """Raised when approving a member who has not requested a role."""

    def __init__(self, user_id: str):
        super().__init__(
            "No requested_role to approve.",
            code="NO_REQUESTED_ROLE",
            details={"user_id": user_id},
        )


class InvalidRoleActionError(ValidationError):
    """Raised for a PATCH body with a missing or unknown mode."""

    def __init__(self):
        super().__init__("Invalid mode", code="INVALID_MODE")


class MissingRoleError(ValidationError):
    """Raised when a set-role action carries no role."""

    def __init__(self):
        super().__init__("Missing role", code="MISSING_ROLE")


class InvalidRoleError(ValidationError):
    """Raised when a set-role action names a role outside the chapter roles."""

    def __init__(self, role: str):
        super().__init__(
            f"Invalid role: {role}",
            code="INVALID_ROLE",
            details={"role": role},
        )


class ProtectedColumnError(ValidationError):
    """Raised when a self-service write touches a column the owner may not set."""

    def __init__(self, columns: list[str]):
        super().__init__(
            f"Cannot update protected fields: {', '.join(sorted(columns))}",
            code="PROTECTED_COLUMN",
            details={"columns": sorted(columns)},
        )
