"""
Profile repository for database access.

Encapsulates all Supabase queries against the users table. The same
repository class serves both credential tiers: build it over a
RestrictedAccess client for a caller's own row, or over an ElevatedAccess
client for admin operations.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .exceptions import ProfileNotFoundError, ProtectedColumnError
from .models import UserProfile

PROFILES_TABLE = "users"

PROFILE_COLUMNS = (
    "id, email, first_name, last_name, student_id, school, "
    "requested_role, role, created_at, last_sign_in_at"
)

# Columns a profile owner may write through self-service sign-up
SELF_SERVICE_COLUMNS = frozenset(
    {"first_name", "last_name", "student_id", "school", "requested_role"}
)


class ProfileRepository(BaseRepository[UserProfile]):
    """
    Repository for profile data access.

    Note: This repository does NOT perform authorization checks.
    Callers decide which credential tier it runs under.
    """

    def list_profiles(self) -> list[UserProfile]:
        """Return every profile, newest created_at first."""
        result = self._execute(
            "list_profiles",
            lambda: self._db.table(PROFILES_TABLE)
            .select(PROFILE_COLUMNS)
            .order("created_at", desc=True)
            .execute(),
        )
        return [self._map_to_profile(row) for row in result.data or []]

    def get_profile(self, user_id: str) -> Optional[UserProfile]:
        """Return the profile for user_id, or None if no row is visible."""
        row = self._select_one(user_id, PROFILE_COLUMNS, "get_profile")
        return self._map_to_profile(row) if row else None

    def get_role(self, user_id: str) -> Optional[str]:
        """Return the stored effective role, or None when unset or missing."""
        row = self._select_one(user_id, "role", "get_role")
        return row.get("role") if row else None

    def get_requested_role(self, user_id: str) -> Optional[str]:
        """Return the pending role request, or None when unset or missing."""
        row = self._select_one(user_id, "requested_role", "get_requested_role")
        return row.get("requested_role") if row else None

    def update_role(self, user_id: str, role: str, clear_request: bool = False) -> None:
        """
        Set the effective role.

        Args:
            user_id: Target profile ID.
            role: New effective role.
            clear_request: Also null out requested_role in the same write.
        """
        data: dict[str, Any] = {"role": role}
        if clear_request:
            data["requested_role"] = None

        self._execute(
            "update_role",
            lambda: self._db.table(PROFILES_TABLE).update(data).eq("id", user_id).execute(),
        )

    def update_own_profile(self, user_id: str, fields: dict[str, Any]) -> UserProfile:
        """
        Write self-service fields for a profile owner.

        Only SELF_SERVICE_COLUMNS may appear in fields; anything else is
        rejected before a query is built.

        Returns:
            The updated profile.

        Raises:
            ProtectedColumnError: If fields names a non-writable column.
            ProfileNotFoundError: If no row was updated.
        """
        protected = set(fields) - SELF_SERVICE_COLUMNS
        if protected:
            raise ProtectedColumnError(list(protected))

        data = {key: value for key, value in fields.items() if key in SELF_SERVICE_COLUMNS}
        result = self._execute(
            "update_own_profile",
            lambda: self._db.table(PROFILES_TABLE).update(data).eq("id", user_id).execute(),
        )
        if not result.data:
            raise ProfileNotFoundError(user_id)
        return self._map_to_profile(result.data[0])

    def delete_profile(self, user_id: str) -> None:
        """Delete the profile row. Deleting a missing row is not an error."""
        self._execute(
            "delete_profile",
            lambda: self._db.table(PROFILES_TABLE).delete().eq("id", user_id).execute(),
        )

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _select_one(self, user_id: str, columns: str, operation: str) -> Optional[dict[str, Any]]:
        result = self._execute(
            operation,
            lambda: self._db.table(PROFILES_TABLE)
            .select(columns)
            .eq("id", user_id)
            .limit(1)
            .execute(),
        )
        if not result.data:
            return None
        return result.data[0]

    def _map_to_profile(self, data: dict[str, Any]) -> UserProfile:
        """Map database row to UserProfile model."""
        return UserProfile(
            id=str(data["id"]),
            email=data.get("email"),
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            student_id=data.get("student_id"),
            school=data.get("school"),
            requested_role=data.get("requested_role"),
            role=data.get("role"),
            created_at=data["created_at"],
            last_sign_in_at=data.get("last_sign_in_at"),
        )
