"""
Store access capabilities.

Two credential tiers reach the Profile Store:

- RestrictedAccess wraps a client scoped to the calling user. Row Level
  Security applies, so it can only see and change what the caller owns.
- ElevatedAccess wraps the service-role client and bypasses RLS. It must
  only be handed out after the admin authorization check has passed.

Handlers receive these objects through FastAPI dependencies and never
build clients themselves, which keeps the privilege boundary in one place.
"""

from supabase import Client

from .database import get_supabase_client, get_supabase_user_client
from .models import AuthenticatedUser


class RestrictedAccess:
    """Caller-scoped store access for one request."""

    def __init__(self, client: Client, user_id: str) -> None:
        self._client = client
        self._user_id = user_id

    @property
    def client(self) -> Client:
        return self._client

    @property
    def user_id(self) -> str:
        """ID of the user this access is scoped to."""
        return self._user_id


class ElevatedAccess:
    """Service-role store access. Bypasses Row Level Security."""

    def __init__(self, client: Client) -> None:
        self._client = client

    @property
    def client(self) -> Client:
        return self._client


class AccessFactory:
    """
    Builds access capabilities.

    Restricted access is built fresh for every call. Elevated access reuses
    the cached service-role client.
    """

    def restricted(self, user: AuthenticatedUser) -> RestrictedAccess:
        """Build caller-scoped access from the user's access token."""
        return RestrictedAccess(get_supabase_user_client(user.access_token), user.id)

    def elevated(self) -> ElevatedAccess:
        """Build service-role access."""
        return ElevatedAccess(get_supabase_client())
