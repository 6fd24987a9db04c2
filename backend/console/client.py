"""HTTP client for the admin user-management API."""

from typing import Any, Optional

import httpx


class AdminAPIError(Exception):
    """
    Raised when the API answers with a non-2xx status or cannot be reached.

    status_code is 0 when no response was received.
    """

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class AdminAPIClient:
    """
    Thin wrapper over /api/admin/users.

    Args:
        base_url: API root, e.g. "http://localhost:8000"
        token: Admin's Supabase access token
        transport: Optional httpx transport (tests pass httpx.MockTransport)
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers={"Authorization": f"Bearer {token}"},
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> "AdminAPIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def list_users(self) -> list[dict[str, Any]]:
        """Fetch all members, newest first."""
        return self._request("GET", "/api/admin/users").get("users", [])

    def approve(self, user_id: str) -> dict[str, Any]:
        """Grant the member's requested role."""
        return self._request("PATCH", f"/api/admin/users/{user_id}", json={"mode": "approve"})

    def set_role(self, user_id: str, role: str) -> dict[str, Any]:
        """Overwrite the member's effective role."""
        return self._request(
            "PATCH",
            f"/api/admin/users/{user_id}",
            json={"mode": "set", "role": role},
        )

    def delete_user(self, user_id: str) -> dict[str, Any]:
        """Delete the member's account and profile. May carry a warning."""
        return self._request("DELETE", f"/api/admin/users/{user_id}")

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.TransportError as e:
            raise AdminAPIError(0, f"Cannot reach API: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.is_error:
            message = body.get("error") if isinstance(body, dict) else None
            raise AdminAPIError(response.status_code, message or f"HTTP {response.status_code}")
        return body
