"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Any, Optional
from unittest.mock import MagicMock
import jwt  # PyJWT

from api.dependencies import reset_container
from modules.auth.service import reset_auth_service
from shared.database import reset_client_cache


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    email_verified: bool = True,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        email_verified: Whether the email should be marked as verified
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "email_confirmed_at": now.isoformat() if email_verified else None,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_profile_row(
    user_id: str = "user-1",
    created_at: str = "2025-01-01T00:00:00+00:00",
    role: Optional[str] = None,
    requested_role: Optional[str] = None,
    **overrides: Any,
) -> dict[str, Any]:
    """Build a users-table row as PostgREST returns it."""
    row = {
        "id": user_id,
        "email": f"{user_id}@example.com",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "student_id": 12345,
        "school": "Denmark",
        "requested_role": requested_role,
        "role": role,
        "created_at": created_at,
        "last_sign_in_at": None,
    }
    row.update(overrides)
    return row


def mock_query_result(data: Any) -> MagicMock:
    """Mock PostgREST response with .data set."""
    result = MagicMock()
    result.data = data
    return result


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached services and clients before and after each test."""
    reset_auth_service()
    reset_container()
    reset_client_cache()
    yield
    reset_auth_service()
    reset_container()
    reset_client_cache()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
