"""Tests for the /api/users endpoints."""

import pytest
from unittest.mock import MagicMock, patch
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_access_factory
from shared.access import RestrictedAccess
from tests.conftest import TEST_JWT_SECRET, create_test_token, make_profile_row, mock_query_result


@pytest.fixture(autouse=True)
def jwt_secret():
    with patch("modules.auth.service.get_settings") as mock_settings:
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        yield mock_settings


@pytest.fixture
def user_client():
    return MagicMock()


@pytest.fixture
def factory(user_client):
    factory = MagicMock()
    factory.restricted.side_effect = lambda user: RestrictedAccess(user_client, user.id)
    return factory


@pytest.fixture
def client(factory):
    app = create_app()
    app.dependency_overrides[get_access_factory] = lambda: factory
    return TestClient(app)


@pytest.fixture
def headers():
    return {"Authorization": f"Bearer {create_test_token(user_id='user-1', email='ada@example.com')}"}


def profile_query(user_client):
    return user_client.table.return_value.select.return_value.eq.return_value.limit.return_value


class TestGetMe:
    def test_without_profile_row(self, client, user_client, headers):
        profile_query(user_client).execute.return_value = mock_query_result([])

        response = client.get("/api/users/me", headers=headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "user-1"
        assert data["email"] == "ada@example.com"
        assert data["role"] == "Pending"
        assert data["signup_complete"] is False

    def test_completed_profile(self, client, user_client, headers):
        profile_query(user_client).execute.return_value = mock_query_result(
            [make_profile_row("user-1", role="Officer", requested_role="Officer")]
        )

        response = client.get("/api/users/me", headers=headers)

        data = response.json()
        assert data["role"] == "Officer"
        assert data["first_name"] == "Ada"
        assert data["signup_complete"] is True

    def test_role_defaults_to_pending(self, client, user_client, headers):
        profile_query(user_client).execute.return_value = mock_query_result(
            [make_profile_row("user-1", requested_role="Member")]
        )

        data = client.get("/api/users/me", headers=headers).json()

        assert data["role"] == "Pending"
        assert data["requested_role"] == "Member"

    def test_incomplete_profile(self, client, user_client, headers):
        profile_query(user_client).execute.return_value = mock_query_result(
            [make_profile_row("user-1", requested_role=None)]
        )

        data = client.get("/api/users/me", headers=headers).json()

        assert data["signup_complete"] is False

    def test_reads_with_callers_access(self, client, factory, user_client, headers):
        profile_query(user_client).execute.return_value = mock_query_result([])

        client.get("/api/users/me", headers=headers)

        factory.restricted.assert_called_once()
        factory.elevated.assert_not_called()
