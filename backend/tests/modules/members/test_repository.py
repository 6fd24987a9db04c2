"""Tests for modules/members/repository.py."""

import pytest
from unittest.mock import MagicMock

from postgrest.exceptions import APIError

from modules.members.exceptions import ProfileNotFoundError, ProtectedColumnError
from modules.members.repository import (
    PROFILE_COLUMNS,
    PROFILES_TABLE,
    ProfileRepository,
)
from shared.repository import StoreError
from tests.conftest import make_profile_row, mock_query_result


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def repository(mock_db):
    return ProfileRepository(mock_db)


def select_chain(mock_db):
    """The .select().eq().limit() chain used for single-row reads."""
    return mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value


class TestListProfiles:
    def test_orders_newest_first(self, repository, mock_db):
        query = mock_db.table.return_value.select.return_value.order.return_value
        query.execute.return_value = mock_query_result([make_profile_row("user-1")])

        profiles = repository.list_profiles()

        mock_db.table.assert_called_once_with(PROFILES_TABLE)
        mock_db.table.return_value.select.assert_called_once_with(PROFILE_COLUMNS)
        mock_db.table.return_value.select.return_value.order.assert_called_once_with(
            "created_at", desc=True
        )
        assert [p.id for p in profiles] == ["user-1"]

    def test_empty(self, repository, mock_db):
        query = mock_db.table.return_value.select.return_value.order.return_value
        query.execute.return_value = mock_query_result([])

        assert repository.list_profiles() == []

    def test_store_failure(self, repository, mock_db):
        query = mock_db.table.return_value.select.return_value.order.return_value
        query.execute.side_effect = APIError({"message": "relation does not exist"})

        with pytest.raises(StoreError, match="relation does not exist"):
            repository.list_profiles()


class TestSingleRowReads:
    def test_get_profile(self, repository, mock_db):
        select_chain(mock_db).execute.return_value = mock_query_result(
            [make_profile_row("user-1", role="Member")]
        )

        profile = repository.get_profile("user-1")

        mock_db.table.return_value.select.return_value.eq.assert_called_once_with("id", "user-1")
        assert profile.id == "user-1"
        assert profile.role == "Member"
        assert profile.student_id == 12345

    def test_get_profile_missing(self, repository, mock_db):
        select_chain(mock_db).execute.return_value = mock_query_result([])
        assert repository.get_profile("user-1") is None

    def test_get_role(self, repository, mock_db):
        select_chain(mock_db).execute.return_value = mock_query_result([{"role": "Admin"}])

        assert repository.get_role("user-1") == "Admin"
        mock_db.table.return_value.select.assert_called_once_with("role")

    def test_get_role_missing_row(self, repository, mock_db):
        select_chain(mock_db).execute.return_value = mock_query_result([])
        assert repository.get_role("user-1") is None

    def test_get_requested_role(self, repository, mock_db):
        select_chain(mock_db).execute.return_value = mock_query_result(
            [{"requested_role": "Officer"}]
        )
        assert repository.get_requested_role("user-1") == "Officer"

    def test_get_requested_role_null(self, repository, mock_db):
        select_chain(mock_db).execute.return_value = mock_query_result(
            [{"requested_role": None}]
        )
        assert repository.get_requested_role("user-1") is None


class TestUpdateRole:
    def test_sets_role_only(self, repository, mock_db):
        repository.update_role("user-1", "Officer")

        mock_db.table.return_value.update.assert_called_once_with({"role": "Officer"})
        mock_db.table.return_value.update.return_value.eq.assert_called_once_with("id", "user-1")

    def test_clears_request(self, repository, mock_db):
        repository.update_role("user-1", "Officer", clear_request=True)

        mock_db.table.return_value.update.assert_called_once_with(
            {"role": "Officer", "requested_role": None}
        )

    def test_store_failure(self, repository, mock_db):
        chain = mock_db.table.return_value.update.return_value.eq.return_value
        chain.execute.side_effect = APIError({"message": "violates check constraint"})

        with pytest.raises(StoreError, match="violates check constraint"):
            repository.update_role("user-1", "Officer")


class TestUpdateOwnProfile:
    def test_writes_allowed_columns(self, repository, mock_db):
        chain = mock_db.table.return_value.update.return_value.eq.return_value
        chain.execute.return_value = mock_query_result(
            [make_profile_row("user-1", requested_role="Officer")]
        )
        fields = {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "student_id": 12345,
            "school": "Denmark",
            "requested_role": "Officer",
        }

        profile = repository.update_own_profile("user-1", fields)

        mock_db.table.return_value.update.assert_called_once_with(fields)
        assert profile.requested_role == "Officer"

    def test_rejects_role_column(self, repository, mock_db):
        """The effective role is never written through self-service."""
        with pytest.raises(ProtectedColumnError, match="role"):
            repository.update_own_profile("user-1", {"first_name": "Ada", "role": "Admin"})

        mock_db.table.assert_not_called()

    def test_missing_row(self, repository, mock_db):
        chain = mock_db.table.return_value.update.return_value.eq.return_value
        chain.execute.return_value = mock_query_result([])

        with pytest.raises(ProfileNotFoundError):
            repository.update_own_profile("user-1", {"first_name": "Ada"})


class TestDeleteProfile:
    def test_deletes_by_id(self, repository, mock_db):
        repository.delete_profile("user-1")

        mock_db.table.return_value.delete.return_value.eq.assert_called_once_with("id", "user-1")
        mock_db.table.return_value.delete.return_value.eq.return_value.execute.assert_called_once()

    def test_store_failure(self, repository, mock_db):
        chain = mock_db.table.return_value.delete.return_value.eq.return_value
        chain.execute.side_effect = APIError({"message": "delete blocked"})

        with pytest.raises(StoreError, match="delete blocked"):
            repository.delete_profile("user-1")
