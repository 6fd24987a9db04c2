"""Tests for shared/models.py."""

import pytest
from pydantic import ValidationError

from shared.models import AuthenticatedUser


class TestAuthenticatedUser:
    def test_defaults(self):
        user = AuthenticatedUser(id="user-1")
        assert user.email == ""
        assert user.email_verified is False
        assert user.last_sign_in is None
        assert user.access_token == ""

    def test_is_frozen(self):
        user = AuthenticatedUser(id="user-1")
        with pytest.raises(ValidationError):
            user.id = "user-2"

    def test_access_token_hidden_from_dump_and_repr(self):
        """The raw token should not leak into serialized output or logs."""
        user = AuthenticatedUser(id="user-1", access_token="secret-token")
        assert "access_token" not in user.model_dump()
        assert "secret-token" not in repr(user)
        assert user.access_token == "secret-token"
