"""Tests for console/display.py."""

from io import StringIO

from rich.console import Console

from console.display import filter_users, format_datetime, full_name, render_users

USERS = [
    {
        "id": "u1",
        "email": "ada@example.com",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "student_id": 1001,
        "school": "Denmark",
        "requested_role": "Officer",
        "role": None,
        "created_at": "2025-03-01T10:00:00Z",
        "last_sign_in_at": None,
    },
    {
        "id": "u2",
        "email": "grace@example.com",
        "first_name": "Grace",
        "last_name": "Hopper",
        "student_id": 2002,
        "school": "Other",
        "requested_role": "Member",
        "role": "Member",
        "created_at": "2025-02-01T10:00:00Z",
        "last_sign_in_at": "2025-02-02T08:30:00+00:00",
    },
    {
        "id": "u3",
        "email": "alan@example.com",
        "first_name": None,
        "last_name": None,
        "student_id": None,
        "school": None,
        "requested_role": None,
        "role": "Admin",
        "created_at": "2025-01-01T10:00:00Z",
        "last_sign_in_at": None,
    },
]


class TestFilterUsers:
    def test_no_filters(self):
        assert filter_users(USERS) == USERS

    def test_search_email(self):
        assert [u["id"] for u in filter_users(USERS, search="GRACE@")] == ["u2"]

    def test_search_name(self):
        assert [u["id"] for u in filter_users(USERS, search="ada love")] == ["u1"]

    def test_search_student_id(self):
        assert [u["id"] for u in filter_users(USERS, search="2002")] == ["u2"]

    def test_role_pending_matches_unset_role(self):
        assert [u["id"] for u in filter_users(USERS, role="Pending")] == ["u1"]

    def test_role(self):
        assert [u["id"] for u in filter_users(USERS, role="Admin")] == ["u3"]

    def test_pending_only(self):
        """Open requests are those that differ from the granted role."""
        assert [u["id"] for u in filter_users(USERS, pending_only=True)] == ["u1"]

    def test_keeps_order(self):
        assert [u["id"] for u in filter_users(USERS, search="example.com")] == ["u1", "u2", "u3"]


class TestFormatting:
    def test_format_datetime(self):
        assert format_datetime("2025-02-02T08:30:00Z") == "2025-02-02 08:30"

    def test_format_missing(self):
        assert format_datetime(None) == "-"

    def test_format_unparseable(self):
        assert format_datetime("yesterday") == "yesterday"

    def test_full_name(self):
        assert full_name(USERS[0]) == "Ada Lovelace"
        assert full_name(USERS[2]) == "-"


class TestRenderUsers:
    def render(self, users):
        out = StringIO()
        render_users(users, out=Console(file=out, width=250, color_system=None))
        return out.getvalue()

    def test_table(self):
        output = self.render(USERS)
        assert "Members (3)" in output
        assert "ada@example.com" in output
        assert "Pending" in output
        assert "Denmark" in output

    def test_empty(self):
        assert "No users found." in self.render([])
