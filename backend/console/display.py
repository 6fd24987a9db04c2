"""Rich terminal rendering for the admin console."""

from datetime import datetime
from typing import Any, Iterable, Optional

from rich.console import Console
from rich.table import Table

console = Console()

ROLE_STYLES = {
    "Pending": "yellow",
    "Admin": "bold red",
    "Advisor": "magenta",
    "President": "cyan",
    "Officer": "blue",
    "Member": "green",
}


def format_datetime(value: Optional[str]) -> str:
    """Format an ISO timestamp for display, or "-" when missing."""
    if not value:
        return "-"
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).strftime("%Y-%m-%d %H:%M")
    except ValueError:
        return value


def full_name(user: dict[str, Any]) -> str:
    name = " ".join(part for part in (user.get("first_name"), user.get("last_name")) if part)
    return name or "-"


def filter_users(
    users: Iterable[dict[str, Any]],
    search: Optional[str] = None,
    role: Optional[str] = None,
    pending_only: bool = False,
) -> list[dict[str, Any]]:
    """
    Filter members client-side.

    Args:
        users: Members as returned by the API
        search: Case-insensitive match on email, name, or student ID
        role: Keep members whose effective role (Pending when unset) matches
        pending_only: Keep members with a requested role that differs from their role
    """
    needle = search.lower().strip() if search else ""
    result = []
    for user in users:
        effective = user.get("role") or "Pending"
        if role and effective != role:
            continue
        if pending_only and (not user.get("requested_role") or user["requested_role"] == effective):
            continue
        if needle:
            haystack = " ".join(
                str(value)
                for value in (user.get("email"), full_name(user), user.get("student_id"))
                if value is not None
            ).lower()
            if needle not in haystack:
                continue
        result.append(user)
    return result


def build_users_table(users: list[dict[str, Any]]) -> Table:
    table = Table(title=f"Members ({len(users)})", show_lines=False)
    table.add_column("ID", style="dim", overflow="fold")
    table.add_column("Created")
    table.add_column("Last sign-in")
    table.add_column("Student ID", justify="right")
    table.add_column("School")
    table.add_column("Email")
    table.add_column("Full Name")
    table.add_column("Requested Role")
    table.add_column("Role")

    for user in users:
        effective = user.get("role") or "Pending"
        table.add_row(
            user["id"],
            format_datetime(user.get("created_at")),
            format_datetime(user.get("last_sign_in_at")),
            str(user["student_id"]) if user.get("student_id") is not None else "-",
            user.get("school") or "-",
            user.get("email") or "-",
            full_name(user),
            user.get("requested_role") or "-",
            f"[{ROLE_STYLES.get(effective, 'white')}]{effective}[/]",
        )
    return table


def render_users(users: list[dict[str, Any]], out: Optional[Console] = None) -> None:
    """Print members as a table."""
    target = out or console
    if not users:
        target.print("[dim]No users found.[/dim]")
        return
    target.print(build_users_table(users))
