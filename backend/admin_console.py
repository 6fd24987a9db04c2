"""
Spark admin console.

Terminal stand-in for the chapter's admin page: lists members as a table,
filters them client-side, and approves, sets, or deletes through the
admin HTTP API.
"""

import argparse
import os
import sys

from rich.prompt import Confirm

from console.client import AdminAPIClient, AdminAPIError
from console.display import console, filter_users, render_users
from modules.members.models import Role

DEFAULT_API_URL = "http://localhost:8000"


def cmd_list(client: AdminAPIClient, args: argparse.Namespace) -> None:
    users = client.list_users()
    users = filter_users(users, search=args.search, role=args.role, pending_only=args.pending)
    render_users(users)


def cmd_approve(client: AdminAPIClient, args: argparse.Namespace) -> None:
    client.approve(args.user_id)
    console.print(f"[green]Approved requested role for {args.user_id}[/green]")


def cmd_set_role(client: AdminAPIClient, args: argparse.Namespace) -> None:
    client.set_role(args.user_id, args.role)
    console.print(f"[green]Set role of {args.user_id} to {args.role}[/green]")


def cmd_delete(client: AdminAPIClient, args: argparse.Namespace) -> None:
    if not args.yes and not Confirm.ask(
        f"Delete user {args.user_id}? This removes their account and profile"
    ):
        console.print("[dim]Cancelled[/dim]")
        return

    result = client.delete_user(args.user_id)
    if result.get("warning"):
        console.print(f"[yellow]Account deleted, but:[/yellow] {result['warning']}")
    else:
        console.print(f"[green]Deleted {args.user_id}[/green]")


COMMANDS = {
    "list": cmd_list,
    "approve": cmd_approve,
    "set-role": cmd_set_role,
    "delete": cmd_delete,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Spark chapter admin console")
    parser.add_argument(
        "--api-url",
        default=os.environ.get("SPARK_API_URL", DEFAULT_API_URL),
        help=f"API base URL (default: $SPARK_API_URL or {DEFAULT_API_URL})",
    )
    parser.add_argument(
        "--token",
        default=os.environ.get("SPARK_ADMIN_TOKEN"),
        help="Admin access token (default: $SPARK_ADMIN_TOKEN)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    list_parser = sub.add_parser("list", help="List members")
    list_parser.add_argument("--search", "-s", help="Match email, name, or student ID")
    list_parser.add_argument(
        "--role", choices=[role.value for role in Role], help="Only show this role"
    )
    list_parser.add_argument(
        "--pending", action="store_true", help="Only show open role requests"
    )

    approve_parser = sub.add_parser("approve", help="Grant a member's requested role")
    approve_parser.add_argument("user_id")

    set_parser = sub.add_parser("set-role", help="Set a member's role")
    set_parser.add_argument("user_id")
    set_parser.add_argument("role", choices=[role.value for role in Role])

    delete_parser = sub.add_parser("delete", help="Delete a member's account")
    delete_parser.add_argument("user_id")
    delete_parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.token:
        console.print("[red]Error:[/red] No token. Pass --token or set SPARK_ADMIN_TOKEN.")
        return 1

    with AdminAPIClient(args.api_url, args.token) as client:
        try:
            COMMANDS[args.command](client, args)
        except AdminAPIError as e:
            if e.status_code:
                console.print(f"[red]Error ({e.status_code}):[/red] {e.message}")
            else:
                console.print(f"[red]Error:[/red] {e.message}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
