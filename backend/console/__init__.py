"""
Terminal admin console.

Talks to the admin HTTP API and renders members with rich.
"""

from .client import AdminAPIClient, AdminAPIError
from .display import console, filter_users, render_users

__all__ = [
    "AdminAPIClient",
    "AdminAPIError",
    "console",
    "filter_users",
    "render_users",
]
