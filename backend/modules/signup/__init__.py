"""
Sign-up module.

Lets a signed-in user complete their own profile and request a role.

Public API:
- SignupService: Completes sign-up with caller-scoped access
- SignupRequest, SignupOptions: Request and form-choice models
"""

from .models import DropdownItem, SignupOptions, SignupRequest
from .service import SignupService, get_signup_options

__all__ = [
    "DropdownItem",
    "SignupOptions",
    "SignupRequest",
    "SignupService",
    "get_signup_options",
]
