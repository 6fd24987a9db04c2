"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated caller.

    Populated from the claims of a validated Supabase access token and made
    available to route handlers via dependency injection. The raw token is
    kept so a caller-scoped store client can be built for the same request.
    """

    id: str = Field(..., description="User ID (UUID from Supabase)")
    email: str = Field(default="", description="User's email address")
    email_verified: bool = Field(default=False, description="Whether email is verified")
    last_sign_in: Optional[datetime] = Field(None, description="Token issue time")
    access_token: str = Field(default="", repr=False, exclude=True)

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }
