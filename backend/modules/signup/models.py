"""
Sign-up module data models.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.members.models import REQUESTABLE_ROLES, Role, School


class SignupRequest(BaseModel):
    """
    Fields a signed-in user fills in to complete sign-up.

    Unknown fields are rejected, so a payload carrying "role" fails
    validation instead of being silently dropped.
    """

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    student_id: int = Field(..., ge=0, description="School-issued student ID")
    school: School
    requested_role: Role

    @field_validator("requested_role")
    @classmethod
    def role_must_be_requestable(cls, value: Role) -> Role:
        if value not in REQUESTABLE_ROLES:
            raise ValueError(f"{value.value} cannot be requested")
        return value


class DropdownItem(BaseModel):
    """A value/label pair for a select control."""

    value: str
    label: str


class SignupOptions(BaseModel):
    """Choices offered on the sign-up form."""

    schools: list[DropdownItem]
    roles: list[DropdownItem]
