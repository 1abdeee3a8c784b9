"""
projecthub/schemas.py

Request schemas for the JSON endpoints.

Fields are optional at the schema level; presence and format checks happen
in validate_registration() so every failure surfaces as a ValidationError
with the API's own messages rather than FastAPI's 422 payload.
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, Field, validator

try:
    from projecthub.errors import ValidationError
    from projecthub.models import UserRole
except ModuleNotFoundError:
    from errors import ValidationError
    from models import UserRole


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


class RegisterRequest(BaseModel):
    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Email address (unique)")
    password: Optional[str] = Field(None, description="Plain password; hashed before storage")
    role: Optional[str] = Field(None, description="user | admin")

    @validator("name", "email", "role", pre=True)
    def trim(cls, v):
        """Trim whitespace from text fields."""
        if isinstance(v, str):
            return v.strip()
        return v


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class StatusUpdateRequest(BaseModel):
    status: Optional[str] = Field(None, description="New moderation status (any string)")


def validate_registration(req: RegisterRequest) -> None:
    """
    Raise ValidationError if any field is missing, the email is malformed,
    or the role is not one of the known roles.
    """
    if not req.name or not req.email or not req.password or not req.role:
        raise ValidationError("All fields are required")

    if not EMAIL_PATTERN.match(req.email):
        raise ValidationError("Invalid email format")

    if req.role not in {r.value for r in UserRole}:
        raise ValidationError(f"Invalid role: must be one of {', '.join(r.value for r in UserRole)}")
