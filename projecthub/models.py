from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from datetime import datetime, timezone
from enum import Enum
import uuid


def new_id() -> str:
    """Collision-resistant identifier for users and projects."""
    return uuid.uuid4().hex


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


# Enums
class UserRole(str, Enum):
    user = "user"
    admin = "admin"


# Initial moderation status; admins may assign any other string
STATUS_PENDING = "pending"


# Models
class User(BaseModel):
    id: str = Field(default_factory=new_id)
    name: str
    email: str
    password_hash: str
    role: UserRole = UserRole.user
    created_at: str = Field(default_factory=now_iso, alias="createdAt")

    class Config:
        populate_by_name = True

    def public(self) -> Dict[str, Any]:
        """User view safe to return to clients (no credentials)."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
        }


class Project(BaseModel):
    id: str = Field(default_factory=new_id)
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    files: List[str] = Field(default_factory=list)
    video: Optional[str] = None
    status: str = STATUS_PENDING
    user_id: str = Field(..., alias="userId")
    created_at: str = Field(default_factory=now_iso, alias="createdAt")

    class Config:
        populate_by_name = True

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


def parse_tags(raw: Optional[str]) -> List[str]:
    """Split a comma-separated tag string, trimming entries and dropping empty ones."""
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]
