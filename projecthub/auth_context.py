"""
projecthub/auth_context.py

Token issuing and verification primitives for FastAPI dependency injection.

Contains:
- AuthContext: identity decoded from a verified bearer token
- create_access_token: sign {id, email, role} with an expiry
- verify_token: JWT signature/expiry check
- require_auth_context: FastAPI dependency for protected routes

This module MUST NOT import projecthub.main to avoid circular dependencies.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel

try:
    from projecthub.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_HOURS, IS_DEV
    from projecthub.errors import MissingTokenError, InvalidTokenError
    from projecthub.models import User
except ModuleNotFoundError:
    from config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_HOURS, IS_DEV
    from errors import MissingTokenError, InvalidTokenError
    from models import User

# auto_error=False so a missing header maps to MissingTokenError instead of
# FastAPI's default 403
security = HTTPBearer(auto_error=False)


class AuthContext(BaseModel):
    """
    Identity attached to a request after token verification.

    Claims are trusted as issued; the store is not consulted, so a token stays
    valid for its whole lifetime.
    """
    user_id: str
    email: str
    role: str


# ---------------------------------------------------------
# JWT Tokens
# ---------------------------------------------------------
def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """Issue a signed token carrying the user's id, email and role."""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(hours=ACCESS_TOKEN_HOURS))
    payload = {
        "id": user.id,
        "email": user.email,
        "role": user.role.value,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(payload, SECRET_KEY, algorithm=ALGORITHM)


def verify_token(token: str) -> dict:
    """
    Verify a JWT and return its decoded payload.

    Raises:
        InvalidTokenError: bad signature, expired, or malformed token
    """
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        if IS_DEV:
            print("[AUTH] Token expired")
        raise InvalidTokenError()
    except jwt.InvalidTokenError:
        if IS_DEV:
            print("[AUTH] Token failed verification")
        raise InvalidTokenError()


def require_auth_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthContext:
    """
    Auth dependency for protected routes.

    Usage:
        @router.post("/projects")
        def create(ctx: AuthContext = Depends(require_auth_context)):
            ...

    Raises:
        MissingTokenError (401): no bearer token on the request
        InvalidTokenError (403): token fails verification or lacks claims
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()

    payload = verify_token(credentials.credentials)
    user_id = payload.get("id")
    email = payload.get("email")
    role = payload.get("role")

    if not user_id or not email or not role:
        print("[AUTH] Missing claims in token payload")
        raise InvalidTokenError()

    return AuthContext(user_id=str(user_id), email=email, role=role)
