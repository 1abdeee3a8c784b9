"""
projecthub/routes_auth.py

Registration and login endpoints.

Both return the public user view plus a freshly signed access token.
Passwords are hashed before storage and never echoed back.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

try:
    from projecthub.auth_context import create_access_token
    from projecthub.config import IS_DEV
    from projecthub.errors import AuthError
    from projecthub.models import User
    from projecthub.schemas import LoginRequest, RegisterRequest, normalize_email, validate_registration
    from projecthub.security import hash_password, verify_password
    from projecthub.store import Store, get_store
except ModuleNotFoundError:
    from auth_context import create_access_token
    from config import IS_DEV
    from errors import AuthError
    from models import User
    from schemas import LoginRequest, RegisterRequest, normalize_email, validate_registration
    from security import hash_password, verify_password
    from store import Store, get_store


router = APIRouter(
    prefix="/api",
    tags=["auth"],
)


@router.post("/register", status_code=201)
def register(req: RegisterRequest, store: Store = Depends(get_store)) -> Dict[str, Any]:
    """
    Create a user and return it with an access token.

    Raises:
        ValidationError (400): missing field, malformed email, unknown role
        ConflictError (400): email already registered
    """
    validate_registration(req)
    email_norm = normalize_email(req.email)

    user = User(
        name=req.name,
        email=email_norm,
        password_hash=hash_password(req.password),
        role=req.role,
    )
    # add_user raises ConflictError on a duplicate email
    store.add_user(user)

    if IS_DEV:
        print(f"[REGISTER] User created: id={user.id}, email={repr(email_norm)}, role={user.role.value}")

    return {
        "success": True,
        "message": "User registered successfully",
        "user": user.public(),
        "token": create_access_token(user),
    }


@router.post("/login")
def login(req: Optional[LoginRequest] = None, store: Store = Depends(get_store)) -> Dict[str, Any]:
    """
    Exchange email + password for an access token.

    Unknown email and wrong password fail identically with AuthError (401).
    """
    # A request without a body is treated like an empty one
    if req is None:
        req = LoginRequest()
    email_norm = normalize_email(req.email)
    user = store.find_user_by_email(email_norm) if email_norm else None

    if user is None or not req.password or not verify_password(req.password, user.password_hash):
        if IS_DEV:
            print("[LOGIN] Invalid credentials")
        raise AuthError()

    if IS_DEV:
        print(f"[LOGIN] Login successful: user_id={user.id}, role={user.role.value}")

    return {
        "success": True,
        "message": "Login successful",
        "user": user.public(),
        "token": create_access_token(user),
    }
