"""
projecthub/dependencies.py

Reusable FastAPI dependencies for authorization and request plumbing.
"""

from __future__ import annotations

from typing import Callable

from fastapi import Depends

try:
    from projecthub.auth_context import require_auth_context, AuthContext
    from projecthub.config import IS_DEV, UPLOAD_DIR
    from projecthub.errors import ForbiddenError
except ModuleNotFoundError:
    from auth_context import require_auth_context, AuthContext
    from config import IS_DEV, UPLOAD_DIR
    from errors import ForbiddenError


def require_role(role: str) -> Callable:
    """
    FastAPI dependency factory enforcing that the caller holds `role`.

    Apply once per router instead of repeating the check in every handler:
        router = APIRouter(dependencies=[Depends(require_role("admin"))])

    Raises:
        MissingTokenError / InvalidTokenError: from require_auth_context
        ForbiddenError (403): authenticated but with a different role
    """
    def _check_role(ctx: AuthContext = Depends(require_auth_context)) -> AuthContext:
        if ctx.role != role:
            if IS_DEV:
                print(f"[AUTHZ] Role denied: required={role}, role={ctx.role}, user_id={ctx.user_id}")
            raise ForbiddenError()
        return ctx

    return _check_role


def get_upload_dir() -> str:
    """Directory uploads are written to (overridable in tests)."""
    return UPLOAD_DIR
