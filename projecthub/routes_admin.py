"""
projecthub/routes_admin.py

Moderation endpoints. The whole router is gated by require_role("admin"),
so handlers never repeat the role check.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

try:
    from projecthub.auth_context import AuthContext
    from projecthub.dependencies import require_role
    from projecthub.errors import NotFoundError, ValidationError
    from projecthub.models import UserRole
    from projecthub.schemas import StatusUpdateRequest
    from projecthub.store import Store, get_store
except ModuleNotFoundError:
    from auth_context import AuthContext
    from dependencies import require_role
    from errors import NotFoundError, ValidationError
    from models import UserRole
    from schemas import StatusUpdateRequest
    from store import Store, get_store


require_admin = require_role(UserRole.admin.value)

router = APIRouter(
    prefix="/api/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("/projects")
def admin_list_projects(store: Store = Depends(get_store)) -> Dict[str, Any]:
    return {
        "success": True,
        "projects": [p.to_response() for p in store.list_projects()],
    }


@router.put("/projects/{project_id}")
def admin_update_status(
    project_id: str,
    req: Optional[StatusUpdateRequest] = None,
    ctx: AuthContext = Depends(require_admin),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    """
    Overwrite a project's moderation status.

    The value is stored exactly as sent, including empty or padded strings;
    there is no fixed status vocabulary. Only an absent status is rejected.
    """
    if store.get_project(project_id) is None:
        raise NotFoundError("Project not found")

    if req is None or req.status is None:
        raise ValidationError("Status is required")

    project = store.update_project_status(project_id, req.status)
    if project is None:
        raise NotFoundError("Project not found")

    print(f"[ADMIN] Set project {project_id} status to {repr(project.status)} (by user_id={ctx.user_id})")

    return {
        "success": True,
        "project": project.to_response(),
    }


@router.delete("/projects/{project_id}")
def admin_delete_project(
    project_id: str,
    ctx: AuthContext = Depends(require_admin),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    if not store.delete_project(project_id):
        raise NotFoundError("Project not found")

    print(f"[ADMIN] Deleted project {project_id} (by user_id={ctx.user_id})")

    return {
        "success": True,
        "message": "Project deleted successfully",
    }
