"""
projecthub/routes_projects.py

Project submission and public browsing endpoints.

- POST /api/projects      : authenticated multipart submission (status "pending")
- GET  /api/projects      : public listing, optional category/tag filters (AND)
- GET  /api/projects/{id} : public single project
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

try:
    from projecthub.auth_context import AuthContext, require_auth_context
    from projecthub.config import IS_DEV
    from projecthub.dependencies import get_upload_dir
    from projecthub.errors import NotFoundError
    from projecthub.models import Project, parse_tags
    from projecthub.store import Store, get_store
    from projecthub.uploads import save_uploads
except ModuleNotFoundError:
    from auth_context import AuthContext, require_auth_context
    from config import IS_DEV
    from dependencies import get_upload_dir
    from errors import NotFoundError
    from models import Project, parse_tags
    from store import Store, get_store
    from uploads import save_uploads


router = APIRouter(
    prefix="/api/projects",
    tags=["projects"],
)


@router.post("", status_code=201)
async def create_project(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    video: Optional[str] = Form(None),
    files: Optional[List[UploadFile]] = File(None),
    ctx: AuthContext = Depends(require_auth_context),
    store: Store = Depends(get_store),
    upload_dir: str = Depends(get_upload_dir),
) -> Dict[str, Any]:
    """
    Submit a project on behalf of the caller.

    Attachments are written to the upload directory before the project is
    stored; the project records their stored names.
    """
    stored_files = await save_uploads(files, upload_dir)

    project = Project(
        title=title,
        description=description,
        category=category,
        tags=parse_tags(tags),
        files=stored_files,
        video=video,
        user_id=ctx.user_id,
    )
    store.add_project(project)

    if IS_DEV:
        print(f"[PROJECTS] Created project_id={project.id}, user_id={ctx.user_id}, files={len(stored_files)}")

    return {
        "success": True,
        "message": "Project submitted successfully",
        "project": project.to_response(),
    }


@router.get("")
def list_projects(
    category: Optional[str] = None,
    tag: Optional[str] = None,
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    projects = store.list_projects(category=category, tag=tag)
    return {
        "success": True,
        "projects": [p.to_response() for p in projects],
    }


@router.get("/{project_id}")
def get_project(project_id: str, store: Store = Depends(get_store)) -> Dict[str, Any]:
    project = store.get_project(project_id)
    if project is None:
        raise NotFoundError("Project not found")
    return {
        "success": True,
        "project": project.to_response(),
    }
