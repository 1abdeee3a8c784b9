# projecthub/uploads.py
# Multipart attachment persistence and read-only serving of stored files

from __future__ import annotations

import os
import time
from typing import List, Optional

from fastapi import APIRouter, Depends, UploadFile
from fastapi.responses import FileResponse
from starlette.concurrency import run_in_threadpool

try:
    from projecthub.config import IS_DEV
    from projecthub.dependencies import get_upload_dir
    from projecthub.errors import NotFoundError
except ModuleNotFoundError:
    from config import IS_DEV
    from dependencies import get_upload_dir
    from errors import NotFoundError


# Read-only access to stored attachments
router = APIRouter(
    prefix="/uploads",
    tags=["uploads"],
)


def stored_name(original: Optional[str], millis: Optional[int] = None) -> str:
    """
    Name an upload is stored under: "<epoch millis>-<original basename>".

    Only the basename of the client-supplied name is kept, so a crafted name
    cannot escape the upload directory.
    """
    if millis is None:
        millis = int(time.time() * 1000)
    base = os.path.basename((original or "").replace("\\", "/")) or "upload"
    return f"{millis}-{base}"


def _write_file(path: str, data: bytes) -> None:
    with open(path, "wb") as f:
        f.write(data)


async def save_uploads(files: Optional[List[UploadFile]], upload_dir: str) -> List[str]:
    """
    Write each attachment into upload_dir and return the stored file names.

    The directory is created on first use. Two files sharing a name within the
    same millisecond overwrite each other.
    """
    names: List[str] = []
    if not files:
        return names

    os.makedirs(upload_dir, exist_ok=True)

    for upload in files:
        # Browsers send an empty part when no file is picked
        if not upload.filename:
            continue
        name = stored_name(upload.filename)
        dest_path = os.path.join(upload_dir, name)
        await run_in_threadpool(_write_file, dest_path, await upload.read())
        names.append(name)
        if IS_DEV:
            print(f"[UPLOAD] Stored {name} ({os.path.getsize(dest_path)} bytes)")

    return names


@router.get("/{filename}")
def download_upload(filename: str, upload_dir: str = Depends(get_upload_dir)) -> FileResponse:
    """Serve a stored attachment; 404 if it (or the upload directory) is absent."""
    if os.path.basename(filename) != filename:
        raise NotFoundError("File not found")

    fs_path = os.path.join(upload_dir, filename)
    if not os.path.isfile(fs_path):
        raise NotFoundError("File not found")

    return FileResponse(fs_path, filename=filename, media_type="application/octet-stream")
