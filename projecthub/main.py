# ---------------------------------------------------------
# projecthub/main.py
# ProjectHub - project submission & moderation backend
#
# Run: uvicorn projecthub.main:app --reload (from repo root)
#  or: python -m projecthub.main  (listens on PORT)
#
# - FastAPI + in-memory store
# - /api/register, /api/login       : accounts + bearer tokens
# - /api/projects                    : submit (multipart) / browse
# - /api/admin/projects              : moderation (admin role)
# ---------------------------------------------------------

from __future__ import annotations

import os
from typing import Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

# Import local modules (robust fallback for different run contexts)
try:
    from projecthub.config import CORS_ORIGINS, FRONTEND_DIR, IS_DEV, IS_PROD, IS_STAGING, PORT
    from projecthub.errors import ApiError, InternalError, ValidationError
    from projecthub import routes_admin, routes_auth, routes_projects, uploads
except ModuleNotFoundError:
    from config import CORS_ORIGINS, FRONTEND_DIR, IS_DEV, IS_PROD, IS_STAGING, PORT
    from errors import ApiError, InternalError, ValidationError
    import routes_admin
    import routes_auth
    import routes_projects
    import uploads


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


# ---------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------
app = FastAPI(title="ProjectHub Backend", version="0.1")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS if (IS_PROD or IS_STAGING) else ["*"],  # Restrict origins outside dev
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)


# ---------------------------------------------------------
# Error handling
# ---------------------------------------------------------
@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if IS_DEV:
        print(f"[API] {request.method} {request.url.path} -> {exc.status_code} {type(exc).__name__}: {exc.message}")
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    if IS_DEV:
        print(f"[API] {request.method} {request.url.path} -> 400 malformed request: {exc.errors()}")
    return error_response(ValidationError.status_code, "Invalid request body")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    print(f"[ERROR] {request.method} {request.url.path}: {type(exc).__name__}: {exc}")
    return error_response(InternalError.status_code, InternalError.message)


# ---------------------------------------------------------
# Routes
# ---------------------------------------------------------
@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


app.include_router(routes_auth.router)
app.include_router(routes_projects.router)
app.include_router(routes_admin.router)
app.include_router(uploads.router)

# Optional static frontend, mounted last so API routes take precedence
if FRONTEND_DIR and os.path.isdir(FRONTEND_DIR):
    app.mount("/", StaticFiles(directory=FRONTEND_DIR, html=True), name="frontend")
    print(f"[CONFIG] Serving frontend from {FRONTEND_DIR}")


if __name__ == "__main__":
    import uvicorn

    print(f"[SERVER] Running on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
