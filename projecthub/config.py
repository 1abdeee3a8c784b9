# projecthub/config.py
# Environment-aware configuration for the ProjectHub backend

import os
from typing import Literal

# Environment detection
ENV: Literal["dev", "staging", "prod"] = os.environ.get("ENV", "dev")  # type: ignore
IS_DEV = (ENV == "dev")
IS_STAGING = (ENV == "staging")
IS_PROD = (ENV == "prod")

# HTTP listener (used when running `python -m projecthub.main`)
PORT = int(os.environ.get("PORT", "3000"))

# JWT configuration
SECRET_KEY = os.environ.get("JWT_SECRET", "your-secret-key")  # TODO: Use secure key in prod
ALGORITHM = "HS256"

# Token lifetime
ACCESS_TOKEN_HOURS = int(os.environ.get("ACCESS_TOKEN_HOURS", "24"))

# Password hashing work factor (PBKDF2-SHA256)
PASSWORD_HASH_ITERATIONS = int(os.environ.get("PASSWORD_HASH_ITERATIONS", "100000"))

# File uploads (directory is created lazily on first upload)
UPLOAD_DIR = os.environ.get("UPLOAD_DIR", "uploads")

# Optional static frontend served at "/"
FRONTEND_DIR = os.environ.get("FRONTEND_DIR", "").strip()

# CORS origins (expand for staging/prod)
CORS_ORIGINS = [
    "http://localhost:3000",
    "https://isfrontend.onrender.com",
]

if IS_STAGING or IS_PROD:
    extra_origins = os.environ.get("CORS_ORIGINS", "")
    if extra_origins:
        CORS_ORIGINS.extend(o.strip() for o in extra_origins.split(",") if o.strip())

print(f"[CONFIG] Environment: {ENV}")
print(f"[CONFIG] Port: {PORT}")
print(f"[CONFIG] Access token: {ACCESS_TOKEN_HOURS} hours")
print(f"[CONFIG] Upload dir: {UPLOAD_DIR}")
