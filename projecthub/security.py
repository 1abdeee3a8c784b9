# projecthub/security.py
# Password hashing helpers (salted PBKDF2-SHA256)

from __future__ import annotations

import hashlib
import hmac
import secrets

try:
    from projecthub.config import PASSWORD_HASH_ITERATIONS
except ModuleNotFoundError:
    from config import PASSWORD_HASH_ITERATIONS

HASH_SCHEME = "pbkdf2_sha256"
SALT_BYTES = 16


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


def hash_password(password: str, iterations: int = PASSWORD_HASH_ITERATIONS) -> str:
    """
    Hash a password with a fresh random salt.

    Format: pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>
    """
    salt = secrets.token_bytes(SALT_BYTES)
    digest = _derive(password, salt, iterations)
    return f"{HASH_SCHEME}${iterations}${salt.hex()}${digest.hex()}"


def verify_password(password: str, password_hash: str) -> bool:
    """Check a claimed password against a stored hash in constant time."""
    try:
        scheme, iterations, salt_hex, digest_hex = password_hash.split("$")
        if scheme != HASH_SCHEME:
            return False
        expected = bytes.fromhex(digest_hex)
        actual = _derive(password, bytes.fromhex(salt_hex), int(iterations))
    except (ValueError, AttributeError):
        return False
    return hmac.compare_digest(actual, expected)
