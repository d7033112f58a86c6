"""Salted SHA-256 password hashing.

Stored format is ``"<hex digest>:<salt>"``. Accounts created before salting
hold a bare hex digest of the password; both formats verify.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Optional

from werkzeug.security import gen_salt

SALT_LENGTH = 22


def _digest(password: str, salt: str = "") -> str:
    return hashlib.sha256((password + salt).encode("utf-8")).hexdigest()


def hash_password(password: str, salt: Optional[str] = None) -> str:
    if not salt:
        salt = gen_salt(SALT_LENGTH)
    return f"{_digest(password, salt)}:{salt}"


def verify_password(password: str, stored_hash: Optional[str]) -> bool:
    if not password or not stored_hash:
        return False

    stored_hash = stored_hash.strip()
    if ":" not in stored_hash:
        return hmac.compare_digest(_digest(password), stored_hash)

    digest, salt = stored_hash.split(":", 1)
    return hmac.compare_digest(_digest(password, salt), digest)
