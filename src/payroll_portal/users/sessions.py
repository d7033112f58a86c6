from __future__ import annotations

import base64
import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_SESSION_HOURS
from .model import Session
from .repository import SessionRepository

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer(header: Optional[str]) -> Optional[str]:
    """Return the token from ``"Bearer <token>"``; None for anything else."""

    if not header or not header.startswith(BEARER_PREFIX):
        return None
    token = header[len(BEARER_PREFIX):].strip()
    return token or None


class SessionManager:
    """Issues and validates opaque bearer tokens with a fixed TTL.

    Expiry is enforced lazily: an expired session is deleted the next time it
    is looked up, there is no background sweep.
    """

    def __init__(self, sessions: SessionRepository, *, ttl_hours: int = DEFAULT_SESSION_HOURS):
        self._sessions = sessions
        self._ttl = timedelta(hours=int(ttl_hours))

    def issue(self, user_id: str, *, now: datetime | None = None) -> str:
        now = now or now_local()
        raw = f"{user_id}:{int(now.timestamp() * 1000)}:{secrets.token_hex(16)}"
        token = base64.b64encode(raw.encode("utf-8")).decode("ascii")

        self._sessions.create(
            Session(token=token, user_id=str(user_id), created_at=now, expires_at=now + self._ttl)
        )
        return token

    def validate(self, bearer_header: Optional[str], *, now: datetime | None = None) -> Optional[str]:
        token = extract_bearer(bearer_header)
        if not token:
            return None

        session = self._sessions.get_by_token(token)
        if not session:
            return None

        now = now or now_local()
        if session.is_valid(now):
            return session.user_id

        self._sessions.delete_by_token(token)
        logger.info("Evicted expired session for user %s", session.user_id)
        return None

    def revoke(self, bearer_header: Optional[str]) -> None:
        token = extract_bearer(bearer_header)
        if token:
            self._sessions.delete_by_token(token)
