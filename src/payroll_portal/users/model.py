from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class User:
    """Domain entity: a registered employee account.

    ``password_hash`` holds ``"<hex digest>:<salt>"`` (or a bare legacy digest).
    """

    user_id: str
    name: str
    password_hash: str
    created_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None


@dataclass(frozen=True)
class Session:
    token: str
    user_id: str
    created_at: datetime
    expires_at: datetime

    def is_valid(self, now: datetime) -> bool:
        return now < self.expires_at
