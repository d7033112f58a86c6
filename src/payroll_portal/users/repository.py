from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from .model import Session, User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(self, *, user_id: str, name: str, password_hash: str, created_at: datetime) -> None:
        raise NotImplementedError

    def touch_last_login(self, user_id: str, *, at: datetime) -> bool:
        raise NotImplementedError


class SessionRepository(Protocol):
    def create(self, session: Session) -> None:
        raise NotImplementedError

    def get_by_token(self, token: str) -> Optional[Session]:
        raise NotImplementedError

    def delete_by_token(self, token: str) -> bool:
        raise NotImplementedError
