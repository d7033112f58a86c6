from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_min_length, require_non_empty, sanitize_text, validate_user_id
from ..core.constants import MAX_NAME_LENGTH, MIN_PASSWORD_LENGTH
from ..core.exceptions import AuthenticationError, ConflictError, UnauthenticatedError, ValidationError
from ..core import messages
from .passwords import hash_password, verify_password
from .repository import UserRepository
from .sessions import SessionManager

logger = logging.getLogger(__name__)


class AuthService:
    """Use cases: register, login, logout and token resolution."""

    def __init__(self, users: UserRepository, sessions: SessionManager):
        self._users = users
        self._sessions = sessions

    def register(self, *, user_id: Optional[str], name: Optional[str], password: Optional[str], now: datetime | None = None) -> str:
        if not user_id or not name or not password:
            raise ValidationError(messages.ALL_FIELDS_REQUIRED)

        user_id = validate_user_id(user_id)
        password = str(password)
        name = require_non_empty(sanitize_text(name, max_length=MAX_NAME_LENGTH))
        require_min_length(password, MIN_PASSWORD_LENGTH, messages.PASSWORD_TOO_SHORT)

        if self._users.get_by_id(user_id):
            raise ConflictError(messages.ID_TAKEN)

        now = now or now_local()
        self._users.create_user(user_id=user_id, name=name, password_hash=hash_password(password), created_at=now)
        logger.info("Registered user %s", user_id)
        return self._sessions.issue(user_id, now=now)

    def login(self, *, user_id: Optional[str], password: Optional[str], now: datetime | None = None) -> str:
        if not user_id or not password:
            raise ValidationError(messages.ALL_FIELDS_REQUIRED)

        user = self._users.get_by_id(str(user_id).strip())
        if not user or not verify_password(str(password), user.password_hash):
            raise AuthenticationError(messages.WRONG_CREDENTIALS)

        now = now or now_local()
        self._users.touch_last_login(user.user_id, at=now)
        return self._sessions.issue(user.user_id, now=now)

    def logout(self, bearer_header: Optional[str]) -> None:
        self._sessions.revoke(bearer_header)

    def resolve_user(self, bearer_header: Optional[str], *, now: datetime | None = None) -> str:
        """Map an Authorization header to a user id or raise UnauthenticatedError."""

        if not bearer_header:
            raise UnauthenticatedError(messages.TOKEN_REQUIRED)

        user_id = self._sessions.validate(bearer_header, now=now)
        if not user_id:
            raise UnauthenticatedError(messages.TOKEN_INVALID)
        return user_id
