from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import iso_timestamp, parse_timestamp
from ..core.constants import SESSIONS_PARTITION, USERS_PARTITION
from ..storage.locks import PartitionLocks
from ..storage.row_store import Row, RowStore
from .model import Session, User
from .repository import SessionRepository, UserRepository

USERS_HEADER = ["ID", "Name", "Password", "Created", "LastLogin"]
SESSIONS_HEADER = ["Token", "UserID", "Created", "Expires", "LastUsed"]


def _cell(row: Row, index: int) -> str:
    return str(row[index]).strip() if index < len(row) and row[index] is not None else ""


class RowStoreUserRepository(UserRepository):
    def __init__(self, store: RowStore, locks: PartitionLocks):
        self._store = store
        self._locks = locks

    def _find(self, handle: str, user_id: str) -> tuple[int, Optional[Row]]:
        # Case-insensitive, like ledger user keys.
        wanted = str(user_id).strip().lower()
        for i, row in enumerate(self._store.scan_rows(handle)):
            if _cell(row, 0).lower() == wanted:
                return i, row
        return -1, None

    def get_by_id(self, user_id: str) -> Optional[User]:
        handle = self._store.get_partition(USERS_PARTITION)
        if not handle:
            return None
        _, row = self._find(handle, user_id)
        if row is None:
            return None
        return User(
            user_id=_cell(row, 0),
            name=_cell(row, 1),
            password_hash=_cell(row, 2),
            created_at=parse_timestamp(row[3] if len(row) > 3 else None),
            last_login_at=parse_timestamp(row[4] if len(row) > 4 else None),
        )

    def create_user(self, *, user_id: str, name: str, password_hash: str, created_at: datetime) -> None:
        handle = self._store.ensure_partition(USERS_PARTITION, USERS_HEADER)
        with self._locks.hold(handle):
            self._store.append_row(handle, [user_id, name, password_hash, iso_timestamp(created_at), ""])

    def touch_last_login(self, user_id: str, *, at: datetime) -> bool:
        handle = self._store.get_partition(USERS_PARTITION)
        if not handle:
            return False
        with self._locks.hold(handle):
            index, row = self._find(handle, user_id)
            if row is None:
                return False
            updated = list(row) + [""] * (len(USERS_HEADER) - len(row))
            updated[4] = iso_timestamp(at)
            self._store.update_row(handle, index, updated)
            return True


class RowStoreSessionRepository(SessionRepository):
    def __init__(self, store: RowStore, locks: PartitionLocks):
        self._store = store
        self._locks = locks

    def create(self, session: Session) -> None:
        handle = self._store.ensure_partition(SESSIONS_PARTITION, SESSIONS_HEADER)
        with self._locks.hold(handle):
            self._store.append_row(
                handle,
                [
                    session.token,
                    session.user_id,
                    iso_timestamp(session.created_at),
                    iso_timestamp(session.expires_at),
                    iso_timestamp(session.created_at),
                ],
            )

    def get_by_token(self, token: str) -> Optional[Session]:
        handle = self._store.get_partition(SESSIONS_PARTITION)
        if not handle:
            return None
        for row in self._store.scan_rows(handle):
            if _cell(row, 0) != token:
                continue
            created = parse_timestamp(row[2] if len(row) > 2 else None)
            expires = parse_timestamp(row[3] if len(row) > 3 else None)
            if created is None or expires is None:
                return None
            return Session(token=token, user_id=_cell(row, 1), created_at=created, expires_at=expires)
        return None

    def delete_by_token(self, token: str) -> bool:
        handle = self._store.get_partition(SESSIONS_PARTITION)
        if not handle:
            return False
        with self._locks.hold(handle):
            for i, row in enumerate(self._store.scan_rows(handle)):
                if _cell(row, 0) == token:
                    self._store.delete_row(handle, i)
                    return True
        return False
