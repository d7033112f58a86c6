from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, UpsertResult


class AttendanceRepository(Protocol):
    def upsert(self, record: AttendanceRecord) -> UpsertResult:
        """Insert or overwrite the row for (record.user_id, record.date)."""
        raise NotImplementedError

    def delete_for_user_and_date(self, user_id: str, work_date: str) -> Optional[int]:
        """Delete every row matching the key.

        Returns the number of rows deleted, or None when the month has no
        partition at all.
        """
        raise NotImplementedError

    def list_for_user(self, user_id: str, month: str) -> Sequence[AttendanceRecord]:
        """Records of one user in one month, most recent date first."""
        raise NotImplementedError

    def list_months(self) -> Sequence[str]:
        """``YYYY-MM`` of every existing partition, newest first."""
        raise NotImplementedError
