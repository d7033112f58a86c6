from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import (
    iso_timestamp,
    month_for_partition,
    now_local,
    parse_timestamp,
    partition_for_month,
    try_normalize_date,
)
from ..common.validators import read_number
from ..core.constants import ATTENDANCE_PREFIX
from ..core.enums import AttendanceStatus, UpsertAction
from ..storage.locks import PartitionLocks
from ..storage.row_store import Row, RowStore
from .model import AttendanceRecord, UpsertResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

ATTENDANCE_HEADER = [
    "UserID", "Date", "Status", "WorkHours", "OTHours", "TotalHours",
    "Earned", "Deduction", "Details", "Created",
]


def user_key(value: object) -> str:
    return str(value if value is not None else "").strip().lower()


def row_matches(row: Row, user_id: str, work_date: str) -> bool:
    """Case/whitespace-insensitive user match plus normalized date match."""

    if len(row) < 2:
        return False
    return user_key(row[0]) == user_key(user_id) and try_normalize_date(row[1]) == work_date


def _to_row(record: AttendanceRecord, *, user_cell: object, stamp: datetime) -> Row:
    return [
        user_cell,
        record.date,
        record.status.value,
        record.work_hours,
        record.ot_hours,
        record.total_hours,
        record.earned,
        record.deduction,
        record.details,
        iso_timestamp(stamp),
    ]


def _to_record(row: Row) -> Optional[AttendanceRecord]:
    row = list(row) + [None] * (len(ATTENDANCE_HEADER) - len(row))
    work_date = try_normalize_date(row[1])
    if not work_date:
        return None
    try:
        status = AttendanceStatus(str(row[2]).strip().lower())
    except ValueError:
        logger.warning("Skipping row with unknown status %r on %s", row[2], work_date)
        return None

    return AttendanceRecord(
        user_id=str(row[0]).strip(),
        date=work_date,
        status=status,
        work_hours=read_number(row[3]),
        ot_hours=read_number(row[4]),
        total_hours=read_number(row[5]),
        earned=read_number(row[6]),
        deduction=read_number(row[7]),
        details=str(row[8] or ""),
        created_at=parse_timestamp(row[9]),
    )


class RowStoreAttendanceRepository(AttendanceRepository):
    """Ledger partitioned by month into ``Attendance_YYYY_MM`` partitions."""

    def __init__(self, store: RowStore, locks: PartitionLocks):
        self._store = store
        self._locks = locks

    def upsert(self, record: AttendanceRecord) -> UpsertResult:
        partition = partition_for_month(record.month)
        handle = self._store.ensure_partition(partition, ATTENDANCE_HEADER)
        stamp = record.created_at or now_local()

        with self._locks.hold(handle):
            for i, row in enumerate(self._store.scan_rows(handle)):
                if row_matches(row, record.user_id, record.date):
                    self._store.update_row(handle, i, _to_row(record, user_cell=row[0], stamp=stamp))
                    logger.info("Updated %s record for %s at %s row %d", record.date, record.user_id, partition, i)
                    return UpsertResult(action=UpsertAction.UPDATED, partition=partition, row_index=i)

            index = self._store.append_row(handle, _to_row(record, user_cell=record.user_id, stamp=stamp))
            logger.info("Created %s record for %s at %s row %d", record.date, record.user_id, partition, index)
            return UpsertResult(action=UpsertAction.CREATED, partition=partition, row_index=index)

    def delete_for_user_and_date(self, user_id: str, work_date: str) -> Optional[int]:
        handle = self._store.get_partition(partition_for_month(work_date[:7]))
        if not handle:
            return None

        with self._locks.hold(handle):
            matches = [i for i, row in enumerate(self._store.scan_rows(handle)) if row_matches(row, user_id, work_date)]
            # Highest index first so earlier positions stay valid.
            for index in sorted(matches, reverse=True):
                self._store.delete_row(handle, index)

        if len(matches) > 1:
            logger.warning("Deleted %d duplicate rows for %s on %s", len(matches), user_id, work_date)
        return len(matches)

    def list_for_user(self, user_id: str, month: str) -> Sequence[AttendanceRecord]:
        handle = self._store.get_partition(partition_for_month(month))
        if not handle:
            return []

        wanted = user_key(user_id)
        records = []
        for row in self._store.scan_rows(handle):
            if not row or user_key(row[0]) != wanted:
                continue
            record = _to_record(row)
            if record:
                records.append(record)

        records.sort(key=lambda r: r.date, reverse=True)
        return records

    def list_months(self) -> Sequence[str]:
        months = {month_for_partition(name) for name in self._store.list_partitions(ATTENDANCE_PREFIX)}
        return sorted((m for m in months if m), reverse=True)
