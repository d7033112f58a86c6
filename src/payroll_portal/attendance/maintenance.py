from __future__ import annotations

import logging
from typing import Dict

from ..common.datetime_utils import try_normalize_date
from ..core.constants import ATTENDANCE_PREFIX
from ..storage.locks import PartitionLocks
from ..storage.row_store import RowStore
from .row_attendance_repository import user_key

logger = logging.getLogger(__name__)


class LedgerMaintenance:
    """Repair jobs for attendance partitions.

    Concurrent appends can leave two rows for one (user, date); these jobs
    bring the ledger back to one row per key and canonical date cells.
    """

    def __init__(self, store: RowStore, locks: PartitionLocks):
        self._store = store
        self._locks = locks

    def remove_duplicates(self) -> Dict[str, int]:
        """Keep the first row per (user, date) in every partition.

        Returns removed-row counts keyed by partition name (only partitions
        that had duplicates).
        """

        removed: Dict[str, int] = {}
        for name in sorted(self._store.list_partitions(ATTENDANCE_PREFIX)):
            with self._locks.hold(name):
                seen: set[tuple[str, str]] = set()
                duplicates: list[int] = []
                for i, row in enumerate(self._store.scan_rows(name)):
                    work_date = try_normalize_date(row[1]) if len(row) > 1 else None
                    if not work_date:
                        continue
                    key = (user_key(row[0]), work_date)
                    if key in seen:
                        duplicates.append(i)
                    else:
                        seen.add(key)

                for index in sorted(duplicates, reverse=True):
                    self._store.delete_row(name, index)

            if duplicates:
                removed[name] = len(duplicates)
                logger.info("Removed %d duplicate rows from %s", len(duplicates), name)

        logger.info("Duplicate cleanup complete: %d rows removed", sum(removed.values()))
        return removed

    def normalize_stored_dates(self) -> int:
        """Rewrite date cells that are not already plain ``YYYY-MM-DD``."""

        fixed = 0
        for name in sorted(self._store.list_partitions(ATTENDANCE_PREFIX)):
            with self._locks.hold(name):
                for i, row in enumerate(self._store.scan_rows(name)):
                    if len(row) < 2:
                        continue
                    normalized = try_normalize_date(row[1])
                    if normalized and row[1] != normalized:
                        updated = list(row)
                        updated[1] = normalized
                        self._store.update_row(name, i, updated)
                        fixed += 1

        logger.info("Date normalization complete: %d cells rewritten", fixed)
        return fixed
