from __future__ import annotations

import copy
import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Sequence, Set

from .row_store import Row, RowStore

logger = logging.getLogger(__name__)


class MemoryRowStore(RowStore):
    """Process-local row store used by the development and testing settings."""

    def __init__(self):
        self._headers: Dict[str, List[str]] = {}
        self._rows: Dict[str, List[Row]] = {}
        self._lock = threading.RLock()

    def ensure_partition(self, name: str, header: Sequence[str]) -> str:
        with self._lock:
            if name not in self._rows:
                self._headers[name] = list(header)
                self._rows[name] = []
                logger.info("Created partition %s", name)
            return name

    def get_partition(self, name: str) -> Optional[str]:
        with self._lock:
            return name if name in self._rows else None

    def header(self, handle: str) -> List[str]:
        with self._lock:
            return list(self._headers[self._require(handle)])

    def scan_rows(self, handle: str) -> Sequence[Row]:
        with self._lock:
            return copy.deepcopy(self._rows[self._require(handle)])

    def append_row(self, handle: str, row: Sequence[Any]) -> int:
        with self._lock:
            rows = self._rows[self._require(handle)]
            rows.append(list(row))
            return len(rows) - 1

    def update_row(self, handle: str, index: int, row: Sequence[Any]) -> None:
        with self._lock:
            rows = self._rows[self._require(handle)]
            self._check_index(rows, index)
            rows[index] = list(row)

    def delete_row(self, handle: str, index: int) -> None:
        with self._lock:
            rows = self._rows[self._require(handle)]
            self._check_index(rows, index)
            del rows[index]

    def list_partitions(self, prefix: str = "") -> Set[str]:
        with self._lock:
            return {name for name in self._rows if name.startswith(prefix)}

    @contextmanager
    def exclusive(self, handle: str) -> Iterator[None]:
        with self._lock:
            yield

    def _require(self, handle: str) -> str:
        if handle not in self._rows:
            raise KeyError(f"Unknown partition: {handle!r}")
        return handle

    @staticmethod
    def _check_index(rows: List[Row], index: int) -> None:
        if index < 0 or index >= len(rows):
            raise IndexError(f"Row index out of range: {index}")
