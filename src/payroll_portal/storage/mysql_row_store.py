from __future__ import annotations

import json
import logging
import threading
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Sequence, Set

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, decode_cells, encode_cells, fetchall, fetchone
from .row_store import Row, RowStore

logger = logging.getLogger(__name__)


class MySQLRowStore(RowStore):
    """Row store on two MySQL tables (see ``database/schema.sql``).

    A row index is the position of the row within its partition when ordered
    by ``row_id``, which keeps append order and matches :meth:`scan_rows`.

    Outside :meth:`exclusive` every call runs in its own short transaction.
    Inside it, calls from the same thread share one transaction that holds a
    ``FOR UPDATE`` lock on the partition row, so positions read by a scan stay
    valid for the writes that follow, even across worker processes.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._local = threading.local()

    @contextmanager
    def exclusive(self, handle: str) -> Iterator[None]:
        active = getattr(self._local, "conn", None)
        if active is not None:
            with self._cursor() as cur:
                self._lock_partition(cur, handle)
            yield
            return

        with db_cursor(self._conn_factory) as (conn, cur):
            self._lock_partition(cur, handle)
            self._local.conn = conn
            try:
                yield
            finally:
                self._local.conn = None

    @staticmethod
    def _lock_partition(cur, handle: str) -> None:
        cur.execute("SELECT name FROM partitions WHERE name=%s FOR UPDATE", (handle,))
        fetchall(cur)

    @contextmanager
    def _cursor(self):
        conn = getattr(self._local, "conn", None)
        if conn is None:
            with db_cursor(self._conn_factory) as (_, cur):
                yield cur
            return

        # Commit/rollback belong to the enclosing exclusive() scope.
        cur = conn.cursor(dictionary=True)
        try:
            yield cur
        finally:
            cur.close()

    def ensure_partition(self, name: str, header: Sequence[str]) -> str:
        with self._cursor() as cur:
            cur.execute(
                "INSERT IGNORE INTO partitions(name, header) VALUES(%s,%s)",
                (name, json.dumps(list(header))),
            )
            if cur.rowcount > 0:
                logger.info("Created partition %s", name)
        return name

    def get_partition(self, name: str) -> Optional[str]:
        with self._cursor() as cur:
            cur.execute("SELECT name FROM partitions WHERE name=%s", (name,))
            row = fetchone(cur)
            return row["name"] if row else None

    def scan_rows(self, handle: str) -> Sequence[Row]:
        with self._cursor() as cur:
            cur.execute(
                """
                SELECT cells
                FROM partition_rows
                WHERE partition_name=%s
                ORDER BY row_id
                """,
                (handle,),
            )
            return [decode_cells(r["cells"]) for r in fetchall(cur)]

    def append_row(self, handle: str, row: Sequence[Any]) -> int:
        with self._cursor() as cur:
            cur.execute(
                "INSERT INTO partition_rows(partition_name, cells) VALUES(%s,%s)",
                (handle, encode_cells(row)),
            )
            cur.execute("SELECT COUNT(*) AS n FROM partition_rows WHERE partition_name=%s", (handle,))
            count = fetchone(cur)
            return int(count["n"]) - 1 if count else 0

    def update_row(self, handle: str, index: int, row: Sequence[Any]) -> None:
        with self._cursor() as cur:
            row_id = self._row_id_at(cur, handle, index)
            cur.execute(
                "UPDATE partition_rows SET cells=%s WHERE row_id=%s",
                (encode_cells(row), row_id),
            )

    def delete_row(self, handle: str, index: int) -> None:
        with self._cursor() as cur:
            row_id = self._row_id_at(cur, handle, index)
            cur.execute("DELETE FROM partition_rows WHERE row_id=%s", (row_id,))

    def list_partitions(self, prefix: str = "") -> Set[str]:
        with self._cursor() as cur:
            cur.execute("SELECT name FROM partitions WHERE name LIKE %s", (_like_prefix(prefix),))
            return {r["name"] for r in fetchall(cur)}

    @staticmethod
    def _row_id_at(cur, handle: str, index: int) -> int:
        if index < 0:
            raise IndexError(f"Row index out of range: {index}")
        cur.execute(
            """
            SELECT row_id
            FROM partition_rows
            WHERE partition_name=%s
            ORDER BY row_id
            LIMIT 1 OFFSET %s
            """,
            (handle, int(index)),
        )
        r = fetchone(cur)
        if not r:
            raise IndexError(f"Row index out of range: {index}")
        return int(r["row_id"])


def _like_prefix(prefix: str) -> str:
    escaped = prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return escaped + "%"
