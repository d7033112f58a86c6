import pytest

from payroll_portal.storage.locks import PartitionLocks
from payroll_portal.storage.mysql_row_store import MySQLRowStore


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self.rowcount = 0
        self._result = []

    def execute(self, sql, params=()):
        sql = " ".join(sql.split())
        self.conn.statements.append((sql, params))
        if sql.startswith("SELECT row_id"):
            self._result = [{"row_id": 40 + params[1]}]
        elif sql.startswith("SELECT cells"):
            self._result = [{"cells": '["emp001", "2025-11-01"]'}, {"cells": '["emp002", "2025-11-01"]'}]
        else:
            self._result = []

    def fetchone(self):
        return self._result[0] if self._result else None

    def fetchall(self):
        return list(self._result)

    def close(self):
        pass


class FakeConnection:
    def __init__(self):
        self.statements = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    def cursor(self, dictionary=False):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed = True


class FakeConnectionFactory:
    def __init__(self):
        self.connections = []

    def connect(self):
        conn = FakeConnection()
        self.connections.append(conn)
        return conn


def test_scan_and_write_share_one_locked_transaction():
    factory = FakeConnectionFactory()
    store = MySQLRowStore(factory)
    locks = PartitionLocks(store)

    with locks.hold("Attendance_2025_11"):
        rows = store.scan_rows("Attendance_2025_11")
        store.update_row("Attendance_2025_11", 1, ["emp002", "2025-11-01", "absent"])

    assert rows == [["emp001", "2025-11-01"], ["emp002", "2025-11-01"]]
    [conn] = factory.connections
    statements = [sql for sql, _ in conn.statements]
    assert statements[0] == "SELECT name FROM partitions WHERE name=%s FOR UPDATE"
    assert statements[-1] == "UPDATE partition_rows SET cells=%s WHERE row_id=%s"
    assert conn.statements[-1][1][1] == 41
    assert (conn.commits, conn.closed) == (1, True)


def test_failure_inside_scope_rolls_back():
    factory = FakeConnectionFactory()
    store = MySQLRowStore(factory)

    with pytest.raises(RuntimeError):
        with PartitionLocks(store).hold("Attendance_2025_11"):
            store.delete_row("Attendance_2025_11", 0)
            raise RuntimeError("boom")

    [conn] = factory.connections
    assert (conn.commits, conn.rollbacks) == (0, 1)


def test_calls_outside_scope_use_their_own_connection():
    factory = FakeConnectionFactory()
    store = MySQLRowStore(factory)

    store.scan_rows("Attendance_2025_11")
    store.delete_row("Attendance_2025_11", 0)

    assert len(factory.connections) == 2
    assert all(c.commits == 1 for c in factory.connections)
