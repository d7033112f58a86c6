from payroll_portal.attendance.row_attendance_repository import ATTENDANCE_HEADER


def _seed_rows(store, partition, rows):
    handle = store.ensure_partition(partition, ATTENDANCE_HEADER)
    for row in rows:
        store.append_row(handle, row)
    return handle


def test_remove_duplicates_keeps_first_row_per_key(container, store):
    handle = _seed_rows(
        store,
        "Attendance_2025_11",
        [
            ["emp001", "2025-11-01", "present", 8, 1, 9, 600, 0, "Regular Work", ""],
            ["emp001", "2025-11-02", "absent", 0, 0, 0, 0, 300, "", ""],
            ["EMP001", "2025-11-01T00:00:00", "present", 8, 2, 10, 700, 0, "Regular Work", ""],
            ["emp002", "2025-11-01", "present", 8, 0, 8, 500, 0, "Regular Work", ""],
            ["emp001", "2025-11-01", "offday", 0, 0, 0, 0, 0, "offday", ""],
        ],
    )
    _seed_rows(store, "Attendance_2025_10", [["emp001", "2025-10-01", "present", 8, 0, 8, 500, 0, "", ""]])

    removed = container.maintenance.remove_duplicates()

    assert removed == {"Attendance_2025_11": 2}
    rows = store.scan_rows(handle)
    assert [(r[0], r[1], r[4]) for r in rows] == [
        ("emp001", "2025-11-01", 1),
        ("emp001", "2025-11-02", 0),
        ("emp002", "2025-11-01", 0),
    ]


def test_remove_duplicates_on_clean_ledger_is_a_no_op(container, store):
    _seed_rows(store, "Attendance_2025_11", [["emp001", "2025-11-01", "present", 8, 0, 8, 500, 0, "", ""]])

    assert container.maintenance.remove_duplicates() == {}


def test_normalize_stored_dates_rewrites_only_non_canonical_cells(container, store):
    handle = _seed_rows(
        store,
        "Attendance_2025_11",
        [
            ["emp001", "2025-11-01T00:00:00.000Z", "present", 8, 0, 8, 500, 0, "", ""],
            ["emp001", "2025-11-02", "present", 8, 0, 8, 500, 0, "", ""],
            ["emp001", "2025-11-03 09:00:00", "absent", 0, 0, 0, 0, 300, "", ""],
            ["emp001", "garbage", "absent", 0, 0, 0, 0, 300, "", ""],
        ],
    )

    assert container.maintenance.normalize_stored_dates() == 2
    assert [r[1] for r in store.scan_rows(handle)] == ["2025-11-01", "2025-11-02", "2025-11-03", "garbage"]
