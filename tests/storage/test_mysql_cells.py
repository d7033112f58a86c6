from datetime import datetime

from payroll_portal.core.constants import APP_TZ
from payroll_portal.database.mysql_base import decode_cells, encode_cells
from payroll_portal.storage.mysql_row_store import _like_prefix


def test_cells_survive_json_column():
    stamp = datetime(2025, 11, 23, 10, 30, tzinfo=APP_TZ)
    encoded = encode_cells(["emp001", "2025-11-23", 8.0, "জ্বর", stamp])

    assert "জ্বর" in encoded
    assert decode_cells(encoded) == ["emp001", "2025-11-23", 8.0, "জ্বর", "2025-11-23T10:30:00+06:00"]
    assert decode_cells(encoded.encode("utf-8"))[0] == "emp001"
    assert decode_cells(None) == []


def test_like_prefix_escapes_wildcards():
    assert _like_prefix("Attendance_") == "Attendance\\_%"
    assert _like_prefix("") == "%"
