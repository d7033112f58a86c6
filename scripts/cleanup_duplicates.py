"""Remove duplicate (user, date) rows from every attendance partition.

The first row for a key is kept; later copies are deleted.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from dotenv import load_dotenv

from payroll_portal.config import get_settings_module
from payroll_portal.container import build_container


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        storage_backend=getattr(settings, "STORAGE_BACKEND", "mysql"),
    )

    removed = container.maintenance.remove_duplicates()
    if not removed:
        print("OK: no duplicates found")
        return

    for partition, count in sorted(removed.items()):
        print(f"{partition}: removed {count} duplicate(s)")
    print(f"OK: removed {sum(removed.values())} duplicate(s) in total")


if __name__ == "__main__":
    main()
