"""Rewrite stored attendance dates to the canonical YYYY-MM-DD form."""

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

    fixed = container.maintenance.normalize_stored_dates()
    print(f"OK: normalized {fixed} date cell(s)")


if __name__ == "__main__":
    main()
