"""Example: drive the request surface without Flask.

Uses the in-memory backend, so no database is needed.
"""

import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from payroll_portal.api.routes import build_dispatcher
from payroll_portal.container import build_container


def main():
    container = build_container(storage_backend="memory")
    dispatcher = build_dispatcher(container)

    token = dispatcher.dispatch("POST", "register", {"id": "emp001", "name": "Rahim", "password": "secret1"}).body["token"]
    auth = f"Bearer {token}"

    dispatcher.dispatch("POST", "profile/setup", {"basicSalary": "9000", "houseRent": "4500", "otRate": "86.5"}, auth)
    dispatcher.dispatch("POST", "attendance/present", {"date": "2025-11-03", "otHours": "2"}, auth)
    dispatcher.dispatch("POST", "attendance/absent", {"date": "2025-11-04", "reason": "Fever"}, auth)

    print(dispatcher.dispatch("GET", "attendance/stats", {"month": "2025-11"}, auth).body)
    print(dispatcher.dispatch("GET", "attendance/summary", {"month": "2025-11"}, auth).body)


if __name__ == "__main__":
    main()
