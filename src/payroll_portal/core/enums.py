from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status of one attendance day as stored in the ledger."""

    PRESENT = "present"
    ABSENT = "absent"
    OFFDAY = "offday"
    LEAVE = "leave"


class UpsertAction(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
