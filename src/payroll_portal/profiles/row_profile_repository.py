from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import iso_timestamp, now_local, parse_timestamp
from ..common.validators import read_number
from ..core.constants import DEFAULT_FOOD, DEFAULT_MEDICAL, DEFAULT_TRANSPORT, PROFILES_PARTITION
from ..core.enums import UpsertAction
from ..storage.locks import PartitionLocks
from ..storage.row_store import Row, RowStore
from .model import SalaryProfile
from .repository import ProfileRepository

logger = logging.getLogger(__name__)

PROFILES_HEADER = [
    "ID", "Name", "Company", "CardNo", "Section", "Designation", "Grade",
    "BasicSalary", "HouseRent", "Medical", "Transport", "Food", "OTRate",
    "PresentBonus", "NightAllowance", "TiffinBill", "ProfileImage", "Updated",
]


def _text(row: Row, index: int) -> str:
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index]).strip()


def _number(row: Row, index: int, default: float = 0.0) -> float:
    return read_number(row[index] if index < len(row) else None, default=default)


def _to_profile(row: Row) -> SalaryProfile:
    return SalaryProfile(
        user_id=_text(row, 0),
        name=_text(row, 1),
        company=_text(row, 2),
        card_no=_text(row, 3),
        section=_text(row, 4),
        designation=_text(row, 5),
        grade=_text(row, 6),
        basic_salary=_number(row, 7),
        house_rent=_number(row, 8),
        medical=_number(row, 9, DEFAULT_MEDICAL),
        transport=_number(row, 10, DEFAULT_TRANSPORT),
        food=_number(row, 11, DEFAULT_FOOD),
        ot_rate=_number(row, 12),
        present_bonus=_number(row, 13),
        night_allowance=_number(row, 14),
        tiffin_bill=_number(row, 15),
        profile_image=_text(row, 16),
        updated_at=parse_timestamp(row[17] if len(row) > 17 else None),
    )


def _to_row(p: SalaryProfile) -> Row:
    return [
        p.user_id, p.name, p.company, p.card_no, p.section, p.designation, p.grade,
        p.basic_salary, p.house_rent, p.medical, p.transport, p.food, p.ot_rate,
        p.present_bonus, p.night_allowance, p.tiffin_bill, p.profile_image,
        iso_timestamp(p.updated_at or now_local()),
    ]


class RowStoreProfileRepository(ProfileRepository):
    def __init__(self, store: RowStore, locks: PartitionLocks):
        self._store = store
        self._locks = locks

    @staticmethod
    def _index_of(rows, user_id: str) -> int:
        wanted = str(user_id).strip()
        for i, row in enumerate(rows):
            if _text(row, 0) == wanted:
                return i
        return -1

    def get_by_user(self, user_id: str) -> Optional[SalaryProfile]:
        handle = self._store.get_partition(PROFILES_PARTITION)
        if not handle:
            return None
        rows = self._store.scan_rows(handle)
        index = self._index_of(rows, user_id)
        return _to_profile(rows[index]) if index >= 0 else None

    def upsert(self, profile: SalaryProfile) -> UpsertAction:
        handle = self._store.ensure_partition(PROFILES_PARTITION, PROFILES_HEADER)
        with self._locks.hold(handle):
            index = self._index_of(self._store.scan_rows(handle), profile.user_id)
            if index >= 0:
                self._store.update_row(handle, index, _to_row(profile))
                logger.info("Profile updated for %s", profile.user_id)
                return UpsertAction.UPDATED

            self._store.append_row(handle, _to_row(profile))
            logger.info("New profile created for %s", profile.user_id)
            return UpsertAction.CREATED
