from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import UpsertAction
from .model import SalaryProfile


class ProfileRepository(Protocol):
    def get_by_user(self, user_id: str) -> Optional[SalaryProfile]:
        raise NotImplementedError

    def upsert(self, profile: SalaryProfile) -> UpsertAction:
        """Replace the user's row in place if present, else append one."""
        raise NotImplementedError
