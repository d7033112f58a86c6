from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .api.rate_limit import RateLimiter
from .attendance.factory import AttendanceStrategyFactory
from .attendance.maintenance import LedgerMaintenance
from .attendance.row_attendance_repository import RowStoreAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_RATE_LIMIT_PER_MINUTE, DEFAULT_SESSION_HOURS
from .database.connection import DBConfig, DatabaseConnection
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.service import MonthlyStatsService
from .profiles.row_profile_repository import RowStoreProfileRepository
from .profiles.service import ProfileService
from .storage.locks import PartitionLocks
from .storage.memory_row_store import MemoryRowStore
from .storage.mysql_row_store import MySQLRowStore
from .storage.row_store import RowStore
from .users.row_user_repository import RowStoreSessionRepository, RowStoreUserRepository
from .users.service import AuthService
from .users.sessions import SessionManager


@dataclass(frozen=True)
class Container:
    store: RowStore
    locks: PartitionLocks

    users_repo: RowStoreUserRepository
    sessions_repo: RowStoreSessionRepository
    profiles_repo: RowStoreProfileRepository
    attendance_repo: RowStoreAttendanceRepository

    auth_service: AuthService
    profile_service: ProfileService
    attendance_service: AttendanceService
    stats_service: MonthlyStatsService
    maintenance: LedgerMaintenance
    rate_limiter: RateLimiter


def build_store(*, storage_backend: str = "mysql", db_config: Optional[dict] = None) -> RowStore:
    if storage_backend == "memory":
        return MemoryRowStore()
    if storage_backend == "mysql":
        if db_config is None:
            raise ValueError("db_config is required for the mysql storage backend")
        return MySQLRowStore(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))
    raise ValueError(f"Unknown storage backend: {storage_backend}")


def build_container(
    *,
    store: Optional[RowStore] = None,
    db_config: Optional[dict] = None,
    storage_backend: str = "mysql",
    session_ttl_hours: int = DEFAULT_SESSION_HOURS,
    rate_limit_per_minute: int = DEFAULT_RATE_LIMIT_PER_MINUTE,
) -> Container:
    if store is None:
        store = build_store(storage_backend=storage_backend, db_config=db_config)
    locks = PartitionLocks(store)

    users_repo = RowStoreUserRepository(store, locks)
    sessions_repo = RowStoreSessionRepository(store, locks)
    profiles_repo = RowStoreProfileRepository(store, locks)
    attendance_repo = RowStoreAttendanceRepository(store, locks)

    calculator = StandardPayrollCalculator()
    profile_service = ProfileService(profiles_repo)

    auth_service = AuthService(users_repo, SessionManager(sessions_repo, ttl_hours=session_ttl_hours))
    attendance_service = AttendanceService(
        attendance_repo,
        profile_service,
        strategy_factory=AttendanceStrategyFactory(),
        calculator=calculator,
    )
    stats_service = MonthlyStatsService(attendance_repo, profiles_repo, calculator=calculator)

    return Container(
        store=store,
        locks=locks,
        users_repo=users_repo,
        sessions_repo=sessions_repo,
        profiles_repo=profiles_repo,
        attendance_repo=attendance_repo,
        auth_service=auth_service,
        profile_service=profile_service,
        attendance_service=attendance_service,
        stats_service=stats_service,
        maintenance=LedgerMaintenance(store, locks),
        rate_limiter=RateLimiter(rate_limit_per_minute),
    )
