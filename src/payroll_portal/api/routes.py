from __future__ import annotations

from ..attendance.controller import register as register_attendance
from ..container import Container
from ..payroll.controller import register as register_payroll
from ..profiles.controller import register as register_profiles
from ..users.controller import register as register_users
from .dispatcher import Dispatcher, Router


def build_dispatcher(container: Container) -> Dispatcher:
    router = Router()

    register_users(router, container)
    register_profiles(router, container)
    register_attendance(router, container)
    register_payroll(router, container)

    return Dispatcher(router, container.auth_service, rate_limiter=container.rate_limiter)
