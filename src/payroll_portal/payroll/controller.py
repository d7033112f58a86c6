from __future__ import annotations

from ..api.dispatcher import ApiRequest, Router
from ..container import Container
from .salary_components import components_from_gross


def register(router: Router, container: Container) -> None:
    stats_service = container.stats_service

    @router.route("GET", "attendance/stats")
    def stats(req: ApiRequest):
        return {"stats": stats_service.stats(req.user_id, month=req.params.get("month")).to_dict()}

    @router.route("GET", "attendance/summary")
    def summary(req: ApiRequest):
        return {"summary": stats_service.salary_summary(req.user_id, month=req.params.get("month")).to_dict()}

    @router.route("GET", "salary/components")
    def salary_components(req: ApiRequest):
        return {"components": components_from_gross(req.params.get("gross")).to_dict()}
