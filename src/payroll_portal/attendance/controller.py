from __future__ import annotations

from ..api.dispatcher import ApiRequest, Router
from ..container import Container
from ..core import messages


def register(router: Router, container: Container) -> None:
    attendance = container.attendance_service

    @router.route("POST", "attendance/present")
    def present(req: ApiRequest):
        p = req.params
        record = attendance.record_present(
            req.user_id,
            date=p.get("date"),
            ot_hours=p.get("otHours"),
            is_friday=p.get("isFriday"),
            work_hours=p.get("workHours"),
        )
        return {"message": messages.PRESENT_SAVED, "record": record.to_dict()}

    @router.route("POST", "attendance/absent")
    def absent(req: ApiRequest):
        record = attendance.record_absent(req.user_id, date=req.params.get("date"), reason=req.params.get("reason"))
        return {"message": messages.ABSENT_SAVED, "record": record.to_dict()}

    @router.route("POST", "attendance/offday")
    def offday(req: ApiRequest):
        record = attendance.record_offday(req.user_id, date=req.params.get("date"), day_type=req.params.get("type"))
        return {"message": messages.HOLIDAY_SAVED, "record": record.to_dict()}

    @router.route("POST", "attendance/leave")
    def leave(req: ApiRequest):
        record = attendance.record_leave(req.user_id, date=req.params.get("date"), day_type=req.params.get("type"))
        return {"message": messages.HOLIDAY_SAVED, "record": record.to_dict()}

    @router.route("POST", "attendance/delete")
    def delete(req: ApiRequest):
        deleted = attendance.delete(req.user_id, date=req.params.get("date"))
        message = messages.RECORD_DELETED if deleted == 1 else f"{messages.RECORD_DELETED} ({deleted}টি)"
        return {"message": message, "deleted": deleted}

    @router.route("GET", "attendance/history")
    def history(req: ApiRequest):
        records = attendance.history(req.user_id, month=req.params.get("month"))
        return {"records": [r.to_dict() for r in records]}

    @router.route("GET", "attendance/months")
    def months(req: ApiRequest):
        return {"months": attendance.available_months()}
