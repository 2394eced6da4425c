from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response, int_field, iso, json_body, login_required
from ..common.validators import require_fields
from ..container import Container
from .model import StaffSchedule

_UPDATE_KEYS = {
    "startTime": "start_time",
    "endTime": "end_time",
    "breakStart": "break_start",
    "breakEnd": "break_end",
    "isActive": "is_active",
}


def schedule_json(sc: StaffSchedule) -> dict:
    return {
        "id": sc.schedule_id,
        "staffId": sc.staff_id,
        "dayOfWeek": sc.day_of_week,
        "startTime": sc.start_time,
        "endTime": sc.end_time,
        "breakStart": sc.break_start,
        "breakEnd": sc.break_end,
        "isActive": sc.is_active,
        "createdAt": iso(sc.created_at),
        "updatedAt": iso(sc.updated_at),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/staff/schedules", methods=["GET"], endpoint="schedules_list")
    @login_required
    def schedules_list():
        staff_id = request.args.get("staffId")
        if not staff_id:
            return error_response("Staff ID is required", 400)
        if not staff_id.isdigit():
            return error_response("Invalid staffId", 400)

        schedules = container.schedule_service.list_for_staff(int(staff_id))
        return jsonify([schedule_json(sc) for sc in schedules])

    @app.route("/staff/schedules", methods=["POST"], endpoint="schedules_create")
    @login_required
    def schedules_create():
        body = json_body()
        require_fields(body, "staffId", "dayOfWeek", "startTime", "endTime")

        schedule = container.schedule_service.create_schedule(
            staff_id=int_field(body, "staffId"),
            day_of_week=body["dayOfWeek"],
            start_time=body["startTime"],
            end_time=body["endTime"],
            break_start=body.get("breakStart"),
            break_end=body.get("breakEnd"),
        )
        return jsonify(schedule_json(schedule)), 201

    @app.route("/staff/schedules/<int:schedule_id>", methods=["PUT"], endpoint="schedules_update")
    @login_required
    def schedules_update(schedule_id: int):
        body = json_body()
        changes = {name: body[key] for key, name in _UPDATE_KEYS.items() if key in body}
        return jsonify(schedule_json(container.schedule_service.update_schedule(schedule_id, changes)))
