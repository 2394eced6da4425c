from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import (
    date_arg,
    datetime_arg,
    error_response,
    int_field,
    iso,
    json_body,
    login_required,
    optional_json_body,
)
from ..common.validators import require_fields
from ..container import Container
from .model import Shift


def shift_json(sh: Shift) -> dict:
    return {
        "id": sh.shift_id,
        "staffId": sh.staff_id,
        "date": iso(sh.shift_date),
        "startTime": iso(sh.start_time),
        "endTime": iso(sh.end_time),
        "status": sh.status.value,
        "notes": sh.notes,
        "actualStartTime": iso(sh.actual_start_time),
        "actualEndTime": iso(sh.actual_end_time),
        "staff": {
            "id": sh.staff_id,
            "employeeId": sh.employee_id,
            "user": {"firstName": sh.first_name, "lastName": sh.last_name},
        },
        "createdAt": iso(sh.created_at),
        "updatedAt": iso(sh.updated_at),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/staff/shifts", methods=["GET"], endpoint="shifts_list")
    @login_required
    def shifts_list():
        start_s = request.args.get("startDate")
        end_s = request.args.get("endDate")
        if not start_s or not end_s:
            return error_response("Start date and end date are required", 400)

        staff_id = request.args.get("staffId")
        if staff_id and not staff_id.isdigit():
            return error_response("Invalid staffId", 400)

        shifts = container.shift_service.list_shifts(
            start=date_arg(start_s, "startDate"),
            end=date_arg(end_s, "endDate"),
            staff_id=int(staff_id) if staff_id else None,
        )
        return jsonify([shift_json(sh) for sh in shifts])

    @app.route("/staff/shifts", methods=["POST"], endpoint="shifts_create")
    @login_required
    def shifts_create():
        body = json_body()
        require_fields(body, "staffId", "date", "startTime", "endTime")

        shift = container.shift_service.create_shift(
            staff_id=int_field(body, "staffId"),
            shift_date=date_arg(body["date"], "date"),
            start_time=datetime_arg(body["startTime"], "startTime"),
            end_time=datetime_arg(body["endTime"], "endTime"),
            notes=body.get("notes"),
        )
        return jsonify(shift_json(shift)), 201

    @app.route("/staff/shifts/<int:shift_id>/status", methods=["PATCH"], endpoint="shifts_status")
    @login_required
    def shifts_status(shift_id: int):
        body = json_body()
        require_fields(body, "status")

        actual_start = body.get("actualStartTime")
        actual_end = body.get("actualEndTime")
        shift = container.shift_service.update_status(
            shift_id,
            str(body["status"]),
            actual_start_time=datetime_arg(actual_start, "actualStartTime") if actual_start else None,
            actual_end_time=datetime_arg(actual_end, "actualEndTime") if actual_end else None,
        )
        return jsonify(shift_json(shift))

    @app.route("/staff/shifts/<int:shift_id>/clock-in", methods=["POST"], endpoint="shifts_clock_in")
    @login_required
    def shifts_clock_in(shift_id: int):
        return jsonify(shift_json(container.shift_service.clock_in(shift_id)))

    @app.route("/staff/shifts/<int:shift_id>/clock-out", methods=["POST"], endpoint="shifts_clock_out")
    @login_required
    def shifts_clock_out(shift_id: int):
        return jsonify(shift_json(container.shift_service.clock_out(shift_id)))

    @app.route("/staff/shifts/generate", methods=["POST"], endpoint="shifts_generate")
    @login_required
    def shifts_generate():
        body = optional_json_body()
        start_s = body.get("startDate")
        end_s = body.get("endDate")
        if not start_s or not end_s:
            return error_response("Start date and end date are required", 400)

        shifts = container.shift_generator.generate(
            date_arg(start_s, "startDate"),
            date_arg(end_s, "endDate"),
        )
        return jsonify(
            {
                "message": "Shifts generated successfully",
                "count": len(shifts),
                "shifts": [shift_json(sh) for sh in shifts],
            }
        )
