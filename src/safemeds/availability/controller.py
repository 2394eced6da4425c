from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import date_arg, error_response, login_required
from ..container import Container
from ..schedules.controller import schedule_json
from ..shifts.controller import shift_json
from ..time_off.controller import time_off_json
from .model import StaffAvailability


def availability_json(a: StaffAvailability) -> dict:
    s = a.staff
    return {
        "id": s.staff_id,
        "employeeId": s.employee_id,
        "name": s.full_name,
        "position": s.position.value,
        "department": s.department,
        "hasSchedule": a.has_schedule,
        "schedule": schedule_json(a.schedule) if a.schedule else None,
        "hasShift": a.has_shift,
        "shift": shift_json(a.shift) if a.shift else None,
        "hasTimeOff": a.has_time_off,
        "timeOff": time_off_json(a.time_off) if a.time_off else None,
        "isAvailable": a.is_available,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/staff/availability", methods=["GET"], endpoint="staff_availability")
    @login_required
    def staff_availability():
        date_s = request.args.get("date")
        if not date_s:
            return error_response("Date is required", 400)

        report = container.availability_service.for_date(date_arg(date_s, "date"))
        return jsonify([availability_json(a) for a in report])
