from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import (
    current_user_id,
    date_arg,
    error_response,
    int_field,
    iso,
    json_body,
    login_required,
    optional_json_body,
)
from ..common.validators import require_fields
from ..container import Container
from .model import TimeOffRequest


def time_off_json(r: TimeOffRequest) -> dict:
    return {
        "id": r.request_id,
        "staffId": r.staff_id,
        "startDate": iso(r.start_date),
        "endDate": iso(r.end_date),
        "reason": r.reason,
        "type": r.type.value,
        "status": r.status.value,
        "approvedBy": r.approved_by,
        "approvedAt": iso(r.approved_at),
        "notes": r.notes,
        "staff": {
            "id": r.staff_id,
            "employeeId": r.employee_id,
            "user": {"firstName": r.first_name, "lastName": r.last_name},
        },
        "createdAt": iso(r.created_at),
        "updatedAt": iso(r.updated_at),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/staff/time-off", methods=["GET"], endpoint="time_off_list")
    @login_required
    def time_off_list():
        staff_id = request.args.get("staffId")
        if staff_id and not staff_id.isdigit():
            return error_response("Invalid staffId", 400)

        requests = container.time_off_service.list_requests(
            staff_id=int(staff_id) if staff_id else None,
            status=request.args.get("status") or None,
        )
        return jsonify([time_off_json(r) for r in requests])

    @app.route("/staff/time-off", methods=["POST"], endpoint="time_off_create")
    @login_required
    def time_off_create():
        body = json_body()
        require_fields(body, "staffId", "startDate", "endDate", "reason", "type")

        req = container.time_off_service.create_request(
            staff_id=int_field(body, "staffId"),
            start_date=date_arg(body["startDate"], "startDate"),
            end_date=date_arg(body["endDate"], "endDate"),
            reason=str(body["reason"]),
            type=str(body["type"]),
            notes=body.get("notes"),
        )
        return jsonify(time_off_json(req)), 201

    @app.route("/staff/time-off/<int:request_id>/approve", methods=["POST"], endpoint="time_off_approve")
    @login_required
    def time_off_approve(request_id: int):
        body = optional_json_body()
        req = container.time_off_service.approve(
            request_id, approver_id=current_user_id(), notes=body.get("notes")
        )
        return jsonify(time_off_json(req))

    @app.route("/staff/time-off/<int:request_id>/reject", methods=["POST"], endpoint="time_off_reject")
    @login_required
    def time_off_reject(request_id: int):
        body = optional_json_body()
        req = container.time_off_service.reject(
            request_id, approver_id=current_user_id(), notes=body.get("notes")
        )
        return jsonify(time_off_json(req))
