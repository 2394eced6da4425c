from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import date_arg, int_field, iso, json_body, login_required
from ..common.validators import require_fields
from ..container import Container
from .model import StaffMember

# camelCase request keys -> service keyword names
_UPDATE_KEYS = {
    "position": "position",
    "department": "department",
    "salary": "salary",
    "isActive": "is_active",
    "emergencyContact": "emergency_contact",
    "emergencyPhone": "emergency_phone",
    "certifications": "certifications",
    "specializations": "specializations",
    "notes": "notes",
}


def staff_json(s: StaffMember) -> dict:
    return {
        "id": s.staff_id,
        "userId": s.user_id,
        "employeeId": s.employee_id,
        "position": s.position.value,
        "department": s.department,
        "hireDate": iso(s.hire_date),
        "salary": float(s.salary) if s.salary is not None else None,
        "isActive": s.is_active,
        "emergencyContact": s.emergency_contact,
        "emergencyPhone": s.emergency_phone,
        "certifications": list(s.certifications),
        "specializations": list(s.specializations),
        "notes": s.notes,
        "user": {
            "id": s.user_id,
            "firstName": s.first_name,
            "lastName": s.last_name,
            "email": s.email,
            "phone": s.phone,
        },
        "createdAt": iso(s.created_at),
        "updatedAt": iso(s.updated_at),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/staff", methods=["GET"], endpoint="staff_list")
    @login_required
    def staff_list():
        include_inactive = request.args.get("includeInactive") == "true"
        staff = container.staff_service.list_staff(include_inactive=include_inactive)
        return jsonify([staff_json(s) for s in staff])

    @app.route("/staff", methods=["POST"], endpoint="staff_create")
    @login_required
    def staff_create():
        body = json_body()
        require_fields(body, "userId", "employeeId", "position", "department", "hireDate")

        staff = container.staff_service.create_staff(
            user_id=int_field(body, "userId"),
            employee_id=str(body["employeeId"]),
            position=str(body["position"]),
            department=str(body["department"]),
            hire_date=date_arg(body["hireDate"], "hireDate"),
            salary=body.get("salary"),
            emergency_contact=body.get("emergencyContact"),
            emergency_phone=body.get("emergencyPhone"),
            certifications=body.get("certifications"),
            specializations=body.get("specializations"),
            notes=body.get("notes"),
        )
        return jsonify(staff_json(staff)), 201

    @app.route("/staff/<int:staff_id>", methods=["GET"], endpoint="staff_detail")
    @login_required
    def staff_detail(staff_id: int):
        return jsonify(staff_json(container.staff_service.get_staff(staff_id)))

    @app.route("/staff/<int:staff_id>", methods=["PUT"], endpoint="staff_update")
    @login_required
    def staff_update(staff_id: int):
        body = json_body()
        changes = {name: body[key] for key, name in _UPDATE_KEYS.items() if key in body}
        return jsonify(staff_json(container.staff_service.update_staff(staff_id, changes)))

    @app.route("/staff/<int:staff_id>", methods=["DELETE"], endpoint="staff_deactivate")
    @login_required
    def staff_deactivate(staff_id: int):
        container.staff_service.deactivate_staff(staff_id)
        return jsonify({"message": "Staff member deactivated successfully"})
