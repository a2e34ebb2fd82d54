from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.parsing import as_bool
from ..common.responses import error_response, write_response
from ..container import Container
from ..core.exceptions import ValidationError
from ..users.guard import make_admin_required


def register(app: Flask, container: Container) -> None:
    admin_required = make_admin_required(container.tokens)

    @app.route("/api/attendance/<employee_id>", methods=["GET"], endpoint="employee_attendance")
    def employee_attendance(employee_id: str):
        days = container.attendance_service.for_employee(employee_id)
        return jsonify({day: record.to_dict() for day, record in days.items()})

    @app.route("/api/attendance", methods=["POST"], endpoint="record_attendance")
    def record_attendance():
        body = request.get_json(silent=True) or {}
        # Older clients send both points inside one "location" object.
        location = body.get("location") if isinstance(body.get("location"), dict) else {}
        try:
            result = container.attendance_service.record(
                employee_id=body.get("empId"),
                date=body.get("date"),
                check_in=body.get("checkIn"),
                check_out=body.get("checkOut"),
                check_in_location=body.get("checkInLocation", location.get("checkIn")),
                check_out_location=body.get("checkOutLocation", location.get("checkOut")),
                is_late=as_bool(body.get("isLate")),
                is_half_day=as_bool(body.get("isHalfDay")),
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        return write_response(result, "Failed to save attendance")

    @app.route("/api/admin/attendance", methods=["GET"], endpoint="all_attendance")
    @admin_required
    def all_attendance():
        everything = container.attendance_service.all()
        return jsonify(
            {emp: {day: record.to_dict() for day, record in days.items()} for emp, days in everything.items()}
        )
