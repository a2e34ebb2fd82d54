from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import error_response, write_response
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from ..users.guard import make_admin_required


def register(app: Flask, container: Container) -> None:
    admin_required = make_admin_required(container.tokens)

    @app.route("/api/leave/<employee_id>", methods=["GET"], endpoint="employee_leave")
    def employee_leave(employee_id: str):
        return jsonify([leave.to_dict() for leave in container.leave_service.for_employee(employee_id)])

    @app.route("/api/leave", methods=["POST"], endpoint="apply_leave")
    def apply_leave():
        body = request.get_json(silent=True) or {}
        try:
            leave, result = container.leave_service.apply(
                employee_id=body.get("empId"),
                leave_type=body.get("type"),
                from_date=body.get("fromDate"),
                to_date=body.get("toDate"),
                reason=body.get("reason"),
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        return write_response(result, "Failed to save leave", leave=leave.to_dict())

    @app.route("/api/leave/<employee_id>/<leave_id>", methods=["PUT"], endpoint="update_leave_status")
    @admin_required
    def update_leave_status(employee_id: str, leave_id: str):
        body = request.get_json(silent=True) or {}
        try:
            result = container.leave_service.update_status(
                employee_id=employee_id,
                leave_id=leave_id,
                status=body.get("status"),
            )
        except NotFoundError as e:
            return error_response(str(e), 404)
        except ValidationError as e:
            return error_response(str(e), 400)
        return write_response(result, "Failed to update leave status")

    @app.route("/api/admin/leave", methods=["GET"], endpoint="all_leave")
    @admin_required
    def all_leave():
        everything = container.leave_service.all()
        return jsonify({emp: [leave.to_dict() for leave in items] for emp, items in everything.items()})
