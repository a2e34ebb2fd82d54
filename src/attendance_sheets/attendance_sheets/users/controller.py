from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.parsing import as_bool
from ..common.responses import error_response, write_response
from ..container import Container
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .guard import make_admin_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    admin_required = make_admin_required(container.tokens)

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        body = request.get_json(silent=True) or {}
        try:
            result = container.auth_service.login(str(body.get("id") or ""), body.get("password") or "")
        except AuthenticationError as e:
            logger.info("Failed login for %r", body.get("id"))
            return error_response(str(e), 401)
        return jsonify({"success": True, "name": result.name, "token": result.token})

    @app.route("/api/admin/employee", methods=["POST"], endpoint="save_employee")
    @admin_required
    def save_employee():
        body = request.get_json(silent=True) or {}
        try:
            result = container.employee_service.save(
                employee_id=body.get("id"),
                name=body.get("name"),
                password=body.get("password"),
                is_admin=as_bool(body.get("isAdmin")),
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        return write_response(result, "Failed to save employee")

    @app.route("/api/admin/employee/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @admin_required
    def delete_employee(employee_id: str):
        try:
            container.employee_service.delete(employee_id)
        except NotFoundError as e:
            return error_response(str(e), 404)
        return jsonify({"success": True})
