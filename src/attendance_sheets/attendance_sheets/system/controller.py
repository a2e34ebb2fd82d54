from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.enums import Readiness
from ..users.guard import make_admin_required


def register(app: Flask, container: Container) -> None:
    admin_required = make_admin_required(container.tokens)

    def _health_body():
        return {
            "status": container.mirror.readiness.value,
            "failed": container.mirror.failed_sections(),
        }

    @app.before_request
    def wait_for_mirror():
        if not request.path.startswith("/api/") or request.path == "/api/health":
            return None
        if container.mirror.readiness is Readiness.LOADING and not app.config.get("SERVE_WHILE_LOADING"):
            return jsonify({"success": False, "message": "Service is loading"}), 503
        return None

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        status = 503 if container.mirror.readiness is Readiness.LOADING else 200
        return jsonify(_health_body()), status

    @app.route("/api/admin/reload", methods=["POST"], endpoint="reload_mirror")
    @admin_required
    def reload_mirror():
        container.loader.reload()
        return jsonify({"success": True, **_health_body()})
