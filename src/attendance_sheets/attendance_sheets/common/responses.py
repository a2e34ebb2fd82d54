from __future__ import annotations

from flask import jsonify

from ..mirror.write_through import WriteResult


def write_response(result: WriteResult, failure_message: str, **extra):
    """Map a write result to (json, status).

    A partial write is still a failure for the caller, but ``mirrorApplied``
    tells them reads already show the change.
    """
    if result.ok:
        return jsonify({"success": True, **extra}), 200
    body = {
        "success": False,
        "message": failure_message,
        "outcome": result.outcome.value,
        "mirrorApplied": result.mirror_applied,
        **extra,
    }
    return jsonify(body), 500


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status
