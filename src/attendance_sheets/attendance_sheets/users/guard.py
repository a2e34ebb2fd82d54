from __future__ import annotations

from functools import wraps

from flask import g, jsonify, request

from ..core.exceptions import InvalidTokenError
from .tokens import TokenService


def bearer_token() -> str:
    header = request.headers.get("Authorization", "")
    if header.startswith("Bearer "):
        return header[len("Bearer "):].strip()
    return ""


def make_admin_required(tokens: TokenService):
    """Build the guard for admin-only routes.

    Fails closed: no token -> 401 Access denied, bad or expired token -> 401
    Invalid token, non-admin -> 403 Admin access required. On success the
    decoded claims are kept on ``g.current_user``.
    """

    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            token = bearer_token()
            if not token:
                return jsonify({"message": "Access denied"}), 401
            try:
                claims = tokens.verify(token)
            except InvalidTokenError:
                return jsonify({"message": "Invalid token"}), 401
            if not claims.is_admin:
                return jsonify({"message": "Admin access required"}), 403
            g.current_user = claims
            return view(*args, **kwargs)

        return wrapper

    return admin_required
