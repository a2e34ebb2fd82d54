from __future__ import annotations

from dataclasses import dataclass

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from ..core.constants import DEFAULT_TOKEN_TTL_SECONDS, TOKEN_SALT
from ..core.exceptions import InvalidTokenError
from .model import Employee


@dataclass(frozen=True)
class TokenClaims:
    """Identity decoded from a session token."""

    employee_id: str
    is_admin: bool


class TokenService:
    """Signed, time-limited session tokens.

    Tokens are stateless: there is no revocation list, so a token stays valid
    for its whole window even if the employee is deleted or demoted.
    """

    def __init__(self, secret: str, *, ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS):
        if not secret:
            raise ValueError("A token signing secret is required")
        self._serializer = URLSafeTimedSerializer(secret, salt=TOKEN_SALT)
        self._ttl_seconds = int(ttl_seconds)

    def issue(self, employee: Employee) -> str:
        return self._serializer.dumps({"userId": employee.employee_id, "isAdmin": bool(employee.is_admin)})

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = self._serializer.loads(token, max_age=self._ttl_seconds)
        except SignatureExpired as e:
            raise InvalidTokenError("Token expired") from e
        except BadSignature as e:
            raise InvalidTokenError("Bad token signature") from e

        if not isinstance(payload, dict) or "userId" not in payload:
            raise InvalidTokenError("Malformed token payload")
        return TokenClaims(employee_id=str(payload["userId"]), is_admin=bool(payload.get("isAdmin")))
