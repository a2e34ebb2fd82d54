from __future__ import annotations

import time

import pytest
from itsdangerous import TimestampSigner

from src.attendance_sheets.attendance_sheets.core.exceptions import InvalidTokenError
from src.attendance_sheets.attendance_sheets.users.model import Employee
from src.attendance_sheets.attendance_sheets.users.tokens import TokenService


def _employee(is_admin=False):
    return Employee(employee_id="E1", name="Eve", password_hash="x", is_admin=is_admin)


def test_issued_token_round_trips_claims():
    tokens = TokenService("secret")

    claims = tokens.verify(tokens.issue(_employee(is_admin=True)))

    assert claims.employee_id == "E1"
    assert claims.is_admin is True


def test_token_signed_with_another_secret_is_rejected():
    token = TokenService("other-secret").issue(_employee())

    with pytest.raises(InvalidTokenError):
        TokenService("secret").verify(token)


def test_tampered_token_is_rejected():
    token = TokenService("secret").issue(_employee())

    with pytest.raises(InvalidTokenError):
        TokenService("secret").verify(token[:-2] + ("AA" if not token.endswith("AA") else "BB"))


def test_token_expires_after_its_window(monkeypatch):
    tokens = TokenService("secret", ttl_seconds=3600)
    token = tokens.issue(_employee())

    monkeypatch.setattr(TimestampSigner, "get_timestamp", lambda self: int(time.time()) + 3601)

    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        TokenService("")
