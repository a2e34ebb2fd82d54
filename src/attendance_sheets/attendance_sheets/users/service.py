from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty, require_password
from ..core.constants import EMPLOYEES_RANGE
from ..core.enums import WritePolicy
from ..core.exceptions import AuthenticationError, NotFoundError
from ..mirror.mirror import Mirror
from ..mirror.rows import employee_to_row
from ..mirror.write_through import WriteResult, write_through
from ..store.repository import RecordStore
from .model import Employee
from .tokens import TokenService


@dataclass(frozen=True)
class LoginResult:
    employee_id: str
    name: str
    is_admin: bool
    token: str


class AuthService:
    """Use case: authenticate employee (login)."""

    def __init__(self, mirror: Mirror, tokens: TokenService):
        self._mirror = mirror
        self._tokens = tokens

    def login(self, employee_id: str, password: str) -> LoginResult:
        employee = self._mirror.get_employee(str(employee_id or ""))
        if not employee or not isinstance(password, str):
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(employee.password_hash, password or "")
        except ValueError:
            # e.g. corrupted or unsupported hash values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid credentials")

        return LoginResult(
            employee_id=employee.employee_id,
            name=employee.name,
            is_admin=employee.is_admin,
            token=self._tokens.issue(employee),
        )


class EmployeeService:
    """Use case: manage employees (admin)."""

    def __init__(self, mirror: Mirror, store: RecordStore, *, policy: WritePolicy = WritePolicy.MIRROR_FIRST):
        self._mirror = mirror
        self._store = store
        self._policy = policy

    def save(self, *, employee_id: str, name: str, password: str, is_admin: bool = False) -> WriteResult:
        """Create or overwrite an employee. The store gets a new row either way."""
        employee = Employee(
            employee_id=require_non_empty(employee_id, "id"),
            name=require_non_empty(name, "name"),
            password_hash=generate_password_hash(require_password(password)),
            is_admin=bool(is_admin),
        )
        return write_through(
            policy=self._policy,
            apply_to_mirror=lambda: self._mirror.put_employee(employee),
            persist=lambda: self._store.append_row(EMPLOYEES_RANGE, employee_to_row(employee)),
            description=f"employee {employee.employee_id}",
        )

    def delete(self, employee_id: str) -> None:
        """Drop the employee with their attendance and leave, from the mirror only.

        The spreadsheet keeps every row, so a reload brings the employee back.
        """
        if not self._mirror.delete_employee(employee_id):
            raise NotFoundError("Employee not found")
