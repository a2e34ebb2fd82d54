from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: plain data object, no store access here.
    """

    employee_id: str
    name: str
    password_hash: str
    is_admin: bool = False
