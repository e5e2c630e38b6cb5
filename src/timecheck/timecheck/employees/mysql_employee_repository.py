from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import mysql.connector

from ..core.exceptions import DuplicateEmployee
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, barcode, full_name, department, is_active, schedule_id, created_at"


def _to_employee(row: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=str(row["employee_id"]),
        barcode=str(row["barcode"]),
        full_name=row["full_name"],
        department=row["department"],
        is_active=bool(row.get("is_active", True)),
        schedule_id=int(row["schedule_id"]) if row.get("schedule_id") is not None else None,
        created_at=row.get("created_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_by_barcode(self, barcode: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE barcode=%s", (barcode,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def list_all(self, *, include_inactive: bool = True) -> Sequence[Employee]:
        where = "" if include_inactive else "WHERE is_active=1"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees {where} ORDER BY full_name ASC")
            return [_to_employee(r) for r in fetchall(cur)]

    def create(self, employee: Employee) -> Employee:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO employees(employee_id, barcode, full_name, department, is_active, schedule_id)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        employee.employee_id,
                        employee.barcode,
                        employee.full_name,
                        employee.department,
                        1 if employee.is_active else 0,
                        employee.schedule_id,
                    ),
                )
        except mysql.connector.IntegrityError as exc:
            raise DuplicateEmployee("Employee id or barcode already exists") from exc
        return self.get_by_id(employee.employee_id) or employee

    def update(
        self,
        employee_id: str,
        *,
        barcode: Optional[str] = None,
        full_name: Optional[str] = None,
        department: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> Optional[Employee]:
        sets: list[str] = []
        params: list[object] = []
        for column, value in (("barcode", barcode), ("full_name", full_name), ("department", department)):
            if value is not None:
                sets.append(f"{column}=%s")
                params.append(value)
        if is_active is not None:
            sets.append("is_active=%s")
            params.append(1 if is_active else 0)

        if sets:
            params.append(employee_id)
            try:
                with db_cursor(self._conn_factory) as (_, cur):
                    cur.execute(f"UPDATE employees SET {', '.join(sets)} WHERE employee_id=%s", tuple(params))
            except mysql.connector.IntegrityError as exc:
                raise DuplicateEmployee("Barcode already assigned to another employee") from exc

        return self.get_by_id(employee_id)

    def set_schedule(self, employee_id: str, schedule_id: Optional[int]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE employees SET schedule_id=%s WHERE employee_id=%s", (schedule_id, employee_id))
            changed = cur.rowcount > 0
        # rowcount is 0 when the value did not change
        return changed or self.get_by_id(employee_id) is not None

    def delete_by_id(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0
