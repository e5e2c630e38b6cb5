from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

import mysql.connector

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository

_COLUMNS = "record_id, employee_id, work_date, check_in_time, check_out_time, total_hours, overtime_hours"


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(r["record_id"]),
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        check_in_time=r.get("check_in_time"),
        check_out_time=r.get("check_out_time"),
        total_hours=as_float(r.get("total_hours")),
        overtime_hours=as_float(r.get("overtime_hours")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records WHERE employee_id=%s AND work_date=%s",
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE record_id=%s", (int(record_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create_checkin(self, *, employee_id: str, work_date: date, check_in_time: datetime) -> Optional[AttendanceRecord]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(employee_id, work_date, check_in_time)
                    VALUES(%s,%s,%s)
                    """,
                    (employee_id, work_date, check_in_time),
                )
                record_id = int(cur.lastrowid)
        except mysql.connector.IntegrityError:
            # uq_attendance_employee_date: another scan created the row first
            return None

        return AttendanceRecord(
            record_id=record_id,
            employee_id=employee_id,
            work_date=work_date,
            check_in_time=check_in_time,
        )

    def update_checkout(
        self,
        *,
        record_id: int,
        check_out_time: datetime,
        total_hours: float,
        overtime_hours: float,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET check_out_time=%s, total_hours=%s, overtime_hours=%s
                WHERE record_id=%s AND check_in_time IS NOT NULL AND check_out_time IS NULL
                """,
                (check_out_time, total_hours, overtime_hours, int(record_id)),
            )
            return cur.rowcount > 0

    def reset_cycle(self, *, record_id: int, check_in_time: datetime, previous_check_out: Optional[datetime]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET check_in_time=%s, check_out_time=NULL, total_hours=NULL, overtime_hours=NULL
                WHERE record_id=%s AND check_out_time <=> %s
                """,
                (check_in_time, int(record_id), previous_check_out),
            )
            return cur.rowcount > 0

    def list_records(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses: list[str] = []
        params: list[object] = []

        if start_date is not None:
            clauses.append("work_date >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("work_date <= %s")
            params.append(end_date)
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records {where} ORDER BY work_date DESC, check_in_time DESC",
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        department: Optional[str] = None,
    ) -> Sequence[AttendanceReportRow]:
        clauses = ["ar.work_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]

        if department:
            clauses.append("e.department=%s")
            params.append(department)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    e.employee_id, e.full_name, e.department,
                    ar.work_date, ar.check_in_time, ar.check_out_time,
                    ar.total_hours, ar.overtime_hours
                FROM attendance_records ar
                JOIN employees e ON e.employee_id = ar.employee_id
                WHERE {where}
                ORDER BY ar.work_date DESC, e.full_name ASC
                """,
                tuple(params),
            )
            return [
                AttendanceReportRow(
                    employee_id=str(r["employee_id"]),
                    full_name=r["full_name"],
                    department=r["department"],
                    work_date=r["work_date"],
                    check_in_time=r.get("check_in_time"),
                    check_out_time=r.get("check_out_time"),
                    total_hours=as_float(r.get("total_hours")),
                    overtime_hours=as_float(r.get("overtime_hours")),
                )
                for r in fetchall(cur)
            ]
