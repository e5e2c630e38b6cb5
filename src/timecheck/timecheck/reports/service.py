from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..attendance.calculator.standard_calculator import round2
from ..attendance.repository import AttendanceRepository
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository

REPORT_FIELDS = [
    "date",
    "employee_id",
    "full_name",
    "department",
    "check_in",
    "check_out",
    "total_hours",
    "overtime_hours",
]


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


@dataclass(frozen=True)
class DailyStats:
    date: date
    active_employees: int
    checked_in: int
    checked_out: int
    on_shift: int
    absent: int

    def to_dict(self) -> dict:
        return {
            "date": self.date.strftime("%Y-%m-%d"),
            "activeEmployees": self.active_employees,
            "checkedIn": self.checked_in,
            "checkedOut": self.checked_out,
            "onShift": self.on_shift,
            "absent": self.absent,
        }


def _hours(value: Optional[float]) -> str:
    return f"{value or 0:.2f}"


class AttendanceReportService:
    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def build_attendance_report(
        self,
        *,
        start: date,
        end: date,
        department: Optional[str] = None,
    ) -> ReportData:
        if start > end:
            raise ValidationError("Start date must not be after end date")

        query_rows = self._attendance.get_report_rows(start_date=start, end_date=end, department=department)

        summary_map: dict[str, dict] = {}
        out_rows: list[dict] = []

        for r in query_rows:
            out_rows.append(
                {
                    "date": r.work_date.strftime("%Y-%m-%d"),
                    "employee_id": r.employee_id,
                    "full_name": r.full_name,
                    "department": r.department,
                    "check_in": r.check_in_time.strftime("%H:%M") if r.check_in_time else "-",
                    "check_out": r.check_out_time.strftime("%H:%M") if r.check_out_time else "-",
                    "total_hours": _hours(r.total_hours),
                    "overtime_hours": _hours(r.overtime_hours),
                }
            )

            s = summary_map.get(r.employee_id)
            if not s:
                s = {
                    "employee_id": r.employee_id,
                    "full_name": r.full_name,
                    "department": r.department,
                    "days": 0,
                    "total": Decimal(0),
                    "overtime": Decimal(0),
                }
                summary_map[r.employee_id] = s
            s["days"] += 1
            s["total"] += Decimal(str(r.total_hours or 0))
            s["overtime"] += Decimal(str(r.overtime_hours or 0))

        summary = [
            {
                "employee_id": s["employee_id"],
                "full_name": s["full_name"],
                "department": s["department"],
                "days": s["days"],
                "total_hours": _hours(round2(s["total"])),
                "overtime_hours": _hours(round2(s["overtime"])),
            }
            for s in summary_map.values()
        ]
        summary.sort(key=lambda x: float(x["total_hours"]), reverse=True)
        return ReportData(rows=out_rows, summary=summary)

    def daily_stats(self, today: date) -> DailyStats:
        active_ids = {e.employee_id for e in self._employees.list_all(include_inactive=False)}
        records = [
            r
            for r in self._attendance.list_records(start_date=today, end_date=today)
            if r.employee_id in active_ids and r.check_in_time is not None
        ]

        checked_in = len(records)
        checked_out = sum(1 for r in records if r.check_out_time is not None)
        return DailyStats(
            date=today,
            active_employees=len(active_ids),
            checked_in=checked_in,
            checked_out=checked_out,
            on_shift=checked_in - checked_out,
            absent=len(active_ids) - checked_in,
        )
