from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceAction
from ..employees.model import Employee
from .model import AttendanceRecord

_MESSAGES = {
    AttendanceAction.CHECK_IN: "Check-in successful",
    AttendanceAction.CHECK_OUT: "Check-out successful",
}


@dataclass(frozen=True)
class ToggleResult:
    employee: Employee
    action: AttendanceAction
    record: AttendanceRecord
    hours_worked: float
    # Check-ins of employees with a work schedule only
    late: Optional[bool] = None


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def employee_to_dict(employee: Employee) -> dict:
    return {
        "id": employee.employee_id,
        "barcode": employee.barcode,
        "fullName": employee.full_name,
        "department": employee.department,
        "isActive": employee.is_active,
        "scheduleId": employee.schedule_id,
    }


def record_to_dict(record: AttendanceRecord) -> dict:
    return {
        "id": record.record_id,
        "employeeId": record.employee_id,
        "date": record.work_date.strftime("%Y-%m-%d"),
        "checkInTime": _iso(record.check_in_time),
        "checkOutTime": _iso(record.check_out_time),
        "totalHours": record.total_hours,
        "overtimeHours": record.overtime_hours,
    }


def format_toggle_result(result: ToggleResult) -> dict:
    """Response payload for a successful scan."""
    return {
        "success": True,
        "message": _MESSAGES[result.action],
        "employee": employee_to_dict(result.employee),
        "action": result.action.value,
        "record": record_to_dict(result.record),
        "hoursWorked": result.hours_worked,
        "overtimeHours": result.record.overtime_hours or 0.0,
        "late": result.late,
    }
