from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công theo ngày.

    One row per (employee, work_date). ``total_hours``/``overtime_hours`` are only
    set once both timestamps are present.
    """

    record_id: int
    employee_id: str
    work_date: date
    check_in_time: Optional[datetime]
    check_out_time: Optional[datetime] = None
    total_hours: Optional[float] = None
    overtime_hours: Optional[float] = None

    @property
    def is_open(self) -> bool:
        return self.check_in_time is not None and self.check_out_time is None

    @property
    def is_complete(self) -> bool:
        return self.check_in_time is not None and self.check_out_time is not None


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model phục vụ báo cáo/xuất file (tối ưu cho truy vấn)."""

    employee_id: str
    full_name: str
    department: str
    work_date: date
    check_in_time: Optional[datetime]
    check_out_time: Optional[datetime]
    total_hours: Optional[float]
    overtime_hours: Optional[float]
