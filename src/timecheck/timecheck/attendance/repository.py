from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, AttendanceReportRow


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_checkin(self, *, employee_id: str, work_date: date, check_in_time: datetime) -> Optional[AttendanceRecord]:
        """Create the day's record. Returns None if one already exists for that key."""

        raise NotImplementedError

    def update_checkout(
        self,
        *,
        record_id: int,
        check_out_time: datetime,
        total_hours: float,
        overtime_hours: float,
    ) -> bool:
        """Close an open record. Must only succeed while ``check_out_time`` is still unset."""

        raise NotImplementedError

    def reset_cycle(self, *, record_id: int, check_in_time: datetime, previous_check_out: Optional[datetime]) -> bool:
        """Start a new cycle on a completed record (unlimited-cycle policy only).

        Succeeds only if the stored ``check_out_time`` still equals ``previous_check_out``.
        """

        raise NotImplementedError

    def list_records(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        department: Optional[str] = None,
    ) -> Sequence[AttendanceReportRow]:
        raise NotImplementedError
