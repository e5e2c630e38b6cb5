from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import AttendanceAction
from ..employees.model import ScanInput
from ..employees.service import EmployeeService
from ..schedules.service import ScheduleService
from ..settings.service import SettingsService
from .engine import AttendanceToggleEngine
from .formatter import ToggleResult
from .model import AttendanceRecord
from .repository import AttendanceRepository


class AttendanceService:
    """Use case: register a kiosk scan (lookup -> toggle -> result)."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeService,
        settings: SettingsService,
        *,
        engine: Optional[AttendanceToggleEngine] = None,
        schedules: Optional[ScheduleService] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._settings = settings
        self._engine = engine or AttendanceToggleEngine(attendance, settings.current)
        self._schedules = schedules

    def register_scan(self, scan: ScanInput, *, now: Optional[datetime] = None) -> ToggleResult:
        employee = self._employees.resolve(scan)
        now = now or now_local(self._settings.current().timezone)
        outcome = self._engine.toggle(employee, now=now)

        late = None
        if outcome.action == AttendanceAction.CHECK_IN and employee.schedule_id and self._schedules is not None:
            late = self._schedules.is_late_arrival(
                employee.schedule_id,
                checked_in_at=outcome.record.check_in_time,
                tolerance_minutes=self._settings.current().entry_tolerance_minutes,
            )
        return ToggleResult(
            employee=employee,
            action=outcome.action,
            record=outcome.record,
            hours_worked=outcome.hours_worked,
            late=late,
        )

    def today(self) -> date:
        return now_local(self._settings.current().timezone).date()

    def get_today_record(self, employee_id: str, today: Optional[date] = None) -> Optional[AttendanceRecord]:
        """Get today's attendance record for an employee"""
        return self._attendance.get_for_employee_and_date(employee_id, today or self.today())

    def list_records(
        self,
        *,
        employee_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        return self._attendance.list_records(start_date=start_date, end_date=end_date, employee_id=employee_id)
