from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, time
from typing import Optional

import pytest

from src.timecheck.timecheck.attendance.model import AttendanceRecord, AttendanceReportRow
from src.timecheck.timecheck.container import build_services
from src.timecheck.timecheck.employees.model import Employee
from src.timecheck.timecheck.schedules.model import WorkSchedule
from src.timecheck.timecheck.settings.model import SystemSettings


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._by_id: dict[str, Employee] = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def get_by_barcode(self, barcode: str) -> Optional[Employee]:
        return next((e for e in self._by_id.values() if e.barcode == barcode), None)

    def list_all(self, *, include_inactive: bool = True):
        items = sorted(self._by_id.values(), key=lambda e: e.full_name)
        return [e for e in items if include_inactive or e.is_active]

    def create(self, employee: Employee) -> Employee:
        self._by_id[employee.employee_id] = employee
        return employee

    def update(self, employee_id: str, **changes) -> Optional[Employee]:
        current = self._by_id.get(employee_id)
        if not current:
            return None
        updated = replace(current, **{k: v for k, v in changes.items() if v is not None})
        self._by_id[employee_id] = updated
        return updated

    def set_schedule(self, employee_id: str, schedule_id) -> bool:
        current = self._by_id.get(employee_id)
        if not current:
            return False
        self._by_id[employee_id] = replace(current, schedule_id=schedule_id)
        return True

    def delete_by_id(self, employee_id: str) -> bool:
        return self._by_id.pop(employee_id, None) is not None


class InMemoryAttendance:
    def __init__(self, employees: Optional[InMemoryEmployees] = None):
        self._by_key: dict[tuple[str, date], AttendanceRecord] = {}
        self._employees = employees
        self._id = 0
        self.writes = 0

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_key.get((employee_id, work_date))

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        return next((r for r in self._by_key.values() if r.record_id == record_id), None)

    def create_checkin(self, *, employee_id: str, work_date: date, check_in_time: datetime):
        if (employee_id, work_date) in self._by_key:
            return None
        self._id += 1
        self.writes += 1
        rec = AttendanceRecord(
            record_id=self._id,
            employee_id=employee_id,
            work_date=work_date,
            check_in_time=check_in_time,
        )
        self._by_key[(employee_id, work_date)] = rec
        return rec

    def update_checkout(self, *, record_id: int, check_out_time: datetime, total_hours: float, overtime_hours: float) -> bool:
        rec = self.get_by_id(record_id)
        if not rec or rec.check_in_time is None or rec.check_out_time is not None:
            return False
        self.writes += 1
        self._by_key[(rec.employee_id, rec.work_date)] = replace(
            rec, check_out_time=check_out_time, total_hours=total_hours, overtime_hours=overtime_hours
        )
        return True

    def reset_cycle(self, *, record_id: int, check_in_time: datetime, previous_check_out) -> bool:
        rec = self.get_by_id(record_id)
        if not rec or rec.check_out_time != previous_check_out:
            return False
        self.writes += 1
        self._by_key[(rec.employee_id, rec.work_date)] = replace(
            rec, check_in_time=check_in_time, check_out_time=None, total_hours=None, overtime_hours=None
        )
        return True

    def put(self, record: AttendanceRecord) -> None:
        self._by_key[(record.employee_id, record.work_date)] = record
        self._id = max(self._id, record.record_id)

    def list_records(self, *, start_date=None, end_date=None, employee_id=None):
        items = [
            r
            for r in self._by_key.values()
            if (start_date is None or r.work_date >= start_date)
            and (end_date is None or r.work_date <= end_date)
            and (employee_id is None or r.employee_id == employee_id)
        ]
        items.sort(key=lambda r: (r.work_date, r.check_in_time or datetime.min), reverse=True)
        return items

    def get_report_rows(self, *, start_date: date, end_date: date, department=None):
        rows = []
        for r in self.list_records(start_date=start_date, end_date=end_date):
            e = self._employees.get_by_id(r.employee_id) if self._employees else None
            if e is None or (department and e.department != department):
                continue
            rows.append(
                AttendanceReportRow(
                    employee_id=e.employee_id,
                    full_name=e.full_name,
                    department=e.department,
                    work_date=r.work_date,
                    check_in_time=r.check_in_time,
                    check_out_time=r.check_out_time,
                    total_hours=r.total_hours,
                    overtime_hours=r.overtime_hours,
                )
            )
        return rows


class InMemorySchedules:
    def __init__(self, schedules=()):
        self._by_id: dict[int, WorkSchedule] = {s.schedule_id: s for s in schedules}

    def list_all(self):
        return [self._by_id[k] for k in sorted(self._by_id)]

    def get_by_id(self, schedule_id: int) -> Optional[WorkSchedule]:
        return self._by_id.get(schedule_id)

    def create(self, schedule: WorkSchedule) -> WorkSchedule:
        created = replace(schedule, schedule_id=max(self._by_id, default=0) + 1)
        self._by_id[created.schedule_id] = created
        return created

    def update(self, schedule: WorkSchedule) -> Optional[WorkSchedule]:
        if schedule.schedule_id not in self._by_id:
            return None
        self._by_id[schedule.schedule_id] = schedule
        return schedule


class InMemorySettings:
    def __init__(self, settings: Optional[SystemSettings] = None):
        self._settings = settings

    def get(self) -> Optional[SystemSettings]:
        return self._settings

    def save(self, settings: SystemSettings) -> SystemSettings:
        self._settings = settings
        return settings


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 9, 0, 0)


@pytest.fixture
def employee() -> Employee:
    return Employee(
        employee_id="MOJV040815",
        barcode="MOJV040815",
        full_name="Juan Morales Vega",
        department="Operaciones",
    )


@pytest.fixture
def staff(employee) -> list[Employee]:
    return [
        employee,
        Employee(employee_id="GARL920304", barcode="7501234567890", full_name="Laura García Ruiz", department="RH"),
        Employee(
            employee_id="PEHA881122",
            barcode="PEHA881122",
            full_name="Andrés Pérez Hernández",
            department="Almacén",
            is_active=False,
        ),
    ]


@pytest.fixture
def employees_repo(staff) -> InMemoryEmployees:
    return InMemoryEmployees(staff)


@pytest.fixture
def attendance_repo(employees_repo) -> InMemoryAttendance:
    return InMemoryAttendance(employees_repo)


@pytest.fixture
def office_schedule() -> WorkSchedule:
    return WorkSchedule(
        schedule_id=1,
        name="Horario Administrativo",
        entry_time=time(8, 0),
        exit_time=time(18, 0),
        breakfast_out_time=time(10, 0),
        breakfast_in_time=time(10, 30),
        lunch_out_time=time(14, 0),
        lunch_in_time=time(15, 0),
        overtime_enabled=True,
    )


@pytest.fixture
def schedules_repo(office_schedule) -> InMemorySchedules:
    return InMemorySchedules([office_schedule])


@pytest.fixture
def settings_repo() -> InMemorySettings:
    return InMemorySettings(SystemSettings())


@pytest.fixture
def container(employees_repo, attendance_repo, settings_repo, schedules_repo):
    return build_services(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        settings_repo=settings_repo,
        schedules_repo=schedules_repo,
        scanner_options={"inter_char_ms": 100, "min_length": 3, "inactivity_ms": 1000},
    )
