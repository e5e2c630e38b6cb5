from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .attendance.engine import AttendanceToggleEngine
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.locks import KeyedLocks
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .reports.service import AttendanceReportService
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.repository import ScheduleRepository
from .schedules.service import ScheduleService
from .scanner.capture import ScanCapture
from .scanner.classifier import InputClassifier
from .scanner.kiosk import KioskScanHandler
from .scanner.source import InputEventSource
from .settings.model import SystemSettings
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    settings_repo: SettingsRepository
    schedules_repo: ScheduleRepository

    employee_service: EmployeeService
    schedule_service: ScheduleService
    settings_service: SettingsService
    attendance_service: AttendanceService
    report_service: AttendanceReportService

    scanner_options: dict = field(default_factory=dict)
    conn: Optional[DatabaseConnection] = None

    def make_scan_capture(self, source: InputEventSource, *, disabled_contexts=()) -> ScanCapture:
        """Kiosk wiring: scanner input -> classifier -> attendance toggle."""
        return ScanCapture(
            source,
            KioskScanHandler(self.attendance_service),
            classifier=InputClassifier(**self.scanner_options),
            disabled_contexts=disabled_contexts,
        )


def build_services(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    settings_repo: SettingsRepository,
    schedules_repo: ScheduleRepository,
    default_settings: Optional[SystemSettings] = None,
    scanner_options: Optional[dict] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    schedule_service = ScheduleService(schedules_repo)
    employee_service = EmployeeService(employees_repo, schedules=schedule_service)
    settings_service = SettingsService(settings_repo, defaults=default_settings)
    engine = AttendanceToggleEngine(attendance_repo, settings_service.current, locks=KeyedLocks())
    attendance_service = AttendanceService(
        attendance_repo, employee_service, settings_service, engine=engine, schedules=schedule_service
    )
    report_service = AttendanceReportService(attendance_repo, employees_repo)

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        settings_repo=settings_repo,
        schedules_repo=schedules_repo,
        employee_service=employee_service,
        schedule_service=schedule_service,
        settings_service=settings_service,
        attendance_service=attendance_service,
        report_service=report_service,
        scanner_options=dict(scanner_options or {}),
        conn=conn,
    )


def build_container(
    *,
    db_config: dict,
    default_settings: Optional[SystemSettings] = None,
    scanner_options: Optional[dict] = None,
) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        schedules_repo=MySQLScheduleRepository(conn),
        default_settings=default_settings,
        scanner_options=scanner_options,
        conn=conn,
    )
