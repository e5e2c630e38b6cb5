from __future__ import annotations

from datetime import datetime, timedelta

from src.timecheck.timecheck.attendance.formatter import format_toggle_result
from src.timecheck.timecheck.core.enums import AttendanceAction
from src.timecheck.timecheck.employees.model import ScanInput


def test_check_in_after_tolerance_is_flagged_late(container, employees_repo, fixed_now):
    employees_repo.set_schedule("MOJV040815", 1)

    # Office entry is 08:00 with 15 minutes of tolerance; fixed_now is 09:00.
    result = container.attendance_service.register_scan(ScanInput.barcode("MOJV040815"), now=fixed_now)

    assert result.action == AttendanceAction.CHECK_IN
    assert result.late is True
    assert format_toggle_result(result)["late"] is True


def test_check_in_within_tolerance_is_on_time(container, employees_repo):
    employees_repo.set_schedule("MOJV040815", 1)
    now = datetime(2026, 2, 2, 8, 10)

    result = container.attendance_service.register_scan(ScanInput.employee_id("MOJV040815"), now=now)
    assert result.late is False


def test_late_is_unknown_without_schedule_and_on_check_out(container, fixed_now):
    service = container.attendance_service
    container.settings_service.update({"cooldownSeconds": 0})

    first = service.register_scan(ScanInput.barcode("MOJV040815"), now=fixed_now)
    second = service.register_scan(ScanInput.barcode("MOJV040815"), now=fixed_now + timedelta(hours=1))

    assert first.late is None
    assert second.action == AttendanceAction.CHECK_OUT
    assert second.late is None
