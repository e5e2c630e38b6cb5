from __future__ import annotations

from datetime import date, datetime, time

import pytest

from src.timecheck.timecheck.attendance.model import AttendanceRecord
from src.timecheck.timecheck.core.exceptions import ValidationError
from src.timecheck.timecheck.reports.service import AttendanceReportService


def _closed(record_id, employee_id, day, start, end, total, overtime):
    return AttendanceRecord(
        record_id=record_id,
        employee_id=employee_id,
        work_date=day,
        check_in_time=datetime.combine(day, start),
        check_out_time=datetime.combine(day, end),
        total_hours=total,
        overtime_hours=overtime,
    )


def test_report_totals_and_overtime(attendance_repo, employees_repo):
    d1, d2 = date(2026, 1, 29), date(2026, 1, 30)
    attendance_repo.put(_closed(1, "MOJV040815", d1, time(8, 0), time(18, 30), 10.5, 2.5))
    attendance_repo.put(_closed(2, "MOJV040815", d2, time(9, 0), time(17, 0), 8.0, 0.0))
    attendance_repo.put(_closed(3, "GARL920304", d2, time(9, 0), time(16, 0), 7.0, 0.0))

    report = AttendanceReportService(attendance_repo, employees_repo).build_attendance_report(start=d1, end=d2)

    assert len(report.rows) == 3
    top = report.summary[0]
    assert top["employee_id"] == "MOJV040815"
    assert top["days"] == 2
    assert top["total_hours"] == "18.50"
    assert top["overtime_hours"] == "2.50"
    assert report.summary[1]["total_hours"] == "7.00"


def test_report_filters_by_department(attendance_repo, employees_repo):
    day = date(2026, 1, 30)
    attendance_repo.put(_closed(1, "MOJV040815", day, time(9, 0), time(17, 0), 8.0, 0.0))
    attendance_repo.put(_closed(2, "GARL920304", day, time(9, 0), time(16, 0), 7.0, 0.0))

    report = AttendanceReportService(attendance_repo, employees_repo).build_attendance_report(
        start=day, end=day, department="RH"
    )
    assert [r["employee_id"] for r in report.rows] == ["GARL920304"]


def test_open_record_shows_dash_for_checkout(attendance_repo, employees_repo):
    day = date(2026, 1, 30)
    attendance_repo.put(
        AttendanceRecord(record_id=1, employee_id="MOJV040815", work_date=day, check_in_time=datetime(2026, 1, 30, 9, 0))
    )

    row = AttendanceReportService(attendance_repo, employees_repo).build_attendance_report(start=day, end=day).rows[0]
    assert row["check_out"] == "-"
    assert row["total_hours"] == "0.00"


def test_report_rejects_inverted_range(attendance_repo, employees_repo):
    with pytest.raises(ValidationError):
        AttendanceReportService(attendance_repo, employees_repo).build_attendance_report(
            start=date(2026, 2, 1), end=date(2026, 1, 1)
        )


def test_daily_stats(attendance_repo, employees_repo):
    day = date(2026, 1, 30)
    attendance_repo.put(
        AttendanceRecord(record_id=1, employee_id="MOJV040815", work_date=day, check_in_time=datetime(2026, 1, 30, 9, 0))
    )
    attendance_repo.put(
        AttendanceRecord(
            record_id=2,
            employee_id="GARL920304",
            work_date=day,
            check_in_time=datetime(2026, 1, 30, 8, 0),
            check_out_time=datetime(2026, 1, 30, 12, 0),
            total_hours=4.0,
            overtime_hours=0.0,
        )
    )

    stats = AttendanceReportService(attendance_repo, employees_repo).daily_stats(day)

    # PEHA881122 is inactive and not counted
    assert stats.active_employees == 2
    assert stats.checked_in == 2
    assert stats.checked_out == 1
    assert stats.on_shift == 1
    assert stats.absent == 0
