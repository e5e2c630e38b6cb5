from __future__ import annotations

import csv
import io
from datetime import timedelta

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.responses import error_response, json_object_body
from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.exceptions import DomainError, InvalidInput, StorageUnavailable
from ..employees.model import ScanInput
from ..reports.service import REPORT_FIELDS
from .formatter import format_toggle_result, record_to_dict


def _scan_from_payload(data: dict) -> ScanInput:
    barcode = str(data.get("barcode") or "").strip()
    employee_id = str(data.get("employeeId") or "").strip()

    if barcode and employee_id:
        raise InvalidInput("Send either barcode or employeeId, not both")
    if barcode:
        return ScanInput.barcode(barcode)
    if employee_id:
        return ScanInput.employee_id(employee_id)
    raise InvalidInput("Barcode or employee id is required")


def register(app: Flask, container) -> None:
    def _date_arg(name: str):
        value = request.args.get(name)
        return parse_iso_date(value) if value else None

    def _report_range():
        today = container.attendance_service.today()
        end = _date_arg("end") or today
        start = _date_arg("start") or end - timedelta(days=DEFAULT_REPORT_DAYS - 1)
        return start, end

    @app.route("/attendance-toggle", methods=["POST"], endpoint="attendance_toggle")
    @app.route("/api/attendance/toggle", methods=["POST"], endpoint="api_attendance_toggle")
    def attendance_toggle():
        """Kiosk endpoint: auto-detect check-in / check-out from today's record."""
        try:
            scan = _scan_from_payload(json_object_body())
            result = container.attendance_service.register_scan(scan)
            return jsonify(format_toggle_result(result)), 200
        except (DomainError, StorageUnavailable) as e:
            return error_response(e)

    @app.route("/api/attendance/records", methods=["GET"], endpoint="api_attendance_records")
    def attendance_records():
        try:
            records = container.attendance_service.list_records(
                employee_id=request.args.get("employeeId") or None,
                start_date=_date_arg("startDate"),
                end_date=_date_arg("endDate"),
            )
            return jsonify([record_to_dict(r) for r in records]), 200
        except (DomainError, StorageUnavailable) as e:
            return error_response(e)

    @app.route("/api/attendance/today/<employee_id>", methods=["GET"], endpoint="api_attendance_today")
    def attendance_today(employee_id: str):
        try:
            employee = container.employee_service.get(employee_id)
            record = container.attendance_service.get_today_record(employee.employee_id)
            return jsonify({"record": record_to_dict(record) if record else None}), 200
        except (DomainError, StorageUnavailable) as e:
            return error_response(e)

    @app.route("/api/attendance/stats", methods=["GET"], endpoint="api_attendance_stats")
    def attendance_stats():
        try:
            stats = container.report_service.daily_stats(container.attendance_service.today())
            return jsonify(stats.to_dict()), 200
        except (DomainError, StorageUnavailable) as e:
            return error_response(e)

    @app.route("/api/attendance/report", methods=["GET"], endpoint="api_attendance_report")
    def attendance_report():
        try:
            start, end = _report_range()
            data = container.report_service.build_attendance_report(
                start=start, end=end, department=request.args.get("department") or None
            )
            return jsonify(
                {
                    "start": start.strftime("%Y-%m-%d"),
                    "end": end.strftime("%Y-%m-%d"),
                    "rows": data.rows,
                    "summary": data.summary,
                }
            ), 200
        except (DomainError, StorageUnavailable) as e:
            return error_response(e)

    @app.route("/api/attendance/report.csv", methods=["GET"], endpoint="api_attendance_report_csv")
    def attendance_report_csv():
        try:
            start, end = _report_range()
            data = container.report_service.build_attendance_report(
                start=start, end=end, department=request.args.get("department") or None
            )
        except (DomainError, StorageUnavailable) as e:
            return error_response(e)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=REPORT_FIELDS)
        writer.writeheader()
        for row in data.rows:
            writer.writerow(row)

        filename = f"attendance_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
