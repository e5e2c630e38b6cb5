from __future__ import annotations

from flask import Flask, jsonify, request

from ..attendance.formatter import employee_to_dict
from ..common.responses import error_response, json_object_body, parse_bool
from ..core.exceptions import DomainError, StorageUnavailable
from .service import UNCHANGED


def register(app: Flask, container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="api_employees")
    def list_employees():
        try:
            include_inactive = parse_bool(request.args.get("includeInactive"), default=True)
            employees = container.employee_service.list_all(include_inactive=include_inactive)
            return jsonify([employee_to_dict(e) for e in employees]), 200
        except (DomainError, StorageUnavailable) as e:
            return error_response(e)

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="api_employee")
    def get_employee(employee_id: str):
        try:
            return jsonify(employee_to_dict(container.employee_service.get(employee_id))), 200
        except (DomainError, StorageUnavailable) as e:
            return error_response(e)

    @app.route("/api/employees", methods=["POST"], endpoint="api_employee_create")
    def create_employee():
        try:
            data = json_object_body()
            employee = container.employee_service.create(
                employee_id=data.get("id") or data.get("employeeId") or "",
                full_name=data.get("fullName") or "",
                department=data.get("department") or "",
                barcode=data.get("barcode"),
                is_active=parse_bool(data.get("isActive"), default=True),
                schedule_id=data.get("scheduleId"),
            )
            return jsonify(employee_to_dict(employee)), 201
        except (DomainError, StorageUnavailable) as e:
            return error_response(e)

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="api_employee_update")
    def update_employee(employee_id: str):
        try:
            data = json_object_body()
            employee = container.employee_service.update(
                employee_id,
                barcode=data.get("barcode"),
                full_name=data.get("fullName"),
                department=data.get("department"),
                is_active=parse_bool(data["isActive"]) if "isActive" in data else None,
                schedule_id=data["scheduleId"] if "scheduleId" in data else UNCHANGED,
            )
            return jsonify(employee_to_dict(employee)), 200
        except (DomainError, StorageUnavailable) as e:
            return error_response(e)

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="api_employee_delete")
    def delete_employee(employee_id: str):
        try:
            container.employee_service.delete(employee_id)
            return jsonify({"success": True, "message": "Employee deleted successfully"}), 200
        except (DomainError, StorageUnavailable) as e:
            return error_response(e)
