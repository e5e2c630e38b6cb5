from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import error_response, json_object_body
from ..core.exceptions import DomainError, StorageUnavailable


def register(app: Flask, container) -> None:
    service = container.schedule_service

    @app.route("/api/schedules", methods=["GET"], endpoint="api_schedules")
    def list_schedules():
        try:
            return jsonify([service.to_dict(s) for s in service.list_all()]), 200
        except (DomainError, StorageUnavailable) as e:
            return error_response(e)

    @app.route("/api/schedules/<schedule_id>", methods=["GET"], endpoint="api_schedule")
    def get_schedule(schedule_id: str):
        try:
            return jsonify(service.to_dict(service.get(schedule_id))), 200
        except (DomainError, StorageUnavailable) as e:
            return error_response(e)

    @app.route("/api/schedules", methods=["POST"], endpoint="api_schedule_create")
    def create_schedule():
        try:
            schedule = service.create(json_object_body())
            return jsonify(service.to_dict(schedule)), 201
        except (DomainError, StorageUnavailable) as e:
            return error_response(e)

    @app.route("/api/schedules/<schedule_id>", methods=["PUT"], endpoint="api_schedule_update")
    def update_schedule(schedule_id: str):
        try:
            schedule = service.update(schedule_id, json_object_body())
            return jsonify(service.to_dict(schedule)), 200
        except (DomainError, StorageUnavailable) as e:
            return error_response(e)
