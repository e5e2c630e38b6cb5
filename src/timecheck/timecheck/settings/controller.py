from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import error_response, json_object_body
from ..core.exceptions import DomainError, StorageUnavailable


def register(app: Flask, container) -> None:
    @app.route("/api/settings", methods=["GET"], endpoint="api_settings")
    def get_settings():
        try:
            settings = container.settings_service.current()
            return jsonify(container.settings_service.to_dict(settings)), 200
        except (DomainError, StorageUnavailable) as e:
            return error_response(e)

    @app.route("/api/settings", methods=["PUT"], endpoint="api_settings_update")
    def update_settings():
        try:
            settings = container.settings_service.update(json_object_body())
            return jsonify(container.settings_service.to_dict(settings)), 200
        except (DomainError, StorageUnavailable) as e:
            return error_response(e)
