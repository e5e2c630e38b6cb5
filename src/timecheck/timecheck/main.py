from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.constants import DEFAULT_TIMEZONE
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_default_settings, list_tables
from .employees.controller import register as register_employees
from .schedules.controller import register as register_schedules
from .settings.controller import register as register_settings
from .settings.model import SystemSettings

logger = logging.getLogger("timecheck")

REPO_ROOT = Path(__file__).resolve().parents[3]


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(app.config["DEBUG"])

    if container is None:
        container = _build_from_settings(settings, settings_module)

    app.extensions["timecheck"] = container

    register_employees(app, container)
    register_attendance(app, container)
    register_settings(app, container)
    register_schedules(app, container)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"}), 200

    return app


def _build_from_settings(settings, settings_module: str) -> Container:
    db_config = getattr(settings, "DB_CONFIG")
    timezone = getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE)

    # Helpful startup info to avoid "connected but no tables" confusion.
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if getattr(settings, "AUTO_INIT_DB", False):
        apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
        ensure_default_settings(db_config, timezone=timezone)
        logger.info("Schema ready (tables=%s)", len(list_tables(db_config)))
    if getattr(settings, "AUTO_SEED_DB", False):
        apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
        logger.info("Demo seed ready")

    return build_container(
        db_config=db_config,
        default_settings=SystemSettings(timezone=timezone),
        scanner_options=dict(getattr(settings, "SCANNER", {})),
    )
