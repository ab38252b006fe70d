from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .qr.controller import register as register_qr

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[2]
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def create_app(container: Container | None = None) -> Flask:
    """Build the Flask app.

    Tests pass their own container; otherwise one is wired to the MySQL
    database from the active settings module (APP_ENV).
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        container = build_container(
            db_config=getattr(settings, "DB_CONFIG"),
            require_active_employee=bool(getattr(settings, "REQUIRE_ACTIVE_EMPLOYEE", True)),
        )
        logger.info("settings=%s db=%s", settings_module, container.conn.config.describe())

        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(container.conn, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))
        if getattr(settings, "AUTO_SEED_DB", False):
            apply_seed_sql(container.conn, seed_path=REPO_ROOT / "database" / "seed.sql")

    register_attendance(app, container)
    register_qr(app, container)

    return app
