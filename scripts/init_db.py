from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from shopdesk.database.bootstrap import apply_schema, list_tables
from shopdesk.database.connection import DBConfig, DatabaseConnection
from shopdesk.main import configure_logging

logger = logging.getLogger("shopdesk.scripts.init_db")


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    conn = DatabaseConnection(DBConfig.from_dict(settings.DB_CONFIG))

    apply_schema(conn, schema_path=REPO_ROOT / "database" / "schema.sql")
    logger.info("schema applied to %s (tables=%d)", conn.config.describe(), len(list_tables(conn)))


if __name__ == "__main__":
    main()
